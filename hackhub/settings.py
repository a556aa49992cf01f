# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
import os

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
BASE_DIR = os.path.dirname(os.path.dirname(__file__))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "hackhub-dev-c8)1qu36%v2@wv@nhrg&6@kjw!ga2va!5$")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get("DEBUG") in ["1", "true", "True"]

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "*").split(",")

# Application definition

INSTALLED_APPS = ("django.contrib.admin", "django.contrib.auth",
                  "django.contrib.contenttypes", "django.contrib.sessions",
                  "django.contrib.messages", "django.contrib.staticfiles",
                  "hackhub.apps.hackathons", "hackhub.apps.notifications",)

MIDDLEWARE = (
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "hackhub.apps.hackathons.middleware.ApiErrorMiddleware",
)

ROOT_URLCONF = "hackhub.urls"

WSGI_APPLICATION = "hackhub.wsgi.application"

MYSQL_HOST = os.environ.get("MYSQL_HOST")

if MYSQL_HOST:
    DATABASES = {
        "default": {
            "ENGINE":   "django.db.backends.mysql",
            "OPTIONS":  {"charset": "utf8mb4"},
            "NAME":     os.environ.get("MYSQL_DATABASE", "hackhub"),
            "USER":     os.environ.get("MYSQL_USER", "root"),
            "PASSWORD": os.environ.get("MYSQL_PASSWORD", ""),
            "HOST":     MYSQL_HOST,
            "PORT":     os.environ.get("MYSQL_PORT", "3306"),
            "CONN_MAX_AGE": 60,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.path.join(BASE_DIR, "hackhub.sqlite3"),
        }
    }

# Error monitoring
if os.environ.get("SENTRY_DSN"):
    sentry_sdk.init(
        dsn=os.environ["SENTRY_DSN"],
        integrations=[DjangoIntegration()],
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.2")),
        send_default_pii=True,
        )

# Internationalization

LANGUAGE_CODE = "en-us"

# "Local time" for day-granularity status comparisons and meeting slots
TIME_ZONE = os.environ.get("HACKHUB_TIME_ZONE", "UTC")

USE_I18N = True

USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "staticfiles")

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

SITE_URL = os.environ.get("SITE_URL", "http://localhost:8000")

# Outbound email via Amazon SES
AWS_SES_REGION = os.environ.get("AWS_SES_REGION", "")
AWS_SES_ACCESS_KEY_ID = os.environ.get("AWS_SES_ACCESS_KEY_ID", "")
AWS_SES_SECRET_ACCESS_KEY = os.environ.get("AWS_SES_SECRET_ACCESS_KEY", "")
AWS_SES_CONFIGURATION_SET = os.environ.get("AWS_SES_CONFIGURATION_SET", "")
DEFAULT_FROM_EMAIL = os.environ.get(
    "DEFAULT_FROM_EMAIL", "HackHub <no-reply@hackhub.local>")
EMAIL_REPLY_TO = os.environ.get("EMAIL_REPLY_TO", "")
NOTIFICATION_EMAILS_ENABLED = os.environ.get("NOTIFICATION_EMAILS_ENABLED") in [
    "1", "true", "True"]

# Google Meet links are provisioned through an Apps Script web app
MEET_LINK_SCRIPT_URL = os.environ.get("MEET_LINK_SCRIPT_URL", "")
MEET_LINK_SCRIPT_TOKEN = os.environ.get("MEET_LINK_SCRIPT_TOKEN", "")
MEET_LINK_TIMEOUT = float(os.environ.get("MEET_LINK_TIMEOUT", "10"))

MEETING_DEFAULT_DURATION = int(os.environ.get("MEETING_DEFAULT_DURATION", "30"))
MEETING_SLOT_START_HOUR = int(os.environ.get("MEETING_SLOT_START_HOUR", "9"))
MEETING_SLOT_END_HOUR = int(os.environ.get("MEETING_SLOT_END_HOUR", "18"))
MEETING_SLOT_DURATION = int(os.environ.get("MEETING_SLOT_DURATION", "30"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "hackhub": {
            "handlers": ["console"],
            "level": os.environ.get("HACKHUB_LOG_LEVEL", "INFO"),
        },
    },
}

if os.environ.get("HACKHUB_LOG_QUERIES"):
    LOGGING["loggers"]["django.db.backends"] = {
        "handlers": ["console"],
        "level": "DEBUG",
    }
