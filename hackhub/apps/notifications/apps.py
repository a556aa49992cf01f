from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'hackhub.apps.notifications'
    verbose_name = 'Notifications'

    def ready(self):
        import hackhub.apps.notifications.signals  # noqa: F401
