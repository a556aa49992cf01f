from django.apps import AppConfig


class HackathonsConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'hackhub.apps.hackathons'
    verbose_name = 'Hackathons'
