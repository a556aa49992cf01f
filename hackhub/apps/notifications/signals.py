from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver

from hackhub.apps.notifications.fanout import fan_out_announcement
from hackhub.apps.notifications.models import Announcement


@receiver(pre_save, sender=Announcement)
def remember_publication_state(instance, **kwargs):
    if instance.pk is None:
        instance._was_published = False
        return
    instance._was_published = Announcement.objects.filter(
        pk=instance.pk, is_published=True).exists()


@receiver(post_save, sender=Announcement)
def fan_out_on_publish(instance, created, **kwargs):
    if kwargs.get("raw"):
        return
    if instance.is_published and not getattr(instance, "_was_published", False):
        fan_out_announcement(instance)
