import logging

from django.conf import settings
from django.contrib.auth import get_user_model

from hackhub.apps.hackathons.models import OrganizationMember, Registration
from hackhub.apps.notifications.models import Notification
from hackhub.libs import email_service, notification_logic

logger = logging.getLogger(__name__)


def notify_users(users, notification_type, title, message="", link="",
                 hackathon=None):
    notifications = [
        Notification(user=user,
                     hackathon=hackathon,
                     type=notification_type,
                     title=title,
                     message=message,
                     link=link)
        for user in users
    ]
    return Notification.objects.bulk_create(notifications)


def approved_participants(hackathon):
    return get_user_model().objects.filter(
        hackathon_registrations__hackathon=hackathon,
        hackathon_registrations__status=Registration.APPROVED,
    )


def notify_approved_participants(hackathon, notification_type, title,
                                 message="", link=""):
    return notify_users(approved_participants(hackathon), notification_type,
                        title, message=message, link=link, hackathon=hackathon)


def announcement_recipients(announcement):
    hackathon = announcement.hackathon
    User = get_user_model()
    if announcement.target_audience == notification_logic.ORGANIZERS:
        return User.objects.filter(
            organization_memberships__organization_id=hackathon.organization_id,
            organization_memberships__role__in=OrganizationMember.MANAGING_ROLES,
        ).distinct()

    statuses = notification_logic.fanout_registration_statuses(
        announcement.target_audience)
    return User.objects.filter(
        hackathon_registrations__hackathon=hackathon,
        hackathon_registrations__status__in=statuses,
    ).distinct()


def fan_out_announcement(announcement):
    """
    Creates one notification per recipient of a published announcement.

    Safe to call repeatedly: the (announcement, user) uniqueness makes a
    second run insert nothing. Returns the number of notifications created.
    """
    if not announcement.is_published:
        return 0

    recipients = list(announcement_recipients(announcement))
    already_notified = set(
        Notification.objects.filter(announcement=announcement)
        .values_list("user_id", flat=True))

    message = notification_logic.preview(announcement.content)
    Notification.objects.bulk_create(
        [Notification(user=user,
                      hackathon=announcement.hackathon,
                      announcement=announcement,
                      type=Notification.ANNOUNCEMENT,
                      title=announcement.title,
                      message=message,
                      link=announcement.link)
         for user in recipients if user.pk not in already_notified],
        ignore_conflicts=True,
    )

    new_recipients = [user for user in recipients
                      if user.pk not in already_notified]
    logger.info("Announcement %s fanned out to %d user(s)",
                announcement.pk, len(new_recipients))

    if settings.NOTIFICATION_EMAILS_ENABLED and new_recipients:
        email_service.deliver(
            email_service.announcement_email(announcement, user)
            for user in new_recipients)

    return len(new_recipients)
