import datetime
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from hackhub.apps.hackathons import auth_roles
from hackhub.apps.hackathons.forms import MeetingForm
from hackhub.apps.hackathons.helpers import validated
from hackhub.apps.hackathons.models import (
    HackathonRole,
    Meeting,
    Submission,
    Team,
)
from hackhub.apps.notifications.fanout import notify_users
from hackhub.apps.notifications.models import Notification
from hackhub.libs import email_service, meet_links, scheduling
from hackhub.libs.errors import Forbidden, NotFound, ValidationFailed

logger = logging.getLogger(__name__)

CONFLICT = "You already have a meeting scheduled during this time"

REQUIRED_ROLE = {
    Meeting.MENTORING: HackathonRole.MENTOR,
    Meeting.EVALUATION: HackathonRole.JUDGE,
    Meeting.PRESENTATION: HackathonRole.JUDGE,
}


def is_meeting_host(user, hackathon):
    return any(auth_roles.has_hackathon_role(user, hackathon, role)
               for role in (HackathonRole.MENTOR, HackathonRole.JUDGE))


def host_bookings(host, start=None, end=None):
    bookings = Meeting.objects.filter(host=host) \
        .exclude(status=Meeting.CANCELLED)
    if start is not None:
        bookings = bookings.filter(end_time__gt=start)
    if end is not None:
        bookings = bookings.filter(scheduled_at__lt=end)
    return bookings


def _resolve_team(hackathon, team_id):
    if team_id is None:
        return None
    team = Team.objects.filter(pk=team_id, hackathon=hackathon).first()
    if team is None:
        raise NotFound("Team not found")
    return team


def _resolve_submission(hackathon, submission_id):
    if submission_id is None:
        return None
    submission = Submission.objects.filter(pk=submission_id,
                                           hackathon=hackathon).first()
    if submission is None:
        raise NotFound("Submission not found")
    return submission


def schedule_meeting(hackathon, host, data, now=None):
    """
    Books a meeting for ``host``. The conflict check runs with the host's row
    locked so two concurrent bookings for one host cannot both pass it.
    """
    now = now or timezone.now()
    cleaned = validated(MeetingForm(data))

    meeting_type = cleaned["type"]
    if not auth_roles.has_hackathon_role(host, hackathon,
                                         REQUIRED_ROLE[meeting_type]):
        if meeting_type == Meeting.MENTORING:
            raise Forbidden("Only accepted mentors can schedule mentoring sessions")
        raise Forbidden("Only accepted judges can schedule evaluations")

    team = _resolve_team(hackathon, cleaned.get("team_id"))
    submission = _resolve_submission(hackathon, cleaned.get("submission_id"))
    if team is None and submission is not None:
        team = submission.team

    start = cleaned["scheduled_at"]
    if start <= now:
        raise ValidationFailed("Meetings must be scheduled in the future")
    duration = cleaned.get("duration") or settings.MEETING_DEFAULT_DURATION
    end = start + datetime.timedelta(minutes=duration)

    with transaction.atomic():
        get_user_model().objects.select_for_update().get(pk=host.pk)
        existing = host_bookings(host, start=start, end=end)
        clashes = scheduling.conflicting_bookings(start, end, existing)
        if clashes:
            logger.info("Rejected booking for %s at %s: overlaps meeting %s",
                        host.pk, start.isoformat(), clashes[0].pk)
            raise ValidationFailed(CONFLICT)

        meeting = Meeting.objects.create(
            hackathon=hackathon,
            host=host,
            team=team,
            submission=submission,
            title=cleaned["title"],
            description=cleaned.get("description") or "",
            type=meeting_type,
            scheduled_at=start,
            duration=duration,
            end_time=end,
            timezone=cleaned.get("timezone") or settings.TIME_ZONE,
            host_notes=cleaned.get("host_notes") or "",
        )

        if submission is not None and not submission.is_judged:
            submission.status = Submission.UNDER_REVIEW
            submission.save(update_fields=["status", "updated_at"])

    logger.info("Meeting %s scheduled by %s for %s", meeting.pk, host.pk,
                start.isoformat())

    attendees = team.member_users() if team is not None else []
    meeting.meet_link, meeting.calendar_event_id = meet_links.provision_meet_link(
        meeting, [user.email for user in attendees if user.email])
    meeting.save(update_fields=["meet_link", "calendar_event_id"])

    notify_meeting_attendees(meeting, attendees)
    return meeting


def notify_meeting_attendees(meeting, attendees):
    if not attendees:
        return
    when = timezone.localtime(meeting.scheduled_at).strftime("%b %d, %I:%M %p")
    notify_users(attendees,
                 Notification.MEETING,
                 f"Meeting Scheduled: {meeting.title}",
                 message=f"A {meeting.get_type_display().lower()} meeting "
                         f"has been scheduled for {when}.",
                 link=f"/hackathons/{meeting.hackathon.slug}",
                 hackathon=meeting.hackathon)
    email_service.deliver(email_service.meeting_invitation(meeting, user)
                          for user in attendees)


def cancel_meeting(meeting, user, now=None):
    if meeting.host_id != user.pk and \
            not auth_roles.is_organizer(user, meeting.hackathon):
        raise Forbidden()
    if meeting.status == Meeting.CANCELLED:
        raise ValidationFailed("Meeting is already cancelled")

    meeting.cancel(now=now)
    if meeting.team is not None:
        notify_users(meeting.team.member_users(),
                     Notification.MEETING,
                     f"Meeting Cancelled: {meeting.title}",
                     link=f"/hackathons/{meeting.hackathon.slug}",
                     hackathon=meeting.hackathon)
    return meeting


def meetings_for(hackathon, user, role=None, status=None, now=None):
    now = now or timezone.now()
    meetings = Meeting.objects.filter(hackathon=hackathon) \
        .select_related("host", "team")

    if role == "host":
        meetings = meetings.filter(host=user)
    else:
        team = Team.for_user(hackathon, user)
        if team is None:
            return Meeting.objects.none()
        meetings = meetings.filter(team=team)

    if status == "upcoming":
        return meetings.filter(scheduled_at__gte=now) \
            .exclude(status=Meeting.CANCELLED).order_by("scheduled_at")
    if status == "past":
        return meetings.filter(scheduled_at__lt=now).order_by("-scheduled_at")
    return meetings.order_by("scheduled_at")


def scheduled_times(host, day=None, now=None):
    """The host's non-cancelled bookings for ``day``, or from now on"""
    bookings = host_bookings(host).select_related("team")
    if day is None:
        bookings = bookings.filter(scheduled_at__gte=now or timezone.now())
    else:
        start, end = scheduling.day_bounds(day)
        bookings = bookings.filter(scheduled_at__gte=start,
                                   scheduled_at__lte=end)
    return bookings.order_by("scheduled_at")


def slots_for(host, day):
    start, end = scheduling.day_bounds(day)
    return scheduling.available_slots(
        day,
        list(host_bookings(host, start=start, end=end)),
        start_hour=settings.MEETING_SLOT_START_HOUR,
        end_hour=settings.MEETING_SLOT_END_HOUR,
        slot_duration=settings.MEETING_SLOT_DURATION)
