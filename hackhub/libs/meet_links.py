import logging

import requests
from django.conf import settings

from hackhub.libs.errors import MeetLinkError

logger = logging.getLogger(__name__)

FALLBACK_LINK = "https://meet.google.com/lookup/{code}"


def fallback_link(meeting_id):
    code = str(meeting_id).replace("-", "")[:12]
    return FALLBACK_LINK.format(code=code)


def request_meet_link(meeting, attendee_emails=()):
    """
    Asks the Apps Script web app to create a calendar event with a Meet
    conference. Returns ``(meet_link, calendar_event_id)``.
    """
    url = settings.MEET_LINK_SCRIPT_URL
    if not url:
        raise MeetLinkError("MEET_LINK_SCRIPT_URL is not configured")

    payload = {
        "token": settings.MEET_LINK_SCRIPT_TOKEN,
        "title": meeting.title,
        "description": meeting.description,
        "startTime": meeting.scheduled_at.isoformat(),
        "endTime": meeting.end_time.isoformat(),
        "timezone": meeting.timezone,
        "attendees": list(attendee_emails),
    }

    try:
        response = requests.post(url, json=payload,
                                 timeout=settings.MEET_LINK_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise MeetLinkError(f"Meet link request failed: {exc}") from exc

    if not isinstance(data, dict):
        raise MeetLinkError("Unexpected response from meet link script")
    if not data.get("success") or not data.get("meetLink"):
        raise MeetLinkError(data.get("error") or "No meet link returned")
    return data["meetLink"], data.get("eventId", "")


def provision_meet_link(meeting, attendee_emails=()):
    """Never fails: falls back to a lookup link when the provider is down"""
    try:
        return request_meet_link(meeting, attendee_emails)
    except MeetLinkError as exc:
        logger.warning("Using fallback meet link for meeting %s: %s",
                       meeting.pk, exc)
        return fallback_link(meeting.pk), ""
