import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone

logger = logging.getLogger(__name__)


class EmailServiceError(Exception):
    """Raised when Amazon SES rejects a send request."""


@dataclass(frozen=True)
class EmailRequest:
    """Simple representation of an outbound email."""

    to_address: str
    subject: str
    text_body: str
    html_body: Optional[str] = None
    reply_to: Optional[Sequence[str]] = None


class EmailService:
    """Wrapper around Amazon SESv2 for participant-facing emails."""

    def __init__(self, ses_client=None):
        self.client = ses_client or self._build_client()

    def send_bulk(self, requests: Iterable[EmailRequest]) -> int:
        requests = list(requests)
        sent = 0
        failures: List[str] = []

        for request in requests:
            if not request.to_address:
                logger.debug("Skipping email with empty recipient")
                continue

            try:
                self.client.send_email(**self._build_send_kwargs(request))
                sent += 1
            except (BotoCoreError, ClientError) as exc:
                logger.exception("Amazon SES send failed: %s", exc)
                failures.append(str(exc))

        if failures:
            raise EmailServiceError(
                f"Failed to send {len(failures)} email(s): {failures[-1]}"
            )

        return sent

    def _build_client(self):
        if not settings.AWS_SES_REGION:
            raise ImproperlyConfigured("AWS_SES_REGION must be configured")

        client_kwargs = {"region_name": settings.AWS_SES_REGION}

        if settings.AWS_SES_ACCESS_KEY_ID and settings.AWS_SES_SECRET_ACCESS_KEY:
            client_kwargs.update(
                aws_access_key_id=settings.AWS_SES_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SES_SECRET_ACCESS_KEY,
            )

        return boto3.client("sesv2", **client_kwargs)

    def _build_send_kwargs(self, request):
        body = {"Text": {"Data": request.text_body, "Charset": "UTF-8"}}
        if request.html_body:
            body["Html"] = {"Data": request.html_body, "Charset": "UTF-8"}

        reply_to = list(request.reply_to or [])
        if not reply_to and settings.EMAIL_REPLY_TO:
            reply_to = [settings.EMAIL_REPLY_TO]

        kwargs = {
            "FromEmailAddress": settings.DEFAULT_FROM_EMAIL,
            "Destination": {"ToAddresses": [request.to_address]},
            "ReplyToAddresses": reply_to,
            "Content": {
                "Simple": {
                    "Subject": {"Data": request.subject, "Charset": "UTF-8"},
                    "Body": body,
                },
            },
        }

        if settings.AWS_SES_CONFIGURATION_SET:
            kwargs["ConfigurationSetName"] = settings.AWS_SES_CONFIGURATION_SET

        return kwargs


def absolute_url(path):
    return settings.SITE_URL.rstrip("/") + path


def meeting_invitation(meeting, recipient):
    when = timezone.localtime(meeting.scheduled_at).strftime(
        "%A, %B %d, %Y at %I:%M %p")
    host = meeting.host.get_full_name() or meeting.host.get_username()
    lines = [
        f"Hi {recipient.get_full_name() or recipient.get_username()},",
        "",
        f"{host} scheduled a {meeting.get_type_display().lower()} meeting "
        f"with your team for {meeting.hackathon.title}.",
        "",
        f"Title: {meeting.title}",
        f"When: {when} ({meeting.duration} minutes)",
    ]
    if meeting.meet_link:
        lines.append(f"Join: {meeting.meet_link}")
    if meeting.description:
        lines.extend(["", meeting.description])
    return EmailRequest(to_address=recipient.email,
                        subject=f"Meeting scheduled: {meeting.title}",
                        text_body="\n".join(lines))


def announcement_email(announcement, recipient):
    lines = [
        f"Hi {recipient.get_full_name() or recipient.get_username()},",
        "",
        f"New announcement for {announcement.hackathon.title}:",
        "",
        announcement.title,
        "",
        announcement.content,
        "",
        f"View it online: {absolute_url(announcement.link)}",
    ]
    return EmailRequest(
        to_address=recipient.email,
        subject=f"[{announcement.hackathon.title}] {announcement.title}",
        text_body="\n".join(lines))


def deliver(requests, service=None):
    """
    Best-effort delivery. Failures are logged and reported as zero sent so
    callers never roll back state because an email bounced.
    """
    requests = [request for request in requests if request.to_address]
    if not requests:
        return 0
    if service is None and not settings.AWS_SES_REGION:
        logger.debug("SES not configured, dropping %d email(s)", len(requests))
        return 0
    try:
        service = service or EmailService()
        return service.send_bulk(requests)
    except (EmailServiceError, ImproperlyConfigured) as exc:
        logger.warning("Email delivery failed: %s", exc)
        return 0
