import pytest
from botocore.exceptions import ClientError

from hackhub.libs import email_service
from hackhub.libs.email_service import EmailRequest, EmailService, EmailServiceError


class DummySESClient:
    def __init__(self, should_fail=False):
        self.should_fail = should_fail
        self.calls = []

    def send_email(self, **kwargs):
        if self.should_fail:
            raise ClientError({"Error": {"Code": "Boom", "Message": "boom"}}, "SendEmail")
        self.calls.append(kwargs)


def request(to_address="hacker@example.com"):
    return EmailRequest(to_address=to_address,
                        subject="Meeting scheduled",
                        text_body="See you there")


def test_send_bulk_builds_ses_payload(settings):
    settings.DEFAULT_FROM_EMAIL = "HackHub <no-reply@example.com>"
    settings.EMAIL_REPLY_TO = "help@example.com"
    settings.AWS_SES_CONFIGURATION_SET = "hackhub"

    client = DummySESClient()
    sent = EmailService(ses_client=client).send_bulk([request()])

    assert sent == 1
    payload = client.calls[0]
    assert payload["FromEmailAddress"] == "HackHub <no-reply@example.com>"
    assert payload["Destination"] == {"ToAddresses": ["hacker@example.com"]}
    assert payload["ReplyToAddresses"] == ["help@example.com"]
    assert payload["ConfigurationSetName"] == "hackhub"
    assert payload["Content"]["Simple"]["Subject"]["Data"] == "Meeting scheduled"


def test_send_bulk_skips_empty_recipients(settings):
    settings.AWS_SES_CONFIGURATION_SET = ""
    client = DummySESClient()

    sent = EmailService(ses_client=client).send_bulk([request(""), request()])

    assert sent == 1
    assert "ConfigurationSetName" not in client.calls[0]


def test_send_bulk_raises_on_failure():
    service = EmailService(ses_client=DummySESClient(should_fail=True))

    with pytest.raises(EmailServiceError):
        service.send_bulk([request()])


def test_deliver_swallows_failures():
    service = EmailService(ses_client=DummySESClient(should_fail=True))

    assert email_service.deliver([request()], service=service) == 0


def test_deliver_without_ses_configuration_sends_nothing(settings):
    settings.AWS_SES_REGION = ""

    assert email_service.deliver([request()]) == 0
