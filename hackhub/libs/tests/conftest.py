import pytest

from hackhub.apps.hackathons.models import Registration
from hackhub.libs.tests.helpers import (
    make_hackathon,
    make_organization,
    make_user,
    register,
)


@pytest.fixture(autouse=True)
def no_external_delivery(settings):
    """Keep SES and the Meet link script out of every test."""
    settings.AWS_SES_REGION = ""
    settings.MEET_LINK_SCRIPT_URL = ""
    settings.NOTIFICATION_EMAILS_ENABLED = False


@pytest.fixture
def organizer(db):
    return make_user("organizer")


@pytest.fixture
def hackathon(organizer):
    return make_hackathon(make_organization(owner=organizer))


@pytest.fixture
def participant(hackathon):
    user = make_user("participant")
    register(user, hackathon, Registration.APPROVED)
    return user


@pytest.fixture
def pending_user(hackathon):
    user = make_user("pending")
    register(user, hackathon, Registration.PENDING)
    return user
