import datetime
from types import SimpleNamespace

import pytest

from hackhub.libs import notification_logic
from hackhub.libs.notification_logic import (
    ALL,
    ANONYMOUS,
    APPROVED,
    APPROVED_TIER,
    ORGANIZER_TIER,
    ORGANIZERS,
    PENDING_TIER,
    REGISTERED,
)
from hackhub.libs.tests.helpers import utc

NOW = utc(2024, 6, 1, 12)


def announcement(audience=ALL, **overrides):
    fields = {
        "target_audience": audience,
        "is_published": True,
        "publish_at": NOW - datetime.timedelta(hours=1),
        "expires_at": None,
        "is_pinned": False,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.parametrize("audience, tier, visible", [
    (APPROVED, APPROVED_TIER, True),
    (APPROVED, PENDING_TIER, False),
    (APPROVED, ANONYMOUS, False),
    (ALL, APPROVED_TIER, True),
    (ALL, PENDING_TIER, True),
    (ALL, ANONYMOUS, True),
    (REGISTERED, PENDING_TIER, True),
    (REGISTERED, ANONYMOUS, False),
    (ORGANIZERS, APPROVED_TIER, False),
    (ORGANIZERS, ORGANIZER_TIER, True),
])
def test_audience_visibility(audience, tier, visible):
    assert notification_logic.is_visible(announcement(audience), tier,
                                         NOW) is visible


def test_unpublished_scheduled_and_expired_are_hidden():
    tier = ORGANIZER_TIER
    assert not notification_logic.is_visible(
        announcement(is_published=False), tier, NOW)
    assert not notification_logic.is_visible(
        announcement(publish_at=NOW + datetime.timedelta(minutes=1)), tier, NOW)
    assert not notification_logic.is_visible(
        announcement(expires_at=NOW), tier, NOW)
    assert notification_logic.is_visible(
        announcement(expires_at=NOW + datetime.timedelta(seconds=1)), tier, NOW)


def test_pinned_first_then_newest():
    old_pinned = announcement(is_pinned=True,
                              publish_at=NOW - datetime.timedelta(days=3))
    newest = announcement(publish_at=NOW - datetime.timedelta(minutes=5))
    older = announcement(publish_at=NOW - datetime.timedelta(days=1))
    hidden = announcement(APPROVED)

    result = notification_logic.visible_announcements(
        [older, hidden, newest, old_pinned], ANONYMOUS, NOW)

    assert result == [old_pinned, newest, older]


def test_preview_is_capped():
    assert notification_logic.preview("short") == "short"
    exact = "x" * 200
    assert notification_logic.preview(exact) == exact
    long_text = "y" * 250
    assert notification_logic.preview(long_text) == "y" * 200 + "..."


def test_viewer_tier():
    assert notification_logic.viewer_tier(is_organizer=True,
                                          registration_status="PENDING") == \
        ORGANIZER_TIER
    assert notification_logic.viewer_tier(registration_status="APPROVED") == \
        APPROVED_TIER
    assert notification_logic.viewer_tier(registration_status="PENDING") == \
        PENDING_TIER
    assert notification_logic.viewer_tier(registration_status="REJECTED") == \
        ANONYMOUS
    assert notification_logic.viewer_tier() == ANONYMOUS


def test_fanout_statuses_exclude_withdrawn():
    assert "CANCELLED" not in notification_logic.fanout_registration_statuses(ALL)
    assert notification_logic.fanout_registration_statuses(APPROVED) == \
        ("APPROVED",)


def test_announcement_link():
    assert notification_logic.announcement_link("brave-wind", 7) == \
        "/hackathons/brave-wind?announcement=7"
