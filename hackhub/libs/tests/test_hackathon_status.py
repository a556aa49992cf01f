import datetime

import pytest

from hackhub.libs import hackathon_status
from hackhub.libs.hackathon_status import (
    CANCELLED,
    COMPLETED,
    DRAFT,
    IN_PROGRESS,
    JUDGING,
    LIFECYCLE_ORDER,
    PUBLISHED,
    REGISTRATION_CLOSED,
    REGISTRATION_OPEN,
    compute_status,
)
from hackhub.libs.tests.helpers import utc

REG_START = utc(2024, 5, 1, 9)
REG_END = utc(2024, 5, 10, 17)
START = utc(2024, 6, 1, 9)
END = utc(2024, 6, 3, 18)
RESULTS = utc(2024, 6, 10, 12)


def status_at(now, current=PUBLISHED, results_date=RESULTS):
    return compute_status(REG_START, REG_END, START, END, current,
                          results_date=results_date, now=now)


@pytest.mark.parametrize("now, expected", [
    (utc(2024, 4, 20), PUBLISHED),
    (utc(2024, 4, 30, 23, 59), PUBLISHED),
    (utc(2024, 5, 1, 0, 0), REGISTRATION_OPEN),
    (utc(2024, 5, 10, 23, 0), REGISTRATION_OPEN),
    (utc(2024, 5, 11, 0, 0), REGISTRATION_CLOSED),
    (utc(2024, 5, 31, 23, 59), REGISTRATION_CLOSED),
    (utc(2024, 6, 1, 0, 0), IN_PROGRESS),
    (utc(2024, 6, 3, 23, 59), IN_PROGRESS),
    (utc(2024, 6, 4, 0, 0), JUDGING),
    (utc(2024, 6, 10, 23, 0), JUDGING),
    (utc(2024, 6, 11, 0, 0), COMPLETED),
])
def test_status_follows_calendar_days(now, expected):
    assert status_at(now) == expected


def test_without_results_date_judging_never_ends():
    assert status_at(utc(2025, 1, 1), results_date=None) == JUDGING


@pytest.mark.parametrize("pinned", [DRAFT, CANCELLED])
def test_pinned_statuses_are_kept(pinned):
    for now in (utc(2024, 4, 1), utc(2024, 6, 2), utc(2024, 7, 1)):
        assert status_at(now, current=pinned) == pinned


def test_status_never_moves_backwards():
    day = utc(2024, 4, 1)
    last_index = -1
    while day < utc(2024, 7, 1):
        index = LIFECYCLE_ORDER.index(status_at(day))
        assert index >= last_index
        last_index = index
        day += datetime.timedelta(hours=7)


def test_day_granularity_uses_local_time(settings):
    settings.TIME_ZONE = "America/New_York"
    # 02:00 UTC on the 11th is still the 10th in New York
    assert status_at(utc(2024, 5, 11, 2)) == REGISTRATION_OPEN


@pytest.mark.django_db
def test_hackathon_computed_status(hackathon):
    assert hackathon.computed_status() == IN_PROGRESS
    assert hackathon_status.status_for(
        hackathon, now=hackathon.registration_start) == REGISTRATION_OPEN
