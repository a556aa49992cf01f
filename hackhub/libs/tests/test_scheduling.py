import datetime

from hackhub.libs.scheduling import (
    Booking,
    SlotSchedule,
    available_slots,
    conflicting_bookings,
    day_bounds,
    has_conflict,
)
from hackhub.libs.tests.helpers import utc

DAY = datetime.date(2024, 6, 1)
EXISTING = [Booking(utc(2024, 6, 1, 10, 0), utc(2024, 6, 1, 10, 30))]


def at(hour, minute=0):
    return utc(2024, 6, 1, hour, minute)


def test_overlapping_booking_conflicts():
    assert has_conflict(at(10, 15), at(10, 45), EXISTING)


def test_adjacent_bookings_do_not_conflict():
    assert not has_conflict(at(10, 30), at(11, 0), EXISTING)
    assert not has_conflict(at(9, 30), at(10, 0), EXISTING)


def test_containment_and_identical_windows_conflict():
    assert has_conflict(at(10, 0), at(10, 30), EXISTING)
    assert has_conflict(at(10, 5), at(10, 10), EXISTING)
    assert has_conflict(at(9, 0), at(12, 0), EXISTING)


def test_cancelled_bookings_are_ignored():
    cancelled = [Booking(at(10, 0), at(10, 30), "CANCELLED")]
    assert not has_conflict(at(10, 15), at(10, 45), cancelled)
    assert conflicting_bookings(at(10, 15), at(10, 45), cancelled) == []


def test_conflicting_bookings_lists_only_overlaps():
    existing = EXISTING + [Booking(at(14, 0), at(15, 0), "SCHEDULED")]
    assert conflicting_bookings(at(10, 0), at(11, 0), existing) == EXISTING


def test_slots_cover_the_working_day():
    slots = list(available_slots(DAY, []))
    assert len(slots) == 18
    assert slots[0].time == "09:00 AM"
    assert slots[-1].time == "05:30 PM"
    assert all(slot.available for slot in slots)


def test_slots_mark_booked_time_unavailable():
    slots = {slot.time: slot.available
             for slot in available_slots(DAY, EXISTING)}
    assert slots["10:00 AM"] is False
    assert slots["09:30 AM"] is True
    assert slots["10:30 AM"] is True


def test_slot_schedule_can_be_iterated_again():
    schedule = SlotSchedule(DAY, EXISTING, start_hour=9, end_hour=12,
                            slot_duration=60)
    first = list(schedule)
    assert first == list(schedule)
    assert [slot.time for slot in first] == ["09:00 AM", "10:00 AM",
                                             "11:00 AM"]
    assert len(schedule) == 3
    assert [slot.time for slot in first if slot.available] == \
        ["09:00 AM", "11:00 AM"]


def test_day_bounds_span_the_whole_day():
    start, end = day_bounds(DAY)
    assert start == utc(2024, 6, 1, 0, 0)
    assert end == datetime.datetime(2024, 6, 1, 23, 59, 59, 999000,
                                    tzinfo=datetime.timezone.utc)
