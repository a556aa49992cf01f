"""
Conflict detection for mentor and judge meetings.

A booking is anything with ``scheduled_at`` and ``end_time`` attributes and an
optional ``status``. Intervals are half-open, so a meeting ending at 10:30
does not collide with one starting at 10:30.
"""

import datetime
from collections import namedtuple

from django.utils import timezone

CANCELLED = "CANCELLED"

Booking = namedtuple("Booking", ["scheduled_at", "end_time", "status"])
Booking.__new__.__defaults__ = (None,)

Slot = namedtuple("Slot", ["time", "available", "start", "end"])


def overlaps(start_a, end_a, start_b, end_b):
    return start_a < end_b and end_a > start_b


def is_active_booking(booking):
    return getattr(booking, "status", None) != CANCELLED


def conflicting_bookings(new_start, new_end, existing):
    return [booking for booking in existing
            if is_active_booking(booking)
            and overlaps(new_start, new_end,
                         booking.scheduled_at, booking.end_time)]


def has_conflict(new_start, new_end, existing):
    """True if [new_start, new_end) overlaps any non-cancelled booking"""
    return any(is_active_booking(booking)
               and overlaps(new_start, new_end,
                            booking.scheduled_at, booking.end_time)
               for booking in existing)


def slot_label(value):
    return value.strftime("%I:%M %p")


class SlotSchedule:
    """
    The fixed-length slots of one day between ``start_hour`` and ``end_hour``.

    Iterating yields ``Slot`` tuples in time order. The schedule holds no
    cursor, so it can be iterated any number of times.
    """

    def __init__(self, day, existing, start_hour=9, end_hour=18,
                 slot_duration=30):
        if slot_duration <= 0:
            raise ValueError("slot_duration must be positive")
        self.day = day
        self.existing = [booking for booking in existing
                         if is_active_booking(booking)]
        self.start_hour = start_hour
        self.end_hour = end_hour
        self.slot_duration = slot_duration

    def _window(self):
        tz = timezone.get_current_timezone()
        opens = datetime.datetime.combine(self.day,
                                          datetime.time(hour=self.start_hour))
        closes = datetime.datetime.combine(self.day, datetime.time()) + \
            datetime.timedelta(hours=self.end_hour)
        return timezone.make_aware(opens, tz), timezone.make_aware(closes, tz)

    def __iter__(self):
        opens, closes = self._window()
        step = datetime.timedelta(minutes=self.slot_duration)
        current = opens
        while current + step <= closes:
            slot_end = current + step
            yield Slot(time=slot_label(timezone.localtime(current)),
                       available=not has_conflict(current, slot_end,
                                                  self.existing),
                       start=current,
                       end=slot_end)
            current = slot_end

    def __len__(self):
        minutes = (self.end_hour - self.start_hour) * 60
        return max(minutes // self.slot_duration, 0)


def available_slots(day, existing, start_hour=9, end_hour=18, slot_duration=30):
    return SlotSchedule(day, existing, start_hour=start_hour,
                        end_hour=end_hour, slot_duration=slot_duration)


def day_bounds(day):
    """Local [00:00:00.000, 23:59:59.999] bounds of a calendar day"""
    tz = timezone.get_current_timezone()
    start = datetime.datetime.combine(day, datetime.time.min)
    end = datetime.datetime.combine(day, datetime.time(23, 59, 59, 999000))
    return timezone.make_aware(start, tz), timezone.make_aware(end, tz)
