"""
Derives a hackathon's lifecycle status from its configured dates.

Dates are compared by calendar day in the project's local time zone, so an
event whose registration closes "on the 10th" is still open for the whole of
the 10th regardless of the time component stored on the instant.
"""

from django.utils import timezone

DRAFT = "DRAFT"
PUBLISHED = "PUBLISHED"
REGISTRATION_OPEN = "REGISTRATION_OPEN"
REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
IN_PROGRESS = "IN_PROGRESS"
JUDGING = "JUDGING"
COMPLETED = "COMPLETED"
CANCELLED = "CANCELLED"

STATUS_CHOICES = (
    (DRAFT, "Draft"),
    (PUBLISHED, "Published"),
    (REGISTRATION_OPEN, "Registration Open"),
    (REGISTRATION_CLOSED, "Registration Closed"),
    (IN_PROGRESS, "In Progress"),
    (JUDGING, "Judging"),
    (COMPLETED, "Completed"),
    (CANCELLED, "Cancelled"),
)

# Statuses that are set by hand and never recomputed
PINNED_STATUSES = frozenset({DRAFT, CANCELLED})

LIFECYCLE_ORDER = (
    PUBLISHED,
    REGISTRATION_OPEN,
    REGISTRATION_CLOSED,
    IN_PROGRESS,
    JUDGING,
    COMPLETED,
)


def local_day(value):
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.date()


def compute_status(registration_start, registration_end, hackathon_start,
                   hackathon_end, current_status, results_date=None, now=None):
    """
    Returns the status a hackathon should have at ``now``.

    Arguments:
    registration_start, registration_end, hackathon_start, hackathon_end
        -- the four configured instants
    current_status -- the stored status; DRAFT and CANCELLED are returned as-is
    results_date -- optional instant after which judging is considered over
    now -- defaults to the current time
    """
    if current_status in PINNED_STATUSES:
        return current_status

    today = local_day(now or timezone.now())
    reg_start = local_day(registration_start)
    reg_end = local_day(registration_end)
    start = local_day(hackathon_start)
    end = local_day(hackathon_end)

    if today > end:
        if results_date is not None and today > local_day(results_date):
            return COMPLETED
        return JUDGING

    if start <= today <= end:
        return IN_PROGRESS

    if reg_end < today < start:
        return REGISTRATION_CLOSED

    if reg_start <= today <= reg_end:
        return REGISTRATION_OPEN

    if today < reg_start:
        return PUBLISHED

    return current_status


def status_for(hackathon, now=None):
    return compute_status(hackathon.registration_start,
                          hackathon.registration_end,
                          hackathon.hackathon_start,
                          hackathon.hackathon_end,
                          hackathon.status,
                          results_date=hackathon.results_date,
                          now=now)
