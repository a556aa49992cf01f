"""Pure rules for announcement visibility and notification fan-out."""

from django.utils import timezone

PREVIEW_LENGTH = 200
ELLIPSIS = "..."

# Announcement target audiences
ALL = "ALL"
REGISTERED = "REGISTERED"
APPROVED = "APPROVED"
ORGANIZERS = "ORGANIZERS"

AUDIENCE_CHOICES = (
    (ALL, "Everyone"),
    (REGISTERED, "Registered participants"),
    (APPROVED, "Approved participants"),
    (ORGANIZERS, "Organizers"),
)

# Viewer tiers
ANONYMOUS = "ANONYMOUS"
PENDING_TIER = "PENDING"
APPROVED_TIER = "APPROVED"
ORGANIZER_TIER = "ORGANIZER"

AUDIENCE_TIERS = {
    ALL: frozenset({ANONYMOUS, PENDING_TIER, APPROVED_TIER, ORGANIZER_TIER}),
    REGISTERED: frozenset({PENDING_TIER, APPROVED_TIER, ORGANIZER_TIER}),
    APPROVED: frozenset({APPROVED_TIER, ORGANIZER_TIER}),
    ORGANIZERS: frozenset({ORGANIZER_TIER}),
}

# Registration statuses reached by a fan-out, keyed by audience
FANOUT_STATUSES = {
    ALL: ("PENDING", "APPROVED", "REJECTED"),
    REGISTERED: ("PENDING", "APPROVED"),
    APPROVED: ("APPROVED",),
    ORGANIZERS: (),
}


def preview(text, length=PREVIEW_LENGTH):
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS


def viewer_tier(is_organizer=False, registration_status=None):
    if is_organizer:
        return ORGANIZER_TIER
    if registration_status == "APPROVED":
        return APPROVED_TIER
    if registration_status == "PENDING":
        return PENDING_TIER
    return ANONYMOUS


def audience_tiers(audience):
    return AUDIENCE_TIERS.get(audience, AUDIENCE_TIERS[ALL])


def is_live(announcement, now=None):
    now = now or timezone.now()
    if not announcement.is_published:
        return False
    if announcement.publish_at > now:
        return False
    return announcement.expires_at is None or announcement.expires_at > now


def is_visible(announcement, tier, now=None):
    return is_live(announcement, now) and \
        tier in audience_tiers(announcement.target_audience)


def visible_announcements(announcements, tier, now=None):
    """Filters to what ``tier`` may see, pinned first then newest first"""
    now = now or timezone.now()
    visible = [announcement for announcement in announcements
               if is_visible(announcement, tier, now)]
    visible.sort(key=lambda a: a.publish_at, reverse=True)
    visible.sort(key=lambda a: not a.is_pinned)
    return visible


def fanout_registration_statuses(audience):
    return FANOUT_STATUSES.get(audience, FANOUT_STATUSES[ALL])


def announcement_link(slug, announcement_id):
    return f"/hackathons/{slug}?announcement={announcement_id}"
