from hackhub.apps.hackathons.models import (
    Hackathon,
    HackathonRole,
    OrganizationMember,
    Registration,
    Stage,
)
from hackhub.libs.errors import Forbidden, NotFound, Unauthenticated
from hackhub.libs import notification_logic


def get_hackathon(hackathon_id):
    hackathon = Hackathon.objects.filter(pk=hackathon_id) \
        .select_related("organization").first()
    if hackathon is None:
        raise NotFound("Hackathon not found")
    return hackathon


def get_stage(hackathon, stage_id):
    # Stages of another hackathon look exactly like missing ones
    stage = Stage.objects.filter(pk=stage_id, hackathon=hackathon).first()
    if stage is None:
        raise NotFound("Stage not found")
    return stage


def is_organizer(user, hackathon):
    """OWNER and ADMIN members of the owning organization manage a hackathon"""
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return OrganizationMember.objects.filter(
        organization_id=hackathon.organization_id,
        user=user,
        role__in=OrganizationMember.MANAGING_ROLES,
    ).exists()


def registration_for(user, hackathon):
    if not user or not user.is_authenticated:
        return None
    return Registration.objects.filter(hackathon=hackathon, user=user).first()


def is_approved_participant(user, hackathon):
    registration = registration_for(user, hackathon)
    return registration is not None and \
        registration.status == Registration.APPROVED


def has_hackathon_role(user, hackathon, role):
    if not user or not user.is_authenticated:
        return False
    return HackathonRole.objects.filter(hackathon=hackathon,
                                        user=user,
                                        role=role,
                                        status=HackathonRole.ACCEPTED).exists()


def viewer_tier(user, hackathon):
    if is_organizer(user, hackathon):
        return notification_logic.ORGANIZER_TIER
    registration = registration_for(user, hackathon)
    return notification_logic.viewer_tier(
        registration_status=registration.status if registration else None)


def require_user(request):
    if not request.user.is_authenticated:
        raise Unauthenticated()
    return request.user


def require_organizer(request, hackathon):
    user = require_user(request)
    if not is_organizer(user, hackathon):
        raise Forbidden()
    return user


def can_view_hackathon(user, hackathon):
    if hackathon.is_public:
        return True
    return is_organizer(user, hackathon) or \
        is_approved_participant(user, hackathon)


def require_hackathon_visible(request, hackathon):
    if can_view_hackathon(request.user, hackathon):
        return
    if not request.user.is_authenticated:
        raise Unauthenticated()
    raise Forbidden()
