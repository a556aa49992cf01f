from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods

from hackhub.apps.hackathons import api, auth_roles
from hackhub.apps.hackathons.helpers import (
    parse_json_body,
    query_flag,
    success,
    validated,
)
from hackhub.apps.notifications.forms import AnnouncementForm
from hackhub.apps.notifications.models import Announcement, Notification
from hackhub.libs import notification_logic
from hackhub.libs.errors import NotFound, ValidationFailed

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@require_http_methods(["GET", "POST"])
def announcements(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)

    if request.method == "POST":
        user = auth_roles.require_organizer(request, hackathon)
        data = parse_json_body(request)
        data.setdefault("is_published", True)
        form = AnnouncementForm(data)
        validated(form)
        announcement = form.save(commit=False)
        announcement.hackathon = hackathon
        announcement.author = user
        announcement.save()
        return JsonResponse(api.announcement_data(announcement), status=201)

    auth_roles.require_hackathon_visible(request, hackathon)
    queryset = Announcement.objects.filter(hackathon=hackathon) \
        .select_related("author", "hackathon")

    if query_flag(request, "includeUnpublished") and \
            auth_roles.is_organizer(request.user, hackathon):
        visible = queryset.order_by("-is_pinned", "-created_at")
    else:
        tier = auth_roles.viewer_tier(request.user, hackathon)
        visible = notification_logic.visible_announcements(
            queryset.filter(is_published=True), tier)

    return JsonResponse({"announcements": [api.announcement_data(announcement)
                                           for announcement in visible]})


@require_http_methods(["GET", "PATCH", "DELETE"])
def announcement_detail(request, hackathon_id, announcement_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    announcement = Announcement.objects.filter(pk=announcement_id,
                                               hackathon=hackathon).first()
    if announcement is None:
        raise NotFound("Announcement not found")

    if request.method == "GET":
        auth_roles.require_hackathon_visible(request, hackathon)
        tier = auth_roles.viewer_tier(request.user, hackathon)
        if tier != notification_logic.ORGANIZER_TIER and \
                not notification_logic.is_visible(announcement, tier):
            raise NotFound("Announcement not found")
        return JsonResponse(api.announcement_data(announcement))

    auth_roles.require_organizer(request, hackathon)
    if request.method == "PATCH":
        current = model_to_dict(announcement, fields=AnnouncementForm.Meta.fields)
        form = AnnouncementForm(dict(current, **parse_json_body(request)),
                                instance=announcement)
        validated(form)
        return JsonResponse(api.announcement_data(form.save()))

    announcement.delete()
    return success()


def page_param(request, name, default):
    value = request.GET.get(name)
    if value in (None, ""):
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValidationFailed(f"{name} must be an integer")
    if number < 0:
        raise ValidationFailed(f"{name} must not be negative")
    return number


@require_http_methods(["GET"])
def notifications(request):
    user = auth_roles.require_user(request)
    limit = min(page_param(request, "limit", DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
    offset = page_param(request, "offset", 0)

    queryset = Notification.objects.filter(user=user)
    if query_flag(request, "unreadOnly"):
        queryset = queryset.filter(is_read=False)

    total = queryset.count()
    page = list(queryset[offset:offset + limit])
    return JsonResponse({
        "notifications": [api.notification_data(notification)
                          for notification in page],
        "unreadCount": Notification.objects.filter(user=user,
                                                   is_read=False).count(),
        "total": total,
        "hasMore": offset + len(page) < total,
    })


@require_http_methods(["GET"])
def unread_count(request):
    if not request.user.is_authenticated:
        return JsonResponse({"count": 0})
    return JsonResponse({
        "count": Notification.objects.filter(user=request.user,
                                             is_read=False).count()
    })


@require_http_methods(["POST"])
def mark_all_read(request):
    user = auth_roles.require_user(request)
    Notification.objects.filter(user=user, is_read=False) \
        .update(is_read=True, read_at=timezone.now())
    return success()


@require_http_methods(["PATCH", "DELETE"])
def notification_detail(request, notification_id):
    user = auth_roles.require_user(request)
    notification = Notification.objects.filter(pk=notification_id,
                                               user=user).first()
    if notification is None:
        raise NotFound("Notification not found")

    if request.method == "PATCH":
        notification.mark_read()
        return JsonResponse(api.notification_data(notification))

    notification.delete()
    return success()
