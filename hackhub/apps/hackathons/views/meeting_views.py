import datetime

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from hackhub.apps.hackathons import api, auth_roles
from hackhub.apps.hackathons.helpers import parse_json_body
from hackhub.apps.hackathons.models import Meeting
from hackhub.libs import meeting_logic
from hackhub.libs.errors import Forbidden, NotFound, ValidationFailed


def parse_day(request):
    value = request.GET.get("date")
    if not value:
        return None
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise ValidationFailed("date must be formatted as YYYY-MM-DD")


def require_meeting_host(request, hackathon):
    user = auth_roles.require_user(request)
    if not meeting_logic.is_meeting_host(user, hackathon):
        raise Forbidden("Only mentors and judges can view scheduled times")
    return user


@require_http_methods(["GET", "POST"])
def meetings(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    user = auth_roles.require_user(request)

    if request.method == "POST":
        meeting = meeting_logic.schedule_meeting(hackathon, user,
                                                 parse_json_body(request))
        return JsonResponse(api.meeting_data(meeting), status=201)

    meeting_list = meeting_logic.meetings_for(hackathon, user,
                                              role=request.GET.get("role"),
                                              status=request.GET.get("status"))
    return JsonResponse({"meetings": [api.meeting_data(meeting)
                                      for meeting in meeting_list]})


@require_http_methods(["GET"])
def scheduled_times(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    user = require_meeting_host(request, hackathon)
    bookings = meeting_logic.scheduled_times(user, day=parse_day(request))
    return JsonResponse({"scheduledTimes": [api.scheduled_time_data(meeting)
                                            for meeting in bookings]})


@require_http_methods(["GET"])
def available_slots(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    user = require_meeting_host(request, hackathon)
    day = parse_day(request)
    if day is None:
        raise ValidationFailed("date is required")
    slots = meeting_logic.slots_for(user, day)
    return JsonResponse({"date": day.isoformat(),
                         "slots": [api.slot_data(slot) for slot in slots]})


@require_http_methods(["POST"])
def cancel_meeting(request, hackathon_id, meeting_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    meeting = Meeting.objects.filter(pk=meeting_id, hackathon=hackathon) \
        .select_related("hackathon", "team", "host").first()
    if meeting is None:
        raise NotFound("Meeting not found")
    user = auth_roles.require_user(request)
    meeting = meeting_logic.cancel_meeting(meeting, user)
    return JsonResponse(api.meeting_data(meeting))
