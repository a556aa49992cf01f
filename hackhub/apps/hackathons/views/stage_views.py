from django.db.models import Count
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from hackhub.apps.hackathons import api, auth_roles
from hackhub.apps.hackathons.helpers import parse_json_body, success
from hackhub.apps.hackathons.models import Stage
from hackhub.libs import stage_logic, submission_workflow


def stage_body(request):
    data = parse_json_body(request)
    if "depends_on_stage_id" in data:
        data["depends_on"] = data.pop("depends_on_stage_id")
    return data


@require_http_methods(["GET", "POST"])
def stages(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)

    if request.method == "POST":
        auth_roles.require_organizer(request, hackathon)
        stage = stage_logic.create_stage(hackathon, stage_body(request))
        return JsonResponse(api.stage_data(stage), status=201)

    auth_roles.require_hackathon_visible(request, hackathon)
    stage_list = Stage.objects.filter(hackathon=hackathon) \
        .annotate(submission_count=Count("submissions")).order_by("order")
    return JsonResponse({
        "stages": [api.stage_data(stage, stage.submission_count)
                   for stage in stage_list]
    })


@require_http_methods(["POST"])
def reorder_stages(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    auth_roles.require_organizer(request, hackathon)
    stage_list = stage_logic.reorder_stages(
        hackathon, parse_json_body(request).get("stages"))
    return JsonResponse({"stages": [api.stage_data(stage)
                                    for stage in stage_list]})


@require_http_methods(["GET"])
def current_stage(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    auth_roles.require_hackathon_visible(request, hackathon)
    stage = stage_logic.current_stage(hackathon)
    return JsonResponse({
        "current": api.stage_data(stage) if stage is not None else None,
        "upcoming": [api.stage_data(upcoming) for upcoming in
                     stage_logic.upcoming_stages(hackathon)],
    })


@require_http_methods(["GET", "PATCH", "DELETE"])
def stage_detail(request, hackathon_id, stage_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)

    if request.method == "GET":
        auth_roles.require_hackathon_visible(request, hackathon)
        return JsonResponse(api.stage_data(stage, stage.submissions.count()))

    auth_roles.require_organizer(request, hackathon)
    if request.method == "PATCH":
        stage = stage_logic.update_stage(stage, stage_body(request))
        return JsonResponse(api.stage_data(stage))

    stage_logic.delete_stage(stage)
    return success()


@require_http_methods(["POST"])
def activate_stage(request, hackathon_id, stage_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)
    auth_roles.require_organizer(request, hackathon)
    return JsonResponse(api.stage_data(stage_logic.activate_stage(stage)))


@require_http_methods(["POST"])
def complete_stage(request, hackathon_id, stage_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)
    auth_roles.require_organizer(request, hackathon)
    return JsonResponse(api.stage_data(stage_logic.complete_stage(stage)))


@require_http_methods(["GET"])
def stage_stats(request, hackathon_id, stage_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)
    auth_roles.require_organizer(request, hackathon)
    return JsonResponse(submission_workflow.stage_submission_stats(stage))
