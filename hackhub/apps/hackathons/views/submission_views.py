from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from hackhub.apps.hackathons import api, auth_roles
from hackhub.apps.hackathons.helpers import parse_json_body, success
from hackhub.apps.hackathons.models import Submission
from hackhub.libs import submission_workflow
from hackhub.libs.errors import Forbidden, NotFound


def get_submission(stage, submission_id):
    submission = Submission.objects.filter(pk=submission_id, stage=stage) \
        .select_related("stage", "hackathon", "user", "team").first()
    if submission is None:
        raise NotFound("Submission not found")
    return submission


@require_http_methods(["GET", "POST"])
def submissions(request, hackathon_id, stage_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)

    if request.method == "POST":
        user = auth_roles.require_user(request)
        submission = submission_workflow.create_submission(
            stage, user, parse_json_body(request))
        return JsonResponse(api.submission_data(submission), status=201)

    auth_roles.require_hackathon_visible(request, hackathon)
    if not request.user.is_authenticated:
        return JsonResponse({"submissions": []})

    include_author = auth_roles.is_organizer(request.user, hackathon)
    visible = submission_workflow.submissions_visible_to(stage, request.user)
    return JsonResponse({
        "submissions": [api.submission_data(submission, include_author)
                        for submission in visible]
    })


@require_http_methods(["GET", "PATCH", "DELETE"])
def submission_detail(request, hackathon_id, stage_id, submission_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)
    submission = get_submission(stage, submission_id)
    user = auth_roles.require_user(request)

    if request.method == "GET":
        organizer = auth_roles.is_organizer(user, hackathon)
        if not organizer and not submission.is_authored_by(user):
            raise Forbidden()
        return JsonResponse(api.submission_data(submission, organizer))

    if request.method == "PATCH":
        submission = submission_workflow.update_submission(
            submission, user, parse_json_body(request))
        return JsonResponse(api.submission_data(submission))

    submission_workflow.delete_submission(submission, user)
    return success()


@require_http_methods(["POST"])
def judge_submission(request, hackathon_id, stage_id, submission_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    stage = auth_roles.get_stage(hackathon, stage_id)
    submission = get_submission(stage, submission_id)
    user = auth_roles.require_user(request)
    submission = submission_workflow.judge_submission(
        submission, user, parse_json_body(request))
    return JsonResponse(api.submission_data(submission, include_author=True))
