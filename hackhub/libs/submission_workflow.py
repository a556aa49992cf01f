"""
Lifecycle of a stage submission.

A participant (or their team) may hold at most one submission per stage. The
author may edit content until the submission is judged and while the stage
deadline allows it; organizers may change anything at any time.
"""

import logging
import math

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from hackhub.apps.hackathons import auth_roles
from hackhub.apps.hackathons.forms import (
    JudgeForm,
    SubmissionContentForm,
    SubmissionReviewForm,
)
from hackhub.apps.hackathons.helpers import provided, validated
from hackhub.apps.hackathons.models import Registration, Submission, Team
from hackhub.apps.notifications.fanout import notify_users
from hackhub.apps.notifications.models import Notification
from hackhub.libs.errors import Forbidden, UnexpectedError, ValidationFailed

logger = logging.getLogger(__name__)

DUPLICATE_SUBMISSION = "You have already submitted for this stage"
DEADLINE_PASSED = "Submission deadline has passed"

REVIEW_FIELDS = ("status", "score", "feedback")

STATUS_MESSAGES = {
    Submission.UNDER_REVIEW: "is now under review",
    Submission.APPROVED: "has been approved",
    Submission.REJECTED: "has been rejected",
    Submission.NEEDS_REVISION: "needs revision",
}


def is_past_deadline(stage, now):
    return now > stage.effective_deadline


def has_submitted(stage, author_key):
    return Submission.objects.filter(stage=stage, author_key=author_key).exists()


def author_team(stage, user):
    if not stage.team_submission:
        return None
    team = Team.for_user(stage.hackathon, user)
    if team is None:
        raise ValidationFailed("You must be on a team to submit for this stage")
    return team


def create_submission(stage, user, data, now=None):
    hackathon = stage.hackathon
    now = now or timezone.now()

    if not auth_roles.is_approved_participant(user, hackathon):
        raise Forbidden("You must be an approved participant to submit")
    if not stage.requires_submission:
        raise ValidationFailed("This stage does not accept submissions")
    if not stage.is_active:
        raise ValidationFailed("This stage is not active")

    is_late = is_past_deadline(stage, now)
    if is_late and not stage.allow_late_submission:
        raise ValidationFailed(DEADLINE_PASSED)

    team = author_team(stage, user)
    author_key = Submission.author_key_for(user, team)
    if has_submitted(stage, author_key):
        raise ValidationFailed(DUPLICATE_SUBMISSION)

    content = validated(SubmissionContentForm(data))

    try:
        with transaction.atomic():
            submission = Submission.objects.create(
                stage=stage,
                hackathon=hackathon,
                user=user,
                team=team,
                author_key=author_key,
                is_late=is_late,
                submitted_at=now,
                **content)
    except IntegrityError:
        # Lost a race with a concurrent create for the same author
        raise ValidationFailed(DUPLICATE_SUBMISSION)
    except DatabaseError:
        logger.exception("Failed to create submission for stage %s", stage.pk)
        raise UnexpectedError("Failed to create submission")

    logger.info("Submission %s created for stage %s (late=%s)",
                submission.pk, stage.pk, is_late)
    return submission


def _save(submission, message):
    try:
        submission.save()
    except DatabaseError:
        logger.exception("%s: submission %s", message, submission.pk)
        raise UnexpectedError(message)


def notify_status_change(submission):
    phrase = STATUS_MESSAGES.get(submission.status)
    if phrase is None:
        return
    notify_users(
        [submission.user],
        Notification.SUBMISSION,
        f"Submission {phrase}",
        message=f'Your submission for "{submission.stage.name}" {phrase}.',
        link=f"/hackathons/{submission.hackathon.slug}",
        hackathon=submission.hackathon)


def update_submission(submission, user, data, now=None):
    """Organizers review, authors edit content. Returns the saved submission."""
    now = now or timezone.now()
    stage = submission.stage

    if auth_roles.is_organizer(user, submission.hackathon):
        return review_submission(submission, user, data, now=now)

    if not submission.is_authored_by(user):
        raise Forbidden()
    if any(field in data for field in REVIEW_FIELDS):
        raise Forbidden("Only organizers can review submissions")
    if submission.is_judged:
        raise ValidationFailed("Cannot edit a submission that has been judged")
    if is_past_deadline(stage, now) and not stage.allow_late_submission:
        raise ValidationFailed(DEADLINE_PASSED)

    changes = provided(validated(SubmissionContentForm(data)), data)
    for field, value in changes.items():
        setattr(submission, field, value)
    submission.submitted_at = now
    _save(submission, "Failed to update submission")
    return submission


def review_submission(submission, user, data, now=None):
    now = now or timezone.now()
    changes = provided(validated(SubmissionReviewForm(data)), data)
    previous_status = submission.status

    for field, value in changes.items():
        if field == "feedback" and value is None:
            value = ""
        setattr(submission, field, value)

    status_changed = "status" in changes and \
        changes["status"] and changes["status"] != previous_status
    if not changes.get("status"):
        submission.status = previous_status
    if status_changed and submission.is_judged:
        submission.judged_at = now
        submission.judged_by = user

    _save(submission, "Failed to update submission")
    if status_changed:
        notify_status_change(submission)
    return submission


def judge_submission(submission, user, data, now=None):
    if not auth_roles.is_organizer(user, submission.hackathon):
        raise Forbidden("Only organizers can judge submissions")

    cleaned = validated(JudgeForm(data))
    submission.score = cleaned["score"]
    submission.feedback = cleaned.get("feedback") or ""
    submission.status = Submission.APPROVED
    submission.judged_at = now or timezone.now()
    submission.judged_by = user
    _save(submission, "Failed to judge submission")

    notify_users(
        [submission.user],
        Notification.JUDGING,
        "Submission Judged",
        message=f'Your submission for "{submission.stage.name}" has been '
                f"judged. Score: {submission.score}",
        link=f"/hackathons/{submission.hackathon.slug}",
        hackathon=submission.hackathon)
    return submission


def delete_submission(submission, user):
    if not auth_roles.is_organizer(user, submission.hackathon):
        if not submission.is_authored_by(user):
            raise Forbidden()
        if submission.is_judged:
            raise ValidationFailed(
                "Cannot delete a submission that has been judged")
    try:
        submission.delete()
    except DatabaseError:
        logger.exception("Failed to delete submission %s", submission.pk)
        raise UnexpectedError("Failed to delete submission")


def submissions_visible_to(stage, user):
    """Organizers see every submission, everyone else at most their own"""
    submissions = Submission.objects.filter(stage=stage) \
        .select_related("user", "team")
    if auth_roles.is_organizer(user, stage.hackathon):
        return submissions

    keys = [Submission.author_key_for(user)]
    team = Team.for_user(stage.hackathon, user)
    if team is not None:
        keys.append(Submission.author_key_for(user, team))
    return submissions.filter(author_key__in=keys)


def submission_rate(submitted, total):
    if total <= 0:
        return 0
    return int(math.floor(submitted * 100 / total + 0.5))


def stage_submission_stats(stage):
    submissions = Submission.objects.filter(stage=stage)
    total = Registration.objects.filter(hackathon=stage.hackathon_id,
                                        status=Registration.APPROVED).count()
    submitted = submissions.count()
    reviewed = submissions.filter(judged_at__isnull=False).count()
    return {
        "totalParticipants": total,
        "submitted": submitted,
        "pending": submitted - reviewed,
        "reviewed": reviewed,
        "approved": submissions.filter(status=Submission.APPROVED).count(),
        "rejected": submissions.filter(status=Submission.REJECTED).count(),
        "submissionRate": submission_rate(submitted, total),
    }
