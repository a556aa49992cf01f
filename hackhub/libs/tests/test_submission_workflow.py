import datetime
from decimal import Decimal
from unittest import mock

import pytest
from django.test import TestCase

from hackhub.apps.hackathons.models import Registration, Submission
from hackhub.apps.notifications.models import Notification
from hackhub.libs import submission_workflow
from hackhub.libs.errors import Forbidden, ValidationFailed
from hackhub.libs.tests.helpers import (
    make_hackathon,
    make_organization,
    make_stage,
    make_team,
    make_user,
    register,
    utc,
)

DEADLINE = utc(2024, 6, 1)
CONTENT = {"title": "Robo Chef", "description": "Cooks for you",
           "repo_url": "https://github.com/example/robo-chef"}


@pytest.mark.django_db
class TestSubmissionCreation(TestCase):
    def setUp(self):
        self.organizer = make_user("organizer")
        self.hackathon = make_hackathon(make_organization(owner=self.organizer))
        self.stage = make_stage(self.hackathon,
                                start_date=utc(2024, 5, 20),
                                end_date=DEADLINE)
        self.participant = make_user("participant")
        register(self.participant, self.hackathon)

    def create(self, user=None, now=None, data=None):
        return submission_workflow.create_submission(
            self.stage, user or self.participant, data or CONTENT,
            now=now or DEADLINE - datetime.timedelta(hours=1))

    def test_create_on_time(self):
        submission = self.create()
        assert submission.status == Submission.SUBMITTED
        assert submission.is_late is False
        assert submission.author_key == f"user:{self.participant.pk}"
        assert submission.repo_url == CONTENT["repo_url"]

    def test_one_second_before_deadline_is_not_late(self):
        submission = self.create(now=DEADLINE - datetime.timedelta(seconds=1))
        assert submission.is_late is False

    def test_after_deadline_without_allowance_is_rejected(self):
        with pytest.raises(ValidationFailed) as error:
            self.create(now=utc(2024, 6, 1, 0, 0, 1))
        assert error.value.msg == submission_workflow.DEADLINE_PASSED
        assert not Submission.objects.exists()

    def test_after_deadline_with_allowance_is_late(self):
        self.stage.allow_late_submission = True
        self.stage.save()
        submission = self.create(now=DEADLINE + datetime.timedelta(seconds=1))
        assert submission.is_late is True

    def test_submission_deadline_overrides_end_date(self):
        self.stage.submission_deadline = DEADLINE - datetime.timedelta(days=1)
        self.stage.save()
        with pytest.raises(ValidationFailed):
            self.create(now=DEADLINE - datetime.timedelta(hours=1))

    def test_second_submission_is_a_duplicate(self):
        self.create()
        with pytest.raises(ValidationFailed) as error:
            self.create()
        assert error.value.msg == submission_workflow.DUPLICATE_SUBMISSION
        assert Submission.objects.count() == 1

    def test_concurrent_duplicate_is_reported_as_duplicate(self):
        self.create()
        with mock.patch.object(submission_workflow, "has_submitted",
                               return_value=False):
            with pytest.raises(ValidationFailed) as error:
                self.create()
        assert error.value.msg == submission_workflow.DUPLICATE_SUBMISSION
        assert Submission.objects.count() == 1

    def test_requires_approved_registration(self):
        pending = make_user("pending")
        register(pending, self.hackathon, Registration.PENDING)
        with pytest.raises(Forbidden):
            self.create(user=pending)

    def test_stage_must_accept_submissions(self):
        self.stage.requires_submission = False
        self.stage.save()
        with pytest.raises(ValidationFailed):
            self.create()

    def test_stage_must_be_active(self):
        self.stage.is_active = False
        self.stage.save()
        with pytest.raises(ValidationFailed):
            self.create()

    def test_invalid_links_are_rejected(self):
        with pytest.raises(ValidationFailed) as error:
            self.create(data={"title": "Bad", "links": ["not a url"]})
        assert "links" in error.value.errors
        assert not Submission.objects.exists()

    def test_team_stage_uses_one_submission_per_team(self):
        self.stage.team_submission = True
        self.stage.save()
        teammate = make_user("teammate")
        register(teammate, self.hackathon)
        make_team(self.hackathon, self.participant, teammate)

        first = self.create()
        assert first.team is not None
        with pytest.raises(ValidationFailed):
            self.create(user=teammate)

    def test_team_stage_requires_a_team(self):
        self.stage.team_submission = True
        self.stage.save()
        with pytest.raises(ValidationFailed):
            self.create()


@pytest.mark.django_db
class TestSubmissionChanges(TestCase):
    def setUp(self):
        self.organizer = make_user("organizer")
        self.hackathon = make_hackathon(make_organization(owner=self.organizer))
        self.stage = make_stage(self.hackathon,
                                start_date=utc(2024, 5, 20),
                                end_date=DEADLINE)
        self.participant = make_user("participant")
        register(self.participant, self.hackathon)
        self.before = DEADLINE - datetime.timedelta(hours=2)
        self.submission = submission_workflow.create_submission(
            self.stage, self.participant, CONTENT, now=self.before)

    def test_author_edits_content_and_refreshes_timestamp(self):
        edited_at = DEADLINE - datetime.timedelta(minutes=5)
        submission = submission_workflow.update_submission(
            self.submission, self.participant, {"title": "Robo Chef 2"},
            now=edited_at)
        submission.refresh_from_db()
        assert submission.title == "Robo Chef 2"
        assert submission.description == CONTENT["description"]
        assert submission.submitted_at == edited_at

    def test_author_cannot_edit_after_deadline(self):
        with pytest.raises(ValidationFailed):
            submission_workflow.update_submission(
                self.submission, self.participant, {"title": "Late"},
                now=DEADLINE + datetime.timedelta(seconds=1))

    def test_author_cannot_set_review_fields(self):
        with pytest.raises(Forbidden):
            submission_workflow.update_submission(
                self.submission, self.participant, {"status": "APPROVED"},
                now=self.before)

    def test_other_participants_cannot_edit(self):
        other = make_user("other")
        register(other, self.hackathon)
        with pytest.raises(Forbidden):
            submission_workflow.update_submission(
                self.submission, other, {"title": "Mine"}, now=self.before)

    def test_judged_submission_is_frozen_for_author(self):
        submission_workflow.judge_submission(self.submission, self.organizer,
                                             {"score": 88})
        with pytest.raises(ValidationFailed):
            submission_workflow.update_submission(
                self.submission, self.participant, {"title": "Again"},
                now=self.before)
        with pytest.raises(ValidationFailed):
            submission_workflow.delete_submission(self.submission,
                                                  self.participant)

    def test_organizer_review_ignores_deadline(self):
        submission = submission_workflow.update_submission(
            self.submission, self.organizer,
            {"status": Submission.REJECTED, "feedback": "Incomplete"},
            now=DEADLINE + datetime.timedelta(days=3))
        assert submission.status == Submission.REJECTED
        assert submission.judged_by == self.organizer
        notification = Notification.objects.get(user=self.participant)
        assert notification.type == Notification.SUBMISSION
        assert notification.title == "Submission has been rejected"

    def test_judge_scores_and_approves(self):
        submission = submission_workflow.judge_submission(
            self.submission, self.organizer,
            {"score": "91.5", "feedback": "Great demo"})
        assert submission.status == Submission.APPROVED
        assert submission.score == Decimal("91.5")
        assert submission.judged_at is not None
        assert Notification.objects.filter(
            user=self.participant, type=Notification.JUDGING).exists()

    def test_judge_requires_organizer(self):
        with pytest.raises(Forbidden):
            submission_workflow.judge_submission(
                self.submission, self.participant, {"score": 100})

    def test_negative_scores_are_rejected(self):
        with pytest.raises(ValidationFailed):
            submission_workflow.judge_submission(
                self.submission, self.organizer, {"score": -1})

    def test_author_deletes_unjudged_submission(self):
        submission_workflow.delete_submission(self.submission, self.participant)
        assert not Submission.objects.exists()

    def test_visibility(self):
        other = make_user("other")
        register(other, self.hackathon)
        assert list(submission_workflow.submissions_visible_to(
            self.stage, self.organizer)) == [self.submission]
        assert list(submission_workflow.submissions_visible_to(
            self.stage, self.participant)) == [self.submission]
        assert list(submission_workflow.submissions_visible_to(
            self.stage, other)) == []

    def test_stage_stats(self):
        for name in ("second", "third", "fourth"):
            register(make_user(name), self.hackathon)
        submission_workflow.judge_submission(self.submission, self.organizer,
                                             {"score": 70})

        stats = submission_workflow.stage_submission_stats(self.stage)

        assert stats == {
            "totalParticipants": 4,
            "submitted": 1,
            "pending": 0,
            "reviewed": 1,
            "approved": 1,
            "rejected": 0,
            "submissionRate": 25,
        }


def test_submission_rate_rounds_half_up():
    assert submission_workflow.submission_rate(1, 8) == 13
    assert submission_workflow.submission_rate(0, 0) == 0
    assert submission_workflow.submission_rate(2, 3) == 67
