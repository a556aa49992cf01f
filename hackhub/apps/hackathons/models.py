from haikunator import Haikunator
from django.conf import settings
from django.db import models
from django.core.exceptions import ValidationError
from django.utils import timezone

from hackhub.libs import hackathon_status


class Organization(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name

    class Meta:
        ordering = ["name"]


class OrganizationMember(models.Model):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    ROLE_CHOICES = (
        (OWNER, "Owner"),
        (ADMIN, "Admin"),
        (MEMBER, "Member"),
    )
    MANAGING_ROLES = (OWNER, ADMIN)

    organization = models.ForeignKey(Organization,
                                     related_name="members",
                                     on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="organization_memberships",
                             on_delete=models.CASCADE)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=MEMBER)

    def __str__(self):
        return f"{self.user} ({self.role}) in {self.organization}"

    class Meta:
        unique_together = ("organization", "user")


class Hackathon(models.Model):
    organization = models.ForeignKey(Organization,
                                     related_name="hackathons",
                                     on_delete=models.CASCADE)
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=20,
                              choices=hackathon_status.STATUS_CHOICES,
                              default=hackathon_status.DRAFT)
    is_public = models.BooleanField(default=True)
    require_approval = models.BooleanField(default=False)
    max_team_size = models.PositiveIntegerField(default=4)
    registration_start = models.DateTimeField()
    registration_end = models.DateTimeField()
    hackathon_start = models.DateTimeField()
    hackathon_end = models.DateTimeField()
    results_date = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def set_unique_slug(self):
        haikunator = Haikunator()
        slug = haikunator.haikunate()

        while Hackathon.objects.filter(slug=slug).exists():
            slug = haikunator.haikunate()

        self.slug = slug

    def save(self, *args, **kwargs):
        if not self.slug:
            self.set_unique_slug()
        super().save(*args, **kwargs)

    def clean(self):
        if self.registration_start > self.registration_end:
            raise ValidationError(
                "Registration start must be before registration end")
        if self.hackathon_start > self.hackathon_end:
            raise ValidationError("Hackathon start must be before hackathon end")

    def computed_status(self, now=None):
        return hackathon_status.status_for(self, now=now)

    def __str__(self):
        return self.title

    class Meta:
        ordering = ["-hackathon_start"]


class Registration(models.Model):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    STATUS_CHOICES = (
        (PENDING, "Pending"),
        (APPROVED, "Approved"),
        (REJECTED, "Rejected"),
        (CANCELLED, "Cancelled"),
    )

    hackathon = models.ForeignKey(Hackathon,
                                  related_name="registrations",
                                  on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="hackathon_registrations",
                             on_delete=models.CASCADE)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES,
                              default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user} -> {self.hackathon} ({self.status})"

    class Meta:
        unique_together = ("hackathon", "user")


class Team(models.Model):
    hackathon = models.ForeignKey(Hackathon,
                                  related_name="teams",
                                  on_delete=models.CASCADE)
    name = models.CharField(max_length=100)
    leader = models.ForeignKey(settings.AUTH_USER_MODEL,
                               related_name="led_teams",
                               blank=True,
                               null=True,
                               on_delete=models.SET_NULL)
    created_at = models.DateTimeField(auto_now_add=True)

    @classmethod
    def for_user(cls, hackathon, user):
        return cls.objects.filter(hackathon=hackathon,
                                  members__user=user).first()

    def member_users(self):
        return [member.user for member in
                self.members.select_related("user").all()]

    def __str__(self):
        return self.name

    class Meta:
        unique_together = ("hackathon", "name")
        ordering = ["name"]


class TeamMember(models.Model):
    team = models.ForeignKey(Team, related_name="members",
                             on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="team_memberships",
                             on_delete=models.CASCADE)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("team", "user")


class HackathonRole(models.Model):
    MENTOR = "MENTOR"
    JUDGE = "JUDGE"
    ROLE_CHOICES = (
        (MENTOR, "Mentor"),
        (JUDGE, "Judge"),
    )

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    STATUS_CHOICES = (
        (PENDING, "Pending"),
        (ACCEPTED, "Accepted"),
        (DECLINED, "Declined"),
    )

    hackathon = models.ForeignKey(Hackathon, related_name="roles",
                                  on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="hackathon_roles",
                             on_delete=models.CASCADE)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES,
                              default=PENDING)

    def __str__(self):
        return f"{self.user} as {self.role} for {self.hackathon}"

    class Meta:
        unique_together = ("hackathon", "user", "role")


class Stage(models.Model):
    REGISTRATION = "REGISTRATION"
    TEAM_FORMATION = "TEAM_FORMATION"
    IDEATION = "IDEATION"
    MENTORING_SESSION = "MENTORING_SESSION"
    CHECKPOINT = "CHECKPOINT"
    DEVELOPMENT = "DEVELOPMENT"
    EVALUATION = "EVALUATION"
    PRESENTATION = "PRESENTATION"
    RESULTS = "RESULTS"
    CUSTOM = "CUSTOM"
    TYPE_CHOICES = (
        (REGISTRATION, "Registration"),
        (TEAM_FORMATION, "Team Formation"),
        (IDEATION, "Ideation"),
        (MENTORING_SESSION, "Mentoring Session"),
        (CHECKPOINT, "Checkpoint"),
        (DEVELOPMENT, "Development"),
        (EVALUATION, "Evaluation"),
        (PRESENTATION, "Presentation"),
        (RESULTS, "Results"),
        (CUSTOM, "Custom"),
    )

    TOP_N = "TOP_N"
    PERCENTAGE = "PERCENTAGE"
    SCORE_THRESHOLD = "SCORE_THRESHOLD"
    ELIMINATION_CHOICES = (
        (TOP_N, "Top N"),
        (PERCENTAGE, "Percentage"),
        (SCORE_THRESHOLD, "Score Threshold"),
    )

    hackathon = models.ForeignKey(Hackathon, related_name="stages",
                                  on_delete=models.CASCADE)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=CUSTOM)
    order = models.IntegerField()
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    is_active = models.BooleanField(default=True)
    is_completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(blank=True, null=True)
    requires_submission = models.BooleanField(default=False)
    submission_deadline = models.DateTimeField(blank=True, null=True)
    allow_late_submission = models.BooleanField(default=False)
    team_submission = models.BooleanField(default=False)
    submission_instructions = models.TextField(blank=True)
    is_elimination = models.BooleanField(default=False)
    elimination_type = models.CharField(max_length=20,
                                        choices=ELIMINATION_CHOICES,
                                        blank=True)
    elimination_value = models.DecimalField(max_digits=8, decimal_places=2,
                                            blank=True, null=True)
    judging_criteria = models.JSONField(default=list, blank=True)
    depends_on = models.ForeignKey("self", related_name="dependents",
                                   blank=True, null=True,
                                   on_delete=models.SET_NULL)
    notify_on_start = models.BooleanField(default=False)
    notify_on_complete = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @property
    def effective_deadline(self):
        return self.submission_deadline or self.end_date

    def clean(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError("Start date must be before end date")
        if self.is_elimination and not (self.elimination_type and
                                         self.elimination_value is not None):
            raise ValidationError(
                "Elimination stages need an elimination type and value")
        if self.depends_on_id and self.depends_on_id == self.pk:
            raise ValidationError("A stage cannot depend on itself")

    def __str__(self):
        return f"{self.order}. {self.name}"

    class Meta:
        ordering = ["order"]
        constraints = [
            models.UniqueConstraint(fields=["hackathon", "order"],
                                    name="unique_stage_order"),
        ]


class Submission(models.Model):
    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    NEEDS_REVISION = "NEEDS_REVISION"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    STATUS_CHOICES = (
        (SUBMITTED, "Submitted"),
        (UNDER_REVIEW, "Under Review"),
        (NEEDS_REVISION, "Needs Revision"),
        (APPROVED, "Approved"),
        (REJECTED, "Rejected"),
    )
    JUDGED_STATUSES = (APPROVED, REJECTED)

    stage = models.ForeignKey(Stage, related_name="submissions",
                              on_delete=models.CASCADE)
    hackathon = models.ForeignKey(Hackathon, related_name="submissions",
                                  on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="stage_submissions",
                             on_delete=models.CASCADE)
    team = models.ForeignKey(Team, related_name="submissions",
                             blank=True, null=True,
                             on_delete=models.CASCADE)
    # "user:<id>" or "team:<id>", one submission per author and stage
    author_key = models.CharField(max_length=40, blank=True)
    title = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    content = models.TextField(blank=True)
    repo_url = models.URLField(blank=True)
    demo_url = models.URLField(blank=True)
    file_url = models.URLField(blank=True)
    links = models.JSONField(default=list, blank=True)
    attachments = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES,
                              default=SUBMITTED)
    is_late = models.BooleanField(default=False)
    score = models.DecimalField(max_digits=6, decimal_places=2,
                                blank=True, null=True)
    feedback = models.TextField(blank=True)
    submitted_at = models.DateTimeField(default=timezone.now)
    judged_at = models.DateTimeField(blank=True, null=True)
    judged_by = models.ForeignKey(settings.AUTH_USER_MODEL,
                                  related_name="judged_submissions",
                                  blank=True, null=True,
                                  on_delete=models.SET_NULL)
    updated_at = models.DateTimeField(auto_now=True)

    @staticmethod
    def author_key_for(user, team=None):
        if team is not None:
            return f"team:{team.pk}"
        return f"user:{user.pk}"

    @property
    def is_judged(self):
        return self.status in self.JUDGED_STATUSES

    def is_authored_by(self, user):
        if self.team_id is not None:
            return self.team.members.filter(user=user).exists()
        return self.user_id == user.pk

    def save(self, *args, **kwargs):
        if not self.author_key:
            self.author_key = Submission.author_key_for(self.user, self.team)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.title or 'Submission'} for {self.stage}"

    class Meta:
        ordering = ["-submitted_at"]
        constraints = [
            models.UniqueConstraint(fields=["stage", "author_key"],
                                    name="unique_submission_per_author"),
        ]


class Meeting(models.Model):
    MENTORING = "MENTORING"
    EVALUATION = "EVALUATION"
    PRESENTATION = "PRESENTATION"
    TYPE_CHOICES = (
        (MENTORING, "Mentoring"),
        (EVALUATION, "Evaluation"),
        (PRESENTATION, "Presentation"),
    )

    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"
    STATUS_CHOICES = (
        (SCHEDULED, "Scheduled"),
        (IN_PROGRESS, "In Progress"),
        (COMPLETED, "Completed"),
        (CANCELLED, "Cancelled"),
        (NO_SHOW, "No Show"),
    )

    hackathon = models.ForeignKey(Hackathon, related_name="meetings",
                                  on_delete=models.CASCADE)
    host = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="hosted_meetings",
                             on_delete=models.CASCADE)
    team = models.ForeignKey(Team, related_name="meetings",
                             blank=True, null=True,
                             on_delete=models.SET_NULL)
    submission = models.ForeignKey(Submission, related_name="meetings",
                                   blank=True, null=True,
                                   on_delete=models.SET_NULL)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=15, choices=TYPE_CHOICES)
    scheduled_at = models.DateTimeField()
    duration = models.PositiveIntegerField(default=30)
    end_time = models.DateTimeField()
    timezone = models.CharField(max_length=50, default="UTC")
    host_notes = models.TextField(blank=True)
    meet_link = models.URLField(blank=True)
    calendar_event_id = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=15, choices=STATUS_CHOICES,
                              default=SCHEDULED)
    cancelled_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def cancel(self, now=None):
        self.status = Meeting.CANCELLED
        self.cancelled_at = now or timezone.now()
        self.save(update_fields=["status", "cancelled_at"])

    def delete(self, using=None, keep_parents=False):
        raise ValidationError("Meetings are cancelled, not deleted")

    def __str__(self):
        return f"{self.title} at {self.scheduled_at}"

    class Meta:
        ordering = ["scheduled_at"]
