import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Organization",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Hackathon",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True)),
                ("description", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published"), ("REGISTRATION_OPEN", "Registration Open"), ("REGISTRATION_CLOSED", "Registration Closed"), ("IN_PROGRESS", "In Progress"), ("JUDGING", "Judging"), ("COMPLETED", "Completed"), ("CANCELLED", "Cancelled")], default="DRAFT", max_length=20)),
                ("is_public", models.BooleanField(default=True)),
                ("require_approval", models.BooleanField(default=False)),
                ("max_team_size", models.PositiveIntegerField(default=4)),
                ("registration_start", models.DateTimeField()),
                ("registration_end", models.DateTimeField()),
                ("hackathon_start", models.DateTimeField()),
                ("hackathon_end", models.DateTimeField()),
                ("results_date", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hackathons", to="hackathons.organization")),
            ],
            options={"ordering": ["-hackathon_start"]},
        ),
        migrations.CreateModel(
            name="OrganizationMember",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("OWNER", "Owner"), ("ADMIN", "Admin"), ("MEMBER", "Member")], default="MEMBER", max_length=10)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="members", to="hackathons.organization")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="organization_memberships", to=settings.AUTH_USER_MODEL)),
            ],
            options={"unique_together": {("organization", "user")}},
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("PENDING", "Pending"), ("APPROVED", "Approved"), ("REJECTED", "Rejected"), ("CANCELLED", "Cancelled")], default="PENDING", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="registrations", to="hackathons.hackathon")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hackathon_registrations", to=settings.AUTH_USER_MODEL)),
            ],
            options={"unique_together": {("hackathon", "user")}},
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="teams", to="hackathons.hackathon")),
                ("leader", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="led_teams", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["name"], "unique_together": {("hackathon", "name")}},
        ),
        migrations.CreateModel(
            name="TeamMember",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                ("team", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="members", to="hackathons.team")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="team_memberships", to=settings.AUTH_USER_MODEL)),
            ],
            options={"unique_together": {("team", "user")}},
        ),
        migrations.CreateModel(
            name="HackathonRole",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("MENTOR", "Mentor"), ("JUDGE", "Judge")], max_length=10)),
                ("status", models.CharField(choices=[("PENDING", "Pending"), ("ACCEPTED", "Accepted"), ("DECLINED", "Declined")], default="PENDING", max_length=10)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="roles", to="hackathons.hackathon")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hackathon_roles", to=settings.AUTH_USER_MODEL)),
            ],
            options={"unique_together": {("hackathon", "user", "role")}},
        ),
        migrations.CreateModel(
            name="Stage",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("type", models.CharField(choices=[("REGISTRATION", "Registration"), ("TEAM_FORMATION", "Team Formation"), ("IDEATION", "Ideation"), ("MENTORING_SESSION", "Mentoring Session"), ("CHECKPOINT", "Checkpoint"), ("DEVELOPMENT", "Development"), ("EVALUATION", "Evaluation"), ("PRESENTATION", "Presentation"), ("RESULTS", "Results"), ("CUSTOM", "Custom")], default="CUSTOM", max_length=20)),
                ("order", models.IntegerField()),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("is_active", models.BooleanField(default=True)),
                ("is_completed", models.BooleanField(default=False)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("requires_submission", models.BooleanField(default=False)),
                ("submission_deadline", models.DateTimeField(blank=True, null=True)),
                ("allow_late_submission", models.BooleanField(default=False)),
                ("team_submission", models.BooleanField(default=False)),
                ("submission_instructions", models.TextField(blank=True)),
                ("is_elimination", models.BooleanField(default=False)),
                ("elimination_type", models.CharField(blank=True, choices=[("TOP_N", "Top N"), ("PERCENTAGE", "Percentage"), ("SCORE_THRESHOLD", "Score Threshold")], max_length=20)),
                ("elimination_value", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("judging_criteria", models.JSONField(blank=True, default=list)),
                ("notify_on_start", models.BooleanField(default=False)),
                ("notify_on_complete", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("depends_on", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="dependents", to="hackathons.stage")),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="stages", to="hackathons.hackathon")),
            ],
            options={"ordering": ["order"]},
        ),
        migrations.AddConstraint(
            model_name="stage",
            constraint=models.UniqueConstraint(fields=("hackathon", "order"), name="unique_stage_order"),
        ),
        migrations.CreateModel(
            name="Submission",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("author_key", models.CharField(blank=True, max_length=40)),
                ("title", models.CharField(blank=True, max_length=200)),
                ("description", models.TextField(blank=True)),
                ("content", models.TextField(blank=True)),
                ("repo_url", models.URLField(blank=True)),
                ("demo_url", models.URLField(blank=True)),
                ("file_url", models.URLField(blank=True)),
                ("links", models.JSONField(blank=True, default=list)),
                ("attachments", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=[("SUBMITTED", "Submitted"), ("UNDER_REVIEW", "Under Review"), ("NEEDS_REVISION", "Needs Revision"), ("APPROVED", "Approved"), ("REJECTED", "Rejected")], default="SUBMITTED", max_length=20)),
                ("is_late", models.BooleanField(default=False)),
                ("score", models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ("feedback", models.TextField(blank=True)),
                ("submitted_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("judged_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="hackathons.hackathon")),
                ("judged_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="judged_submissions", to=settings.AUTH_USER_MODEL)),
                ("stage", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="hackathons.stage")),
                ("team", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="hackathons.team")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="stage_submissions", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-submitted_at"]},
        ),
        migrations.AddConstraint(
            model_name="submission",
            constraint=models.UniqueConstraint(fields=("stage", "author_key"), name="unique_submission_per_author"),
        ),
        migrations.CreateModel(
            name="Meeting",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("type", models.CharField(choices=[("MENTORING", "Mentoring"), ("EVALUATION", "Evaluation"), ("PRESENTATION", "Presentation")], max_length=15)),
                ("scheduled_at", models.DateTimeField()),
                ("duration", models.PositiveIntegerField(default=30)),
                ("end_time", models.DateTimeField()),
                ("timezone", models.CharField(default="UTC", max_length=50)),
                ("host_notes", models.TextField(blank=True)),
                ("meet_link", models.URLField(blank=True)),
                ("calendar_event_id", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(choices=[("SCHEDULED", "Scheduled"), ("IN_PROGRESS", "In Progress"), ("COMPLETED", "Completed"), ("CANCELLED", "Cancelled"), ("NO_SHOW", "No Show")], default="SCHEDULED", max_length=15)),
                ("cancelled_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="meetings", to="hackathons.hackathon")),
                ("host", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hosted_meetings", to=settings.AUTH_USER_MODEL)),
                ("submission", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="meetings", to="hackathons.submission")),
                ("team", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="meetings", to="hackathons.team")),
            ],
            options={"ordering": ["scheduled_at"]},
        ),
    ]
