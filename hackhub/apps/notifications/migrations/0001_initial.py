import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("hackathons", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Announcement",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField()),
                ("type", models.CharField(choices=[("INFO", "Info"), ("UPDATE", "Update"), ("DEADLINE", "Deadline"), ("URGENT", "Urgent"), ("RESULT", "Result"), ("SCHEDULE_CHANGE", "Schedule Change")], default="INFO", max_length=20)),
                ("priority", models.CharField(choices=[("LOW", "Low"), ("NORMAL", "Normal"), ("HIGH", "High"), ("URGENT", "Urgent")], default="NORMAL", max_length=10)),
                ("target_audience", models.CharField(choices=[("ALL", "Everyone"), ("REGISTERED", "Registered participants"), ("APPROVED", "Approved participants"), ("ORGANIZERS", "Organizers")], default="ALL", max_length=20)),
                ("publish_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("is_pinned", models.BooleanField(default=False)),
                ("is_published", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="announcements", to=settings.AUTH_USER_MODEL)),
                ("hackathon", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="announcements", to="hackathons.hackathon")),
            ],
            options={"ordering": ["-is_pinned", "-publish_at"]},
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("ANNOUNCEMENT", "Announcement"), ("MEETING", "Meeting"), ("SUBMISSION", "Submission"), ("JUDGING", "Judging"), ("STAGE", "Stage"), ("SYSTEM", "System")], default="SYSTEM", max_length=15)),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField(blank=True)),
                ("link", models.CharField(blank=True, max_length=500)),
                ("is_read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("announcement", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to="notifications.announcement")),
                ("hackathon", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to="hackathons.hackathon")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.AddConstraint(
            model_name="notification",
            constraint=models.UniqueConstraint(fields=("announcement", "user"), name="unique_announcement_notification"),
        ),
    ]
