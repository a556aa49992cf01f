from django.conf import settings
from django.db import models
from django.utils import timezone

from hackhub.apps.hackathons.models import Hackathon
from hackhub.libs import notification_logic


class Announcement(models.Model):
    INFO = "INFO"
    UPDATE = "UPDATE"
    DEADLINE = "DEADLINE"
    URGENT = "URGENT"
    RESULT = "RESULT"
    SCHEDULE_CHANGE = "SCHEDULE_CHANGE"
    TYPE_CHOICES = (
        (INFO, "Info"),
        (UPDATE, "Update"),
        (DEADLINE, "Deadline"),
        (URGENT, "Urgent"),
        (RESULT, "Result"),
        (SCHEDULE_CHANGE, "Schedule Change"),
    )

    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    PRIORITY_CHOICES = (
        (LOW, "Low"),
        (NORMAL, "Normal"),
        (HIGH, "High"),
        (URGENT, "Urgent"),
    )

    hackathon = models.ForeignKey(Hackathon, related_name="announcements",
                                  on_delete=models.CASCADE)
    author = models.ForeignKey(settings.AUTH_USER_MODEL,
                               related_name="announcements",
                               blank=True, null=True,
                               on_delete=models.SET_NULL)
    title = models.CharField(max_length=200)
    content = models.TextField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=INFO)
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES,
                                default=NORMAL)
    target_audience = models.CharField(
        max_length=20,
        choices=notification_logic.AUDIENCE_CHOICES,
        default=notification_logic.ALL)
    publish_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(blank=True, null=True)
    is_pinned = models.BooleanField(default=False)
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @property
    def link(self):
        return notification_logic.announcement_link(self.hackathon.slug, self.pk)

    def __str__(self):
        return self.title

    class Meta:
        ordering = ["-is_pinned", "-publish_at"]


class Notification(models.Model):
    ANNOUNCEMENT = "ANNOUNCEMENT"
    MEETING = "MEETING"
    SUBMISSION = "SUBMISSION"
    JUDGING = "JUDGING"
    STAGE = "STAGE"
    SYSTEM = "SYSTEM"
    TYPE_CHOICES = (
        (ANNOUNCEMENT, "Announcement"),
        (MEETING, "Meeting"),
        (SUBMISSION, "Submission"),
        (JUDGING, "Judging"),
        (STAGE, "Stage"),
        (SYSTEM, "System"),
    )

    user = models.ForeignKey(settings.AUTH_USER_MODEL,
                             related_name="notifications",
                             on_delete=models.CASCADE)
    hackathon = models.ForeignKey(Hackathon, related_name="notifications",
                                  blank=True, null=True,
                                  on_delete=models.CASCADE)
    announcement = models.ForeignKey(Announcement,
                                     related_name="notifications",
                                     blank=True, null=True,
                                     on_delete=models.CASCADE)
    type = models.CharField(max_length=15, choices=TYPE_CHOICES, default=SYSTEM)
    title = models.CharField(max_length=255)
    message = models.TextField(blank=True)
    link = models.CharField(max_length=500, blank=True)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def mark_read(self, now=None):
        self.is_read = True
        self.read_at = now or timezone.now()
        self.save(update_fields=["is_read", "read_at"])

    def __str__(self):
        return f"{self.title} -> {self.user}"

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["announcement", "user"],
                                    name="unique_announcement_notification"),
        ]
