from django.contrib import admin

from hackhub.apps.notifications.models import Announcement, Notification


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "hackathon", "type", "priority",
                    "target_audience", "is_published", "is_pinned",
                    "publish_at")
    list_filter = ("type", "priority", "target_audience", "is_published")
    search_fields = ("title", "content")


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "type", "is_read", "created_at")
    list_filter = ("type", "is_read")
