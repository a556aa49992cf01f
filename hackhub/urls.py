from django.urls import include, path
from django.contrib import admin

import hackhub.apps.hackathons.views.hackathon_views as hackathon_views
import hackhub.apps.hackathons.views.meeting_views as meeting_views
import hackhub.apps.hackathons.views.stage_views as stage_views
import hackhub.apps.hackathons.views.submission_views as submission_views
import hackhub.apps.notifications.views as notification_views


admin.autodiscover()

stage_patterns = [
    path("", stage_views.stage_detail, name="stage_detail"),
    path("activate/", stage_views.activate_stage, name="activate_stage"),
    path("complete/", stage_views.complete_stage, name="complete_stage"),
    path("stats/", stage_views.stage_stats, name="stage_stats"),
    path("submissions/", submission_views.submissions, name="submissions"),
    path("submissions/<int:submission_id>/",
         submission_views.submission_detail,
         name="submission_detail"),
    path("submissions/<int:submission_id>/judge/",
         submission_views.judge_submission,
         name="judge_submission"),
]

hackathon_patterns = [
    path("", hackathon_views.hackathon_detail, name="hackathon_detail"),

    # Stages
    path("stages/", stage_views.stages, name="stages"),
    path("stages/reorder/", stage_views.reorder_stages, name="reorder_stages"),
    path("stages/current/", stage_views.current_stage, name="current_stage"),
    path("stages/<int:stage_id>/", include(stage_patterns)),

    # Meetings
    path("meetings/", meeting_views.meetings, name="meetings"),
    path("meetings/scheduled-times/",
         meeting_views.scheduled_times,
         name="scheduled_times"),
    path("meetings/available-slots/",
         meeting_views.available_slots,
         name="available_slots"),
    path("meetings/<int:meeting_id>/cancel/",
         meeting_views.cancel_meeting,
         name="cancel_meeting"),

    # Announcements
    path("announcements/", notification_views.announcements,
         name="announcements"),
    path("announcements/<int:announcement_id>/",
         notification_views.announcement_detail,
         name="announcement_detail"),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/hackathons/<int:hackathon_id>/", include(hackathon_patterns)),

    # Notifications
    path("api/notifications/", notification_views.notifications,
         name="notifications"),
    path("api/notifications/unread-count/", notification_views.unread_count,
         name="unread_count"),
    path("api/notifications/mark-all-read/", notification_views.mark_all_read,
         name="mark_all_read"),
    path("api/notifications/<int:notification_id>/",
         notification_views.notification_detail,
         name="notification_detail"),
]
