from django.contrib import admin

from hackhub.apps.hackathons import models


class OrganizationMemberInline(admin.TabularInline):
    model = models.OrganizationMember
    extra = 0
    fields = ("user", "role")


class StageInline(admin.TabularInline):
    model = models.Stage
    fk_name = "hackathon"
    extra = 0
    fields = ("order", "name", "type", "start_date", "end_date", "is_active",
              "is_completed", "requires_submission")


class TeamMemberInline(admin.TabularInline):
    model = models.TeamMember
    extra = 0


@admin.register(models.Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "created_at")
    search_fields = ("name", "slug")
    inlines = (OrganizationMemberInline, )


@admin.register(models.Hackathon)
class HackathonAdmin(admin.ModelAdmin):
    list_display = ("title", "organization", "status", "hackathon_start",
                    "hackathon_end", "is_public")
    list_filter = ("status", "is_public")
    search_fields = ("title", "slug")
    inlines = (StageInline, )


@admin.register(models.Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ("user", "hackathon", "status", "created_at")
    list_filter = ("status", )


@admin.register(models.Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "hackathon", "leader")
    inlines = (TeamMemberInline, )


@admin.register(models.Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("title", "stage", "user", "team", "status", "is_late",
                    "score", "submitted_at")
    list_filter = ("status", "is_late")
    readonly_fields = ("author_key", )


@admin.register(models.Meeting)
class MeetingAdmin(admin.ModelAdmin):
    list_display = ("title", "host", "team", "type", "scheduled_at", "status")
    list_filter = ("type", "status")

    def has_delete_permission(self, request, obj=None):
        return False


admin.site.register(models.HackathonRole)
admin.site.register(models.Stage)
