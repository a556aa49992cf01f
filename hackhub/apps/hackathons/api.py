"""JSON representations returned by the API views."""


def iso(value):
    return value.isoformat() if value is not None else None


def user_summary(user):
    if user is None:
        return None
    return {
        "id": user.pk,
        "name": user.get_full_name() or user.get_username(),
        "email": user.email,
    }


def hackathon_data(hackathon, status):
    return {
        "id": hackathon.pk,
        "title": hackathon.title,
        "slug": hackathon.slug,
        "description": hackathon.description,
        "status": status,
        "storedStatus": hackathon.status,
        "isPublic": hackathon.is_public,
        "requireApproval": hackathon.require_approval,
        "registrationStart": iso(hackathon.registration_start),
        "registrationEnd": iso(hackathon.registration_end),
        "hackathonStart": iso(hackathon.hackathon_start),
        "hackathonEnd": iso(hackathon.hackathon_end),
        "resultsDate": iso(hackathon.results_date),
    }


def stage_data(stage, submission_count=None):
    data = {
        "id": stage.pk,
        "hackathonId": stage.hackathon_id,
        "name": stage.name,
        "description": stage.description,
        "type": stage.type,
        "order": stage.order,
        "startDate": iso(stage.start_date),
        "endDate": iso(stage.end_date),
        "isActive": stage.is_active,
        "isCompleted": stage.is_completed,
        "completedAt": iso(stage.completed_at),
        "requiresSubmission": stage.requires_submission,
        "submissionDeadline": iso(stage.submission_deadline),
        "effectiveDeadline": iso(stage.effective_deadline),
        "allowLateSubmission": stage.allow_late_submission,
        "teamSubmission": stage.team_submission,
        "submissionInstructions": stage.submission_instructions,
        "isElimination": stage.is_elimination,
        "eliminationType": stage.elimination_type or None,
        "eliminationValue": float(stage.elimination_value)
        if stage.elimination_value is not None else None,
        "judgingCriteria": stage.judging_criteria,
        "dependsOnStageId": stage.depends_on_id,
        "notifyOnStart": stage.notify_on_start,
        "notifyOnComplete": stage.notify_on_complete,
    }
    if submission_count is not None:
        data["submissionCount"] = submission_count
    return data


def submission_data(submission, include_author=False):
    data = {
        "id": submission.pk,
        "stageId": submission.stage_id,
        "hackathonId": submission.hackathon_id,
        "teamId": submission.team_id,
        "title": submission.title,
        "description": submission.description,
        "content": submission.content,
        "repoUrl": submission.repo_url,
        "demoUrl": submission.demo_url,
        "fileUrl": submission.file_url,
        "links": submission.links,
        "attachments": submission.attachments,
        "status": submission.status,
        "isLate": submission.is_late,
        "score": float(submission.score) if submission.score is not None else None,
        "feedback": submission.feedback,
        "submittedAt": iso(submission.submitted_at),
        "judgedAt": iso(submission.judged_at),
    }
    if include_author:
        data["user"] = user_summary(submission.user)
        data["team"] = {"id": submission.team.pk, "name": submission.team.name} \
            if submission.team_id else None
    return data


def meeting_data(meeting):
    return {
        "id": meeting.pk,
        "hackathonId": meeting.hackathon_id,
        "title": meeting.title,
        "description": meeting.description,
        "type": meeting.type,
        "status": meeting.status,
        "scheduledAt": iso(meeting.scheduled_at),
        "endTime": iso(meeting.end_time),
        "duration": meeting.duration,
        "timezone": meeting.timezone,
        "meetLink": meeting.meet_link,
        "host": user_summary(meeting.host),
        "teamId": meeting.team_id,
        "teamName": meeting.team.name if meeting.team_id else None,
        "submissionId": meeting.submission_id,
        "cancelledAt": iso(meeting.cancelled_at),
    }


def scheduled_time_data(meeting):
    return {
        "id": meeting.pk,
        "scheduledAt": iso(meeting.scheduled_at),
        "endTime": iso(meeting.end_time),
        "duration": meeting.duration,
        "title": meeting.title,
        "type": meeting.type,
        "teamName": meeting.team.name if meeting.team_id else None,
    }


def slot_data(slot):
    return {
        "time": slot.time,
        "available": slot.available,
        "start": iso(slot.start),
        "end": iso(slot.end),
    }


def announcement_data(announcement):
    return {
        "id": announcement.pk,
        "hackathonId": announcement.hackathon_id,
        "title": announcement.title,
        "content": announcement.content,
        "type": announcement.type,
        "priority": announcement.priority,
        "targetAudience": announcement.target_audience,
        "publishAt": iso(announcement.publish_at),
        "expiresAt": iso(announcement.expires_at),
        "isPinned": announcement.is_pinned,
        "isPublished": announcement.is_published,
        "author": user_summary(announcement.author),
        "createdAt": iso(announcement.created_at),
    }


def notification_data(notification):
    return {
        "id": notification.pk,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "link": notification.link,
        "isRead": notification.is_read,
        "readAt": iso(notification.read_at),
        "hackathonId": notification.hackathon_id,
        "announcementId": notification.announcement_id,
        "createdAt": iso(notification.created_at),
    }
