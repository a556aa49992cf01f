from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

from hackhub.apps.hackathons.models import Meeting, Stage, Submission

url_validator = URLValidator()


def _validate_url(value, label):
    try:
        url_validator(value)
    except ValidationError:
        raise forms.ValidationError(f"{label} must be a valid URL")


class StageForm(forms.ModelForm):
    def __init__(self, *args, hackathon=None, **kwargs):
        super().__init__(*args, **kwargs)
        queryset = Stage.objects.filter(hackathon=hackathon)
        if self.instance.pk:
            queryset = queryset.exclude(pk=self.instance.pk)
        self.fields["depends_on"].queryset = queryset

    def clean_judging_criteria(self):
        criteria = self.cleaned_data.get("judging_criteria") or []
        if not isinstance(criteria, list):
            raise forms.ValidationError("Judging criteria must be a list")
        for criterion in criteria:
            if not isinstance(criterion, dict) or not criterion.get("name"):
                raise forms.ValidationError(
                    "Each judging criterion needs a name")
        return criteria

    def clean(self):
        cleaned_data = super().clean()
        start = cleaned_data.get("start_date")
        end = cleaned_data.get("end_date")
        deadline = cleaned_data.get("submission_deadline")
        if start and end and start > end:
            self.add_error("end_date", "End date must be after start date")
        if deadline and start and deadline < start:
            self.add_error("submission_deadline",
                           "Submission deadline must be after start date")
        return cleaned_data

    class Meta:
        model = Stage
        fields = [
            "name", "description", "type", "start_date", "end_date",
            "is_active", "requires_submission", "submission_deadline",
            "allow_late_submission", "team_submission",
            "submission_instructions", "is_elimination", "elimination_type",
            "elimination_value", "judging_criteria", "depends_on",
            "notify_on_start", "notify_on_complete",
        ]


class StageOrderForm(forms.Form):
    order = forms.IntegerField(required=False, min_value=0)


class SubmissionContentForm(forms.Form):
    """The fields a participant may write on their own submission"""
    title = forms.CharField(max_length=200, required=False)
    description = forms.CharField(required=False)
    content = forms.CharField(required=False)
    repo_url = forms.URLField(required=False)
    demo_url = forms.URLField(required=False)
    file_url = forms.URLField(required=False)
    links = forms.JSONField(required=False)
    attachments = forms.JSONField(required=False)

    CONTENT_FIELDS = ("title", "description", "content", "repo_url",
                      "demo_url", "file_url", "links", "attachments")

    def clean_links(self):
        links = self.cleaned_data.get("links") or []
        if not isinstance(links, list):
            raise forms.ValidationError("Links must be a list")
        for link in links:
            url = link.get("url") if isinstance(link, dict) else link
            if not isinstance(url, str):
                raise forms.ValidationError("Each link needs a url")
            _validate_url(url, "Link")
        return links

    def clean_attachments(self):
        attachments = self.cleaned_data.get("attachments") or []
        if not isinstance(attachments, list):
            raise forms.ValidationError("Attachments must be a list")
        for attachment in attachments:
            if not isinstance(attachment, dict) or \
                    not attachment.get("name") or \
                    not isinstance(attachment.get("url"), str):
                raise forms.ValidationError(
                    "Each attachment needs a name and a url")
            _validate_url(attachment["url"], "Attachment")
        return attachments


class SubmissionReviewForm(SubmissionContentForm):
    """Organizers may set any field, including the review outcome"""
    status = forms.ChoiceField(choices=Submission.STATUS_CHOICES, required=False)
    score = forms.DecimalField(max_digits=6, decimal_places=2, min_value=0,
                               required=False)
    feedback = forms.CharField(required=False)


class JudgeForm(forms.Form):
    score = forms.DecimalField(max_digits=6, decimal_places=2, min_value=0)
    feedback = forms.CharField(required=False)


class MeetingForm(forms.Form):
    title = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    type = forms.ChoiceField(choices=Meeting.TYPE_CHOICES)
    scheduled_at = forms.DateTimeField()
    duration = forms.IntegerField(required=False, min_value=5, max_value=480)
    timezone = forms.CharField(max_length=50, required=False)
    team_id = forms.IntegerField(required=False)
    submission_id = forms.IntegerField(required=False)
    host_notes = forms.CharField(required=False)
