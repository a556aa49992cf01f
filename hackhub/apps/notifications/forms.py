from django import forms

from hackhub.apps.notifications.models import Announcement

# Fields that fall back to the stored (or model default) value when omitted
DEFAULTED_FIELDS = ("type", "priority", "target_audience", "publish_at")


class AnnouncementForm(forms.ModelForm):
    title = forms.CharField(min_length=3, max_length=200)
    content = forms.CharField(min_length=10)
    publish_at = forms.DateTimeField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in DEFAULTED_FIELDS:
            self.fields[name].required = False

    def clean(self):
        cleaned_data = super().clean()
        for name in DEFAULTED_FIELDS:
            if not cleaned_data.get(name) and name not in self.errors:
                cleaned_data[name] = getattr(self.instance, name)

        publish_at = cleaned_data.get("publish_at")
        expires_at = cleaned_data.get("expires_at")
        if publish_at and expires_at and expires_at <= publish_at:
            self.add_error("expires_at", "Expiry must be after the publish time")
        return cleaned_data

    class Meta:
        model = Announcement
        fields = [
            "title", "content", "type", "priority", "target_audience",
            "publish_at", "expires_at", "is_pinned", "is_published",
        ]
