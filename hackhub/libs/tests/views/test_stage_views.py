import datetime

import pytest
from django.urls import reverse
from django.utils import timezone

from hackhub.apps.hackathons.models import Stage
from hackhub.libs.tests.helpers import (
    make_hackathon,
    make_organization,
    make_stage,
    make_user,
    patch_json,
    post_json,
)


def stages_url(hackathon):
    return reverse("stages", args=[hackathon.pk])


def stage_url(stage):
    return reverse("stage_detail", args=[stage.hackathon_id, stage.pk])


@pytest.mark.django_db
def test_public_stage_list_is_ordered(client, hackathon):
    make_stage(hackathon, order=1, name="Second")
    make_stage(hackathon, order=0, name="First")

    response = client.get(stages_url(hackathon))

    assert response.status_code == 200
    names = [stage["name"] for stage in response.json()["stages"]]
    assert names == ["First", "Second"]
    assert response.json()["stages"][0]["submissionCount"] == 0


@pytest.mark.django_db
def test_private_hackathon_hides_stages(client, organizer, pending_user):
    hackathon = make_hackathon(make_organization(owner=organizer,
                                                 name="Private Org"),
                               is_public=False)
    url = stages_url(hackathon)

    assert client.get(url).status_code == 401

    client.force_login(pending_user)
    assert client.get(url).status_code == 403

    client.force_login(organizer)
    assert client.get(url).status_code == 200


@pytest.mark.django_db
def test_private_hackathon_visible_to_approved_participant(client, organizer):
    hackathon = make_hackathon(make_organization(owner=organizer,
                                                 name="Private Org"),
                               is_public=False)
    user = make_user("insider")
    hackathon.registrations.create(user=user, status="APPROVED")
    client.force_login(user)

    assert client.get(stages_url(hackathon)).status_code == 200


@pytest.mark.django_db
def test_missing_hackathon_is_not_found(client):
    response = client.get(reverse("stages", args=[424242]))

    assert response.status_code == 404
    assert response.json() == {"error": "Hackathon not found"}


@pytest.mark.django_db
def test_create_stage(client, organizer, hackathon):
    client.force_login(organizer)
    now = timezone.now()

    response = post_json(client, stages_url(hackathon), {
        "name": "Demo Day",
        "type": "PRESENTATION",
        "startDate": now.isoformat(),
        "endDate": (now + datetime.timedelta(hours=4)).isoformat(),
        "requiresSubmission": True,
        "allowLateSubmission": True,
    })

    assert response.status_code == 201
    data = response.json()
    assert data["order"] == 0
    assert data["allowLateSubmission"] is True
    assert data["effectiveDeadline"] == data["endDate"]


@pytest.mark.django_db
def test_create_stage_requires_organizer(client, hackathon, participant):
    now = timezone.now()
    body = {"name": "Sneaky", "startDate": now.isoformat(),
            "endDate": now.isoformat()}

    assert post_json(client, stages_url(hackathon), body).status_code == 401

    client.force_login(participant)
    response = post_json(client, stages_url(hackathon), body)
    assert response.status_code == 403
    assert response.json() == {"error": "Access denied"}
    assert not Stage.objects.exists()


@pytest.mark.django_db
def test_create_stage_validation_errors(client, organizer, hackathon):
    client.force_login(organizer)

    response = post_json(client, stages_url(hackathon), {"name": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"
    assert "start_date" in response.json()["errors"]


@pytest.mark.django_db
def test_malformed_json(client, organizer, hackathon):
    client.force_login(organizer)

    response = client.post(stages_url(hackathon), data="{not json",
                           content_type="application/json")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


@pytest.mark.django_db
def test_stage_of_other_hackathon_is_not_found(client, organizer, hackathon):
    other = make_hackathon(make_organization(name="Elsewhere"))
    stage = make_stage(other)
    client.force_login(organizer)

    url = reverse("stage_detail", args=[hackathon.pk, stage.pk])
    assert client.get(url).status_code == 404
    assert patch_json(client, url, {"name": "Mine"}).status_code == 404


@pytest.mark.django_db
def test_patch_and_delete_stage(client, organizer, hackathon):
    first = make_stage(hackathon, name="First")
    second = make_stage(hackathon, name="Second")
    client.force_login(organizer)

    response = patch_json(client, stage_url(first), {"name": "Kickoff"})
    assert response.status_code == 200
    assert response.json()["name"] == "Kickoff"

    response = client.delete(stage_url(first))
    assert response.status_code == 200
    assert response.json() == {"success": True}
    second.refresh_from_db()
    assert second.order == 0


@pytest.mark.django_db
def test_reorder_view(client, organizer, hackathon):
    a = make_stage(hackathon, name="A")
    b = make_stage(hackathon, name="B")
    client.force_login(organizer)

    response = post_json(client, reverse("reorder_stages", args=[hackathon.pk]),
                         {"stages": [{"id": a.pk, "order": 1},
                                     {"id": b.pk, "order": 0}]})

    assert response.status_code == 200
    assert [stage["name"] for stage in response.json()["stages"]] == ["B", "A"]


@pytest.mark.django_db
def test_activate_complete_and_stats(client, organizer, hackathon, participant):
    stage = make_stage(hackathon, is_active=False)
    client.force_login(organizer)
    args = [hackathon.pk, stage.pk]

    assert post_json(client, reverse("activate_stage", args=args),
                     {}).json()["isActive"] is True
    assert post_json(client, reverse("complete_stage", args=args),
                     {}).json()["isCompleted"] is True

    stats = client.get(reverse("stage_stats", args=args)).json()
    assert stats["totalParticipants"] == 1
    assert stats["submissionRate"] == 0


@pytest.mark.django_db
def test_stats_require_organizer(client, hackathon, participant):
    stage = make_stage(hackathon)
    client.force_login(participant)

    response = client.get(reverse("stage_stats", args=[hackathon.pk, stage.pk]))

    assert response.status_code == 403


@pytest.mark.django_db
def test_current_stage_view(client, hackathon):
    stage = make_stage(hackathon, name="Now")

    data = client.get(reverse("current_stage", args=[hackathon.pk])).json()

    assert data["current"]["id"] == stage.pk
    assert data["upcoming"] == []


@pytest.mark.django_db
def test_hackathon_detail_reports_computed_status(client, hackathon):
    data = client.get(reverse("hackathon_detail", args=[hackathon.pk])).json()

    assert data["status"] == "IN_PROGRESS"
    assert data["storedStatus"] == "PUBLISHED"
    assert data["isOrganizer"] is False
