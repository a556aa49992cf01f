"""Builders for the objects most tests need"""

import datetime
import json

from django.contrib.auth import get_user_model
from django.utils import timezone

from hackhub.apps.hackathons.models import (
    Hackathon,
    HackathonRole,
    Organization,
    OrganizationMember,
    Registration,
    Stage,
    Team,
    TeamMember,
)


def utc(*args):
    return datetime.datetime(*args, tzinfo=datetime.timezone.utc)


def make_user(username, **kwargs):
    kwargs.setdefault("email", f"{username}@example.com")
    return get_user_model().objects.create_user(username=username,
                                                password="testpass123",
                                                **kwargs)


def make_organization(owner=None, name="Hack Club"):
    organization = Organization.objects.create(
        name=name, slug=name.lower().replace(" ", "-"))
    if owner is not None:
        OrganizationMember.objects.create(organization=organization,
                                          user=owner,
                                          role=OrganizationMember.OWNER)
    return organization


def make_hackathon(organization, **overrides):
    now = timezone.now()
    fields = {
        "title": "Spring Hack",
        "status": "PUBLISHED",
        "registration_start": now - datetime.timedelta(days=10),
        "registration_end": now - datetime.timedelta(days=5),
        "hackathon_start": now - datetime.timedelta(days=1),
        "hackathon_end": now + datetime.timedelta(days=5),
    }
    fields.update(overrides)
    return Hackathon.objects.create(organization=organization, **fields)


def make_stage(hackathon, order=None, **overrides):
    now = timezone.now()
    if order is None:
        order = Stage.objects.filter(hackathon=hackathon).count()
    fields = {
        "name": f"Stage {order}",
        "type": Stage.DEVELOPMENT,
        "start_date": now - datetime.timedelta(days=1),
        "end_date": now + datetime.timedelta(days=2),
        "requires_submission": True,
    }
    fields.update(overrides)
    return Stage.objects.create(hackathon=hackathon, order=order, **fields)


def register(user, hackathon, status=Registration.APPROVED):
    return Registration.objects.create(user=user, hackathon=hackathon,
                                       status=status)


def make_team(hackathon, *users, name="Team Rocket"):
    team = Team.objects.create(hackathon=hackathon, name=name,
                               leader=users[0] if users else None)
    for user in users:
        TeamMember.objects.create(team=team, user=user)
    return team


def grant_role(user, hackathon, role, status=HackathonRole.ACCEPTED):
    return HackathonRole.objects.create(user=user, hackathon=hackathon,
                                        role=role, status=status)


def post_json(client, url, body):
    return client.post(url, data=json.dumps(body),
                       content_type="application/json")


def patch_json(client, url, body):
    return client.patch(url, data=json.dumps(body),
                        content_type="application/json")
