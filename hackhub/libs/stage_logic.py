"""Ordering, activation and completion of hackathon stages."""

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Max
from django.forms.models import model_to_dict
from django.utils import timezone

from hackhub.apps.hackathons.forms import StageForm, StageOrderForm
from hackhub.apps.hackathons.helpers import validated
from hackhub.apps.hackathons.models import Stage
from hackhub.apps.notifications.fanout import notify_approved_participants
from hackhub.apps.notifications.models import Notification
from hackhub.libs.errors import UnexpectedError, ValidationFailed

logger = logging.getLogger(__name__)

ORDER_TAKEN = "A stage with this order already exists"

# Checkbox fields read a missing key as False, so creation starts from these
STAGE_DEFAULTS = {
    "type": Stage.CUSTOM,
    "is_active": True,
}


def next_order(hackathon):
    last = Stage.objects.filter(hackathon=hackathon).aggregate(Max("order"))
    if last["order__max"] is None:
        return 0
    return last["order__max"] + 1


def create_stage(hackathon, data):
    order = validated(StageOrderForm(data)).get("order")
    form = StageForm(dict(STAGE_DEFAULTS, **data), hackathon=hackathon)
    validated(form)

    stage = form.save(commit=False)
    stage.hackathon = hackathon
    stage.order = next_order(hackathon) if order is None else order
    if Stage.objects.filter(hackathon=hackathon, order=stage.order).exists():
        raise ValidationFailed(ORDER_TAKEN)

    try:
        with transaction.atomic():
            stage.save()
    except IntegrityError:
        raise ValidationFailed(ORDER_TAKEN)
    except DatabaseError:
        logger.exception("Failed to create stage for hackathon %s",
                         hackathon.pk)
        raise UnexpectedError("Failed to create stage")

    logger.info("Created stage %s (%s) at order %s", stage.pk, stage.name,
                stage.order)
    return stage


def update_stage(stage, data):
    """Partial update: fields missing from ``data`` keep their stored values"""
    current = model_to_dict(stage, fields=StageForm.Meta.fields)
    form = StageForm(dict(current, **data), instance=stage,
                     hackathon=stage.hackathon)
    validated(form)

    order = validated(StageOrderForm(data)).get("order")
    if order is not None and order != stage.order:
        if Stage.objects.filter(hackathon=stage.hackathon_id, order=order) \
                .exclude(pk=stage.pk).exists():
            raise ValidationFailed(ORDER_TAKEN)
        form.instance.order = order

    try:
        with transaction.atomic():
            return form.save()
    except IntegrityError:
        raise ValidationFailed(ORDER_TAKEN)
    except DatabaseError:
        logger.exception("Failed to update stage %s", stage.pk)
        raise UnexpectedError("Failed to update stage")


def delete_stage(stage):
    """Deletes the stage and its submissions, then closes the order gap"""
    hackathon_id = stage.hackathon_id
    removed_order = stage.order
    submission_count = stage.submissions.count()

    with transaction.atomic():
        stage.delete()
        # Ascending so each row moves into a slot that is already free
        later = Stage.objects.select_for_update() \
            .filter(hackathon=hackathon_id, order__gt=removed_order) \
            .order_by("order")
        for later_stage in later:
            later_stage.order -= 1
            later_stage.save(update_fields=["order"])

    logger.info("Deleted stage %s with %d submission(s)", stage.name,
                submission_count)


def reorder_stages(hackathon, entries):
    """
    Applies ``[{"id": ..., "order": ...}, ...]`` atomically. Stages not listed
    keep their order, which the new orders may not collide with.
    """
    if not isinstance(entries, list) or not entries:
        raise ValidationFailed("Stages must be a non-empty list")

    new_orders = {}
    for entry in entries:
        try:
            stage_id = int(entry["id"])
            order = int(entry["order"])
        except (KeyError, TypeError, ValueError):
            raise ValidationFailed("Each stage needs an id and an order")
        if order < 0:
            raise ValidationFailed("Order must be zero or greater")
        new_orders[stage_id] = order

    if len(set(new_orders.values())) != len(new_orders):
        raise ValidationFailed("Stage orders must be unique")

    with transaction.atomic():
        stages = {stage.pk: stage for stage in
                  Stage.objects.select_for_update().filter(hackathon=hackathon)}
        if not set(new_orders).issubset(stages):
            raise ValidationFailed("Every stage must belong to this hackathon")

        untouched = {stage.order for pk, stage in stages.items()
                     if pk not in new_orders}
        if untouched & set(new_orders.values()):
            raise ValidationFailed(ORDER_TAKEN)

        # Park the moving stages on negative orders first
        for index, stage_id in enumerate(new_orders):
            stages[stage_id].order = -(index + 1)
            stages[stage_id].save(update_fields=["order"])
        for stage_id, order in new_orders.items():
            stages[stage_id].order = order
            stages[stage_id].save(update_fields=["order"])

    return list(Stage.objects.filter(hackathon=hackathon).order_by("order"))


def activate_stage(stage):
    dependency = stage.depends_on
    if dependency is not None and not dependency.is_completed:
        raise ValidationFailed(
            f'Stage "{dependency.name}" must be completed first')

    stage.is_active = True
    stage.save(update_fields=["is_active", "updated_at"])

    if stage.notify_on_start:
        notify_approved_participants(
            stage.hackathon,
            Notification.STAGE,
            f"Stage Started: {stage.name}",
            message=stage.description or
            f'The "{stage.name}" stage has started.',
            link=f"/hackathons/{stage.hackathon.slug}")
    return stage


def complete_stage(stage, now=None):
    stage.is_completed = True
    stage.completed_at = now or timezone.now()
    stage.save(update_fields=["is_completed", "completed_at", "updated_at"])

    if stage.notify_on_complete:
        notify_approved_participants(
            stage.hackathon,
            Notification.STAGE,
            f"Stage Completed: {stage.name}",
            message=f'The "{stage.name}" stage has been completed.',
            link=f"/hackathons/{stage.hackathon.slug}")
    return stage


def current_stage(hackathon, now=None):
    now = now or timezone.now()
    return Stage.objects.filter(hackathon=hackathon,
                                is_active=True,
                                start_date__lte=now,
                                end_date__gte=now).order_by("order").first()


def upcoming_stages(hackathon, now=None, limit=3):
    now = now or timezone.now()
    return list(Stage.objects.filter(hackathon=hackathon,
                                     is_active=True,
                                     start_date__gt=now)
                .order_by("start_date")[:limit])
