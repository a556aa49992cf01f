from django.core.management.base import BaseCommand
from django.db import transaction

from hackhub.apps.hackathons.models import Hackathon
from hackhub.apps.notifications.fanout import notify_approved_participants
from hackhub.apps.notifications.models import Notification
from hackhub.libs import hackathon_status


class Command(BaseCommand):
    help = "Recompute date-derived hackathon statuses and store any changes"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            dest="dry_run",
            help="Only report the transitions, do not save them",
            action="store_true",
            default=False)

    def handle(self, *args, **options):
        changed = 0
        hackathons = Hackathon.objects.exclude(
            status__in=hackathon_status.PINNED_STATUSES)

        for hackathon in hackathons:
            status = hackathon.computed_status()
            if status == hackathon.status:
                continue

            changed += 1
            self.stdout.write(
                f"{hackathon.title}: {hackathon.status} -> {status}")
            if options["dry_run"]:
                continue

            with transaction.atomic():
                hackathon.status = status
                hackathon.save(update_fields=["status", "updated_at"])
                notify_approved_participants(
                    hackathon,
                    Notification.SYSTEM,
                    f"{hackathon.title} is now "
                    f"{hackathon.get_status_display().lower()}",
                    link=f"/hackathons/{hackathon.slug}")

        verb = "would change" if options["dry_run"] else "changed"
        self.stdout.write(f"{changed} hackathon status(es) {verb}")
