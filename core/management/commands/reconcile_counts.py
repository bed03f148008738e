from django.core.management.base import BaseCommand

from events.services import participant_count_drift, reconcile_participant_counts


class Command(BaseCommand):
    help = "Repairs cached event participant counts from the registration rows"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report drifting events",
        )

    def handle(self, *args, **options):
        drift = participant_count_drift()
        for event_id, (cached, actual) in drift.items():
            self.stdout.write(f"Event {event_id}: cached={cached} actual={actual}")

        if options["dry_run"]:
            self.stdout.write(f"{len(drift)} event(s) drifting")
            return

        fixed = reconcile_participant_counts()
        self.stdout.write(self.style.SUCCESS(f"Reconciled {fixed} event(s)"))
