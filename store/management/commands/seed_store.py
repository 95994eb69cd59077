from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from store.local import MODELS

FIXTURES = {
    "room": "rooms",
    "reservation": "reservations",
    "housekeeping": "housekeeping",
}


class Command(BaseCommand):
    help = "Load the sample rooms, reservations and tasks into empty collections"

    def add_arguments(self, parser):
        parser.add_argument(
            "collections",
            nargs="*",
            help="Collections to seed (default: all)",
        )

    def handle(self, *args, **options):
        if settings.FRONTDESK_STORE_BACKEND != "local":
            raise CommandError("Only the local store can be seeded.")

        requested = options["collections"] or list(FIXTURES)
        unknown = [name for name in requested if name not in FIXTURES]
        if unknown:
            raise CommandError(
                f"Unknown collection: {', '.join(unknown)} (choose from {', '.join(FIXTURES)})"
            )
        # rooms first: reservations and tasks reference them
        for collection in FIXTURES:
            if collection not in requested:
                continue

            model = apps.get_model(MODELS[collection])
            if model.objects.exists():
                self.stdout.write(f"{collection}: already has data, skipped")
                continue

            call_command("loaddata", FIXTURES[collection], verbosity=0)
            self.stdout.write(
                self.style.SUCCESS(
                    f"{collection}: loaded {model.objects.count()} records"
                )
            )
