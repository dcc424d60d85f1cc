# clinic_core/common/management/commands/serve.py

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Sync the database schema with the models, then start the HTTP server."

    def add_arguments(self, parser):
        parser.add_argument("--host", default=None, help="Bind address (default: SERVER_HOST).")
        parser.add_argument("--port", type=int, default=None, help="Port (default: SERVER_PORT).")
        parser.add_argument("--noreload", action="store_true", help="Disable the auto-reloader.")

    def handle(self, *args, **options):
        host = options["host"] or settings.SERVER_HOST
        port = options["port"] or settings.SERVER_PORT

        call_command("migrate", run_syncdb=True, interactive=False, verbosity=options["verbosity"])
        self.stdout.write(self.style.SUCCESS(f"Schema in sync. Listening on {host}:{port}"))

        call_command("runserver", f"{host}:{port}", use_reloader=not options["noreload"])
