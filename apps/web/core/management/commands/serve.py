"""
Run the development server on the configured PORT.

Usage:
    python apps/web/manage.py serve
    python apps/web/manage.py serve --port 8000
"""

from typing import Any

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Run the API on 0.0.0.0:<PORT> (PORT from the environment, default 4000)"

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument(
            "--port",
            type=int,
            default=None,
            help="Override the PORT setting",
        )

    def handle(self, *_args: Any, **options: Any) -> None:
        port = options["port"] or settings.PORT
        self.stdout.write(f"Backend running on port {port}")
        call_command("runserver", f"0.0.0.0:{port}")
