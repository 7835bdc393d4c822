# apps/publishing/management/commands/build_site.py
from __future__ import annotations

import shutil
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError, CommandParser

from apps.publishing.builder import SiteBuilder


class Command(BaseCommand):
    help = "Render the site sources (Django templates + YAML front matter) into a static output directory."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--source", type=str, default=None, help="Dossier des sources (défaut: SITE_SOURCE_DIR)")
        parser.add_argument("--output", type=str, default=None, help="Dossier de sortie (défaut: SITE_OUTPUT_DIR)")
        parser.add_argument("--clean", action="store_true", help="Supprime le dossier de sortie avant le build")
        parser.add_argument("--quiet", action="store_true", help="Sortie console minimale")

    def handle(self, *args, **options):
        source = Path(options.get("source") or settings.SITE_SOURCE_DIR)
        output = Path(options.get("output") or settings.SITE_OUTPUT_DIR)
        quiet: bool = options.get("quiet", False)

        if not source.is_dir():
            raise CommandError(f"Source directory not found: {source}")
        src_resolved, out_resolved = source.resolve(), output.resolve()
        if src_resolved.is_relative_to(out_resolved):
            raise CommandError(f"Output directory {output} must not be or contain the source directory {source}")
        if out_resolved.is_relative_to(src_resolved):
            raise CommandError(f"Output directory {output} must not be inside the source directory {source}")

        try:
            if options.get("clean") and output.exists():
                shutil.rmtree(output)
            report = SiteBuilder(source, output).build()
        except OSError as exc:
            raise CommandError(str(exc)) from exc

        if not quiet:
            self.stdout.write(self.style.SUCCESS("=== Build — Résumé ==="))
            self.stdout.write(f"Pages: {len(report.pages)} | Copied: {len(report.copied)} | Errors: {len(report.errors)}")
            self.stdout.write(f"Output: {output}")
            for rel, message in report.errors:
                self.stderr.write(f"  {rel}: {message}")

        if not report.ok:
            raise CommandError(f"{len(report.errors)} page(s) failed to render")
