from __future__ import annotations

import io
import tempfile
from pathlib import Path
from unittest.mock import patch

from django.core.management import CommandError, call_command
from django.test import SimpleTestCase, override_settings


class BuildSiteCommandTests(SimpleTestCase):
    def setUp(self) -> None:
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        self.source = self.root / "site"
        self.output = self.root / "_site"
        self.source.mkdir()
        (self.source / "index.html").write_text(
            "{% load lightbox %}{% lightbox cat.jpg, A cat %}", encoding="utf-8"
        )

    def test_builds_into_output_and_prints_summary(self) -> None:
        stdout = io.StringIO()
        call_command("build_site", "--source", str(self.source), "--output", str(self.output), stdout=stdout)

        self.assertIn("Pages: 1 | Copied: 0 | Errors: 0", stdout.getvalue())
        html = (self.output / "index.html").read_text(encoding="utf-8")
        self.assertIn('rel="lightbox"', html)

    def test_defaults_come_from_settings(self) -> None:
        with override_settings(SITE_SOURCE_DIR=self.source, SITE_OUTPUT_DIR=self.output):
            call_command("build_site", "--quiet", stdout=io.StringIO())
        self.assertTrue((self.output / "index.html").exists())

    def test_clean_removes_stale_files(self) -> None:
        self.output.mkdir()
        (self.output / "stale.html").write_text("old", encoding="utf-8")

        call_command(
            "build_site", "--source", str(self.source), "--output", str(self.output),
            "--clean", "--quiet", stdout=io.StringIO(),
        )
        self.assertFalse((self.output / "stale.html").exists())
        self.assertTrue((self.output / "index.html").exists())

    def test_missing_source_is_command_error(self) -> None:
        with self.assertRaises(CommandError):
            call_command("build_site", "--source", str(self.root / "nope"), "--output", str(self.output))

    def test_clean_refuses_output_containing_source(self) -> None:
        precious = self.root / "precious.txt"
        precious.write_text("keep", encoding="utf-8")

        with self.assertRaises(CommandError):
            call_command(
                "build_site", "--source", str(self.source), "--output", str(self.root),
                "--clean", "--quiet", stdout=io.StringIO(),
            )
        self.assertTrue(precious.exists())
        self.assertTrue((self.source / "index.html").exists())

    def test_output_inside_source_is_command_error(self) -> None:
        with self.assertRaises(CommandError):
            call_command(
                "build_site", "--source", str(self.source), "--output", str(self.source / "out"),
                "--quiet", stdout=io.StringIO(),
            )
        self.assertFalse((self.source / "out").exists())

    def test_filesystem_error_becomes_command_error(self) -> None:
        with patch(
            "apps.publishing.management.commands.build_site.SiteBuilder.build",
            side_effect=PermissionError("read-only output"),
        ):
            with self.assertRaises(CommandError) as ctx:
                call_command(
                    "build_site", "--source", str(self.source), "--output", str(self.output),
                    "--quiet", stdout=io.StringIO(),
                )
        self.assertIn("read-only output", str(ctx.exception))

    def test_page_error_fails_command(self) -> None:
        (self.source / "bad.html").write_text("{% if %}", encoding="utf-8")
        stderr = io.StringIO()
        with self.assertLogs("publishing.builder", level="ERROR"):
            with self.assertRaises(CommandError):
                call_command(
                    "build_site", "--source", str(self.source), "--output", str(self.output),
                    stdout=io.StringIO(), stderr=stderr,
                )
        self.assertIn("bad.html", stderr.getvalue())
