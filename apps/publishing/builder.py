# apps/publishing/builder.py
"""
Build du site statique: chaque page source (HTML + en-tête YAML optionnel)
est rendue par le moteur de templates Django puis écrite dans le dossier
de sortie, au même chemin relatif. Les autres fichiers sont copiés tels quels.

Les chemins dont un composant commence par ``_`` ou ``.`` (layouts,
includes, fichiers cachés) ne sont ni rendus ni copiés.
"""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.conf import settings
from django.template import TemplateDoesNotExist, TemplateSyntaxError, engines

from apps.publishing.frontmatter import FrontMatterError, split_front_matter

log = logging.getLogger("publishing.builder")

_SKIP_PREFIXES = ("_", ".")


@dataclass
class BuildReport:
    pages: List[str] = field(default_factory=list)
    copied: List[str] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _is_skipped(relpath: PurePosixPath) -> bool:
    return any(part.startswith(_SKIP_PREFIXES) for part in relpath.parts)


class SiteBuilder:
    def __init__(
        self,
        source_dir,
        output_dir,
        *,
        engine=None,
        page_extensions: Optional[Iterable[str]] = None,
        site_context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.source_dir = Path(source_dir)
        self.output_dir = Path(output_dir)
        self.engine = engine or engines["django"]
        exts = page_extensions if page_extensions is not None else getattr(settings, "SITE_PAGE_EXTENSIONS", (".html",))
        self.page_extensions = tuple(e.lower() for e in exts)
        self.site_context = dict(site_context if site_context is not None else getattr(settings, "SITE_CONTEXT", {}))

    # ------------------------------------------------------------------ discovery

    def _walk(self) -> List[Path]:
        files: List[Path] = []
        output_root = self.output_dir.resolve()
        for path in sorted(self.source_dir.rglob("*")):
            if not path.is_file():
                continue
            # Sortie imbriquée dans les sources: jamais reprise au build suivant.
            if path.resolve().is_relative_to(output_root):
                continue
            rel = PurePosixPath(path.relative_to(self.source_dir).as_posix())
            if _is_skipped(rel):
                continue
            files.append(path)
        return files

    def is_page(self, path: Path) -> bool:
        return path.suffix.lower() in self.page_extensions

    def discover(self) -> List[Path]:
        """Pages à rendre, triées par chemin."""
        return [p for p in self._walk() if self.is_page(p)]

    # ------------------------------------------------------------------ rendering

    def _relpath(self, path: Path) -> str:
        return path.relative_to(self.source_dir).as_posix()

    def render_page(self, path: Path) -> str:
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        front, body = split_front_matter(text, path=path)
        page = dict(front)
        page.setdefault("url", "/" + self._relpath(path))
        tpl = self.engine.from_string(body)
        return tpl.render({"page": page, "site": self.site_context})

    # ------------------------------------------------------------------ build

    def build(self) -> BuildReport:
        if not self.source_dir.is_dir():
            raise FileNotFoundError(f"Source directory not found: {self.source_dir}")

        report = BuildReport()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        log.info("Building %s -> %s", self.source_dir, self.output_dir)

        for path in self._walk():
            rel = self._relpath(path)
            dest = self.output_dir / rel
            dest.parent.mkdir(parents=True, exist_ok=True)

            if not self.is_page(path):
                shutil.copy2(path, dest)
                report.copied.append(rel)
                continue

            try:
                html = self.render_page(path)
            except (FrontMatterError, TemplateSyntaxError, TemplateDoesNotExist, UnicodeDecodeError) as exc:
                log.error("Failed to render %s: %s", rel, exc)
                report.errors.append((rel, str(exc)))
                continue

            dest.write_text(html, encoding="utf-8")
            report.pages.append(rel)
            log.debug("Rendered %s", rel)

        log.info(
            "Build done: %d pages, %d copied, %d errors",
            len(report.pages), len(report.copied), len(report.errors),
        )
        return report
