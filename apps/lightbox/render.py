# apps/lightbox/render.py
"""
Rendu du tag ``{% lightbox path, title, alt %}``.

Le texte brut du tag est découpé sur les virgules, chaque segment est
nettoyé (strip), puis injecté tel quel dans un fragment HTML fixe:

    <a href="/img/{path}" rel="lightbox" title="{title}"><img src="/img/{path}" alt="{alt}" /></a>

Aucun échappement HTML n'est appliqué: la sortie doit rester identique
octet pour octet à celle des pages existantes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

log = logging.getLogger("lightbox.render")

IMAGE_PREFIX = "/img/"

LIGHTBOX_HTML = (
    '<a href="{prefix}{path}" rel="lightbox" title="{title}">'
    '<img src="{prefix}{path}" alt="{alt}" /></a>'
)


@dataclass(frozen=True)
class LightboxArgs:
    path: str = ""
    title: str = ""
    alt: Optional[str] = None

    @property
    def alt_text(self) -> str:
        """Texte alternatif effectif: ``alt`` s'il est fourni, sinon ``title``."""
        return self.title if self.alt is None else self.alt


def split_segments(text: str) -> List[str]:
    """
    Découpe sur les virgules. Les segments vides en fin de liste sont
    retirés avant le strip: ``"a.jpg, T,"`` n'a que deux segments, alors
    que ``"a.jpg, T, "`` en a trois (le dernier vide après strip).
    """
    pieces = (text or "").split(",")
    while len(pieces) > 1 and pieces[-1] == "":
        pieces.pop()
    return [segment.strip() for segment in pieces]


def parse_arguments(text: str) -> LightboxArgs:
    """
    Associe les segments dans l'ordre: path, title, alt.
    Les segments au-delà du troisième sont ignorés.
    """
    segments = split_segments(text)
    if len(segments) < 2:
        log.warning("lightbox: expected 'path, title[, alt]', got %r", text)
    path = segments[0] if segments else ""
    title = segments[1] if len(segments) > 1 else ""
    alt = segments[2] if len(segments) > 2 else None
    return LightboxArgs(path=path, title=title, alt=alt)


def render_lightbox(text: str) -> str:
    """Rend le fragment HTML pour le texte brut d'un tag lightbox."""
    args = parse_arguments(text)
    return LIGHTBOX_HTML.format(
        prefix=IMAGE_PREFIX,
        path=args.path,
        title=args.title,
        alt=args.alt_text,
    )
