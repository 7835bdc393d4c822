# apps/lightbox/registry.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from django import template
from django.utils.safestring import SafeString, mark_safe

from apps.lightbox.render import render_lightbox

log = logging.getLogger("lightbox.registry")

LIGHTBOX_TAG = "lightbox"

TagHandler = Callable[[str], str]


class RawTextTagNode(template.Node):
    """
    Noeud qui passe le texte brut du tag au handler, sans résoudre
    de variables. Le contexte de rendu est ignoré.
    """

    def __init__(self, tag_name: str, raw_text: str, handler: TagHandler) -> None:
        self.tag_name = tag_name
        self.raw_text = raw_text
        self.handler = handler

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.tag_name} {self.raw_text!r}>"

    def render(self, context) -> SafeString:
        return mark_safe(self.handler(self.raw_text))


def raw_text_compiler(handler: TagHandler) -> Callable:
    """Fabrique la fonction de compilation Django pour un handler texte brut."""

    def compile_tag(parser, token) -> RawTextTagNode:
        bits = token.contents.split(None, 1)
        raw_text = bits[1] if len(bits) > 1 else ""
        return RawTextTagNode(bits[0], raw_text, handler)

    compile_tag.__name__ = f"compile_{getattr(handler, '__name__', 'tag')}"
    return compile_tag


def build_tag_registry() -> Dict[str, TagHandler]:
    """Table nom de tag -> handler. Nouvelle instance à chaque appel."""
    return {LIGHTBOX_TAG: render_lightbox}


def install_tags(
    library: template.Library,
    registry: Optional[Dict[str, TagHandler]] = None,
) -> template.Library:
    """Enregistre chaque handler du registre dans la ``Library`` Django donnée."""
    if registry is None:
        registry = build_tag_registry()
    for name, handler in registry.items():
        library.tag(name, raw_text_compiler(handler))
        log.debug("Registered template tag %r -> %s", name, getattr(handler, "__name__", handler))
    return library
