"""
Usage :
    {% load lightbox %}
    {% lightbox cat.jpg, A cat, A sleeping cat %}
"""
from __future__ import annotations

from django import template

from apps.lightbox.registry import build_tag_registry, install_tags

register = install_tags(template.Library(), build_tag_registry())
