# apps/lightbox/apps.py
from django.apps import AppConfig
import logging

log = logging.getLogger("lightbox.apps")


class LightboxConfig(AppConfig):
    name = "apps.lightbox"
    verbose_name = "Lightbox"

    def ready(self):
        from .registry import build_tag_registry

        log.info("LightboxConfig ready: tags %s", ", ".join(sorted(build_tag_registry())))
