# staticsite/settings/base.py
from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# Inerte si .env absent
_dotenv_path = find_dotenv(filename=os.getenv("DOTENV_FILE", ".env"), usecwd=True)
if _dotenv_path:
    load_dotenv(_dotenv_path, override=False)

BASE_DIR = Path(__file__).resolve().parents[2]  # racine du dépôt (site/, _site/)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return bool(default)
    return str(value).strip().lower() in _TRUE_VALUES


def _env_path(name: str, default: Path) -> Path:
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    path = Path(value).expanduser()
    return path if path.is_absolute() else BASE_DIR / path


# --------------------------------------------------------------------------------------
# Clés & debug
# --------------------------------------------------------------------------------------
SECRET_KEY = os.getenv('SECRET_KEY', 'CHANGE_ME_DEV_ONLY')
DEBUG = env_flag("DEBUG", default=False)  # Dev.py le passera à True.

ALLOWED_HOSTS: list[str] = []

# --------------------------------------------------------------------------------------
# Apps
# --------------------------------------------------------------------------------------
DJANGO_APPS = [
    'django.contrib.staticfiles',
]

LOCAL_APPS = [
    "apps.lightbox.apps.LightboxConfig",
    "apps.publishing.apps.PublishingConfig",
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

# Le site est rendu hors requête: pas de middleware, pas d'URLs.
MIDDLEWARE: list[str] = []
ROOT_URLCONF = None

# --------------------------------------------------------------------------------------
# Templates
# --------------------------------------------------------------------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [
            BASE_DIR / 'site' / '_includes',
        ],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [],
        },
    },
]

# --------------------------------------------------------------------------------------
# Database: aucune, le build est purement fichier -> fichier
# --------------------------------------------------------------------------------------
DATABASES: dict = {}

# --------------------------------------------------------------------------------------
# I18N / TZ
# --------------------------------------------------------------------------------------
LANGUAGE_CODE = 'en'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

STATIC_URL = '/static/'

# --------------------------------------------------------------------------------------
# Site statique
# --------------------------------------------------------------------------------------
SITE_SOURCE_DIR = _env_path("SITE_SOURCE_DIR", BASE_DIR / "site")
SITE_OUTPUT_DIR = _env_path("SITE_OUTPUT_DIR", BASE_DIR / "_site")
SITE_PAGE_EXTENSIONS = (".html",)
SITE_CONTEXT = {
    "title": os.getenv("SITE_TITLE", "Static site"),
    "base_url": os.getenv("SITE_BASE_URL", "/"),
}

# --------------------------------------------------------------------------------------
# Logging (propre, exploitable)
# --------------------------------------------------------------------------------------
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {'format': '[{levelname}] {name}: {message}', 'style': '{'},
        'verbose': {'format': '{asctime} [{levelname}] {name} {module}:{lineno} — {message}', 'style': '{'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'verbose'},
    },
    'root': {'handlers': ['console'], 'level': LOG_LEVEL},
    'loggers': {
        'lightbox': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'publishing': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
    },
}
