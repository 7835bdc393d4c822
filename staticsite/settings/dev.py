# staticsite/settings/dev.py
# export DJANGO_SETTINGS_MODULE=staticsite.settings.dev

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

# Dev: logs lisibles en console
LOGGING['handlers']['console']['formatter'] = 'simple'

# Dev: trace détaillée sur les erreurs de template
TEMPLATES[0]['OPTIONS']['debug'] = True
