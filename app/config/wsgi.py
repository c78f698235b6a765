"""
WSGI config for the Tarodan backend.

Served by gunicorn in production. Background work (payment sweeps,
membership reminders, campaigns) runs in the Celery worker and beat
processes, not here.

For more information on this file, see:
https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
