"""WSGI config for Youth Hub project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "youthhub.settings")

application = get_wsgi_application()
