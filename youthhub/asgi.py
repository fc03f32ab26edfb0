"""ASGI config for Youth Hub project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "youthhub.settings")

application = get_asgi_application()
