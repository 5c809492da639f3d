"""
ASGI config for the canteen backend.

Notifications are delivered by polling the REST API, so plain HTTP is the
only protocol served here.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core_backend.settings")

application = get_asgi_application()
