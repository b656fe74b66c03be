"""
ASGI config for the hopital project.

Only plain HTTP is served; every request is handled independently by
Django's ASGI handler.
"""
import os

from django.core.asgi import get_asgi_application  # noqa: E402

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hopital.settings")

application = get_asgi_application()
