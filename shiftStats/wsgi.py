"""WSGI entry point for the shiftStats analytics host.

Exposes the module-level `application` callable for WSGI servers.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shiftStats.settings")

application = get_wsgi_application()
