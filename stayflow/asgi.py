"""
ASGI config for the stayflow project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "stayflow.settings")

application = get_asgi_application()
