"""
WSGI config for the stayflow project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "stayflow.settings")

application = get_wsgi_application()
