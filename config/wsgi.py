"""WSGI config for the Cameinw project.

Exposes the WSGI application used by Django's runserver and by
production WSGI servers such as gunicorn.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
