"""ASGI config for the Cameinw project.

Exposes the ASGI callable for asynchronous servers such as uvicorn or
daphne. Production servers should set DJANGO_SETTINGS_MODULE explicitly.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
