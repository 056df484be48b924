"""Development settings for the Cameinw project.

Extends the base settings with debug mode, open hosts and verbose
logging of the domain apps. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
