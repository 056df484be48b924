"""Top-level package for Django configuration.

Contains the settings modules for the Cameinw rental API and the WSGI and
ASGI entry points.
"""
