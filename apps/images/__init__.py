"""Images app package.

Profile pictures of users and gallery/main pictures of places, stored
through Django's default storage under ``users/<id>/`` and
``places/<id>/``.
"""
