"""Users app package.

Defines the custom user model (email login, USER/OWNER roles), the
registration and login endpoints that issue JWT tokens, and the user
profile API. Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL
throughout the project.
"""
