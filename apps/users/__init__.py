"""Users app package.

Defines the custom user model (email login) with the owner/host role
used across the platform. Use ``apps.users.models.CustomUser`` as the
AUTH_USER_MODEL throughout the project.
"""
