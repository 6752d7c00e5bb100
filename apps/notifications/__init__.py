"""Notifications app package.

In-app notifications created as side effects of booking events and
periodic reminders. Delivery is best-effort: failures are logged and
never affect the operation that triggered them.
"""
