import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("petstay")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Reminders for confirmed stays starting soon - every 6 hours
    "send-upcoming-booking-reminders": {
        "task": "bookings.send_upcoming_booking_reminders",
        "schedule": crontab(minute=0, hour="*/6"),
    },
    # Review reminders for completed bookings - daily at 10:00
    "send-review-reminders": {
        "task": "reviews.send_review_reminders",
        "schedule": crontab(minute=0, hour=10),
    },
}
