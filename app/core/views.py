"""Operational endpoints that sit outside the domain apps."""

import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django_celery_beat.models import PeriodicTask

logger = logging.getLogger(__name__)

LIFECYCLE_TASKS = (
    "payments.workers.expiration_sweeper.sweep_expired_payments",
    "memberships.tasks.send_expiration_reminders",
    "memberships.tasks.send_monthly_premium_offers",
    "marketing.tasks.send_weekly_newsletter",
    "marketing.tasks.send_monthly_promotions",
)


def _database_ok() -> bool:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return False
    return True


def _cache_ok() -> bool:
    # django-redis is configured with IGNORE_EXCEPTIONS, so an outage shows
    # up as a missed read rather than an error
    cache.set("health_check", "ok", timeout=1)
    return cache.get("health_check") == "ok"


def _scheduler_status() -> dict:
    """Map each lifecycle task to whether an enabled beat schedule exists."""
    enabled = set(
        PeriodicTask.objects.filter(task__in=LIFECYCLE_TASKS, enabled=True).values_list(
            "task", flat=True
        )
    )
    return {task: task in enabled for task in LIFECYCLE_TASKS}


def health_check(request):
    """
    Liveness check for the load balancer and container orchestration.

    Responds 503 only when the database is unreachable. A cache outage is
    reported but tolerated; reminder runs then lose their overlap lock.
    The scheduler map is only filled when the database answers.
    """
    db_up = _database_ok()
    body = {
        "status": "healthy" if db_up else "unhealthy",
        "database": "connected" if db_up else "disconnected",
        "cache": "connected" if _cache_ok() else "disconnected",
        "scheduler": _scheduler_status() if db_up else {},
    }
    return JsonResponse(body, status=200 if db_up else 503)
