"""
Celery tasks for e-mail delivery.

Tasks:
    send_template_email: Render a template and send it to one recipient

Design:
    - Unknown templates are permanent failures: logged and not retried
    - Any other error is treated as transient and retried with
      exponential backoff (max 3 retries)

Usage:
    from notifications.tasks import send_template_email

    # Normally called through notifications.dispatch.CeleryEmailDispatcher
    send_template_email.delay(
        recipient="collector@example.com",
        template="membership-expiring",
        data={"user_name": "Ayse"},
        subject="Your membership expires soon",
    )
"""

from __future__ import annotations

import logging
from typing import Any

from celery import shared_task
from django.template import TemplateDoesNotExist

from notifications.email import build_template_email

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """Base exception for delivery failures."""

    def __init__(self, message: str, code: str, is_permanent: bool = False):
        super().__init__(message)
        self.code = code
        self.is_permanent = is_permanent


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_kwargs={"max_retries": 3},
)
def send_template_email(
    self,
    recipient: str,
    template: str,
    data: dict[str, Any] | None = None,
    subject: str = "",
) -> dict[str, Any]:
    """
    Render and send one templated e-mail.

    Args:
        recipient: Destination address
        template: Template identifier
        data: Template context
        subject: Subject line

    Returns:
        Dict with "sent" flag, template and, on permanent failure, error code
    """
    try:
        message = build_template_email(recipient, template, data or {}, subject)
    except TemplateDoesNotExist as e:
        error = DeliveryError(
            f"Unknown e-mail template '{template}'",
            code="unknown_template",
            is_permanent=True,
        )
        logger.warning(
            f"E-mail permanently failed for {recipient}: {error.code} - {error}",
            extra={"template": template, "missing": str(e)},
        )
        return {"sent": False, "template": template, "error": error.code}

    message.send()

    logger.info(
        f"E-mail '{template}' sent to {recipient}",
        extra={"template": template, "task_id": self.request.id},
    )
    return {"sent": True, "template": template}
