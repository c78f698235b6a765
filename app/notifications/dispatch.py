"""
E-mail job dispatch over Celery.

Usage:
    from notifications.dispatch import CeleryEmailDispatcher, EmailJob

    dispatcher = CeleryEmailDispatcher()
    job_id = dispatcher.enqueue(EmailJob(recipient, "premium-offer", data, subject))
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from kombu.exceptions import OperationalError

from core.exceptions import ExternalServiceError
from notifications.tasks import send_template_email

logger = logging.getLogger(__name__)


class DispatchError(ExternalServiceError):
    """Raised when a job cannot be handed to the message broker."""

    default_error_code: str = "DISPATCH_FAILED"


@dataclass(frozen=True)
class EmailJob:
    """
    A templated e-mail waiting to be sent.

    Attributes:
        recipient: Destination e-mail address
        template: Template identifier, e.g. "membership-expiring"
        data: Template context; must be JSON-serialisable
        subject: Subject line
    """

    recipient: str
    template: str
    data: dict[str, Any] = field(default_factory=dict)
    subject: str = ""


class CeleryEmailDispatcher:
    """Queues EmailJobs on the send_template_email Celery task."""

    def enqueue(self, job: EmailJob) -> str:
        try:
            result = send_template_email.delay(
                recipient=job.recipient,
                template=job.template,
                data=dict(job.data),
                subject=job.subject,
            )
        except OperationalError as e:
            raise DispatchError(
                "Could not enqueue e-mail job",
                details={"template": job.template, "recipient": job.recipient},
            ) from e

        logger.debug(
            "E-mail job queued",
            extra={"job_id": result.id, "template": job.template},
        )
        return result.id


@dataclass
class CampaignRunResult:
    """Outcome of one bulk e-mail run."""

    sent: int = 0
    failed: int = 0
    error: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = ["CampaignRunResult", "CeleryEmailDispatcher", "DispatchError", "EmailJob"]
