"""
Domain error hierarchy.

    BaseApplicationError
    ├── ConflictError
    │   └── LockAcquisitionError
    └── ExternalServiceError

Each error carries a machine-readable ``error_code`` and a ``details``
mapping. ``to_dict()`` is what goes into log ``extra=`` and JSON responses:

    try:
        dispatcher.enqueue(job)
    except ExternalServiceError as exc:
        logger.warning("Enqueue failed", extra=exc.to_dict())

Request validation and authentication errors are DRF's concern, not these.
"""

from __future__ import annotations

from typing import Any


class BaseApplicationError(Exception):
    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "error_code": self.error_code}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"error_code={self.error_code!r}, details={self.details!r})"
        )


class ConflictError(BaseApplicationError):
    """The operation clashes with work already in progress (HTTP 409)."""

    default_error_code: str = "CONFLICT"


class LockAcquisitionError(ConflictError):
    """Another process holds the DistributedLock."""

    default_error_code: str = "LOCK_ACQUISITION_FAILED"


class ExternalServiceError(BaseApplicationError):
    """The broker, Redis or the mail transport failed."""

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"


__all__ = [
    "BaseApplicationError",
    "ConflictError",
    "ExternalServiceError",
    "LockAcquisitionError",
]
