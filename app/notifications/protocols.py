"""
Protocol definitions for notification dispatch.

Schedulers depend on this contract rather than on Celery, so tests can pass
a recording fake and production passes CeleryEmailDispatcher.

Usage:
    from notifications.protocols import NotificationDispatcher

    class RecordingDispatcher:
        def __init__(self):
            self.jobs = []

        def enqueue(self, job):
            self.jobs.append(job)
            return f"job-{len(self.jobs)}"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from notifications.dispatch import EmailJob


@runtime_checkable
class NotificationDispatcher(Protocol):
    """
    Protocol for fire-and-forget notification queues.

    Once enqueue() returns, delivery (and its retries) is owned by the
    dispatcher. Callers never wait for the message to be sent.
    """

    def enqueue(self, job: EmailJob) -> str:
        """
        Queue a job for delivery.

        Args:
            job: E-mail job to deliver

        Returns:
            Identifier of the queued job

        Raises:
            DispatchError: If the job could not be queued
        """
        ...


__all__ = ["NotificationDispatcher"]
