"""
Project-wide pytest setup.

Fixtures used by a single app live in that app's tests/conftest.py; the
clock and dispatcher doubles are shared by the e-mail jobs of several apps.
"""

import os
from datetime import datetime
from pathlib import Path

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# Test modules are marked by file name unless they carry an explicit marker.
# Anything not listed hits the database, so it counts as integration.
MARKERS_BY_FILENAME = {
    "test_integration.py": "e2e",
    "test_views.py": "integration",
    "test_tasks.py": "integration",
    "test_expiration_sweeper.py": "integration",
    "test_reminders.py": "integration",
    "test_premium_offers.py": "integration",
    "test_stores.py": "integration",
    "test_models.py": "unit",
    "test_managers.py": "unit",
    "test_state_transitions.py": "unit",
    "test_locks.py": "unit",
    "test_time_windows.py": "unit",
    "test_dispatch.py": "unit",
    "test_exceptions.py": "unit",
    "test_beat.py": "integration",
    "test_services.py": "integration",
    "test_templates.py": "integration",
}
LEVELS = {"unit", "integration", "e2e"}


def pytest_configure():
    django.setup()

    from django.conf import settings

    # The default PBKDF2 hasher dominates test runtime when factories set passwords
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.CELERY_TASK_ALWAYS_EAGER = True


def pytest_collection_modifyitems(items):
    for item in items:
        if LEVELS & {marker.name for marker in item.iter_markers()}:
            continue
        level = MARKERS_BY_FILENAME.get(Path(str(item.fspath)).name, "integration")
        item.add_marker(getattr(pytest.mark, level))


class FixedClock:
    """Clock stuck at one moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def clock_at():
    """
    Factory for frozen clocks:

        sweeper = ExpirationSweeper(clock=clock_at(datetime(2024, 1, 1, tzinfo=UTC)))
    """
    return FixedClock


class RecordingDispatcher:
    """
    In-memory dispatcher that records queued jobs.

    Recipients listed in ``fail_for`` raise DispatchError instead.
    """

    def __init__(self, fail_for=()):
        self.jobs = []
        self.fail_for = set(fail_for)

    def enqueue(self, job):
        from notifications.dispatch import DispatchError

        if job.recipient in self.fail_for:
            raise DispatchError("broker unreachable", details={"recipient": job.recipient})
        self.jobs.append(job)
        return f"job-{len(self.jobs)}"

    @property
    def recipients(self):
        return [job.recipient for job in self.jobs]


@pytest.fixture
def dispatcher():
    """Dispatcher that records every job."""
    return RecordingDispatcher()


@pytest.fixture
def failing_dispatcher():
    """Build a dispatcher that fails for the given recipients."""
    return RecordingDispatcher
