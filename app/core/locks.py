"""
Cross-process mutual exclusion on top of the django-redis connection.

A celery-beat schedule fires once, but the resulting task may still run
twice: a worker dies after ack, a message is redelivered, or an admin
triggers the job by hand. Tasks with non-idempotent side effects, such as
the daily membership reminders, hold a DistributedLock for the run.

    with DistributedLock(f"memberships:reminders:{day}", ttl=3600, blocking=False):
        ...
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING

from django_redis import get_redis_connection
from redis.exceptions import RedisError

from core.exceptions import LockAcquisitionError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

RETRY_DELAY = 0.05


class DistributedLock:
    """
    Owner-token lock stored under ``lock:<key>`` with an expiry.

    The expiry (``ttl`` seconds) frees the key if the holder crashes, so it
    must exceed the longest expected run. Only the holder of the random
    token can release the lock.

    With ``blocking=True`` acquire() polls for up to ``timeout`` seconds;
    otherwise it gives up after one attempt. Either way a failed attempt
    raises LockAcquisitionError. An unreachable Redis surfaces as
    redis.exceptions.RedisError from acquire(); callers choose whether to
    proceed unlocked.
    """

    RELEASE_SCRIPT = """
    if redis.call("get", KEYS[1]) == ARGV[1] then
        return redis.call("del", KEYS[1])
    end
    return 0
    """

    def __init__(
        self,
        key: str,
        ttl: int = 30,
        blocking: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.key = f"lock:{key}"
        self.ttl = ttl
        self.blocking = blocking
        self.timeout = timeout
        self._token: str | None = None
        self._client: Redis | None = None

    @property
    def client(self) -> Redis:
        if self._client is None:
            self._client = get_redis_connection("default")
        return self._client

    @property
    def is_held(self) -> bool:
        return self._token is not None

    def _claim(self, token: str) -> bool:
        return bool(self.client.set(self.key, token, nx=True, ex=self.ttl))

    def acquire(self) -> bool:
        token = uuid.uuid4().hex

        if self._claim(token):
            self._token = token
            return True

        if not self.blocking:
            raise LockAcquisitionError(
                f"Lock '{self.key}' is already held",
                details={"key": self.key},
            )

        deadline = time.monotonic() + self.timeout
        while time.monotonic() < deadline:
            time.sleep(RETRY_DELAY)
            if self._claim(token):
                self._token = token
                return True

        raise LockAcquisitionError(
            f"Timed out after {self.timeout}s waiting for lock '{self.key}'",
            details={"key": self.key, "timeout": self.timeout},
        )

    def release(self) -> bool:
        """
        Delete the key if this instance still owns it.

        A Redis error here is logged and reported as False; the key then
        frees itself when its ttl runs out.
        """
        token, self._token = self._token, None
        if token is None:
            return False
        try:
            return bool(self.client.eval(self.RELEASE_SCRIPT, 1, self.key, token))
        except RedisError as e:
            logger.warning(
                f"Could not release lock '{self.key}', it expires in {self.ttl}s: {e}",
                extra={"key": self.key, "ttl": self.ttl},
            )
            return False

    def __enter__(self) -> DistributedLock:
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()


__all__ = ["DistributedLock"]
