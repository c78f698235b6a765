"""
Protocol definitions for generic infrastructure services.

Protocols define contracts that collaborators must fulfil, enabling:
- Duck typing with static type checking
- Dependency inversion (depend on abstractions, not concretions)
- Easy substitution in tests

Available Protocols:
    Clock: Source of the current time for scheduled jobs

Usage:
    from core.protocols import Clock

    class ExpirationSweeper:
        def __init__(self, clock: Clock | None = None):
            self.clock = clock or SystemClock()

    class FrozenClock:
        def __init__(self, moment):
            self.moment = moment

        def now(self):
            return self.moment

    # FrozenClock is a valid Clock even without explicit inheritance
    sweeper = ExpirationSweeper(clock=FrozenClock(moment))

Note:
    - For the notification dispatch contract, see notifications.protocols
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class Clock(Protocol):
    """
    Protocol for time sources.

    Schedulers read "now" exclusively through a Clock so that window and
    threshold computations can be tested deterministically.
    """

    def now(self) -> datetime:
        """
        Return the current moment.

        Returns:
            Timezone-aware datetime
        """
        ...


__all__ = ["Clock"]
