"""Single-slot deferred timer for notification expiry.

The timer never spawns threads. The owner polls it on every input event;
a callback whose deadline has passed fires once and the slot is cleared.
Scheduling a new callback replaces the pending one, so at most one expiry
is ever live.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

Clock = Callable[[], float]


@dataclass(slots=True)
class _Pending:
    deadline: float
    callback: Callable[[], None]


class DeferredTimer:
    """Cancelable timer driven by an injected clock."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._pending: _Pending | None = None

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def deadline(self) -> float | None:
        return self._pending.deadline if self._pending else None

    def schedule(self, delay: float, callback: Callable[[], None]) -> float:
        """Schedule ``callback`` after ``delay`` seconds, replacing any pending one.

        Returns:
            The absolute deadline on the timer clock.
        """
        deadline = self._clock() + delay
        self._pending = _Pending(deadline=deadline, callback=callback)
        return deadline

    def cancel(self) -> None:
        self._pending = None

    def poll(self) -> bool:
        """Fire the pending callback if its deadline has passed.

        Returns:
            True when a callback fired.
        """
        pending = self._pending
        if pending is None or self._clock() < pending.deadline:
            return False
        self._pending = None
        pending.callback()
        return True
