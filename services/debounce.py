"""Cancellable delayed callbacks for cooperative (polled) event loops."""
from __future__ import annotations

import time
from typing import Callable, Optional


class Debouncer:
    """Run the most recently scheduled callback once its quiet period has passed.

    Scheduling replaces whatever was pending, so at most one callback waits at
    any time. Nothing runs in the background: the owner calls :meth:`poll`
    from its own event loop (a Streamlit fragment timer in the app).
    """

    def __init__(self, quiet_period: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        if quiet_period < 0:
            raise ValueError("quiet_period must not be negative")
        self.quiet_period = quiet_period
        self._clock = clock
        self._callback: Optional[Callable[[], object]] = None
        self._due_at = 0.0

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def schedule(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self._due_at = self._clock() + self.quiet_period

    def cancel(self) -> bool:
        """Drop the pending callback; return whether there was one."""
        had_pending = self._callback is not None
        self._callback = None
        return had_pending

    def poll(self) -> bool:
        """Run the pending callback if it is due. Returns ``True`` when it ran."""

        if self._callback is None or self._clock() < self._due_at:
            return False
        callback, self._callback = self._callback, None
        callback()
        return True


__all__ = ["Debouncer"]
