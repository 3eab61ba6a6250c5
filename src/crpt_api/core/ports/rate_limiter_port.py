from __future__ import annotations

from typing import ContextManager, Protocol


class RateLimiterPort(Protocol):
    def acquire(self, timeout: float | None = None) -> None:
        """Block until a permit is available, then take it.

        Raises CancelledWaitError if the wait ends without a permit.
        """

    def release(self) -> None:
        """Return a previously acquired permit to the pool."""

    def permit(self, timeout: float | None = None) -> ContextManager[None]:
        """Hold one permit for the duration of a with-block."""
        ...
