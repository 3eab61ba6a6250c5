from __future__ import annotations

import logging
import threading
import time
import weakref
from contextlib import contextmanager
from typing import Iterator

from ..core.domain.enums import PeriodUnit
from ..core.domain.errors import AcquireTimeoutError, ConfigurationError, LimiterClosedError
from ..core.ports.rate_limiter_port import RateLimiterPort

logger = logging.getLogger(__name__)


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    return value


def _replenish_forever(limiter_ref: "weakref.ref[FixedWindowRateLimiter]", stopped: threading.Event, period: float) -> None:
    # Holds only a weak reference so a discarded limiter can be collected.
    next_tick = time.monotonic() + period
    while not stopped.wait(max(0.0, next_tick - time.monotonic())):
        limiter = limiter_ref()
        if limiter is None:
            return
        try:
            limiter.replenish()
        except Exception:
            logger.exception("Permit replenishment failed; will retry on next tick")
        del limiter

        next_tick += period
        now = time.monotonic()
        if next_tick <= now:
            # Late tick: coalesce the missed windows into the one just run.
            missed = int((now - next_tick) // period) + 1
            logger.debug(f"Replenishment fell behind by {missed} window(s)")
            next_tick += missed * period


class FixedWindowRateLimiter(RateLimiterPort):
    """Fixed-window permit pool shared by any number of threads.

    At most ``capacity`` permits are handed out per window. A background thread
    resets the pool to full capacity every ``period_count`` x ``period_unit``,
    regardless of call volume. Callers that find the pool empty block until a
    permit is released or the next reset happens.

    All permits return at once on each window boundary, so up to
    ``2 * capacity`` calls can be observed in a short span straddling a
    boundary. That is how a fixed window behaves and is intended here; use a
    token bucket or sliding window if smooth pacing is required.

    Example:
        # 10 requests per second
        limiter = FixedWindowRateLimiter(PeriodUnit.SECONDS, 1, 10)

        with limiter.permit():
            send_request()

        limiter.close()
    """

    def __init__(
        self,
        period_unit: PeriodUnit | str,
        period_count: int,
        capacity: int,
        *,
        name: str | None = None,
    ) -> None:
        """Create the pool and start its replenishment thread.

        Args:
            period_unit: Time unit of the window (PeriodUnit or its name, e.g. "seconds")
            period_count: Number of units per window (positive integer)
            capacity: Maximum permits granted per window (positive integer)
            name: Optional name used for the background thread and in logs

        Raises:
            ConfigurationError: If any argument is invalid.
        """
        try:
            unit = period_unit if isinstance(period_unit, PeriodUnit) else PeriodUnit.from_str(str(period_unit))
        except ValueError:
            raise ConfigurationError(f"Unknown period unit: {period_unit!r}") from None
        self._period_unit = unit
        self._period_count = _positive_int("period_count", period_count)
        self._capacity = _positive_int("capacity", capacity)
        self._period = unit.to_seconds(self._period_count)

        self._available = self._capacity
        self._outstanding = 0  # acquired and not yet released, across resets
        self._closed = False
        self._cond = threading.Condition(threading.Lock())
        self._stopped = threading.Event()

        self._name = name or f"rate-limiter-{id(self):x}"
        self._ticker = threading.Thread(
            target=_replenish_forever,
            args=(weakref.ref(self), self._stopped, self._period),
            name=self._name,
            daemon=True,
        )
        # Stops the thread if the limiter is garbage-collected without close().
        self._finalizer = weakref.finalize(self, self._stopped.set)
        self._ticker.start()
        logger.info(
            f"Rate limiter {self._name} started: {self._capacity} permits per "
            f"{self._period_count} {self._period_unit.value}"
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        with self._cond:
            return self._available

    @property
    def period_seconds(self) -> float:
        return self._period

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def acquire(self, timeout: float | None = None) -> None:
        """Take one permit, blocking until one is available.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Raises:
            AcquireTimeoutError: If no permit was granted within timeout.
            LimiterClosedError: If the limiter is closed before or while waiting.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while True:
                if self._closed:
                    raise LimiterClosedError()
                if self._available > 0:
                    self._available -= 1
                    self._outstanding += 1
                    logger.debug(f"{self._name}: permit acquired ({self._available}/{self._capacity} left)")
                    return
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise AcquireTimeoutError(timeout)
                self._cond.wait(remaining)

    def try_acquire(self) -> bool:
        """Take a permit if one is free right now; never blocks."""
        with self._cond:
            if self._closed or self._available <= 0:
                return False
            self._available -= 1
            self._outstanding += 1
            return True

    def release(self) -> None:
        """Return one permit, never raising the pool above capacity."""
        with self._cond:
            if self._outstanding == 0:
                logger.warning(f"{self._name}: release() without an outstanding permit")
            else:
                self._outstanding -= 1
            if self._available >= self._capacity:
                # Permit taken before the last reset; the pool is already full.
                logger.debug(f"{self._name}: released permit dropped, pool already full")
                return
            self._available += 1
            self._cond.notify()

    @contextmanager
    def permit(self, timeout: float | None = None) -> Iterator[None]:
        """Hold one permit for the body of a with-block.

        The permit is released on every exit path. If acquiring fails, nothing
        is released.
        """
        self.acquire(timeout)
        try:
            yield
        finally:
            self.release()

    def replenish(self) -> int:
        """Reset the pool to full capacity and return how many permits came back."""
        with self._cond:
            consumed = self._capacity - self._available
            self._available += consumed
            if consumed:
                self._cond.notify(consumed)
        if consumed:
            logger.debug(f"{self._name}: window reset, {consumed} permit(s) restored")
        return consumed

    def close(self) -> None:
        """Stop replenishment and wake all waiters with LimiterClosedError."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()
        self._finalizer()
        if self._ticker is not threading.current_thread():
            self._ticker.join()
        logger.info(f"Rate limiter {self._name} closed")

    def __enter__(self) -> FixedWindowRateLimiter:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
