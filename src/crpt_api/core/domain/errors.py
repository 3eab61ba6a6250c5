from __future__ import annotations


class CrptApiError(Exception):
    """Base class for all errors raised by crpt_api."""


class ConfigurationError(CrptApiError, ValueError):
    """Invalid limiter or client configuration. Raised at construction."""


class CancelledWaitError(CrptApiError):
    """A blocked acquire ended before a permit was granted.

    No permit was consumed and no release is owed, so the call is safe to retry.
    """


class AcquireTimeoutError(CancelledWaitError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"No permit became available within {timeout:.3f}s")
        self.timeout = timeout


class LimiterClosedError(CancelledWaitError):
    def __init__(self) -> None:
        super().__init__("Rate limiter is closed")


class TransportError(CrptApiError):
    """Network or I/O failure while talking to the remote API."""


class SerializationError(CrptApiError):
    """The document could not be validated or serialized to JSON."""


class RemoteRejectionError(CrptApiError):
    """The remote API answered with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Document submission rejected with HTTP {status_code}")
        self.status_code = status_code
        self.body = body
