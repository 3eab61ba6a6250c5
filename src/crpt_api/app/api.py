from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

from pydantic import ValidationError

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import PeriodUnit
from ..core.domain.errors import ConfigurationError, CrptApiError, LimiterClosedError
from ..core.domain.models import BatchItemResult, SubmissionResult
from ..core.usecases.submit_document import SubmitDocumentUseCase
from ..infra.rate_limiter import FixedWindowRateLimiter
from ..infra.schemas import Document

logger = logging.getLogger(__name__)


class SubmissionClient:
    """Rate-limited client for the CRPT document creation API.

    Every call to ``submit`` takes a permit from a fixed-window rate limiter
    shared by all threads using this client, and gives it back once the HTTP
    call is over, whatever its outcome. When the window's budget is used up,
    callers block until the next window instead of failing.

    Example:
        # Using default configuration (from environment variables)
        with SubmissionClient() as client:
            result = client.submit(document, signature="...")

        # At most 5 requests per second
        with SubmissionClient(request_limit=5, period_unit="seconds") as client:
            results = client.submit_many(documents, signature="...", max_workers=8)
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        request_limit: int | None = None,
        period_unit: PeriodUnit | str | None = None,
        period_count: int | None = None,
        timeout_seconds: float | None = None,
        transport_retries: int | None = None,
    ):
        """Initialize the client and start its rate limiter.

        Args:
            base_url: API scheme and host. If None, uses CRPT_API_BASE_URL or the production host.
            request_limit: Maximum requests per window. If None, uses CRPT_API_REQUEST_LIMIT or default (10).
            period_unit: Window time unit. If None, uses CRPT_API_PERIOD_UNIT or default (seconds).
            period_count: Units per window. If None, uses CRPT_API_PERIOD_COUNT or default (1).
            timeout_seconds: HTTP timeout. If None, uses CRPT_API_TIMEOUT_SECONDS or default (20).
            transport_retries: Connection retries. If None, uses CRPT_API_TRANSPORT_RETRIES or default (0).

        Raises:
            ConfigurationError: If an override is invalid (e.g. unknown period unit, non-positive limit).
        """
        self._container = Container()

        # Build config dict with only provided values
        overrides: dict[str, Any] = {}
        if base_url is not None:
            overrides["base_url"] = base_url
        if request_limit is not None:
            overrides["request_limit"] = request_limit
        if period_unit is not None:
            overrides["period_unit"] = period_unit
        if period_count is not None:
            overrides["period_count"] = period_count
        if timeout_seconds is not None:
            overrides["timeout_seconds"] = timeout_seconds
        if transport_retries is not None:
            overrides["transport_retries"] = transport_retries

        if overrides:
            try:
                config = AppConfig(**overrides)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid client configuration: {e}") from e
            self._container.config.from_pydantic(config)

        self._container.init_resources()
        # Resolved once; after shutdown_resources() the container would build fresh ones.
        self._rate_limiter: FixedWindowRateLimiter = self._container.rate_limiter()
        self._closed = False

    @property
    def rate_limiter(self) -> FixedWindowRateLimiter:
        return self._rate_limiter

    def _submit_uc(self) -> SubmitDocumentUseCase:
        if self._closed:
            raise LimiterClosedError()
        return self._container.submit_uc()

    def submit(
        self,
        document: Document | dict[str, Any],
        signature: str,
        *,
        timeout: float | None = None,
    ) -> SubmissionResult:
        """Create a document, waiting for rate-limit capacity first.

        Args:
            document: Document model, or a mapping validated into one.
            signature: Detached signature sent in the Signature header.
            timeout: Maximum seconds to wait for a permit. None waits indefinitely.

        Returns:
            SubmissionResult for a 2xx response.

        Raises:
            CancelledWaitError: No permit was granted (timeout or client closed).
            SerializationError: The document is invalid.
            TransportError: Network failure.
            RemoteRejectionError: Non-2xx response.
        """
        uc = self._submit_uc()
        return uc.execute(document, signature, timeout=timeout)

    def submit_many(
        self,
        documents: Sequence[Document | dict[str, Any]],
        signature: str,
        *,
        max_workers: int = 4,
        timeout: float | None = None,
    ) -> list[BatchItemResult]:
        """Submit documents concurrently; all workers share this client's rate limit.

        Per-document CrptApiError failures are captured in the returned items
        rather than aborting the batch. Results keep the input order.
        """
        uc = self._submit_uc()

        def _one(index: int, document: Document | dict[str, Any]) -> BatchItemResult:
            try:
                return BatchItemResult(index=index, result=uc.execute(document, signature, timeout=timeout))
            except CrptApiError as e:
                logger.debug(f"Document #{index} failed: {e}")
                return BatchItemResult(index=index, error=e)

        logger.info(f"Submitting {len(documents)} document(s) with {max_workers} worker(s)")
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="crpt-submit") as pool:
            futures = [pool.submit(_one, i, doc) for i, doc in enumerate(documents)]
            results = [f.result() for f in futures]

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Batch finished: {len(results) - failed} succeeded, {failed} failed")
        return results

    def close(self) -> None:
        """Stop the rate limiter and close the HTTP client. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self._container.shutdown_resources()

    def __enter__(self) -> SubmissionClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "SubmissionClient",
    "AppConfig",
]
