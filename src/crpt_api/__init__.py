"""crpt_api package: app/core/infra/config.

Expose the library-friendly client and the rate limiter at the package level.
"""

from .app.api import AppConfig, SubmissionClient
from .core.domain.enums import PeriodUnit
from .core.domain.errors import (
    AcquireTimeoutError,
    CancelledWaitError,
    ConfigurationError,
    CrptApiError,
    LimiterClosedError,
    RemoteRejectionError,
    SerializationError,
    TransportError,
)
from .infra.rate_limiter import FixedWindowRateLimiter
from .infra.schemas import Description, Document, Product

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "SubmissionClient",
    "AppConfig",
    "FixedWindowRateLimiter",
    "PeriodUnit",
    "Document",
    "Description",
    "Product",
    "CrptApiError",
    "ConfigurationError",
    "CancelledWaitError",
    "AcquireTimeoutError",
    "LimiterClosedError",
    "TransportError",
    "SerializationError",
    "RemoteRejectionError",
]
