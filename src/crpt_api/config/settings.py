from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.enums import PeriodUnit


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CRPT_API_ prefix.
    For example:
        - CRPT_API_REQUEST_LIMIT=100
        - CRPT_API_PERIOD_UNIT=minutes
        - CRPT_API_BASE_URL=https://markirovka.sandbox.crptech.ru

    Alternatively, settings can be provided programmatically when creating the client:
        client = SubmissionClient(request_limit=5, period_unit="seconds")
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_API_",
        case_sensitive=False,
        extra="forbid",
    )

    base_url: str = Field(
        default="https://ismp.crpt.ru",
        description="Scheme and host of the CRPT API; the create-document path is appended",
    )

    request_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of requests allowed per window",
    )

    period_unit: PeriodUnit = Field(
        default=PeriodUnit.SECONDS,
        description="Time unit of the rate-limit window",
    )

    period_count: int = Field(
        default=1,
        ge=1,
        description="Number of period units per window",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="HTTP timeout for a single request",
    )

    transport_retries: int = Field(
        default=0,
        ge=0,
        description="Connection-level retries performed by the HTTP transport",
    )
