from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..core.domain.errors import TransportError
from ..core.ports.transport_port import DocumentTransportPort

logger = logging.getLogger(__name__)


class HttpClient(DocumentTransportPort):
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
        retries: int = 0,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10,
            transport=httpx.HTTPTransport(retries=retries),
        )

    def post_json(self, url: str, payload: str, headers: Mapping[str, str]) -> httpx.Response:
        request_headers = {"Content-Type": "application/json", **dict(headers)}
        logger.debug(f"POST {url} ({len(payload)} bytes)")
        try:
            return self._client.post(url, content=payload.encode("utf-8"), headers=request_headers)
        except httpx.TransportError as e:
            raise TransportError(f"POST {url} failed: {e}") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
