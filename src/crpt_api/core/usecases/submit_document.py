from __future__ import annotations

import logging
from typing import Any

from ..domain.errors import RemoteRejectionError
from ..domain.models import SubmissionResult
from ..ports.rate_limiter_port import RateLimiterPort
from ..ports.serializer_port import DocumentSerializerPort
from ..ports.transport_port import DocumentTransportPort

logger = logging.getLogger(__name__)


class SubmitDocumentUseCase:
    def __init__(
        self,
        rate_limiter: RateLimiterPort,
        transport: DocumentTransportPort,
        serializer: DocumentSerializerPort,
        url: str,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._transport = transport
        self._serializer = serializer
        self._url = url

    def execute(self, document: Any, signature: str, *, timeout: float | None = None) -> SubmissionResult:
        # The permit is held across the request; release happens on every exit path.
        with self._rate_limiter.permit(timeout):
            payload = self._serializer.dumps(document)
            resp = self._transport.post_json(self._url, payload, {"Signature": signature})
            status = resp.status_code
            body = resp.text

        if 200 <= status < 300:
            result = SubmissionResult(
                status_code=status,
                body=body,
                document_id=self._serializer.read_document_id(body),
            )
            logger.info(f"Document submitted successfully (HTTP {status}, id={result.document_id or '-'})")
            return result

        logger.warning(f"Document submission failed: HTTP {status}: {body[:200]}")
        raise RemoteRejectionError(status, body)
