from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from ..core.domain.errors import SerializationError
from ..core.ports.serializer_port import DocumentSerializerPort
from .schemas import CreateDocumentResponse, Document

logger = logging.getLogger(__name__)


class DocumentSerializer(DocumentSerializerPort):
    def dumps(self, document: Document | Mapping[str, Any]) -> str:
        if isinstance(document, Document):
            model = document
        elif isinstance(document, Mapping):
            try:
                model = Document.model_validate(dict(document))
            except ValidationError as e:
                raise SerializationError(f"Invalid document: {e}") from e
        else:
            raise SerializationError(f"Unsupported document type: {type(document).__name__}")
        try:
            return model.model_dump_json()
        except (ValueError, TypeError) as e:
            raise SerializationError(f"Failed to serialize document: {e}") from e

    def read_document_id(self, body: str) -> str | None:
        if not body:
            return None
        try:
            data = json.loads(body)
        except ValueError:
            logger.debug("Response body is not JSON; no document id")
            return None
        if not isinstance(data, dict):
            return None
        try:
            return CreateDocumentResponse.model_validate(data).value
        except ValidationError:
            return None
