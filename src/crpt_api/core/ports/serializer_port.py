from __future__ import annotations

from typing import Any, Protocol


class DocumentSerializerPort(Protocol):
    def dumps(self, document: Any) -> str:
        """Serialize a document to a JSON string. Raises SerializationError."""
        ...

    def read_document_id(self, body: str) -> str | None:
        """Extract the created document id from a success body, if present."""
        ...
