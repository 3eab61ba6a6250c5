from __future__ import annotations


CREATE_DOCUMENT_PATH = "/api/v3/lk/documents/create"


def get_create_document_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{CREATE_DOCUMENT_PATH}"
