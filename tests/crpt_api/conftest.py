"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json
import os
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner


CREATE_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop CRPT_API_* variables so the host environment cannot leak into tests."""
    for key in list(os.environ):
        if key.upper().startswith("CRPT_API_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_document() -> dict:
    return {
        "description": {"participantInn": "7700000000"},
        "doc_id": "doc-1",
        "doc_status": "DRAFT",
        "doc_type": "LP_INTRODUCE_GOODS",
        "importRequest": True,
        "owner_inn": "7700000000",
        "participant_inn": "7700000000",
        "producer_inn": "7711111111",
        "production_date": "2024-01-23",
        "production_type": "OWN_PRODUCTION",
        "products": [
            {
                "certificate_document": "CONFORMITY_CERTIFICATE",
                "certificate_document_date": "2024-01-01",
                "certificate_document_number": "RU-123",
                "owner_inn": "7700000000",
                "producer_inn": "7711111111",
                "production_date": "2024-01-23",
                "tnved_code": "6401100000",
                "uit_code": "010461234567890121abc",
                "uitu_code": None,
            }
        ],
        "reg_date": "2024-01-24",
        "reg_number": "42",
    }


@pytest.fixture
def document_file(tmp_path: Path, sample_document: dict) -> Path:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a function that tests can use to register mock responses. A callable
    `handler` can be registered instead of a fixed status/body.
    """
    responses = {}
    calls_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str = CREATE_URL,
        method: str = "POST",
        status_code: int = 200,
        json_payload: dict | None = None,
        content: bytes | None = None,
        handler=None,
    ):
        """Register a mock response for a given URL and method."""
        if handler is not None:
            responses[(method.upper(), url)] = handler
            return
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        calls_log.append(request)
        entry = responses.get((request.method, str(request.url)))
        if entry is None:
            return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")
        if callable(entry):
            return entry(request)
        status, body = entry
        return httpx.Response(status, content=body, headers={"Content-Length": str(len(body))})

    # Patch httpx.Client to always use our mock transport
    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.calls = calls_log  # type: ignore[attr-defined]
    return add_response
