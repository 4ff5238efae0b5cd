"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json
import os

import httpx
import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CRPT_API_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("CRPT_API_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    Every request is recorded in ``add_response.requests``.
    """
    responses = {}
    requests_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "POST",
        status_code: int = 200,
        json_payload: dict | None = None,
        content: bytes | None = None,
    ):
        """Register a mock response for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        request.read()
        requests_log.append(request)
        key = (request.method, str(request.url))
        if key in responses:
            status, body = responses[key]
            return httpx.Response(status, content=body, headers={"Content-Length": str(len(body))})

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.requests = requests_log  # type: ignore[attr-defined]
    return add_response


@pytest.fixture
def document_payload() -> dict:
    return {
        "description": {"participantInn": "7700000000"},
        "doc_id": "doc-1",
        "doc_status": "DRAFT",
        "doc_type": "LP_INTRODUCE_GOODS",
        "importRequest": True,
        "owner_inn": "7700000001",
        "participant_inn": "7700000000",
        "producer_inn": "7700000002",
        "production_date": "2024-01-15",
        "production_type": "OWN_PRODUCTION",
        "products": [
            {
                "certificate_document": "CONFORMITY_CERTIFICATE",
                "certificate_document_date": "2024-01-10",
                "certificate_document_number": "RU-123",
                "owner_inn": "7700000001",
                "producer_inn": "7700000002",
                "production_date": "2024-01-15",
                "tnved_code": "6401100000",
                "uit_code": "010460043993125621JgXJ5.T",
            }
        ],
        "reg_date": "2024-01-16",
        "reg_number": "42",
    }
