from typing import Any

import httpx


def assert_success_envelope(response: httpx.Response, message: str | None = None) -> dict[str, Any]:
    """Assert a 200 report envelope and return its data."""
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["status"] == "success"
    if message is not None:
        assert body["message"] == message
    data: dict[str, Any] = body["data"]
    return data


def assert_error_envelope(response: httpx.Response, status_code: int, code: str) -> dict[str, Any]:
    """Assert an error envelope with the given HTTP status and error code."""
    assert response.status_code == status_code, response.text
    body: dict[str, Any] = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert body["message"]
    return body
