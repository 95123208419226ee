"""Status validation and backend error parsing."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Protocol

import httpx

from .errors import ErrorDetail, ErrorResponse


class _RequestInfo(Protocol):
    method: str
    url: object


class CheckableResponse(Protocol):
    status_code: int
    request: _RequestInfo

    def read(self) -> bytes: ...


def is_success_status(status: int) -> bool:
    return 200 <= status <= 299


def check_response(response: CheckableResponse) -> ErrorResponse | None:
    """Return ``None`` for 2xx responses, an ``ErrorResponse`` otherwise.

    Error bodies are expected to be empty or to match
    ``{"message": ..., "errors": [{"resource", "field", "code", "message"}]}``.
    Anything else is ignored: the status code alone still yields an error.
    """

    status = response.status_code
    if is_success_status(status):
        return None

    message, details = parse_error_body(_read_body(response))
    request = response.request
    return ErrorResponse(
        method=str(request.method),
        url=str(request.url),
        http_status=status,
        message=message,
        errors=details,
    )


def parse_error_body(data: bytes) -> tuple[str, tuple[ErrorDetail, ...]]:
    if not data:
        return "", ()
    try:
        payload = json.loads(data)
    except ValueError:
        return "", ()
    if not isinstance(payload, Mapping):
        return "", ()

    message = _as_text(payload.get("message"))
    raw_errors = payload.get("errors")
    if not isinstance(raw_errors, list):
        return message, ()
    details = tuple(
        ErrorDetail(
            resource=_as_text(entry.get("resource")),
            field=_as_text(entry.get("field")),
            code=_as_text(entry.get("code")),
            message=_as_text(entry.get("message")),
        )
        for entry in raw_errors
        if isinstance(entry, Mapping)
    )
    return message, details


def _read_body(response: CheckableResponse) -> bytes:
    try:
        return response.read()
    except httpx.HTTPError:
        return b""


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else ""


__all__ = [
    "CheckableResponse",
    "is_success_status",
    "check_response",
    "parse_error_body",
]
