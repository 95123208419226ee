"""Outbound request construction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx

from .errors import EncodingFailureError, MalformedTargetError

JSON_CONTENT_TYPE = "application/json"

_ALLOWED_SCHEMES = frozenset({"http", "https"})


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """A request that has been built but not yet sent."""

    method: str
    url: httpx.URL
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def build_request(
    method: str,
    url: str,
    body: object = None,
    *,
    headers: Mapping[str, str] | None = None,
) -> RequestDescriptor:
    """Build a request descriptor.

    ``body`` is JSON encoded when it is not ``None``; only then is a
    ``Content-Type`` header set. ``headers`` is where callers add
    authentication or user-agent headers.
    """

    target = parse_target(url)

    merged: dict[str, str] = dict(headers or {})
    content: bytes | None = None
    if body is not None:
        content = encode_body(body)
        merged["Content-Type"] = JSON_CONTENT_TYPE

    return RequestDescriptor(
        method=method.upper(),
        url=target,
        headers=merged,
        content=content,
    )


def parse_target(url: str) -> httpx.URL:
    if not isinstance(url, str):
        raise MalformedTargetError(f"target must be str, got {type(url).__name__}")
    try:
        target = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise MalformedTargetError(f"malformed target {url!r}: {exc}") from exc
    if target.scheme not in _ALLOWED_SCHEMES or not target.host:
        raise MalformedTargetError(f"target must be an absolute http(s) URL, got {url!r}")
    return target


def encode_body(body: object) -> bytes:
    try:
        text = json.dumps(body, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingFailureError(f"request body is not JSON encodable: {exc}") from exc
    return text.encode("utf-8")


__all__ = [
    "JSON_CONTENT_TYPE",
    "RequestDescriptor",
    "build_request",
    "parse_target",
    "encode_body",
]
