"""Shared helpers for transport construction and body handling."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx

from ..config import TransportConfig

DRAIN_LIMIT_BYTES = 512


@runtime_checkable
class RawSink(Protocol):
    """Destination that receives the response body verbatim."""

    def write(self, data: bytes, /) -> object: ...


def build_default_headers() -> Mapping[str, str]:
    return {
        "Accept": "application/json",
    }


def build_default_timeout(config: TransportConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout_connect_seconds,
        read=config.timeout_read_seconds,
        write=config.timeout_write_seconds,
        pool=config.timeout_pool_seconds,
    )


def is_raw_sink(destination: object) -> bool:
    return not isinstance(destination, type) and isinstance(destination, RawSink)


__all__ = [
    "DRAIN_LIMIT_BYTES",
    "RawSink",
    "build_default_headers",
    "build_default_timeout",
    "is_raw_sink",
]
