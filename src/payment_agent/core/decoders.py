"""Payload decoders usable as ``send`` destinations."""

from __future__ import annotations

from .errors import PaymentDecodeError


def as_object(payload: object) -> dict[str, object]:
    if not isinstance(payload, dict):
        raise PaymentDecodeError("response JSON root must be an object")
    if any(not isinstance(key, str) for key in payload):
        raise PaymentDecodeError("response JSON object keys must be strings")
    return payload


def as_list(payload: object) -> list[object]:
    if not isinstance(payload, list):
        raise PaymentDecodeError("response JSON root must be an array")
    return payload


def as_json(payload: object) -> object:
    return payload


__all__ = [
    "as_object",
    "as_list",
    "as_json",
]
