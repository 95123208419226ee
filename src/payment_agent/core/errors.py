"""Error types raised by the payment agent."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class PaymentApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class PaymentRequestError(PaymentApiError):
    """Request could not be built; nothing was sent."""


class MalformedTargetError(PaymentRequestError):
    """Target is not an absolute http(s) URL."""


class EncodingFailureError(PaymentRequestError):
    """Request body could not be JSON encoded."""


class PaymentValidationError(PaymentRequestError):
    """Invalid configuration or input."""


class PaymentTransportError(PaymentApiError):
    """Network/transport-level failure."""


class PaymentDecodeError(PaymentApiError):
    """Successful response whose body could not be decoded."""


class AgentClosedError(PaymentApiError):
    """Raised when an agent is used after close."""


@dataclass(slots=True, frozen=True)
class ErrorDetail:
    """One entry of the backend's ``errors`` list."""

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorResponse(PaymentApiError):
    """Backend answered with a status outside 200..299."""

    def __init__(
        self,
        *,
        method: str,
        url: str,
        http_status: int,
        message: str = "",
        errors: Sequence[ErrorDetail] = (),
    ) -> None:
        self.method = method
        self.url = url
        self.http_status = http_status
        self.message = message
        self.errors = tuple(errors)
        super().__init__(self._render(), http_status=http_status, cause="backend")

    def _render(self) -> str:
        details = "[" + ", ".join(repr(detail) for detail in self.errors) + "]"
        return f"{self.method} {self.url}: {self.http_status} {self.message} {details}"

    def __str__(self) -> str:
        return self._render()


__all__ = [
    "PaymentApiError",
    "PaymentRequestError",
    "MalformedTargetError",
    "EncodingFailureError",
    "PaymentValidationError",
    "PaymentTransportError",
    "PaymentDecodeError",
    "AgentClosedError",
    "ErrorDetail",
    "ErrorResponse",
]
