"""Registry of payment error codes and their texts."""

from __future__ import annotations

from types import MappingProxyType

from .errors import PaymentApiError

ERR_CODE_OK = 1200
ERR_CODE_BAD_REQUEST = 1400
ERR_CODE_ACTION_NOT_SUPPORT = 14003
ERR_CODE_INVALID_TOKEN = 14004
ERR_CODE_UNAUTHORIZED = 1401
ERR_CODE_FORBIDDEN = 1403
ERR_CODE_PERMISSION_DENIED = 14030
ERR_CODE_NOT_FOUND = 1404
ERR_CODE_PLAN_NOT_FOUND = 14040
ERR_CODE_REGION_NOT_FOUND = 14041
ERR_CODE_METHOD_NOT_ALLOWED = 1405
ERR_CODE_TIMEOUT = 1408
ERR_CODE_ADMIN_NOT_PRESENTED = 15000
ERR_CODE_SERVICE_UNAVAILABLE = 1503

ERR_CODE_UNKNOWN_ERROR = 140010

ERR_TEXT = MappingProxyType(
    {
        ERR_CODE_OK: "OK",
        ERR_CODE_BAD_REQUEST: "Bad request",
        ERR_CODE_ACTION_NOT_SUPPORT: "Not supported action",
        ERR_CODE_INVALID_TOKEN: "Invalid token",
        ERR_CODE_UNAUTHORIZED: "Unauthorized",
        ERR_CODE_FORBIDDEN: "Forbidden",
        ERR_CODE_PERMISSION_DENIED: "Permission denied",
        ERR_CODE_NOT_FOUND: "Not found",
        ERR_CODE_PLAN_NOT_FOUND: "No such plan",
        ERR_CODE_REGION_NOT_FOUND: "Region not exist",
        ERR_CODE_METHOD_NOT_ALLOWED: "Method not allowed",
        ERR_CODE_TIMEOUT: "Request timeout",
        ERR_CODE_ADMIN_NOT_PRESENTED: "Admin not presented",
        ERR_CODE_SERVICE_UNAVAILABLE: "Service unavailable",
        ERR_CODE_UNKNOWN_ERROR: "Unknown error",
    }
)

_STATUS_CODES = MappingProxyType(
    {
        400: ERR_CODE_BAD_REQUEST,
        401: ERR_CODE_UNAUTHORIZED,
        403: ERR_CODE_FORBIDDEN,
        404: ERR_CODE_NOT_FOUND,
        405: ERR_CODE_METHOD_NOT_ALLOWED,
        408: ERR_CODE_TIMEOUT,
        503: ERR_CODE_SERVICE_UNAVAILABLE,
    }
)


def err_text(code: int) -> str:
    return ERR_TEXT.get(code, ERR_TEXT[ERR_CODE_UNKNOWN_ERROR])


class ErrorMessage(PaymentApiError):
    """Error value identified by a registry code."""

    def __init__(self, code: int) -> None:
        self.code = code
        self.message = err_text(code)
        super().__init__(f"[{self.code}] {self.message}")


def error_new(code: int) -> ErrorMessage:
    return ErrorMessage(code)


def code_for_status(http_status: int | None) -> int:
    """Map an HTTP status to the closest registry code."""

    if http_status is not None and 200 <= http_status <= 299:
        return ERR_CODE_OK
    return _STATUS_CODES.get(http_status, ERR_CODE_UNKNOWN_ERROR)


__all__ = [
    "ERR_CODE_OK",
    "ERR_CODE_BAD_REQUEST",
    "ERR_CODE_ACTION_NOT_SUPPORT",
    "ERR_CODE_INVALID_TOKEN",
    "ERR_CODE_UNAUTHORIZED",
    "ERR_CODE_FORBIDDEN",
    "ERR_CODE_PERMISSION_DENIED",
    "ERR_CODE_NOT_FOUND",
    "ERR_CODE_PLAN_NOT_FOUND",
    "ERR_CODE_REGION_NOT_FOUND",
    "ERR_CODE_METHOD_NOT_ALLOWED",
    "ERR_CODE_TIMEOUT",
    "ERR_CODE_ADMIN_NOT_PRESENTED",
    "ERR_CODE_SERVICE_UNAVAILABLE",
    "ERR_CODE_UNKNOWN_ERROR",
    "ERR_TEXT",
    "ErrorMessage",
    "err_text",
    "error_new",
    "code_for_status",
]
