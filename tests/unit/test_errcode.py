from __future__ import annotations

import pytest

from payment_agent.core.errcode import (
    ERR_CODE_ACTION_NOT_SUPPORT,
    ERR_CODE_ADMIN_NOT_PRESENTED,
    ERR_CODE_BAD_REQUEST,
    ERR_CODE_FORBIDDEN,
    ERR_CODE_INVALID_TOKEN,
    ERR_CODE_METHOD_NOT_ALLOWED,
    ERR_CODE_NOT_FOUND,
    ERR_CODE_OK,
    ERR_CODE_PERMISSION_DENIED,
    ERR_CODE_PLAN_NOT_FOUND,
    ERR_CODE_REGION_NOT_FOUND,
    ERR_CODE_SERVICE_UNAVAILABLE,
    ERR_CODE_TIMEOUT,
    ERR_CODE_UNAUTHORIZED,
    ERR_CODE_UNKNOWN_ERROR,
    ERR_TEXT,
    ErrorMessage,
    code_for_status,
    err_text,
    error_new,
)
from payment_agent.core.errors import PaymentApiError


@pytest.mark.parametrize(
    ("code", "text"),
    [
        (ERR_CODE_OK, "OK"),
        (ERR_CODE_BAD_REQUEST, "Bad request"),
        (ERR_CODE_ACTION_NOT_SUPPORT, "Not supported action"),
        (ERR_CODE_INVALID_TOKEN, "Invalid token"),
        (ERR_CODE_UNAUTHORIZED, "Unauthorized"),
        (ERR_CODE_FORBIDDEN, "Forbidden"),
        (ERR_CODE_PERMISSION_DENIED, "Permission denied"),
        (ERR_CODE_NOT_FOUND, "Not found"),
        (ERR_CODE_PLAN_NOT_FOUND, "No such plan"),
        (ERR_CODE_REGION_NOT_FOUND, "Region not exist"),
        (ERR_CODE_METHOD_NOT_ALLOWED, "Method not allowed"),
        (ERR_CODE_TIMEOUT, "Request timeout"),
        (ERR_CODE_ADMIN_NOT_PRESENTED, "Admin not presented"),
        (ERR_CODE_SERVICE_UNAVAILABLE, "Service unavailable"),
        (ERR_CODE_UNKNOWN_ERROR, "Unknown error"),
    ],
)
def test_err_text_returns_registered_text(code: int, text: str):
    assert err_text(code) == text


def test_registry_covers_every_listed_code():
    assert len(ERR_TEXT) == 15
    assert ERR_CODE_UNKNOWN_ERROR == 140010


@pytest.mark.parametrize("code", [0, -1, 1201, 14005, 999999])
def test_err_text_falls_back_for_unregistered_codes(code: int):
    assert err_text(code) == "Unknown error"


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ERR_TEXT[1] = "nope"  # type: ignore[index]


@pytest.mark.parametrize("code", sorted(ERR_TEXT) + [42])
def test_error_new_renders_code_and_text(code: int):
    err = error_new(code)
    assert isinstance(err, ErrorMessage)
    assert isinstance(err, PaymentApiError)
    assert err.code == code
    assert str(err) == f"[{code}] {err_text(code)}"


def test_error_new_can_be_raised():
    with pytest.raises(ErrorMessage, match=r"^\[14040\] No such plan$"):
        raise error_new(ERR_CODE_PLAN_NOT_FOUND)


@pytest.mark.parametrize(
    ("http_status", "expected"),
    [
        (200, ERR_CODE_OK),
        (204, ERR_CODE_OK),
        (400, ERR_CODE_BAD_REQUEST),
        (401, ERR_CODE_UNAUTHORIZED),
        (403, ERR_CODE_FORBIDDEN),
        (404, ERR_CODE_NOT_FOUND),
        (405, ERR_CODE_METHOD_NOT_ALLOWED),
        (408, ERR_CODE_TIMEOUT),
        (503, ERR_CODE_SERVICE_UNAVAILABLE),
        (500, ERR_CODE_UNKNOWN_ERROR),
        (302, ERR_CODE_UNKNOWN_ERROR),
        (None, ERR_CODE_UNKNOWN_ERROR),
    ],
)
def test_code_for_status(http_status: int | None, expected: int):
    assert code_for_status(http_status) == expected
