"""Public package exports for the payment agent."""

from .agent import Agent, default_agent, new_agent
from .config import AgentConfig, TransportConfig
from .core.errcode import ErrorMessage, code_for_status, err_text, error_new
from .core.errors import (
    AgentClosedError,
    EncodingFailureError,
    ErrorDetail,
    ErrorResponse,
    MalformedTargetError,
    PaymentApiError,
    PaymentDecodeError,
    PaymentTransportError,
)

__all__ = [
    "Agent",
    "AgentConfig",
    "TransportConfig",
    "new_agent",
    "default_agent",
    "ErrorMessage",
    "err_text",
    "error_new",
    "code_for_status",
    "PaymentApiError",
    "MalformedTargetError",
    "EncodingFailureError",
    "PaymentTransportError",
    "PaymentDecodeError",
    "AgentClosedError",
    "ErrorDetail",
    "ErrorResponse",
]
