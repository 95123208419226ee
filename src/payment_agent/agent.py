"""Public agent entrypoint."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from types import TracebackType
from typing import TypeVar
from urllib.parse import urlencode

from .config import AgentConfig
from .core.errors import AgentClosedError, PaymentValidationError
from .core.request import RequestDescriptor, build_request
from .core.transport import Decoder, SyncTransport
from .core.transport_shared import RawSink
from .resources import (
    AccountAgent,
    AmountAgent,
    BalanceAgent,
    CheckoutAgent,
    CouponAgent,
    MarketAgent,
    RechargeAgent,
)

T = TypeVar("T")

_default_lock = threading.Lock()
_default_transport: SyncTransport | None = None
_default_agent: "Agent | None" = None


def validate_agent_config(config: AgentConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise PaymentValidationError(str(exc)) from exc


class Agent:
    """Manages communication with the payment components API.

    Every sub-agent (``recharge``, ``checkout``, ``balance``, ``market``,
    ``amount``, ``account``, ``coupon``) is a view over this agent and
    dispatches through its single transport.
    """

    def __init__(
        self,
        transport: SyncTransport,
        *,
        config: AgentConfig | None = None,
        owns_transport: bool = False,
    ) -> None:
        self._config = config or AgentConfig()
        validate_agent_config(self._config)

        self._transport = transport
        self._owns_transport = owns_transport
        self._closed = False

        self.account = AccountAgent(self)
        self.amount = AmountAgent(self)
        self.balance = BalanceAgent(self)
        self.checkout = CheckoutAgent(self)
        self.coupon = CouponAgent(self)
        self.market = MarketAgent(self)
        self.recharge = RechargeAgent(self)

    @property
    def config(self) -> AgentConfig:
        return self._config

    @property
    def transport(self) -> SyncTransport:
        return self._transport

    @property
    def closed(self) -> bool:
        return self._closed

    def url_for(self, path: str, params: Mapping[str, str] | None = None) -> str:
        """Resolve ``path`` against the configured base URL."""

        url = self._config.base_url.rstrip("/") + "/" + path.lstrip("/")
        if params:
            url += "?" + urlencode(params)
        return url

    def new_request(self, method: str, url: str, body: object = None) -> RequestDescriptor:
        return build_request(method, url, body)

    def send(
        self,
        descriptor: RequestDescriptor,
        destination: RawSink | Decoder[T] | None = None,
    ) -> T | int | None:
        self._ensure_open()
        return self._transport.send(descriptor, destination)

    def set_follow_redirects(self, follow: bool) -> None:
        self._ensure_open()
        self._transport.set_follow_redirects(follow)

    def _ensure_open(self) -> None:
        if self._closed:
            raise AgentClosedError("Agent is already closed")

    def close(self) -> None:
        if self._closed:
            return
        if self._owns_transport:
            self._transport.close()
        self._closed = True

    def __enter__(self) -> "Agent":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


def default_transport() -> SyncTransport:
    """Return the process-wide transport, creating it on first use."""

    global _default_transport
    with _default_lock:
        if _default_transport is None or _default_transport.closed:
            _default_transport = SyncTransport(AgentConfig())
        return _default_transport


def new_agent(
    transport: SyncTransport | None = None,
    *,
    config: AgentConfig | None = None,
) -> Agent:
    """Build an agent with every sub-agent wired to one transport.

    Without ``transport`` the agent uses :func:`default_transport`, unless a
    ``config`` is given, in which case it gets a transport of its own that
    ``close()`` releases.
    """

    if transport is not None:
        return Agent(transport, config=config)
    if config is None:
        return Agent(default_transport())
    validate_agent_config(config)
    return Agent(SyncTransport(config), config=config, owns_transport=True)


def default_agent() -> Agent:
    """Return the process-wide agent backed by :func:`default_transport`."""

    global _default_agent
    transport = default_transport()
    with _default_lock:
        if (
            _default_agent is None
            or _default_agent.closed
            or _default_agent.transport is not transport
        ):
            _default_agent = Agent(transport)
        return _default_agent


__all__ = [
    "Agent",
    "new_agent",
    "default_agent",
    "default_transport",
    "validate_agent_config",
]
