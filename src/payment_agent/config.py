"""Agent configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "http://localhost:7071"

_ENV_PREFIX = "PAYMENT_AGENT_"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0
    follow_redirects: bool = True

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")
        if not isinstance(self.follow_redirects, bool):
            raise ValueError("transport.follow_redirects must be bool")


@dataclass(slots=True, frozen=True)
class AgentConfig:
    """Runtime configuration for the payment agent."""

    base_url: str = DEFAULT_BASE_URL

    transport: TransportConfig = field(default_factory=TransportConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AgentConfig":
        """Build a config from ``PAYMENT_AGENT_*`` environment variables.

        Unset variables keep their defaults.
        """

        env = os.environ if environ is None else environ
        defaults = TransportConfig()
        transport = TransportConfig(
            timeout_connect_seconds=_env_float(
                env, "TIMEOUT_CONNECT_SECONDS", defaults.timeout_connect_seconds
            ),
            timeout_read_seconds=_env_float(
                env, "TIMEOUT_READ_SECONDS", defaults.timeout_read_seconds
            ),
            follow_redirects=_env_bool(env, "FOLLOW_REDIRECTS", defaults.follow_redirects),
        )
        return cls(
            base_url=env.get(_ENV_PREFIX + "BASE_URL", DEFAULT_BASE_URL),
            transport=transport,
        )

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{_ENV_PREFIX}{name} must be a boolean, got {raw!r}")


__all__ = [
    "DEFAULT_BASE_URL",
    "TransportConfig",
    "AgentConfig",
]
