"""Market (plan catalogue) sub-agent."""

from __future__ import annotations

from .base import ResourceAgent


class MarketAgent(ResourceAgent):
    __slots__ = ()

    def get(self, region: str | None = None) -> dict[str, object] | None:
        params = {"region": region} if region else None
        return self._call("GET", "/market", params=params)


__all__ = [
    "MarketAgent",
]
