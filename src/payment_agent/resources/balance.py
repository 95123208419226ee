"""Balance sub-agent."""

from __future__ import annotations

from .base import ResourceAgent, path_segment


class BalanceAgent(ResourceAgent):
    __slots__ = ()

    def get(self, namespace: str) -> dict[str, object] | None:
        return self._call("GET", f"/balance/{path_segment(namespace)}")


__all__ = [
    "BalanceAgent",
]
