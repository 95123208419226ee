"""Account sub-agent."""

from __future__ import annotations

from .base import ResourceAgent


class AccountAgent(ResourceAgent):
    __slots__ = ()

    def get(self, namespace: str) -> dict[str, object] | None:
        return self._call("GET", "/account", params={"namespace": namespace})


__all__ = [
    "AccountAgent",
]
