"""Amount (transaction record) sub-agent."""

from __future__ import annotations

from ..core.decoders import as_list
from .base import ResourceAgent, path_segment


class AmountAgent(ResourceAgent):
    __slots__ = ()

    def list(self, namespace: str) -> list[object] | None:
        return self._call("GET", "/amounts", params={"namespace": namespace}, decoder=as_list)

    def get(self, amount_id: str) -> dict[str, object] | None:
        return self._call("GET", f"/amounts/{path_segment(amount_id)}")


__all__ = [
    "AmountAgent",
]
