"""Recharge sub-agent."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.decoders import as_list
from .base import ResourceAgent


class RechargeAgent(ResourceAgent):
    __slots__ = ()

    def create(self, payment: Mapping[str, object]) -> dict[str, object] | None:
        return self._call("POST", "/recharge", body=dict(payment))

    def list(self, namespace: str) -> list[object] | None:
        return self._call("GET", "/recharge", params={"namespace": namespace}, decoder=as_list)


__all__ = [
    "RechargeAgent",
]
