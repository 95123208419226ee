"""Checkout sub-agent."""

from __future__ import annotations

from collections.abc import Mapping

from .base import ResourceAgent


class CheckoutAgent(ResourceAgent):
    __slots__ = ()

    def create(self, order: Mapping[str, object]) -> dict[str, object] | None:
        """Place an order; ``order`` is sent as the JSON body."""

        return self._call("POST", "/checkout", body=dict(order))


__all__ = [
    "CheckoutAgent",
]
