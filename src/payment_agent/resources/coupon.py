"""Coupon sub-agent."""

from __future__ import annotations

from .base import ResourceAgent, path_segment


class CouponAgent(ResourceAgent):
    __slots__ = ()

    def get(self, serial: str) -> dict[str, object] | None:
        return self._call("GET", f"/coupons/{path_segment(serial)}")

    def use(self, serial: str, *, code: str, namespace: str) -> dict[str, object] | None:
        """Redeem coupon ``serial`` into ``namespace``'s balance."""

        return self._call(
            "PUT",
            f"/coupons/use/{path_segment(serial)}",
            body={"code": code, "namespace": namespace},
        )


__all__ = [
    "CouponAgent",
]
