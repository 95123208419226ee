"""Resource sub-agents sharing one agent."""

from .account import AccountAgent
from .amount import AmountAgent
from .balance import BalanceAgent
from .base import ResourceAgent
from .checkout import CheckoutAgent
from .coupon import CouponAgent
from .market import MarketAgent
from .recharge import RechargeAgent

__all__ = [
    "ResourceAgent",
    "AccountAgent",
    "AmountAgent",
    "BalanceAgent",
    "CheckoutAgent",
    "CouponAgent",
    "MarketAgent",
    "RechargeAgent",
]
