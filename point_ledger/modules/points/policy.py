"""Business rules for charging and spending points.

Every function here is pure: it takes the current balance and a requested
amount and returns either the resulting balance or a :class:`Rejection`.
Amount-shape checks (sign, unit, minimum) always run before the balance
ceiling/floor checks, so a malformed request is rejected the same way no
matter what the account currently holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from point_ledger.core.config import PointSettings


class RejectionReason(str, Enum):
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    INVALID_CHARGE_UNIT = "INVALID_CHARGE_UNIT"
    INVALID_SPEND_UNIT = "INVALID_SPEND_UNIT"
    MAX_BALANCE_EXCEEDED = "MAX_BALANCE_EXCEEDED"
    BELOW_MINIMUM_SPEND = "BELOW_MINIMUM_SPEND"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"


@dataclass(frozen=True, slots=True)
class Rejection:
    """A validation failure that blocks a mutation before any state change.

    ``limit`` is the rule's bound (unit, ceiling or minimum) where one applies.
    """

    reason: RejectionReason
    amount: int
    current: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PointPolicy:
    charge_unit: int = 5_000
    spend_unit: int = 100
    max_balance: int = 100_000
    min_spend: int = 500
    history_limit: int = 5

    @classmethod
    def from_settings(cls, settings: "PointSettings") -> "PointPolicy":
        return cls(
            charge_unit=settings.charge_unit,
            spend_unit=settings.spend_unit,
            max_balance=settings.max_balance,
            min_spend=settings.min_spend,
            history_limit=settings.history_limit,
        )


DEFAULT_POLICY = PointPolicy()

Outcome = Union[int, Rejection]


def compute_charge(current: int, amount: int, policy: PointPolicy = DEFAULT_POLICY) -> Outcome:
    if amount <= 0:
        return Rejection(RejectionReason.NON_POSITIVE_AMOUNT, amount, current)
    if amount % policy.charge_unit != 0:
        return Rejection(RejectionReason.INVALID_CHARGE_UNIT, amount, current, policy.charge_unit)
    if current + amount > policy.max_balance:
        return Rejection(RejectionReason.MAX_BALANCE_EXCEEDED, amount, current, policy.max_balance)
    return current + amount


def compute_spend(current: int, amount: int, policy: PointPolicy = DEFAULT_POLICY) -> Outcome:
    if amount <= 0:
        return Rejection(RejectionReason.NON_POSITIVE_AMOUNT, amount, current)
    if amount % policy.spend_unit != 0:
        return Rejection(RejectionReason.INVALID_SPEND_UNIT, amount, current, policy.spend_unit)
    if amount < policy.min_spend:
        return Rejection(RejectionReason.BELOW_MINIMUM_SPEND, amount, current, policy.min_spend)
    if current < amount:
        return Rejection(RejectionReason.INSUFFICIENT_BALANCE, amount, current)
    return current - amount
