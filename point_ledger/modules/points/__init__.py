"""Point domain exports"""

from .exceptions import (
    BelowMinimumSpendError,
    InsufficientBalanceError,
    InvalidChargeUnitError,
    InvalidSpendUnitError,
    MaxBalanceExceededError,
    NonPositiveAmountError,
    PointError,
    PointRejectedError,
)
from .locks import KeyLockManager
from .models import PointBalance, PointHistory, TransactionKind
from .policy import DEFAULT_POLICY, PointPolicy, Rejection, RejectionReason, compute_charge, compute_spend
from .service import PointService

__all__ = [
    "BelowMinimumSpendError",
    "InsufficientBalanceError",
    "InvalidChargeUnitError",
    "InvalidSpendUnitError",
    "MaxBalanceExceededError",
    "NonPositiveAmountError",
    "PointError",
    "PointRejectedError",
    "KeyLockManager",
    "PointBalance",
    "PointHistory",
    "TransactionKind",
    "DEFAULT_POLICY",
    "PointPolicy",
    "Rejection",
    "RejectionReason",
    "compute_charge",
    "compute_spend",
    "PointService",
]
