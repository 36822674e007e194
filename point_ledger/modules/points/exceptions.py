"""Point domain specific exceptions."""

from __future__ import annotations

from .policy import Rejection, RejectionReason


class PointError(Exception):
    """Base class for point domain errors."""


class PointRejectedError(PointError):
    """Raised when a charge or spend request breaks a business rule.

    The originating :class:`Rejection` is kept on ``rejection`` so callers can
    branch on ``rejection.reason`` instead of the exception type.
    """

    def __init__(self, rejection: Rejection, message: str) -> None:
        super().__init__(message)
        self.rejection = rejection

    @property
    def reason(self) -> RejectionReason:
        return self.rejection.reason


class NonPositiveAmountError(PointRejectedError):
    """Raised when the requested amount is zero or negative."""


class InvalidChargeUnitError(PointRejectedError):
    """Raised when a charge is not a multiple of the charge unit."""


class InvalidSpendUnitError(PointRejectedError):
    """Raised when a spend is not a multiple of the spend unit."""


class MaxBalanceExceededError(PointRejectedError):
    """Raised when a charge would push the balance over the ceiling."""


class BelowMinimumSpendError(PointRejectedError):
    """Raised when a spend is smaller than the minimum spend."""


class InsufficientBalanceError(PointRejectedError):
    """Raised when a spend is larger than the current balance."""


def _describe(rejection: Rejection) -> str:
    reason = rejection.reason
    if reason is RejectionReason.NON_POSITIVE_AMOUNT:
        return f"Point amount must be positive. Requested: {rejection.amount}"
    if reason is RejectionReason.INVALID_CHARGE_UNIT:
        return f"Points can only be charged in units of {rejection.limit}. Requested: {rejection.amount}"
    if reason is RejectionReason.INVALID_SPEND_UNIT:
        return f"Points can only be spent in units of {rejection.limit}. Requested: {rejection.amount}"
    if reason is RejectionReason.MAX_BALANCE_EXCEEDED:
        return (
            f"Balance cannot exceed the maximum. Current: {rejection.current}, "
            f"charge: {rejection.amount}, maximum: {rejection.limit}"
        )
    if reason is RejectionReason.BELOW_MINIMUM_SPEND:
        return f"Minimum spend is {rejection.limit}. Requested: {rejection.amount}"
    return f"Insufficient points. Current: {rejection.current}, requested: {rejection.amount}"


_ERRORS: dict[RejectionReason, type[PointRejectedError]] = {
    RejectionReason.NON_POSITIVE_AMOUNT: NonPositiveAmountError,
    RejectionReason.INVALID_CHARGE_UNIT: InvalidChargeUnitError,
    RejectionReason.INVALID_SPEND_UNIT: InvalidSpendUnitError,
    RejectionReason.MAX_BALANCE_EXCEEDED: MaxBalanceExceededError,
    RejectionReason.BELOW_MINIMUM_SPEND: BelowMinimumSpendError,
    RejectionReason.INSUFFICIENT_BALANCE: InsufficientBalanceError,
}


def rejection_error(rejection: Rejection) -> PointRejectedError:
    """Build the exception matching ``rejection.reason``."""
    return _ERRORS[rejection.reason](rejection, _describe(rejection))
