"""Calculation-related domain exceptions."""

from .base import DomainException


class CalculationFailedException(DomainException):
    """
    Raised when computing a benefit raises unexpectedly.

    The original exception text is kept in ``detail`` and only shown to
    clients outside production.
    """

    status_code = 500
    error = "Internal server error"

    def __init__(self, detail: str):
        super().__init__(
            message="Failed to calculate EOSB",
            code="CALCULATION_FAILED",
        )
        self.detail = detail
