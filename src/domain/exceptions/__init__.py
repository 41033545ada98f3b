"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .calculation import CalculationFailedException

__all__ = [
    "DomainException",
    "CalculationFailedException",
]
