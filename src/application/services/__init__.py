"""Application services (use cases)."""

from .eosb_service import EOSBService

__all__ = [
    "EOSBService",
]
