"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from src.application.services import EOSBService
from src.service.eosb import GratuityRules, gratuity_rules


def get_gratuity_rules() -> GratuityRules:
    """Get the process-wide gratuity rate table."""
    return gratuity_rules


def get_eosb_service(
    rules: Annotated[GratuityRules, Depends(get_gratuity_rules)],
) -> EOSBService:
    """Get an EOSBService bound to the rate table."""
    return EOSBService(rules=rules)
