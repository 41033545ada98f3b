"""
End-of-Service Benefit Calculation Module
"""

from .models import (
    TerminationType,
    EmploymentRecord,
    ServicePeriod,
    TierBreakdown,
    GratuityBreakdown,
    BenefitResult,
)
from .settings import GratuityRules, gratuity_rules
from .service_period import calculate_service_period, days_in_month
from .gratuity import (
    round_money,
    calculate_eligible_years,
    calculate_daily_wage,
    split_tiers,
    resignation_multiplier,
)
from .calculator import INELIGIBLE_REASON, calculate, explain_result
from .configuration import build_configuration

__all__ = [
    # Settings
    "GratuityRules",
    "gratuity_rules",
    # Models
    "TerminationType",
    "EmploymentRecord",
    "ServicePeriod",
    "TierBreakdown",
    "GratuityBreakdown",
    "BenefitResult",
    # Service Period
    "calculate_service_period",
    "days_in_month",
    # Gratuity
    "round_money",
    "calculate_eligible_years",
    "calculate_daily_wage",
    "split_tiers",
    "resignation_multiplier",
    # Calculator
    "INELIGIBLE_REASON",
    "calculate",
    "explain_result",
    # Configuration
    "build_configuration",
]
