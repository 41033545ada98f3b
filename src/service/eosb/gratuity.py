"""
Gratuity Accrual for the EOSB Calculator.

This module turns a service period into money: the fractional eligible
years, the two-tier day accrual, the resignation penalty multiplier and the
cent rounding applied to every monetary figure.

Formula (UAE Labour Law Article 132):
    Gratuity = (Monthly Salary / 30) x Eligible Days
    First 5 years: 21 days per year
    After 5 years: 30 days per year
"""

import math
from typing import Tuple

from .models import ServicePeriod, TerminationType
from .settings import GratuityRules, gratuity_rules


def round_money(value: float) -> float:
    """
    Round to 2 decimal places, halves away from zero.

    Non-finite values, and values too large to scale by 100, are returned
    unchanged.
    """
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / 100


def calculate_eligible_years(
    period: ServicePeriod,
    rules: GratuityRules = gratuity_rules,
) -> float:
    """
    Fractional years of service used by the accrual tiers.

    Months count as twelfths of a year; leftover days are divided by a fixed
    365-day year rather than by the length of the month they fall in.
    """
    return period.years + period.months / 12 + period.days / rules.days_per_year


def calculate_daily_wage(
    monthly_salary: float,
    rules: GratuityRules = gratuity_rules,
) -> float:
    """Daily wage assuming a fixed 30-day month."""
    return monthly_salary / rules.wage_divisor_days


def split_tiers(
    eligible_years: float,
    rules: GratuityRules = gratuity_rules,
) -> Tuple[float, float]:
    """
    Split eligible years between the first and additional accrual tiers.

    Args:
        eligible_years: Fractional years of service
        rules: Gratuity rules (uses defaults if not provided)

    Returns:
        (first_tier_years, additional_tier_years)
    """
    first_tier_years = min(eligible_years, rules.first_tier_years)
    if eligible_years > rules.first_tier_years:
        additional_tier_years = eligible_years - rules.first_tier_years
    else:
        additional_tier_years = 0
    return first_tier_years, additional_tier_years


def resignation_multiplier(
    eligible_years: float,
    termination_type: TerminationType,
    is_unlimited_contract: bool,
    rules: GratuityRules = gratuity_rules,
) -> float:
    """
    Fraction of the raw gratuity kept after the resignation penalty.

    The penalty only applies to resignations from unlimited contracts; every
    other case keeps the full amount.

    Args:
        eligible_years: Fractional (unrounded) years of service
        termination_type: How the employment ended
        is_unlimited_contract: Whether the contract was open-ended
        rules: Gratuity rules (uses defaults if not provided)

    Returns:
        Multiplier between 0 and 1
    """
    if termination_type != TerminationType.RESIGNATION or not is_unlimited_contract:
        return 1.0

    if eligible_years < rules.penalty_forfeit_below_years:
        return rules.penalty_less_than_one_year
    elif eligible_years < rules.penalty_one_third_below_years:
        return rules.penalty_less_than_three_years
    elif eligible_years < rules.penalty_two_thirds_below_years:
        return rules.penalty_less_than_five_years
    else:
        return rules.penalty_five_years_or_more
