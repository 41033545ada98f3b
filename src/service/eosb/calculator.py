"""
Benefit Calculator for the EOSB service.

This module orchestrates the complete calculation:
1. Decompose the service period from the two dates
2. Gate on the minimum service period
3. Derive fractional eligible years
4. Accrue days of wage in two tiers
5. Apply the resignation penalty
6. Round and assemble the result

This is the main entry point for the eosb module. It is a pure function of
its input: no I/O, no hidden state.
"""

from .gratuity import (
    calculate_daily_wage,
    calculate_eligible_years,
    resignation_multiplier,
    round_money,
    split_tiers,
)
from .models import (
    EMPTY_TIER,
    BenefitResult,
    EmploymentRecord,
    GratuityBreakdown,
    TierBreakdown,
)
from .service_period import calculate_service_period
from .settings import GratuityRules, gratuity_rules

INELIGIBLE_REASON = "Minimum service period of 1 year not completed"


def calculate(
    record: EmploymentRecord,
    rules: GratuityRules = gratuity_rules,
) -> BenefitResult:
    """
    Calculate the end-of-service benefit for an employment record.

    Eligibility:
        The exact elapsed day count must reach the minimum service days. An
        ineligible record still reports its service period, with every
        monetary field zeroed and a reason.

    Penalty:
        Only resignations from unlimited contracts are penalised, based on
        the unrounded eligible years. Tier amounts in the breakdown are the
        pre-penalty figures.

    Allowances:
        Carried on the record but not added to the salary; the formula uses
        the basic salary alone.

    Args:
        record: The employment facts (already validated by the caller)
        rules: Gratuity rules (uses defaults if not provided)

    Returns:
        BenefitResult with the service period, amounts and breakdown
    """
    period = calculate_service_period(record.joining_date, record.last_working_day)
    monthly_salary = record.basic_salary

    if period.total_days < rules.minimum_service_days:
        return BenefitResult(
            total_service_years=period.years,
            total_service_months=period.months,
            total_service_days=period.days,
            basic_salary_amount=record.basic_salary,
            total_salary=monthly_salary,
            eligible_years=0,
            gratuity_amount=0,
            breakdown=GratuityBreakdown(
                first_five_years=EMPTY_TIER,
                additional_years=EMPTY_TIER,
            ),
            is_eligible=False,
            reason=INELIGIBLE_REASON,
        )

    eligible_years = calculate_eligible_years(period, rules)
    daily_wage = calculate_daily_wage(monthly_salary, rules)

    first_tier_years, additional_tier_years = split_tiers(eligible_years, rules)
    first_tier_amount = first_tier_years * rules.first_tier_days_per_year * daily_wage
    additional_tier_amount = (
        additional_tier_years * rules.additional_tier_days_per_year * daily_wage
    )

    multiplier = resignation_multiplier(
        eligible_years,
        record.termination_type,
        record.is_unlimited_contract,
        rules,
    )
    gratuity = (first_tier_amount + additional_tier_amount) * multiplier

    return BenefitResult(
        total_service_years=period.years,
        total_service_months=period.months,
        total_service_days=period.days,
        basic_salary_amount=record.basic_salary,
        total_salary=monthly_salary,
        eligible_years=round_money(eligible_years),
        gratuity_amount=round_money(gratuity),
        breakdown=GratuityBreakdown(
            first_five_years=TierBreakdown(
                years=first_tier_years,
                rate=rules.first_tier_days_per_year,
                amount=round_money(first_tier_amount),
            ),
            additional_years=TierBreakdown(
                years=additional_tier_years,
                rate=rules.additional_tier_days_per_year,
                amount=round_money(additional_tier_amount),
            ),
        ),
        is_eligible=True,
        penalty_multiplier=multiplier,
    )


def explain_result(result: BenefitResult) -> str:
    """
    Generate a human-readable explanation of a benefit result.

    Args:
        result: The result to explain

    Returns:
        Multi-line explanation string
    """
    lines = [
        f"Service: {result.total_service_years} years, "
        f"{result.total_service_months} months, {result.total_service_days} days",
    ]

    if not result.is_eligible:
        lines.append(f"Not eligible: {result.reason}")
        return "\n".join(lines)

    first = result.breakdown.first_five_years
    additional = result.breakdown.additional_years
    lines.append(f"Eligible years: {result.eligible_years:.2f}")
    lines.append(f"  - First tier: {first.years:.2f} years x {first.rate} days = {first.amount:.2f}")
    lines.append(
        f"  - Additional tier: {additional.years:.2f} years x {additional.rate} days = {additional.amount:.2f}"
    )
    lines.append(f"Gratuity: {result.gratuity_amount:.2f}")
    return "\n".join(lines)
