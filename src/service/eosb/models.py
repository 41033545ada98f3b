"""
Data models for the EOSB calculation.

These models represent the data structures used throughout the calculation,
from the employment facts supplied by the caller to the final benefit
breakdown returned to them.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class TerminationType(str, Enum):
    """How the employment ended."""
    RESIGNATION = "resignation"
    TERMINATION = "termination"  # Termination by employer
    RETIREMENT = "retirement"
    DEATH = "death"
    DISABILITY = "disability"


@dataclass(frozen=True)
class EmploymentRecord:
    """
    The employment facts a benefit is calculated from.

    Attributes:
        basic_salary: Monthly basic salary in the local currency unit
        termination_type: How the employment ended
        is_unlimited_contract: True for an open-ended contract, False for fixed-term
        joining_date: First day of service
        last_working_day: Last day of service (after joining_date)
        allowances: Monthly allowances; accepted but not part of the formula
    """
    basic_salary: float
    termination_type: TerminationType
    is_unlimited_contract: bool
    joining_date: date
    last_working_day: date
    allowances: Optional[float] = None

    @property
    def is_resignation(self) -> bool:
        return self.termination_type == TerminationType.RESIGNATION


@dataclass(frozen=True)
class ServicePeriod:
    """
    Length of service between two calendar dates.

    total_days is the exact elapsed day count; years, months and days are the
    calendar decomposition (months 0-11, days 0-30).
    """
    total_days: int
    years: int
    months: int
    days: int


@dataclass(frozen=True)
class TierBreakdown:
    """
    Contribution of one accrual tier to the gratuity.

    Attributes:
        years: Years of service counted in this tier (may be fractional)
        rate: Days of wage accrued per year in this tier
        amount: Monetary amount attributed to this tier, before any penalty
    """
    years: float
    rate: int
    amount: float

    def to_dict(self) -> dict:
        return {"years": self.years, "rate": self.rate, "amount": self.amount}


@dataclass(frozen=True)
class GratuityBreakdown:
    first_five_years: TierBreakdown
    additional_years: TierBreakdown

    def to_dict(self) -> dict:
        return {
            "firstFiveYears": self.first_five_years.to_dict(),
            "additionalYears": self.additional_years.to_dict(),
        }


EMPTY_TIER = TierBreakdown(years=0, rate=0, amount=0)


@dataclass(frozen=True)
class BenefitResult:
    """
    The end-of-service benefit for one employment record.

    Attributes:
        total_service_years: Whole years of service
        total_service_months: Whole months remaining after the years
        total_service_days: Days remaining after the months
        basic_salary_amount: The basic salary the benefit was calculated on
        total_salary: Monthly salary used by the formula (basic salary alone)
        eligible_years: Fractional years of service, rounded to 2 dp
        gratuity_amount: Final benefit after any penalty, rounded to 2 dp
        breakdown: Per-tier contribution to the gratuity
        is_eligible: False when the minimum service period was not completed
        reason: Why the employee is not eligible (None when eligible)
        penalty_multiplier: Fraction of the raw gratuity kept after the
            resignation penalty (not serialized)
    """
    total_service_years: int
    total_service_months: int
    total_service_days: int
    basic_salary_amount: float
    total_salary: float
    eligible_years: float
    gratuity_amount: float
    breakdown: GratuityBreakdown
    is_eligible: bool
    reason: Optional[str] = None
    penalty_multiplier: float = 1.0

    def to_dict(self) -> dict:
        """Convert to API response format."""
        data = {
            "totalServiceYears": self.total_service_years,
            "totalServiceMonths": self.total_service_months,
            "totalServiceDays": self.total_service_days,
            "basicSalaryAmount": self.basic_salary_amount,
            "totalSalary": self.total_salary,
            "eligibleYears": self.eligible_years,
            "gratuityAmount": self.gratuity_amount,
            "breakdown": self.breakdown.to_dict(),
            "isEligible": self.is_eligible,
        }
        if self.reason is not None:
            data["reason"] = self.reason
        return data
