"""
Gratuity Rules for the EOSB Calculator.

This module holds every constant the end-of-service benefit formula depends on:
the minimum service period, the two accrual tiers and the resignation penalty
schedule. The defaults follow UAE Labour Law Article 132; they can be
overridden via environment variables for free-zone variants, but the instance
is frozen and cached so the table never changes after process start.

Environment variables use the EOSB_ prefix:
    EOSB_MINIMUM_SERVICE_DAYS=365
    EOSB_FIRST_TIER_DAYS_PER_YEAR=21

Usage:
    from src.service.eosb.settings import gratuity_rules

    # Use the process-wide table
    divisor = gratuity_rules.wage_divisor_days

    # Or build a custom table for testing
    custom = GratuityRules(first_tier_days_per_year=20)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GratuityRules(BaseSettings):
    """
    Rate table for the end-of-service benefit calculation.

    All day counts are calendar days, all multipliers are fractions of the
    raw gratuity (0 = full forfeiture, 1 = no penalty).
    """

    model_config = SettingsConfigDict(
        env_prefix="EOSB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Eligibility ===
    minimum_service_days: int = Field(
        default=365,
        ge=0,
        description="Elapsed days required before any gratuity is due",
    )

    # === Accrual Tiers ===
    first_tier_years: float = Field(
        default=5.0,
        gt=0.0,
        description="Years of service accrued at the first-tier rate",
    )
    first_tier_days_per_year: int = Field(
        default=21,
        ge=0,
        description="Days of wage accrued per year of service in the first tier",
    )
    additional_tier_days_per_year: int = Field(
        default=30,
        ge=0,
        description="Days of wage accrued per year of service beyond the first tier",
    )

    # === Divisors ===
    wage_divisor_days: int = Field(
        default=30,
        gt=0,
        description="Monthly salary is divided by this to get the daily wage",
    )
    days_per_year: int = Field(
        default=365,
        gt=0,
        description="Divisor turning leftover service days into a fraction of a year",
    )

    # === Resignation Penalty (unlimited contracts only) ===
    penalty_forfeit_below_years: float = Field(
        default=1.0,
        ge=0.0,
        description="Resigning below this many eligible years forfeits the gratuity",
    )
    penalty_one_third_below_years: float = Field(
        default=3.0,
        ge=0.0,
        description="Resigning below this many eligible years pays one third",
    )
    penalty_two_thirds_below_years: float = Field(
        default=5.0,
        ge=0.0,
        description="Resigning below this many eligible years pays two thirds",
    )
    penalty_less_than_one_year: float = Field(default=0.0, ge=0.0, le=1.0)
    penalty_less_than_three_years: float = Field(default=1 / 3, ge=0.0, le=1.0)
    penalty_less_than_five_years: float = Field(default=2 / 3, ge=0.0, le=1.0)
    penalty_five_years_or_more: float = Field(default=1.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_penalty_thresholds(self) -> "GratuityRules":
        """Penalty thresholds must be in ascending order."""
        thresholds = (
            self.penalty_forfeit_below_years,
            self.penalty_one_third_below_years,
            self.penalty_two_thirds_below_years,
        )
        if list(thresholds) != sorted(thresholds):
            raise ValueError(
                f"Penalty thresholds must be ascending, got {thresholds}"
            )
        return self

    @property
    def first_tier_rate(self) -> float:
        """First-tier accrual in days of wage per day of service."""
        return self.first_tier_days_per_year / self.days_per_year

    @property
    def additional_tier_rate(self) -> float:
        """Second-tier accrual in days of wage per day of service."""
        return self.additional_tier_days_per_year / self.days_per_year


@lru_cache
def get_gratuity_rules() -> GratuityRules:
    """Get cached gratuity rules instance."""
    return GratuityRules()


gratuity_rules = get_gratuity_rules()
