"""Configuration and health Pydantic schemas."""

from pydantic import Field

from .base import CamelModel


class TerminationTypeOptionSchema(CamelModel):
    value: str = Field(..., examples=["resignation"])
    label: str = Field(..., examples=["Resignation"])
    label_ar: str = Field(..., description="Arabic label")


class ContractTypeOptionSchema(CamelModel):
    value: bool = Field(..., examples=[True])
    label: str = Field(..., examples=["Unlimited Contract"])
    label_ar: str = Field(..., description="Arabic label")


class ResignationPenaltySchema(CamelModel):
    """Fraction of the gratuity kept on resignation from an unlimited contract."""

    less_than_one_year: float = Field(..., examples=[0])
    less_than_three_years: float = Field(..., examples=[1 / 3])
    less_than_five_years: float = Field(..., examples=[2 / 3])
    five_years_or_more: float = Field(..., examples=[1])


class CalculationRulesSchema(CamelModel):
    minimum_service_days: int = Field(..., examples=[365])
    first_five_years_rate: float = Field(
        ...,
        description="Days of wage per day of service in the first five years",
        examples=[21 / 365],
    )
    additional_years_rate: float = Field(
        ...,
        description="Days of wage per day of service after five years",
        examples=[30 / 365],
    )
    resignation_penalty: ResignationPenaltySchema


class ConfigurationSchema(CamelModel):
    """Schema for GET /api/eosb/config data."""

    termination_types: list[TerminationTypeOptionSchema]
    contract_types: list[ContractTypeOptionSchema]
    calculation_rules: CalculationRulesSchema


class HealthSchema(CamelModel):
    """Schema for GET /api/eosb/health data."""

    status: str = Field("OK", examples=["OK"])
    timestamp: str = Field(..., examples=["2025-07-02T10:30:00.000Z"])
    version: str = Field(..., examples=["1.0.0"])
