"""Calculation-related Pydantic schemas."""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import (
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from src.service.eosb import EmploymentRecord, TerminationType
from .base import CamelModel

LAST_DAY_ORDER_MESSAGE = "Last working day must be after joining date"

_date_adapter = TypeAdapter(date)


def _calendar_date(value: Any) -> Any:
    """Reduce an ISO 8601 timestamp string to its date; pass anything else through."""
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


def _raw_date(data: dict, field: str) -> Optional[date]:
    value = data.get(to_camel(field), data.get(field))
    try:
        return _date_adapter.validate_python(_calendar_date(value))
    except ValidationError:
        return None


def _dates_out_of_order(data: Any) -> bool:
    """True when both raw dates parse and are not in order."""
    if not isinstance(data, dict):
        return False
    joining_date = _raw_date(data, "joining_date")
    last_working_day = _raw_date(data, "last_working_day")
    if joining_date is None or last_working_day is None:
        return False
    return last_working_day <= joining_date


def _date_order_error(data: Any) -> dict:
    return {
        "type": "value_error",
        "loc": (),
        "input": data,
        "ctx": {"error": ValueError(LAST_DAY_ORDER_MESSAGE)},
    }


class EmploymentRecordSchema(CamelModel):
    """Schema for POST /api/eosb/calculate request body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "basicSalary": 10000,
                    "allowances": 0,
                    "terminationType": "resignation",
                    "isUnlimitedContract": True,
                    "joiningDate": "2020-01-01",
                    "lastWorkingDay": "2025-01-01",
                },
                {
                    "basicSalary": 15000,
                    "allowances": 3000,
                    "terminationType": "termination",
                    "isUnlimitedContract": True,
                    "joiningDate": "2018-06-15",
                    "lastWorkingDay": "2025-06-15",
                },
            ]
        },
    )
    basic_salary: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Monthly basic salary",
        examples=[10000],
    )
    allowances: Optional[float] = Field(
        None,
        ge=0,
        allow_inf_nan=False,
        description="Monthly allowances (accepted, not used in the calculation)",
        examples=[2000],
    )
    termination_type: TerminationType = Field(
        ...,
        description="How the employment ended",
        examples=["resignation"],
    )
    is_unlimited_contract: bool = Field(
        ...,
        description="True for an unlimited (open-ended) contract",
    )
    joining_date: date = Field(
        ...,
        description="First day of service (YYYY-MM-DD)",
        examples=["2020-01-01"],
    )
    last_working_day: date = Field(
        ...,
        description="Last day of service (YYYY-MM-DD), after the joining date",
        examples=["2025-01-01"],
    )

    @field_validator("joining_date", "last_working_day", mode="before")
    @classmethod
    def reduce_timestamp_to_date(cls, value: Any) -> Any:
        """Accept ISO 8601 timestamps by keeping their calendar date."""
        return _calendar_date(value)

    @model_validator(mode="wrap")
    @classmethod
    def validate_date_order(
        cls,
        data: Any,
        handler: ValidatorFunctionWrapHandler,
    ) -> "EmploymentRecordSchema":
        """
        Ensure the last working day comes after the joining date.

        The order is still checked when other fields fail, as long as both
        dates parse, so every violated rule is reported together.
        """
        try:
            record = handler(data)
        except ValidationError as exc:
            if not _dates_out_of_order(data):
                raise
            raise ValidationError.from_exception_data(
                exc.title,
                [*exc.errors(include_url=False), _date_order_error(data)],
            ) from None

        if record.last_working_day <= record.joining_date:
            raise ValueError(LAST_DAY_ORDER_MESSAGE)
        return record

    def to_record(self) -> EmploymentRecord:
        return EmploymentRecord(
            basic_salary=self.basic_salary,
            allowances=self.allowances,
            termination_type=self.termination_type,
            is_unlimited_contract=self.is_unlimited_contract,
            joining_date=self.joining_date,
            last_working_day=self.last_working_day,
        )


class TierBreakdownSchema(CamelModel):
    """Schema for one accrual tier in the breakdown."""

    years: float = Field(
        ...,
        ge=0,
        description="Years of service counted in this tier",
        examples=[5],
    )
    rate: int = Field(
        ...,
        ge=0,
        description="Days of wage per year of service in this tier",
        examples=[21],
    )
    amount: float = Field(
        ...,
        description="Amount attributed to this tier, before any penalty",
        examples=[35000],
    )


class GratuityBreakdownSchema(CamelModel):
    first_five_years: TierBreakdownSchema
    additional_years: TierBreakdownSchema


class BenefitResultSchema(CamelModel):
    """Schema for the calculation result in the response envelope."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "totalServiceYears": 5,
                    "totalServiceMonths": 0,
                    "totalServiceDays": 0,
                    "basicSalaryAmount": 10000,
                    "totalSalary": 10000,
                    "eligibleYears": 5.0,
                    "gratuityAmount": 35000,
                    "breakdown": {
                        "firstFiveYears": {"years": 5, "rate": 21, "amount": 35000},
                        "additionalYears": {"years": 0, "rate": 30, "amount": 0},
                    },
                    "isEligible": True,
                }
            ]
        },
    )
    total_service_years: int = Field(..., description="Whole years of service")
    total_service_months: int = Field(..., description="Whole months after the years")
    total_service_days: int = Field(..., description="Days after the months")
    basic_salary_amount: float = Field(..., description="Basic salary used")
    total_salary: float = Field(..., description="Monthly salary the formula used")
    eligible_years: float = Field(
        ...,
        description="Fractional years of service, rounded to 2 decimals",
        examples=[5.0],
    )
    gratuity_amount: float = Field(
        ...,
        description="Final end-of-service benefit, rounded to 2 decimals",
        examples=[35000],
    )
    breakdown: GratuityBreakdownSchema
    is_eligible: bool = Field(
        ...,
        description="False when the minimum service period was not completed",
    )
    reason: Optional[str] = Field(
        None,
        description="Why the employee is not eligible",
        examples=["Minimum service period of 1 year not completed"],
    )
