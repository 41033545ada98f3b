"""EOSB service - orchestrates the benefit calculation use case."""

import structlog

from src.core.metrics import (
    record_calculation,
    record_calculation_failure,
    record_resignation_penalty,
    track_calculation_latency,
)
from src.domain.exceptions import CalculationFailedException
from src.service.eosb import (
    BenefitResult,
    EmploymentRecord,
    GratuityRules,
    build_configuration,
    calculate,
    explain_result,
)

logger = structlog.get_logger(__name__)


class EOSBService:
    """
    Application service for end-of-service benefit use cases.

    Wraps the pure calculator with logging and metrics, and turns any
    exception raised while computing into a CalculationFailedException.
    """

    def __init__(self, rules: GratuityRules):
        self._rules = rules

    def calculate(self, record: EmploymentRecord) -> BenefitResult:
        """
        Calculate the benefit for an employment record.

        Args:
            record: Validated employment facts

        Returns:
            BenefitResult from the calculator

        Raises:
            CalculationFailedException: If the calculation raises
        """
        log = logger.bind(
            termination_type=record.termination_type.value,
            is_unlimited_contract=record.is_unlimited_contract,
        )

        try:
            with track_calculation_latency():
                result = calculate(record, self._rules)
        except Exception as e:
            record_calculation_failure()
            log.exception(
                "eosb_calculation_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise CalculationFailedException(str(e)) from e

        record_calculation(
            result.is_eligible,
            record.termination_type.value,
            record.is_unlimited_contract,
            result.gratuity_amount,
        )
        if result.is_eligible and record.is_resignation and record.is_unlimited_contract:
            record_resignation_penalty(result.penalty_multiplier)

        log.info(
            "eosb_calculated",
            is_eligible=result.is_eligible,
            eligible_years=result.eligible_years,
            gratuity_amount=result.gratuity_amount,
        )
        log.debug("eosb_explanation", explanation=explain_result(result))

        return result

    def get_configuration(self) -> dict:
        """Static configuration payload for clients."""
        return build_configuration(self._rules)
