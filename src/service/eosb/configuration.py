"""
Static configuration echoed to clients.

Clients render the termination and contract dropdowns and the rate table
from this payload instead of hard-coding them. The calculation rules are
read from the same GratuityRules instance the calculator uses.
"""

from .models import TerminationType
from .settings import GratuityRules, gratuity_rules

TERMINATION_TYPE_LABELS = {
    TerminationType.RESIGNATION: ("Resignation", "استقالة"),
    TerminationType.TERMINATION: ("Termination by Employer", "إنهاء من صاحب العمل"),
    TerminationType.RETIREMENT: ("Retirement", "تقاعد"),
    TerminationType.DEATH: ("Death", "وفاة"),
    TerminationType.DISABILITY: ("Disability", "إعاقة"),
}

CONTRACT_TYPE_LABELS = {
    True: ("Unlimited Contract", "عقد غير محدود المدة"),
    False: ("Limited Contract", "عقد محدود المدة"),
}


def build_configuration(rules: GratuityRules = gratuity_rules) -> dict:
    """
    Build the configuration payload.

    Args:
        rules: Gratuity rules (uses defaults if not provided)

    Returns:
        Dict with terminationTypes, contractTypes and calculationRules
    """
    return {
        "terminationTypes": [
            {"value": termination_type.value, "label": label, "labelAr": label_ar}
            for termination_type, (label, label_ar) in TERMINATION_TYPE_LABELS.items()
        ],
        "contractTypes": [
            {"value": value, "label": label, "labelAr": label_ar}
            for value, (label, label_ar) in CONTRACT_TYPE_LABELS.items()
        ],
        "calculationRules": {
            "minimumServiceDays": rules.minimum_service_days,
            "firstFiveYearsRate": rules.first_tier_rate,
            "additionalYearsRate": rules.additional_tier_rate,
            "resignationPenalty": {
                "lessThanOneYear": rules.penalty_less_than_one_year,
                "lessThanThreeYears": rules.penalty_less_than_three_years,
                "lessThanFiveYears": rules.penalty_less_than_five_years,
                "fiveYearsOrMore": rules.penalty_five_years_or_more,
            },
        },
    }
