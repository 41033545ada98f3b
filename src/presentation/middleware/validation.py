"""Translation of request validation errors into client-facing messages."""

from typing import Any, Iterable, List, Mapping

FIELD_MESSAGES = {
    "basicSalary": "Basic salary must be a positive number",
    "allowances": "Allowances must be a positive number",
    "terminationType": "Invalid termination type",
    "isUnlimitedContract": "Contract type must be boolean",
    "joiningDate": "Joining date must be a valid date",
    "lastWorkingDay": "Last working day must be a valid date",
}

VALUE_ERROR_PREFIX = "Value error, "


def is_json_error(errors: Iterable[Mapping[str, Any]]) -> bool:
    """True if the body could not be parsed as JSON at all."""
    return any(error.get("type") == "json_invalid" for error in errors)


def collect_validation_messages(errors: Iterable[Mapping[str, Any]]) -> List[str]:
    """
    Map validation errors to one message per violated rule.

    Errors on a known body field use that field's message, however many
    constraints it broke. A missing body reports every field. Anything else
    (the date-order check, a non-object body) uses the validator's own text.
    Order is preserved and duplicates are dropped.
    """
    messages: List[str] = []

    for error in errors:
        loc = tuple(error.get("loc", ()))
        field = loc[1] if len(loc) > 1 and loc[0] == "body" else None

        if field in FIELD_MESSAGES:
            candidates = [FIELD_MESSAGES[field]]
        elif loc == ("body",) and error.get("type") == "missing":
            candidates = list(FIELD_MESSAGES.values())
            # allowances is optional
            candidates.remove(FIELD_MESSAGES["allowances"])
        else:
            message = str(error.get("msg", "Invalid request"))
            if message.startswith(VALUE_ERROR_PREFIX):
                message = message[len(VALUE_ERROR_PREFIX):]
            candidates = [message]

        for message in candidates:
            if message not in messages:
                messages.append(message)

    return messages
