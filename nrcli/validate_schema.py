from typing import Any, List

from jsonschema import Draft202012Validator, Validator, ValidationError

from nrcli import constants as const


_STRING = {"type": "string"}

CONFIG_SCHEMA = {
    "type": "object",
    "required": ["apiKey", "alertPolicyID"],
    "properties": {
        "apiKey": _STRING,
        "alertPolicyID": _STRING,
    },
}

TERM_SCHEMA = {
    "type": "object",
    "required": ["duration", "operator", "threshold", "time_function", "priority"],
    "properties": {
        "duration": _STRING,
        "operator": _STRING,
        "threshold": _STRING,
        "time_function": _STRING,
        "priority": _STRING,
    },
}

CONDITION_SCHEMA = {
    "type": "object",
    "required": ["name", "enabled", "terms"],
    "properties": {
        "name": _STRING,
        "enabled": {"type": "boolean"},
        "terms": {"type": "array", "items": TERM_SCHEMA},
    },
}

NRQL_CONDITIONS_SCHEMA = {
    "type": "object",
    "required": [const.NRQL_CONDITIONS_KEY],
    "properties": {
        const.NRQL_CONDITIONS_KEY: {"type": "array", "items": CONDITION_SCHEMA},
    },
}


def process_validation_error(error: ValidationError) -> dict:
    return {
        "path": ".".join(map(str, error.absolute_path)),
        "cause": error.message,
    }


def validate_instance(instance: Any, schema: dict) -> List[dict]:
    """
    Validate a decoded JSON document and return every violation found.

    Each violation is a dict with a dotted `path` into the document (list indices included, so the
    offending condition and term can be located) and a human readable `cause`. Empty list means valid.
    """
    validator: Validator = Draft202012Validator(schema)
    # siblings at the same depth share a container, so paths compare without mixing int and str
    detected_errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.absolute_path))
    return [process_validation_error(err) for err in detected_errors]


def validate_config(instance: Any) -> List[dict]:
    return validate_instance(instance, CONFIG_SCHEMA)


def validate_nrql_conditions(instance: Any) -> List[dict]:
    return validate_instance(instance, NRQL_CONDITIONS_SCHEMA)
