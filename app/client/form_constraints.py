"""
Field constraints checked when the contact form is submitted.

Each entry pairs a dotted field path with a predicate over that field's value
alone; no predicate looks at any other field.
"""
import re
from typing import Any, Callable, List, Tuple

from email_validator import EmailNotValidError, validate_email

from app.exceptions.custom_exception import ContactValidationError

Predicate = Callable[[Any], bool]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def length_between(minimum: int, maximum: int) -> Predicate:
    def check(value: Any) -> bool:
        text = _text(value)
        return bool(text) and minimum <= len(text) <= maximum
    return check


def full_match(pattern: str) -> Predicate:
    compiled = re.compile(pattern)

    def check(value: Any) -> bool:
        return compiled.fullmatch(_text(value)) is not None
    return check


def integer_between(minimum: int, maximum: int) -> Predicate:
    digits = full_match(r"[0-9]+")

    def check(value: Any) -> bool:
        text = _text(value).strip()
        return digits(text) and minimum <= int(text) <= maximum
    return check


def is_email(value: Any) -> bool:
    try:
        validate_email(_text(value), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def all_of(*predicates: Predicate) -> Predicate:
    def check(value: Any) -> bool:
        return all(predicate(value) for predicate in predicates)
    return check


FIELD_CONSTRAINTS: List[Tuple[str, Predicate]] = [
    ("name.firstName", length_between(3, 30)),
    ("name.lastName", length_between(3, 30)),
    ("email", all_of(length_between(1, 50), is_email)),
    ("phoneNumber", full_match(r"[0-9]{10,15}")),
    ("address.street", length_between(3, 50)),
    ("address.houseNumber", integer_between(1, 9999)),
    ("address.city", length_between(3, 50)),
    ("address.zipCode", full_match(r"[0-9]{5}")),
]

FIELD_PATHS = [field for field, _ in FIELD_CONSTRAINTS]


def get_field(draft: dict, field: str) -> Any:
    value: Any = draft
    for part in field.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def check_field(field: str, value: Any) -> bool:
    for name, predicate in FIELD_CONSTRAINTS:
        if name == field:
            return predicate(value)
    raise KeyError(f"Unknown contact field: {field}")


def invalid_fields(draft: dict) -> List[str]:
    return [field for field, predicate in FIELD_CONSTRAINTS if not predicate(get_field(draft, field))]


def validate_draft(draft: dict) -> None:
    failed = invalid_fields(draft)
    if failed:
        raise ContactValidationError(failed)
