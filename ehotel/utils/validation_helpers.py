import re
from datetime import date


SIN_PATTERN = re.compile(r"^\d{3}-\d{3}-\d{3}$")
POSTAL_CODE_PATTERN = re.compile(r"^[ABCEGHJKLMNPRSTVXY]\d[A-Z] *\d[A-Z]\d$")


def validate_sin(value):
    if value is not None and not SIN_PATTERN.match(value):
        raise ValueError("SIN must be in the format 123-456-789")
    return value


def validate_postal_code(value):
    if value is not None and not POSTAL_CODE_PATTERN.match(value):
        raise ValueError("Postal code must be in the format A1A 1A1")
    return value


def validate_date_range(start_date, end_date):
    if start_date and end_date and end_date < start_date:
        raise ValueError("End date must be on or after the start date")


def validate_present_or_future(value):
    if value is not None and value < date.today():
        raise ValueError("Date must be today or in the future")
    return value


def reject_null(value):
    """Partial updates may omit a field but not clear a required one."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
