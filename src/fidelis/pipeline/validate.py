import re

from fidelis import codes
from fidelis.error import InputValidationError

from . import config

RX_MOBILE = re.compile(config.MOBILE_PATTERN)
RX_PAN = re.compile(config.PAN_PATTERN)
RX_EMAIL = re.compile(config.EMAIL_PATTERN)


def field_error(field, message):
    return InputValidationError("P01.400", message, {field: message})


def validate_mobile(mobile):
    value = str(mobile or '').strip()
    if not RX_MOBILE.match(value):
        raise field_error("mobile", "Please enter a valid 10-digit mobile number")

    return value


def validate_pan(pan):
    value = str(pan or '').strip().upper()
    if not RX_PAN.match(value):
        raise field_error("pan", "Please enter a valid PAN number (e.g. ABCDE1234F)")

    return value


def validate_email(email):
    if email is None or not str(email).strip():
        return None

    value = str(email).strip()
    if not RX_EMAIL.match(value):
        raise field_error("email", "Please enter a valid email address")

    return value


def validate_registration_number(registration_number):
    value = " ".join(str(registration_number or '').split()).upper()
    if not value:
        raise field_error("registration_number", "Please enter RC number")

    return value


def validate_income(monthly_income):
    if isinstance(monthly_income, bool):
        raise field_error("monthly_income", "Please enter a valid monthly income")

    try:
        value = float(str(monthly_income).replace(',', '').strip())
    except ValueError:
        raise field_error("monthly_income", "Please enter a valid monthly income")

    if not value > 0 or value == float('inf'):
        raise field_error("monthly_income", "Please enter a valid monthly income")

    return value


def validate_employment_type(employment_type):
    value = str(employment_type or '').strip().upper()
    if value not in config.EMPLOYMENT_TYPES:
        choices = ", ".join(f"{c} ({codes.employment_status(c)})" for c in config.EMPLOYMENT_TYPES)
        raise field_error("employment_type", f"Please select employment type: {choices}")

    return value


def collect(**checks):
    ''' Run every `field => (validator, value)` check and raise one error
        carrying all field messages. '''
    values, errors = {}, {}
    for field, (validator, value) in checks.items():
        try:
            values[field] = validator(value)
        except InputValidationError as e:
            errors.update(e.field_errors)

    if errors:
        raise InputValidationError("P01.400", "Invalid input", errors)

    return values
