"""
Phone number helpers (US numbers, E.164).
"""

import re

_NON_DIGITS = re.compile(r"\D")


def digits_only(phone: str) -> str:
    return _NON_DIGITS.sub("", phone or "")


def is_valid_phone(phone: str) -> bool:
    """Valid US numbers are 10 digits, or 11 digits starting with 1."""
    digits = digits_only(phone)
    return len(digits) == 10 or (len(digits) == 11 and digits.startswith("1"))


def format_phone_to_e164(phone: str) -> str:
    """
    Format a US phone number as E.164 (+1XXXXXXXXXX).

    Numbers that are not 10/11-digit US numbers are returned unchanged;
    callers check is_valid_phone before sending anything.
    """
    if not phone:
        return ""

    digits = digits_only(phone)
    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    return phone


def same_us_number(a: str, b: str) -> bool:
    """Compare two numbers ignoring formatting and the leading US country code."""
    a_digits = digits_only(a)
    b_digits = digits_only(b)
    if not a_digits or not b_digits:
        return False
    if len(a_digits) == 11 and a_digits.startswith("1"):
        a_digits = a_digits[1:]
    if len(b_digits) == 11 and b_digits.startswith("1"):
        b_digits = b_digits[1:]
    return a_digits == b_digits
