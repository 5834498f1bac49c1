"""Registration form field validation."""
import re
from typing import Dict

# ASCII digits only
PHONE_PATTERN = re.compile(r"[0-9]{10,15}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

TEXT_FIELDS = ("name", "phone", "email", "college", "national_id")

REQUIRED_MESSAGES = {
    "name": "Full name is required",
    "phone": "Phone number is required",
    "email": "Email is required",
    "college": "College name is required",
    "national_id": "National ID is required",
}

INVALID_PHONE_MESSAGE = "Invalid phone number format. Must be 10-15 digits"
INVALID_EMAIL_MESSAGE = "Invalid email format"

# Space separators, tab/line breaks and the byte order mark. str.strip() would
# also drop \x1c-\x1f and \x85 but keep \ufeff.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim_whitespace(value: str) -> str:
    """Strip leading and trailing whitespace, including the byte order mark."""
    return value.strip(TRIM_CHARACTERS)


def validate_field(field_name: str, value: str) -> str:
    """
    Validate a single registration form field.

    Args:
        field_name: Form field name (e.g. "phone", "national_id")
        value: Raw value as typed by the user

    Returns:
        Error message, or "" if the value is valid
        - Required fields fail when empty after trimming
        - Phone and email patterns are checked against the untrimmed value
        - Unknown fields (including choice fields) are always valid
    """
    if field_name not in REQUIRED_MESSAGES:
        return ""

    if value is None or not trim_whitespace(value):
        return REQUIRED_MESSAGES[field_name]

    if field_name == "phone" and not PHONE_PATTERN.fullmatch(value):
        return INVALID_PHONE_MESSAGE

    if field_name == "email" and not EMAIL_PATTERN.fullmatch(value):
        return INVALID_EMAIL_MESSAGE

    return ""


def validate_form(form) -> Dict[str, str]:
    """
    Re-validate every free-text field of a registration form.

    Args:
        form: RegistrationForm instance

    Returns:
        Dict mapping field name to error message, only for failing fields
    """
    errors = {}
    for field_name in TEXT_FIELDS:
        message = validate_field(field_name, getattr(form, field_name))
        if message:
            errors[field_name] = message
    return errors


def normalize_event_id(event_id: str) -> str:
    """
    Normalize an event identifier for comparison.

    Example: " Launch-Party " → "launch-party"
    """
    return trim_whitespace(event_id).lower()
