"""Phone number normalization for the SMS gateway."""

import re
from typing import Optional

from ....config.constants import DEFAULT_COUNTRY_CODE


_SEPARATORS = re.compile(r"[\s\-.()]")
_NON_DIGITS_EXCEPT_PLUS = re.compile(r"[^\d+]")


def format_phone_number_e164(phone_number: Optional[str], country_code: str = DEFAULT_COUNTRY_CODE) -> Optional[str]:
    """Normalize a phone number to E.164, assuming local numbers are in country_code.

    Returns None when the number cannot be interpreted.
    """
    if not phone_number or not isinstance(phone_number, str):
        return None

    cleaned = _SEPARATORS.sub("", phone_number.strip())
    if not cleaned:
        return None

    if cleaned.startswith("+"):
        return _NON_DIGITS_EXCEPT_PLUS.sub("", cleaned)
    if cleaned.startswith("00"):
        return f"+{cleaned[2:]}"
    if re.fullmatch(rf"{country_code}\d{{8,12}}", cleaned):
        return f"+{cleaned}"
    if re.fullmatch(r"0\d{9}", cleaned):
        return f"+{country_code}{cleaned[1:]}"
    if re.fullmatch(r"\d{9}", cleaned):
        return f"+{country_code}{cleaned}"
    return None
