import logging
import re
from typing import Any, Callable, Dict


logger = logging.getLogger(__name__)

CARD_NUMBER_PATTERN = re.compile(r"[0-9]{12,19}")
EXPIRE_MONTH_PATTERN = re.compile(r"[0-9]{1,2}")
EXPIRE_YEAR_PATTERN = re.compile(r"[0-9]{4}")
CVV_PATTERN = re.compile(r"[0-9]{3,4}")

# RFC 5322 derived. Unanchored and case-sensitive; the IPv4 literal branch
# only partially validates addresses.
EMAIL_PATTERN = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?"
    r"|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])"
)


def _full_match(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def luhn_valid(card_number: str) -> bool:
    """Check a string of digits against the Luhn checksum.

    Anything that is not a non-empty run of ASCII digits fails.
    """
    if not isinstance(card_number, str) or not card_number.isascii() or not card_number.isdigit():
        return False
    total = 0
    for position, char in enumerate(reversed(card_number)):
        digit = int(char)
        if position % 2 != 0:
            digit *= 2
        if digit > 9:
            digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_card_number(value: Any) -> bool:
    return _full_match(CARD_NUMBER_PATTERN, value) and luhn_valid(value)


def is_valid_expire_month(value: Any) -> bool:
    # Format only: "0" and "13" pass.
    return _full_match(EXPIRE_MONTH_PATTERN, value)


def is_valid_expire_year(value: Any) -> bool:
    return _full_match(EXPIRE_YEAR_PATTERN, value)


def is_valid_cvv(value: Any) -> bool:
    return _full_match(CVV_PATTERN, value)


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.search(value) is not None


VALIDATORS: Dict[str, Callable[[Any], bool]] = {
    "card_number": is_valid_card_number,
    "expire_month": is_valid_expire_month,
    "expire_year": is_valid_expire_year,
    "cvv": is_valid_cvv,
    "email": is_valid_email,
}


def validate(kind: str, value: Any) -> bool:
    """Run the validator registered under ``kind``.

    Unknown kinds raise ``KeyError``; the predicates themselves never raise.
    """
    validator = VALIDATORS[kind]
    result = validator(value)
    if not result:
        logger.debug(f"Value failed {kind} validation")
    return result
