"""Payment field and email validators.

Tests:
    - Card numbers need 12-19 ASCII digits and a passing Luhn checksum
    - Expiry month/year and CVV are format-only checks
    - Email keeps the RFC 5322 derived pattern and its quirks
    - Every validator is total: odd input gives False, never an exception
"""

import pytest

from shop_helpers.core.validation import (
    VALIDATORS,
    is_valid_card_number,
    is_valid_cvv,
    is_valid_email,
    is_valid_expire_month,
    is_valid_expire_year,
    luhn_valid,
    validate,
)


@pytest.mark.parametrize("number", [
    "4111111111111111",
    "5555555555554444",
    "378282246310005",
    "6011111111111117",
    "000000000000",
])
def test_valid_card_numbers(number):
    assert is_valid_card_number(number) is True


@pytest.mark.parametrize("number", [
    "4111111111111112",
    "123",
    "41111111111",
    "41111111111111111111",
    "4111 1111 1111 1111",
    "4111-1111-1111-1111",
    "4111111111111111\n",
    "４１１１１１１１１１１１１１１１",
    "",
])
def test_invalid_card_numbers(number):
    assert is_valid_card_number(number) is False


def test_luhn_doubles_every_second_digit_from_the_right():
    assert luhn_valid("18") is True
    assert luhn_valid("81") is False
    assert luhn_valid("59") is True
    assert luhn_valid("0") is True


@pytest.mark.parametrize("month, expected", [
    ("1", True),
    ("12", True),
    ("0", True),
    ("99", True),
    ("123", False),
    ("", False),
    ("1a", False),
    (" 1", False),
])
def test_expire_month_is_format_only(month, expected):
    assert is_valid_expire_month(month) is expected


@pytest.mark.parametrize("year, expected", [
    ("2024", True),
    ("0000", True),
    ("24", False),
    ("20245", False),
    ("20x4", False),
])
def test_expire_year(year, expected):
    assert is_valid_expire_year(year) is expected


@pytest.mark.parametrize("cvv, expected", [
    ("123", True),
    ("1234", True),
    ("12", False),
    ("12345", False),
    ("abc", False),
])
def test_cvv(cvv, expected):
    assert is_valid_cvv(cvv) is expected


@pytest.mark.parametrize("email", [
    "a@b.com",
    "first.last+tag@mail.example.org",
    "user@[192.168.0.1]",
    '"quoted.name"@example.com',
    "contact me at a@b.com today",
])
def test_valid_emails(email):
    assert is_valid_email(email) is True


@pytest.mark.parametrize("email", [
    "not-an-email",
    "a@",
    "@b.com",
    "A@B.COM",
    "a@-b.com",
    "",
])
def test_invalid_emails(email):
    assert is_valid_email(email) is False


def test_email_ip_literal_is_only_partially_checked():
    # The last octet may be replaced by a "tag:" literal.
    assert is_valid_email("a@[1.2.3.ipv6:abc]") is True
    assert is_valid_email("a@[1.2.3]") is False


@pytest.mark.parametrize("validator", list(VALIDATORS.values()))
@pytest.mark.parametrize("value", [None, 4111111111111111, b"123", [], ""])
def test_validators_never_raise(validator, value):
    assert validator(value) is False


def test_validate_dispatches_by_kind():
    assert validate("cvv", "123") is True
    assert validate("email", "nope") is False
    with pytest.raises(KeyError):
        validate("iban", "GB82")


@pytest.mark.parametrize("value", ["abc", "4111 1111", "", "１８", None])
def test_luhn_rejects_non_digit_input(value):
    assert luhn_valid(value) is False
