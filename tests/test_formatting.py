import pytest

from src.claims_system.claims_system.common.formatting import format_currency, status_color
from src.claims_system.claims_system.common.validators import parse_hours
from src.claims_system.claims_system.core.enums import ClaimStatus
from src.claims_system.claims_system.core.exceptions import ValidationError


def test_currency_uses_two_decimals_and_separators():
    assert format_currency(2500) == "R2,500.00"
    assert format_currency(4850.5) == "R4,850.50"


def test_status_colors():
    assert status_color(ClaimStatus.APPROVED) == "#28a745"
    assert status_color("pending") == "#ffc107"
    assert status_color(ClaimStatus.REJECTED) == "#dc3545"
    assert status_color("Archived") == "#6c757d"
    assert status_color(None) == "transparent"


@pytest.mark.parametrize("text,expected", [("", 0.0), ("8", 8.0), ("7.5", 7.5), (".5", 0.5), (" 10 ", 10.0)])
def test_parse_hours(text, expected):
    assert parse_hours(text) == expected


@pytest.mark.parametrize("text", ["abc", "1.2.3", "-4", "."])
def test_parse_hours_rejects_non_decimal(text):
    with pytest.raises(ValidationError):
        parse_hours(text)


def test_parse_hours_rejects_overflowing_digits():
    with pytest.raises(ValidationError):
        parse_hours("9" * 400)
