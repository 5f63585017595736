import pytest

from invoice_calculator.tools.formatting import format_currency, format_invoice_date, short_id


@pytest.mark.parametrize("cents, expected", [
    (0, "$0.00"),
    (5, "$0.05"),
    (1234, "$12.34"),
    (1600, "$16.00"),
    (123456, "$1,234.56"),
    (100000000, "$1,000,000.00"),
    (-1234, "-$12.34"),
])
def test_format_currency(cents, expected):
    assert format_currency(cents) == expected


def test_format_invoice_date():
    assert format_invoice_date("2022-10-01T10:22:32") == "Oct 01, 2022"


@pytest.mark.parametrize("value", [
    "",
    "not a date",
    "2022-13-45T99:99:99",
    "2022-10-01",
    "01/10/2022 10:22",
])
def test_format_invoice_date_returns_input_when_unparseable(value):
    assert format_invoice_date(value) == value


def test_format_invoice_date_never_raises_on_non_strings():
    assert format_invoice_date(None) is None


def test_short_id_truncates_long_identifiers():
    assert short_id("0e4bd2e1-25a4-4ba3") == "0e4bd2e1"


def test_short_id_passes_short_identifiers_through():
    assert short_id("inv-2") == "inv-2"
    assert short_id("12345678") == "12345678"


def test_short_id_custom_length():
    assert short_id("abcdef", length=3) == "abc"
