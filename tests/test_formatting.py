import pytest

from carloan import format_currency, format_tenure


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1_234_567, "₹12,34,567"),
        (0, "₹0"),
        (999, "₹999"),
        (1_000, "₹1,000"),
        (100_000, "₹1,00,000"),
        (10_000_000, "₹1,00,00,000"),
        (25_069.09, "₹25,069"),
        (902_487.3, "₹9,02,487"),
        (0.5, "₹1"),
        (-1_500, "-₹1,500"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_symbol():
    assert format_currency(1_234, symbol="Rs ") == "Rs 1,234"


@pytest.mark.parametrize(
    "months, expected",
    [
        (0, "0 months"),
        (1, "1 month"),
        (11, "11 months"),
        (12, "1 year"),
        (13, "1 year 1 month"),
        (24, "2 years"),
        (35, "2 years 11 months"),
        (61, "5 years 1 month"),
    ],
)
def test_format_tenure(months, expected):
    assert format_tenure(months) == expected
