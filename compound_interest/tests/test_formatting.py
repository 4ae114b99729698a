import pytest

from compound_interest.core.formatting import format_number, format_percent


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_628_894.63, "1,628,895"),
        (999.4, "999"),
        (0, "0"),
        (2.5, "3"),
        (-2.5, "-2"),
        (-1_234_567.2, "-1,234,567"),
    ],
)
def test_format_number_groups_thousands(value, expected):
    assert format_number(value) == expected


def test_format_percent_signs():
    assert format_percent(62.889462) == "+62.89%"
    assert format_percent(0) == "+0.00%"
    assert format_percent(-0.0) == "+0.00%"
    assert format_percent(-1.234) == "-1.23%"


def test_format_percent_decimals():
    assert format_percent(62.889462, 1) == "+62.9%"
    assert format_percent(5, 0) == "+5%"


@pytest.mark.parametrize(
    "value, expected",
    [(float("nan"), "nan"), (float("inf"), "inf"), (float("-inf"), "-inf")],
)
def test_format_number_passes_non_finite_through(value, expected):
    assert format_number(value) == expected
