import pytest

from vizutil.format import FORMATTERS, amount, big, comma, get_formatter, percentage


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.123, "12%"),
        (1, "100%"),
        (0.5, "50%"),
        (0, "0%"),
        (-0.0, "0%"),
        (0.125, "13%"),
        (0.145, "14%"),
        (-0.125, "-13%"),
        (2.5, "250%"),
    ],
)
def test_percentage(x, expected):
    assert percentage(x) == expected


def test_comma():
    assert comma(1234567) == "1,234,567"
    assert comma(1234567.0) == "1,234,567"
    assert comma(1234.5) == "1,234.5"
    assert comma(-1000) == "-1,000"
    assert comma(12) == "12"


@pytest.mark.parametrize(
    "d, expected",
    [
        (0, "0"),
        (12, "12"),
        (12.5, "12.5"),
        (999, "999"),
        (1000, "1000"),
        (1001, "1K"),
        (1234, "1.2K"),
        (1050, "1K"),
        (150_000, "150K"),
        (2_500_000, "2.5M"),
        (25_000_000, "25M"),
        (3_000_000_000, "3Bn"),
        (4_200_000_000_000, "4200Bn"),
    ],
)
def test_big(d, expected):
    assert big(d) == expected


def test_amount():
    assert amount(1_500_000) == "$1.5M"
    assert amount(75) == "$75"


def test_get_formatter():
    assert get_formatter("big") is big
    assert get_formatter(None)(3) == "3"
    f = lambda v: f"<{v}>"
    assert get_formatter(f) is f
    assert set(FORMATTERS) == {"percentage", "comma", "big", "amount"}
    with pytest.raises(KeyError):
        get_formatter("currency")
