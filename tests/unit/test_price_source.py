import pytest

from portfolio_tracker.domain.services.price_source import CharCodePriceSource
from portfolio_tracker.utils.numbers import round_half_up


@pytest.mark.unit
@pytest.mark.parametrize("ticker,expected", [
    ("AAPL", 109.0),   # code sum 286: even, 286 % 6 = 4 -> +9%
    ("ZZZZ", 105.0),   # code sum 360: even, 360 % 6 = 0 -> +5%
    ("AB", 90.0),      # code sum 131: odd,  131 % 6 = 5 -> -10%
    ("NVDA", 92.0),    # code sum 297: odd,  297 % 6 = 3 -> -8%
    ("TSLA", 107.0),   # code sum 308: even, 308 % 6 = 2 -> +7%
])
def test_char_code_quote(ticker, expected):
    assert CharCodePriceSource().quote(ticker, 100) == pytest.approx(expected)


@pytest.mark.unit
def test_quote_is_deterministic():
    source = CharCodePriceSource()
    assert source.quote("ZZZZ", 123.45) == CharCodePriceSource().quote("ZZZZ", 123.45)


@pytest.mark.unit
def test_quote_rounds_to_cents():
    # 33.33 * 1.09 = 36.3297
    assert CharCodePriceSource().quote("AAPL", 33.33) == 36.33


@pytest.mark.unit
def test_quote_stays_within_ten_percent():
    source = CharCodePriceSource()
    for ticker in ("A", "BRK.B", "GOOG", "META", "X", "IBM"):
        price = source.quote(ticker, 200)
        assert 180 <= price <= 220
        assert price != 200


# --- rounding ---


@pytest.mark.unit
def test_round_half_up_ties_go_up():
    # 0.125 is exact in binary
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(2.5, 0) == 3.0


@pytest.mark.unit
def test_round_half_up_uses_binary_value():
    # 1.005 is stored just below 1.005
    assert round_half_up(1.005, 2) == 1.0


@pytest.mark.unit
def test_round_half_up_four_places():
    assert round_half_up(5 / 3, 4) == 1.6667
    assert round_half_up(150.0, 4) == 150.0


@pytest.mark.unit
@pytest.mark.parametrize("value,places", [
    (1e27, 2),
    (1e25, 4),
    (3.5e300, 4),
])
def test_round_half_up_large_values(value, places):
    assert round_half_up(value, places) == value


@pytest.mark.unit
def test_quote_never_rounds_to_zero():
    # 0.001 * 1.09 = 0.00109 would round to 0.00
    assert CharCodePriceSource().quote("AAPL", 0.001) == 0.01
    assert CharCodePriceSource().quote("AB", 0.004) == 0.01
