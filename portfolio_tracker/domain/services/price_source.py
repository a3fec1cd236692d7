"""
Mock price sources.

Stand-ins for a market data feed: given a ticker and a reference price
(usually the position's cost basis) produce a plausible current price.
"""

from typing import Protocol

from portfolio_tracker.utils.numbers import round_half_up

# Prices are quoted in cents and must stay positive
MIN_PRICE = 0.01


class PriceSource(Protocol):
    """Protocol for anything that can quote a ticker"""

    def quote(self, ticker: str, reference_price: float) -> float:
        """Return a current price (> 0) for ticker"""
        ...


class CharCodePriceSource:
    """
    Deterministic nudge derived from the ticker's characters.

    codeSum = sum of character codes
    sign    = +1 if codeSum is even else -1
    pct     = (5 + codeSum % 6) / 100     -> 5%..10%
    price   = reference * (1 + sign * pct), rounded to 2 decimals,
              never below MIN_PRICE
    """

    def quote(self, ticker: str, reference_price: float) -> float:
        code_sum = sum(ord(ch) for ch in ticker)
        sign = 1 if code_sum % 2 == 0 else -1
        pct = (5 + code_sum % 6) / 100
        return max(round_half_up(reference_price * (1 + sign * pct), 2), MIN_PRICE)
