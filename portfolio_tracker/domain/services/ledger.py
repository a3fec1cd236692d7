"""
PORTFOLIO LEDGER
Single source of truth for holdings and mock prices

RESPONSIBILITIES:
- Hold positions (ticker -> shares, average cost), in insertion order
- Hold the price table (ticker -> current price)
- Merge buys with weighted-average cost accounting
- Synthesize a mock price the first time a ticker is bought
- Compute invested / current value / P/L on demand

RULES:
❌ No persistence
❌ No partial writes: validate first, then mutate
✅ Prices are write-once per ticker
✅ Summary is unrounded
✅ Every operation runs under one lock
"""

import logging
import math
import threading
from dataclasses import replace
from typing import Dict, Iterable, Mapping, Optional, Tuple

from portfolio_tracker.domain.models import (
    InvalidInput,
    PortfolioView,
    Position,
    Summary,
)
from portfolio_tracker.domain.services.price_source import (
    CharCodePriceSource,
    PriceSource,
)
from portfolio_tracker.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

AVERAGE_COST_PLACES = 4

# Demo holdings and prices loaded at startup
DEMO_POSITIONS: Tuple[Tuple[str, float, float], ...] = (
    ("AAPL", 12, 180),
    ("MSFT", 8, 350),
    ("TSLA", 5, 220),
)
DEMO_PRICES: Dict[str, float] = {"AAPL": 210, "MSFT": 400, "TSLA": 250}


def normalize_ticker(ticker: str) -> str:
    """Trim and upper-case a ticker symbol."""
    return ticker.strip().upper()


def _require_positive_number(name: str, value: object) -> float:
    # bool is an int subclass but never a valid quantity or price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value}")
    if value <= 0:
        raise InvalidInput(f"{name} must be greater than 0, got {value}")
    return float(value)


class PortfolioLedger:
    """
    In-memory portfolio ledger.

    One instance per application; created by the app factory and injected
    into request handlers. Tests build their own isolated instances.
    """

    def __init__(
        self,
        price_source: Optional[PriceSource] = None,
        seed_positions: Iterable[Tuple[str, float, float]] = (),
        seed_prices: Optional[Mapping[str, float]] = None,
    ):
        """
        Initialize ledger

        Args:
            price_source: Quotes tickers that have no price yet
                (default: CharCodePriceSource)
            seed_positions: (ticker, shares, buy_price) buys applied in order
            seed_prices: Prices loaded before the seed buys, so they win
                over synthesized ones
        """
        self._lock = threading.RLock()
        self._positions: Dict[str, Position] = {}
        self._prices: Dict[str, float] = {}
        self._price_source: PriceSource = price_source or CharCodePriceSource()

        for ticker, price in (seed_prices or {}).items():
            symbol = normalize_ticker(ticker)
            if not symbol:
                raise InvalidInput("seed price ticker must not be blank")
            self._prices[symbol] = _require_positive_number("price", price)

        for ticker, shares, buy_price in seed_positions:
            self.upsert_holding(ticker, shares, buy_price)

    @classmethod
    def with_demo_data(cls, price_source: Optional[PriceSource] = None) -> "PortfolioLedger":
        """Ledger pre-loaded with the demo holdings and prices."""
        return cls(
            price_source=price_source,
            seed_positions=DEMO_POSITIONS,
            seed_prices=DEMO_PRICES,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_holdings(self) -> PortfolioView:
        """Current positions, price table and summary."""
        with self._lock:
            return self._view()

    def upsert_holding(self, ticker: str, shares: float, buy_price: float) -> PortfolioView:
        """
        Record a buy.

        New tickers open a position at buy_price. Existing positions merge:

            new_shares = shares0 + shares
            new_cost   = (shares0 * cost0 + shares * buy_price) / new_shares

        with new_cost rounded to 4 decimals. A mock price is then ensured
        for the ticker, seeded from the resulting average cost.

        Raises:
            InvalidInput: blank ticker, or shares / buy_price not a finite
                number > 0. Nothing is modified in that case.

        Errors raised by the price source propagate, also with nothing
        modified.
        """
        if not isinstance(ticker, str):
            raise InvalidInput(f"ticker must be a string, got {type(ticker).__name__}")
        symbol = normalize_ticker(ticker)
        if not symbol:
            raise InvalidInput("ticker must not be blank")
        shares = _require_positive_number("shares", shares)
        buy_price = _require_positive_number("buy_price", buy_price)

        with self._lock:
            existing = self._positions.get(symbol)
            if existing is None:
                position = Position(ticker=symbol, shares=shares, average_cost=buy_price)
            else:
                new_shares = existing.shares + shares
                new_cost = (
                    existing.shares * existing.average_cost + shares * buy_price
                ) / new_shares
                position = replace(
                    existing,
                    shares=new_shares,
                    average_cost=round_half_up(new_cost, AVERAGE_COST_PLACES),
                )

            # price first: if the source raises, positions stay untouched
            self.ensure_mock_price(symbol, position.average_cost)

            # replacing an existing key keeps its listing slot
            self._positions[symbol] = position
            if existing is None:
                logger.info(f"Opened {symbol}: {shares} @ {buy_price}")
            else:
                logger.info(
                    f"Merged {symbol}: +{shares} @ {buy_price} -> "
                    f"{position.shares} @ {position.average_cost}"
                )
            return self._view()

    def delete_holding(self, ticker: str) -> PortfolioView:
        """
        Remove a position. Unknown tickers are ignored.
        The ticker's price stays in the price table.
        """
        symbol = ticker.upper()
        with self._lock:
            if self._positions.pop(symbol, None) is not None:
                logger.info(f"Deleted {symbol}")
            else:
                logger.debug(f"Delete ignored, no position for {symbol!r}")
            return self._view()

    def ensure_mock_price(self, ticker: str, reference_price: float) -> float:
        """
        Make sure ticker has a price; first write wins.

        Returns:
            The stored price (existing or newly synthesized)
        """
        with self._lock:
            price = self._prices.get(ticker)
            if price is None:
                price = self._price_source.quote(ticker, reference_price)
                self._prices[ticker] = price
                logger.debug(f"Synthesized price {ticker}={price} from {reference_price}")
            return price

    def get_summary(self) -> Summary:
        """Aggregate invested / current value / P/L across positions."""
        with self._lock:
            return self._summary()

    def resolve_price(self, position: Position) -> float:
        """
        Current price for a position.
        Falls back to the position's own cost basis when no market price
        is recorded.
        """
        with self._lock:
            return self._prices.get(position.ticker, position.average_cost)

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _summary(self) -> Summary:
        total_invested = 0.0
        current_value = 0.0
        for position in self._positions.values():
            total_invested += position.invested_amount
            current_value += position.shares * self.resolve_price(position)
        return Summary(
            total_invested=total_invested,
            current_value=current_value,
            total_pl=current_value - total_invested,
        )

    def _view(self) -> PortfolioView:
        return PortfolioView(
            holdings=list(self._positions.values()),
            prices=dict(self._prices),
            summary=self._summary(),
        )
