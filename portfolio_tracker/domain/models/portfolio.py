"""
DOMAIN MODELS - PORTFOLIO & PnL

Immutable structures representing holdings, prices and summaries.
No HTTP, no persistence.
"""

from dataclasses import dataclass
from typing import Dict, List


class PortfolioError(ValueError):
    """Base error for ledger operations."""


class InvalidInput(PortfolioError):
    """
    Raised by the ledger when an upsert payload fails validation.
    Always raised before any state is touched.
    """


@dataclass(frozen=True)
class Position:
    """
    Holding of a single ticker at a weighted-average cost basis.
    """
    ticker: str
    shares: float
    average_cost: float

    @property
    def invested_amount(self) -> float:
        return self.shares * self.average_cost


@dataclass(frozen=True)
class Summary:
    """
    Aggregate invested capital, market value and unrealized P/L.
    Values carry full float precision; rounding is left to presentation.
    """
    total_invested: float
    current_value: float
    total_pl: float


@dataclass(frozen=True)
class PortfolioView:
    """
    Snapshot of the ledger returned by every operation.
    """
    holdings: List[Position]
    prices: Dict[str, float]
    summary: Summary
