"""
Domain Models Package
Export all domain entities
"""

from .portfolio import (
    # Errors
    InvalidInput,
    PortfolioError,

    # Entities
    PortfolioView,
    Position,
    Summary,
)

__all__ = [
    # Errors
    "InvalidInput",
    "PortfolioError",

    # Entities
    "PortfolioView",
    "Position",
    "Summary",
]
