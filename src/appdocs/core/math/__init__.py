"""
Core math modules for appdocs.

Decimal portfolio aggregation shared by the activated and in-review documents.
"""

from appdocs.core.math.portfolio import (
    ZERO,
    flatten_portfolio_funds,
    portfolio_total_amount,
)

__all__ = [
    "ZERO",
    "flatten_portfolio_funds",
    "portfolio_total_amount",
]
