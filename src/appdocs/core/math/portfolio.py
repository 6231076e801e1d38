"""
Portfolio: fund flattening and portfolio total

The portfolio of an application is the ordered sequence of every fund across
all of its products. Its total value is

    total = Σ (amount_i - fees_i) × tax_rate

evaluated in Decimal arithmetic so that summing many funds introduces no
binary rounding drift. An empty portfolio totals zero. Signs are not
checked: negative amounts or fees are aggregated as given.
"""

from decimal import Decimal
from typing import Final, Iterable

from appdocs.core.domain.application import Fund, Product

# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[Decimal] = Decimal("0")


# =============================================================================
# AGGREGATION
# =============================================================================


def flatten_portfolio_funds(products: Iterable[Product]) -> tuple[Fund, ...]:
    """
    Flatten products into their funds, preserving product then fund order.

    Args:
        products: Products of an application

    Returns:
        Tuple of all funds
    """
    return tuple(fund for product in products for fund in product.funds)


def portfolio_total_amount(funds: Iterable[Fund], tax_rate: Decimal) -> Decimal:
    """
    Total portfolio value.

    Args:
        funds: Fund positions (typically from flatten_portfolio_funds)
        tax_rate: Fractional rate applied to each net position (0.15 = 15%)

    Returns:
        Σ (amount - fees) × tax_rate, Decimal("0") for no funds
    """
    rate = Decimal(str(tax_rate)) if isinstance(tax_rate, float) else Decimal(tax_rate)
    return sum(((fund.amount - fund.fees) * rate for fund in funds), ZERO)
