"""Sale projection: disposal costs, profit before tax, profitability.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SaleProjection:
    sale_price: Decimal
    capital_gains_tax: Decimal
    cee_cost: Decimal
    notary_sale_cost: Decimal
    total_sale_expenses: Decimal
    profit_before_tax: Decimal
    profitability: Decimal  # % on total project cost


def ratio_pct(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator * 100, or 0 when the denominator is not positive."""
    if denominator <= 0:
        return Decimal("0")
    return numerator / denominator * 100


def compute_sale_projection(
    sale_price: Decimal,
    capital_gains_tax_rate: Decimal,
    cee_cost: Decimal,
    notary_sale_cost: Decimal,
    total_project_cost: Decimal,
) -> SaleProjection:
    """Project the outcome of selling after renovation.

    Args:
        sale_price: Expected sale price.
        capital_gains_tax_rate: Plusvalia municipal rate in % of the sale price.
        cee_cost: Energy performance certificate.
        notary_sale_cost: Notary fees on the sale deed.
        total_project_cost: Purchase + renovation cost (profitability basis).
    """
    capital_gains_tax = sale_price * (capital_gains_tax_rate / 100)
    total_sale_expenses = capital_gains_tax + cee_cost + notary_sale_cost
    profit = sale_price - total_project_cost - total_sale_expenses

    return SaleProjection(
        sale_price=sale_price,
        capital_gains_tax=capital_gains_tax,
        cee_cost=cee_cost,
        notary_sale_cost=notary_sale_cost,
        total_sale_expenses=total_sale_expenses,
        profit_before_tax=profit,
        profitability=ratio_pct(profit, total_project_cost),
    )
