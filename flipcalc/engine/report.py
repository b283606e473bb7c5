"""Derived figures shown by the summary report.

Pure functions on a finished CalculationResult. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from flipcalc.models.results import CalculationResult

# Summary card thresholds (%)
GOOD_SALE_PROFITABILITY = Decimal("15")
GOOD_NET_RENTAL_YIELD = Decimal("6")


@dataclass(frozen=True)
class InvestmentGrowth:
    cost: Decimal
    sale_price: Decimal
    profit: Decimal
    cost_pct: Decimal  # Share of the cost + profit bar
    profit_pct: Decimal


@dataclass(frozen=True)
class SummaryHighlights:
    sale_profitability_good: bool
    rental_yield_good: bool


def investment_growth(
    total_project_cost: Decimal,
    sale_price: Decimal,
    profit: Decimal,
) -> InvestmentGrowth:
    """Split of a cost-to-sale bar. Losses are not drawn."""
    positive_profit = max(Decimal("0"), profit)
    bar_total = total_project_cost + positive_profit
    if bar_total > 0:
        cost_pct = total_project_cost / bar_total * 100
        profit_pct = positive_profit / bar_total * 100
    else:
        cost_pct = Decimal("100")
        profit_pct = Decimal("0")
    return InvestmentGrowth(
        cost=total_project_cost,
        sale_price=sale_price,
        profit=profit,
        cost_pct=cost_pct,
        profit_pct=profit_pct,
    )


def summary_highlights(result: CalculationResult) -> SummaryHighlights:
    return SummaryHighlights(
        sale_profitability_good=result.sale_profitability > GOOD_SALE_PROFITABILITY,
        rental_yield_good=result.net_rental_yield > GOOD_NET_RENTAL_YIELD,
    )
