"""Per-investor financing, capital contribution and profit split.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from flipcalc.engine.tax import profit_tax
from flipcalc.models.deal import Investor, LoanBasis, TaxSubjectType
from flipcalc.models.results import InvestorBreakdown


@dataclass(frozen=True)
class FinancingSummary:
    loan_amount: Decimal
    loan_associated_costs: Decimal
    total_capital_provided: Decimal
    net_profit_after_tax: Decimal


def _tax_subject(tax_type: TaxSubjectType | str) -> TaxSubjectType:
    try:
        return TaxSubjectType(tax_type)
    except ValueError:
        return TaxSubjectType.INDIVIDUAL


def investor_loan_amount(
    investor: Investor,
    cost_share: Decimal,
    property_value: Decimal,
    loan_basis: LoanBasis = LoanBasis.PROJECT_COST,
) -> Decimal:
    """Debt taken by one investor.

    PROJECT_COST finances a percentage of the investor's share of the whole
    project; PROPERTY_VALUE finances a percentage of the purchase price only,
    pro rata to participation.
    """
    financing = investor.financing_percentage / 100
    if loan_basis is LoanBasis.PROPERTY_VALUE:
        return property_value * financing * (investor.participation / 100)
    return cost_share * financing


def investor_breakdown(
    investor: Investor,
    total_project_cost: Decimal,
    profit_before_tax: Decimal,
    property_value: Decimal,
    loan_basis: LoanBasis = LoanBasis.PROJECT_COST,
) -> InvestorBreakdown:
    """Compute one investor's loan, capital, profit share and tax."""
    participation = investor.participation / 100
    cost_share = total_project_cost * participation

    loan = investor_loan_amount(investor, cost_share, property_value, loan_basis)
    loan_costs = loan * (investor.associated_costs_rate / 100)
    capital_provided = cost_share - loan + loan_costs

    gross_profit = profit_before_tax * participation
    tax_amount = profit_tax(gross_profit, investor.tax_type)

    return InvestorBreakdown(
        id=investor.id,
        participation=investor.participation,
        tax_type=_tax_subject(investor.tax_type),
        cost_share=cost_share,
        loan_amount=loan,
        loan_associated_costs=loan_costs,
        capital_provided=capital_provided,
        gross_profit=gross_profit,
        tax_amount=tax_amount,
        net_profit=gross_profit - tax_amount,
    )


def summarize_financing(breakdown: tuple[InvestorBreakdown, ...]) -> FinancingSummary:
    """Aggregate figures are plain sums over investors."""
    return FinancingSummary(
        loan_amount=sum((b.loan_amount for b in breakdown), Decimal("0")),
        loan_associated_costs=sum((b.loan_associated_costs for b in breakdown), Decimal("0")),
        total_capital_provided=sum((b.capital_provided for b in breakdown), Decimal("0")),
        net_profit_after_tax=sum((b.net_profit for b in breakdown), Decimal("0")),
    )
