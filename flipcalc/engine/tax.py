"""Income tax on an investor's share of the sale profit.

Natural persons pay the progressive IRPF savings-income scale; companies pay
flat corporate tax. Pure functions. No I/O.
"""

from decimal import Decimal

from flipcalc.models.deal import TaxSubjectType

CORPORATE_TAX_RATE = Decimal("0.25")

# (upper bound of bracket, marginal rate); None = no upper bound
IRPF_BRACKETS: tuple[tuple[Decimal | None, Decimal], ...] = (
    (Decimal("6000"), Decimal("0.19")),
    (Decimal("50000"), Decimal("0.21")),
    (Decimal("200000"), Decimal("0.23")),
    (None, Decimal("0.26")),
)


def irpf_tax(profit: Decimal) -> Decimal:
    """Progressive savings-income tax.

    Applied as-is to non-positive profits: a loss falls in the first bracket
    and yields a negative amount (a tax credit). This is a known
    simplification of the model.
    """
    tax = Decimal("0")
    lower = Decimal("0")
    for upper, rate in IRPF_BRACKETS:
        if upper is None or profit <= upper:
            return tax + (profit - lower) * rate
        tax += (upper - lower) * rate
        lower = upper


def corporate_tax(profit: Decimal) -> Decimal:
    """Flat corporate tax; losses produce no credit."""
    if profit <= 0:
        return Decimal("0")
    return profit * CORPORATE_TAX_RATE


def profit_tax(profit: Decimal, tax_type: TaxSubjectType | str) -> Decimal:
    """Tax due on a profit share. Anything that is not a company is taxed as a person."""
    try:
        is_company = TaxSubjectType(tax_type) is TaxSubjectType.COMPANY
    except ValueError:
        is_company = False
    if is_company:
        return corporate_tax(profit)
    return irpf_tax(profit)
