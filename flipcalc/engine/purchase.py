"""Acquisition costs: transfer tax and purchase fees.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from flipcalc.models.deal import DealInput, PurchaseTaxType

VAT_RATE = Decimal("0.21")

PURCHASE_TAX_RATES: dict[PurchaseTaxType, Decimal] = {
    PurchaseTaxType.ITP_10: Decimal("0.10"),
    PurchaseTaxType.ITP_6: Decimal("0.06"),
    PurchaseTaxType.IVA_21: Decimal("0.21"),
}
DEFAULT_PURCHASE_TAX_RATE = PURCHASE_TAX_RATES[PurchaseTaxType.ITP_10]


@dataclass(frozen=True)
class PurchaseCosts:
    property_value: Decimal
    purchase_tax: Decimal
    notary_fees: Decimal
    registry_fees: Decimal
    agency_fees: Decimal
    brokerage_fees: Decimal
    agency_fees_vat: Decimal
    total: Decimal


def purchase_tax_rate(scheme: PurchaseTaxType | str) -> Decimal:
    """Transfer tax rate for a scheme; unknown schemes fall back to ITP 10%."""
    try:
        return PURCHASE_TAX_RATES[PurchaseTaxType(scheme)]
    except ValueError:
        return DEFAULT_PURCHASE_TAX_RATE


def compute_purchase_costs(
    deal: DealInput,
    agency_fees_include_vat: bool = True,
) -> PurchaseCosts:
    """Aggregate the purchase side of the deal.

    Args:
        deal: Deal parameters.
        agency_fees_include_vat: When False, agency and brokerage fees are
            taken as net amounts and 21% VAT is added on top.
    """
    purchase_tax = deal.property_value * purchase_tax_rate(deal.purchase_tax_type)

    agency_fees_vat = Decimal("0")
    if not agency_fees_include_vat:
        agency_fees_vat = (deal.agency_fees + deal.brokerage_fees) * VAT_RATE

    total = (
        deal.property_value
        + purchase_tax
        + deal.notary_fees
        + deal.registry_fees
        + deal.agency_fees
        + deal.brokerage_fees
        + agency_fees_vat
    )

    return PurchaseCosts(
        property_value=deal.property_value,
        purchase_tax=purchase_tax,
        notary_fees=deal.notary_fees,
        registry_fees=deal.registry_fees,
        agency_fees=deal.agency_fees,
        brokerage_fees=deal.brokerage_fees,
        agency_fees_vat=agency_fees_vat,
        total=total,
    )
