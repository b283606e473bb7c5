"""Renovation, fit-out, licence and utility setup costs.

Pure function: deal in, RenovationCosts out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from flipcalc.engine.purchase import VAT_RATE
from flipcalc.models.deal import DealInput, RenovationVatType

SUPPLY_SETUP_FEE = Decimal("250")  # Per utility, net of VAT

RENOVATION_VAT_RATES: dict[RenovationVatType, Decimal] = {
    RenovationVatType.REDUCED: Decimal("0.10"),
    RenovationVatType.STANDARD: Decimal("0.21"),
    RenovationVatType.NONE: Decimal("0"),
}
DEFAULT_RENOVATION_VAT_RATE = RENOVATION_VAT_RATES[RenovationVatType.REDUCED]


@dataclass(frozen=True)
class RenovationCosts:
    renovation_base_cost: Decimal
    furniture_base_cost: Decimal
    vat_rate: Decimal
    renovation_vat: Decimal
    furniture_vat: Decimal
    contingency_amount: Decimal
    general_expenses: Decimal
    technical_fees_base: Decimal
    technical_fees_vat: Decimal
    icio_tax: Decimal
    supply_setup_cost: Decimal
    total: Decimal

    @property
    def technical_fees_total(self) -> Decimal:
        return self.technical_fees_base + self.technical_fees_vat

    @property
    def other_costs(self) -> Decimal:
        """Utility setup + general expenses + technical fees with VAT."""
        return self.supply_setup_cost + self.general_expenses + self.technical_fees_total


def renovation_vat_rate(scheme: RenovationVatType | str) -> Decimal:
    """VAT rate on works and furniture; unknown schemes fall back to 10%."""
    try:
        return RENOVATION_VAT_RATES[RenovationVatType(scheme)]
    except ValueError:
        return DEFAULT_RENOVATION_VAT_RATE


def supply_setup_cost(setup_electricity: bool, setup_water: bool) -> Decimal:
    """Utility connection fees, always at standard VAT."""
    count = int(setup_electricity) + int(setup_water)
    return count * SUPPLY_SETUP_FEE * (1 + VAT_RATE)


def compute_renovation_costs(deal: DealInput) -> RenovationCosts:
    renovation_base = deal.area_sqm * deal.renovation_cost_per_sqm
    furniture_base = deal.area_sqm * deal.furniture_cost_per_sqm
    works_base = renovation_base + furniture_base

    vat_rate = renovation_vat_rate(deal.renovation_vat_type)
    renovation_vat = works_base * vat_rate
    contingency = works_base * (deal.contingency_rate / 100)

    # Technical fees carry 21% regardless of the works VAT scheme
    technical_fees_vat = deal.technical_fees * VAT_RATE

    # ICIO is levied on construction only, not on furniture
    icio_tax = renovation_base * (deal.icio_rate / 100)

    setup = supply_setup_cost(deal.setup_electricity, deal.setup_water)

    total = (
        renovation_base
        + furniture_base
        + renovation_vat
        + contingency
        + deal.general_expenses
        + deal.technical_fees
        + technical_fees_vat
        + icio_tax
        + setup
    )

    return RenovationCosts(
        renovation_base_cost=renovation_base,
        furniture_base_cost=furniture_base,
        vat_rate=vat_rate,
        renovation_vat=renovation_vat,
        furniture_vat=furniture_base * vat_rate,
        contingency_amount=contingency,
        general_expenses=deal.general_expenses,
        technical_fees_base=deal.technical_fees,
        technical_fees_vat=technical_fees_vat,
        icio_tax=icio_tax,
        supply_setup_cost=setup,
        total=total,
    )
