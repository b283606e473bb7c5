from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class PurchaseTaxType(Enum):
    ITP_10 = "itp_10"  # Standard transfer tax
    ITP_6 = "itp_6"  # Reduced transfer tax
    IVA_21 = "iva_21"  # New build: VAT instead of ITP


class RenovationVatType(Enum):
    REDUCED = "10"
    STANDARD = "21"
    NONE = "none"


class TaxSubjectType(Enum):
    INDIVIDUAL = "individual"  # IRPF savings brackets
    COMPANY = "company"  # Flat corporate tax


class RentalModel(Enum):
    TRADITIONAL = "traditional"  # Whole unit, flat monthly rent
    ROOMS = "rooms"  # Rooms x rent per room


class LoanBasis(Enum):
    PROJECT_COST = "project_cost"
    PROPERTY_VALUE = "property_value"


@dataclass(frozen=True)
class Investor:
    id: int
    participation: Decimal = Decimal("100")  # % of the deal
    tax_type: TaxSubjectType | str = TaxSubjectType.INDIVIDUAL
    financing_percentage: Decimal = Decimal("80")  # % of the investor's share that is debt
    loan_interest_rate: Decimal = Decimal("3")  # Informational only
    associated_costs_rate: Decimal = Decimal("1.5")  # % of the loan (arrangement costs)


def _default_investors() -> tuple[Investor, ...]:
    return (Investor(id=1),)


@dataclass(frozen=True)
class DealInput:
    # Purchase
    property_value: Decimal = Decimal("110000")
    purchase_tax_type: PurchaseTaxType | str = PurchaseTaxType.ITP_10
    notary_fees: Decimal = Decimal("600")
    registry_fees: Decimal = Decimal("450")
    agency_fees: Decimal = Decimal("300")  # Gestoria
    brokerage_fees: Decimal = Decimal("0")  # Real-estate agency
    setup_electricity: bool = False
    setup_water: bool = False

    # Renovation
    area_sqm: Decimal = Decimal("70")
    renovation_cost_per_sqm: Decimal = Decimal("500")
    furniture_cost_per_sqm: Decimal = Decimal("40")
    contingency_rate: Decimal = Decimal("5")  # %
    general_expenses: Decimal = Decimal("0")
    technical_fees: Decimal = Decimal("0")  # Net of VAT
    renovation_vat_type: RenovationVatType | str = RenovationVatType.REDUCED
    icio_rate: Decimal = Decimal("5")  # % of renovation base cost

    # Disposition
    sale_price: Decimal = Decimal("195000")
    capital_gains_tax_rate: Decimal = Decimal("2")  # Plusvalia, % of sale price
    cee_cost: Decimal = Decimal("250")
    notary_sale_cost: Decimal = Decimal("500")

    # Rental
    rental_type: RentalModel | str = RentalModel.TRADITIONAL
    monthly_rent: Decimal = Decimal("700")
    number_of_rooms: int = 3
    rent_per_room: Decimal = Decimal("350")
    ibi_fee: Decimal = Decimal("150")  # Annual
    insurance_fee: Decimal = Decimal("150")  # Annual
    include_management_fee: bool = False
    include_cleaning_fee: bool = False

    investors: tuple[Investor, ...] = field(default_factory=_default_investors)


@dataclass(frozen=True)
class Conventions:
    """Formula variants that changed across versions of the report."""
    loan_basis: LoanBasis = LoanBasis.PROJECT_COST
    agency_fees_include_vat: bool = True


DEFAULT_CONVENTIONS = Conventions()
