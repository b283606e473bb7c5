"""Typed edits to a DealInput, one record per group of form fields.

A None field means "leave unchanged".
"""

from dataclasses import dataclass
from decimal import Decimal

from flipcalc.models.deal import PurchaseTaxType, RenovationVatType, RentalModel, TaxSubjectType


@dataclass(frozen=True)
class PurchaseUpdate:
    property_value: Decimal | None = None
    purchase_tax_type: PurchaseTaxType | None = None
    notary_fees: Decimal | None = None
    registry_fees: Decimal | None = None
    agency_fees: Decimal | None = None
    brokerage_fees: Decimal | None = None
    setup_electricity: bool | None = None
    setup_water: bool | None = None


@dataclass(frozen=True)
class RenovationUpdate:
    area_sqm: Decimal | None = None
    renovation_cost_per_sqm: Decimal | None = None
    furniture_cost_per_sqm: Decimal | None = None
    contingency_rate: Decimal | None = None
    general_expenses: Decimal | None = None
    technical_fees: Decimal | None = None
    renovation_vat_type: RenovationVatType | None = None
    icio_rate: Decimal | None = None


@dataclass(frozen=True)
class SaleUpdate:
    sale_price: Decimal | None = None
    capital_gains_tax_rate: Decimal | None = None
    cee_cost: Decimal | None = None
    notary_sale_cost: Decimal | None = None


@dataclass(frozen=True)
class RentalUpdate:
    rental_type: RentalModel | None = None
    monthly_rent: Decimal | None = None
    number_of_rooms: int | None = None
    rent_per_room: Decimal | None = None
    ibi_fee: Decimal | None = None
    insurance_fee: Decimal | None = None
    include_management_fee: bool | None = None
    include_cleaning_fee: bool | None = None


@dataclass(frozen=True)
class InvestorUpdate:
    investor_id: int
    participation: Decimal | None = None
    tax_type: TaxSubjectType | None = None
    financing_percentage: Decimal | None = None
    loan_interest_rate: Decimal | None = None
    associated_costs_rate: Decimal | None = None


DealUpdate = PurchaseUpdate | RenovationUpdate | SaleUpdate | RentalUpdate | InvestorUpdate
