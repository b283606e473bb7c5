"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from flipcalc.models.deal import (
    LoanBasis,
    PurchaseTaxType,
    RenovationVatType,
    RentalModel,
    TaxSubjectType,
)


# ---- Request schemas ----

class InvestorSchema(BaseModel):
    id: int | None = Field(None, description="Stable investor token; assigned when omitted")
    participation: Decimal = Decimal("100")
    tax_type: TaxSubjectType = TaxSubjectType.INDIVIDUAL
    financing_percentage: Decimal = Decimal("80")
    loan_interest_rate: Decimal = Decimal("3")
    associated_costs_rate: Decimal = Decimal("1.5")


class DealRequest(BaseModel):
    # Purchase
    property_value: Decimal = Decimal("110000")
    purchase_tax_type: PurchaseTaxType = PurchaseTaxType.ITP_10
    notary_fees: Decimal = Decimal("600")
    registry_fees: Decimal = Decimal("450")
    agency_fees: Decimal = Decimal("300")
    brokerage_fees: Decimal = Decimal("0")
    setup_electricity: bool = False
    setup_water: bool = False

    # Renovation
    area_sqm: Decimal = Decimal("70")
    renovation_cost_per_sqm: Decimal = Decimal("500")
    furniture_cost_per_sqm: Decimal = Decimal("40")
    contingency_rate: Decimal = Decimal("5")
    general_expenses: Decimal = Decimal("0")
    technical_fees: Decimal = Decimal("0")
    renovation_vat_type: RenovationVatType = RenovationVatType.REDUCED
    icio_rate: Decimal = Decimal("5")

    # Disposition
    sale_price: Decimal = Decimal("195000")
    capital_gains_tax_rate: Decimal = Decimal("2")
    cee_cost: Decimal = Decimal("250")
    notary_sale_cost: Decimal = Decimal("500")

    # Rental
    rental_type: RentalModel = RentalModel.TRADITIONAL
    monthly_rent: Decimal = Decimal("700")
    number_of_rooms: int = 3
    rent_per_room: Decimal = Decimal("350")
    ibi_fee: Decimal = Decimal("150")
    insurance_fee: Decimal = Decimal("150")
    include_management_fee: bool = False
    include_cleaning_fee: bool = False

    investors: list[InvestorSchema] = Field(default_factory=lambda: [InvestorSchema(id=1)])

    # Formula conventions; server settings apply when omitted
    loan_basis: LoanBasis | None = None
    agency_fees_include_vat: bool | None = None


class RebalanceRequest(BaseModel):
    investors: list[InvestorSchema]
    count: int = Field(..., ge=1, description="New number of investors")


# ---- Response schemas ----

class InvestorBreakdownResponse(BaseModel):
    id: int
    participation: Decimal
    tax_type: TaxSubjectType
    cost_share: Decimal
    loan_amount: Decimal
    loan_associated_costs: Decimal
    capital_provided: Decimal
    gross_profit: Decimal
    tax_amount: Decimal
    net_profit: Decimal


class RentalAnalysisResponse(BaseModel):
    monthly_rent: Decimal
    management_fee: Decimal
    cleaning_fee: Decimal
    gross_annual_rent: Decimal
    annual_expenses: Decimal
    net_annual_rent: Decimal
    gross_rental_yield: Decimal
    net_rental_yield: Decimal


class RentalScenariosResponse(BaseModel):
    traditional: RentalAnalysisResponse
    by_rooms: RentalAnalysisResponse


class CalculationDetailsResponse(BaseModel):
    property_value: Decimal
    purchase_tax: Decimal
    notary_fees: Decimal
    registry_fees: Decimal
    agency_fees: Decimal
    brokerage_fees: Decimal
    agency_fees_vat: Decimal
    renovation_base_cost: Decimal
    renovation_vat: Decimal
    furniture_base_cost: Decimal
    furniture_vat: Decimal
    contingency_amount: Decimal
    general_expenses: Decimal
    technical_fees_base: Decimal
    technical_fees_vat: Decimal
    icio_tax: Decimal
    supply_setup_cost: Decimal
    capital_gains_tax: Decimal
    cee_cost: Decimal
    notary_sale_cost: Decimal
    gross_annual_rent: Decimal
    annual_expenses: Decimal
    net_annual_rent: Decimal
    gross_rental_yield: Decimal
    net_rental_yield: Decimal


class AnalysisResponse(BaseModel):
    total_project_cost: Decimal
    sale_profitability: Decimal
    sale_profit_before_tax: Decimal
    net_profit_after_tax: Decimal
    total_purchase_cost: Decimal
    total_renovation_cost: Decimal
    total_licenses_cost: Decimal
    total_other_costs: Decimal
    total_sale_expenses: Decimal
    loan_amount: Decimal
    loan_associated_costs: Decimal
    total_capital_provided: Decimal
    return_on_capital: Decimal
    investor_breakdown: list[InvestorBreakdownResponse]
    details: CalculationDetailsResponse
    gross_rental_yield: Decimal
    net_rental_yield: Decimal
    rental_analysis: RentalScenariosResponse

    # Editing-surface checks, reported but not enforced
    participation_total: Decimal
    participation_valid: bool
    loan_basis: LoanBasis
    agency_fees_include_vat: bool


class RebalanceResponse(BaseModel):
    investors: list[InvestorSchema]
    participation_total: Decimal


class ListingResponse(BaseModel):
    description: str
    price: Decimal
    surface: Decimal
    url: str = ""


class MarketResponse(BaseModel):
    address: str
    average_price_per_sqm: Decimal
    similar_listings: list[ListingResponse] = []
    map_url: str | None = None
