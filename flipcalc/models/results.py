from dataclasses import dataclass, field
from decimal import Decimal

from flipcalc.models.deal import TaxSubjectType


@dataclass(frozen=True)
class InvestorBreakdown:
    id: int
    participation: Decimal
    tax_type: TaxSubjectType
    cost_share: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    loan_associated_costs: Decimal = Decimal("0")
    capital_provided: Decimal = Decimal("0")
    gross_profit: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")  # Negative = credit (IRPF on a loss)
    net_profit: Decimal = Decimal("0")


@dataclass(frozen=True)
class RentalAnalysis:
    monthly_rent: Decimal = Decimal("0")
    management_fee: Decimal = Decimal("0")
    cleaning_fee: Decimal = Decimal("0")
    gross_annual_rent: Decimal = Decimal("0")
    annual_expenses: Decimal = Decimal("0")
    net_annual_rent: Decimal = Decimal("0")
    gross_rental_yield: Decimal = Decimal("0")  # % of total project cost
    net_rental_yield: Decimal = Decimal("0")


@dataclass(frozen=True)
class RentalScenarios:
    traditional: RentalAnalysis = field(default_factory=RentalAnalysis)
    by_rooms: RentalAnalysis = field(default_factory=RentalAnalysis)


@dataclass(frozen=True)
class CalculationDetails:
    # Purchase
    property_value: Decimal = Decimal("0")
    purchase_tax: Decimal = Decimal("0")
    notary_fees: Decimal = Decimal("0")
    registry_fees: Decimal = Decimal("0")
    agency_fees: Decimal = Decimal("0")
    brokerage_fees: Decimal = Decimal("0")
    agency_fees_vat: Decimal = Decimal("0")  # Only when fees are entered net of VAT

    # Renovation & other costs
    renovation_base_cost: Decimal = Decimal("0")
    renovation_vat: Decimal = Decimal("0")  # On renovation + furniture
    furniture_base_cost: Decimal = Decimal("0")
    furniture_vat: Decimal = Decimal("0")  # Portion of renovation_vat, not additive
    contingency_amount: Decimal = Decimal("0")
    general_expenses: Decimal = Decimal("0")
    technical_fees_base: Decimal = Decimal("0")
    technical_fees_vat: Decimal = Decimal("0")
    icio_tax: Decimal = Decimal("0")
    supply_setup_cost: Decimal = Decimal("0")

    # Sale
    capital_gains_tax: Decimal = Decimal("0")
    cee_cost: Decimal = Decimal("0")
    notary_sale_cost: Decimal = Decimal("0")

    # Rental (selected scenario)
    gross_annual_rent: Decimal = Decimal("0")
    annual_expenses: Decimal = Decimal("0")
    net_annual_rent: Decimal = Decimal("0")
    gross_rental_yield: Decimal = Decimal("0")
    net_rental_yield: Decimal = Decimal("0")


@dataclass(frozen=True)
class CalculationResult:
    total_project_cost: Decimal = Decimal("0")
    sale_profitability: Decimal = Decimal("0")  # % on cost
    sale_profit_before_tax: Decimal = Decimal("0")
    net_profit_after_tax: Decimal = Decimal("0")

    total_purchase_cost: Decimal = Decimal("0")
    total_renovation_cost: Decimal = Decimal("0")
    total_licenses_cost: Decimal = Decimal("0")  # ICIO, part of renovation cost
    total_other_costs: Decimal = Decimal("0")  # Part of renovation cost
    total_sale_expenses: Decimal = Decimal("0")

    loan_amount: Decimal = Decimal("0")
    loan_associated_costs: Decimal = Decimal("0")
    total_capital_provided: Decimal = Decimal("0")
    return_on_capital: Decimal = Decimal("0")  # % on capital provided

    investor_breakdown: tuple[InvestorBreakdown, ...] = ()
    details: CalculationDetails = field(default_factory=CalculationDetails)

    # Mirrors the scenario selected in the input
    gross_rental_yield: Decimal = Decimal("0")
    net_rental_yield: Decimal = Decimal("0")

    rental_analysis: RentalScenarios = field(default_factory=RentalScenarios)
