"""Mapping between API schemas and engine dataclasses."""

from dataclasses import asdict

from flipcalc.api.schemas import (
    AnalysisResponse,
    CalculationDetailsResponse,
    DealRequest,
    InvestorBreakdownResponse,
    InvestorSchema,
    RentalAnalysisResponse,
    RentalScenariosResponse,
)
from flipcalc.engine.editing import new_investor_id, participation_is_valid, total_participation
from flipcalc.models.deal import Conventions, DealInput, Investor
from flipcalc.models.results import CalculationResult

_CONVENTION_FIELDS = {"loan_basis", "agency_fees_include_vat"}


def investor_from_schema(schema: InvestorSchema) -> Investor:
    return Investor(
        id=schema.id if schema.id is not None else new_investor_id(),
        participation=schema.participation,
        tax_type=schema.tax_type,
        financing_percentage=schema.financing_percentage,
        loan_interest_rate=schema.loan_interest_rate,
        associated_costs_rate=schema.associated_costs_rate,
    )


def investor_to_schema(investor: Investor) -> InvestorSchema:
    return InvestorSchema(**asdict(investor))


def deal_from_request(req: DealRequest) -> DealInput:
    fields = req.model_dump(exclude={"investors"} | _CONVENTION_FIELDS)
    investors = tuple(investor_from_schema(inv) for inv in req.investors)
    return DealInput(**fields, investors=investors)


def deal_to_request(deal: DealInput) -> DealRequest:
    fields = asdict(deal)
    fields["investors"] = [investor_to_schema(inv) for inv in deal.investors]
    return DealRequest(**fields)


def conventions_for(req: DealRequest, defaults: Conventions) -> Conventions:
    """Request overrides win over server defaults."""
    return Conventions(
        loan_basis=req.loan_basis or defaults.loan_basis,
        agency_fees_include_vat=(
            req.agency_fees_include_vat
            if req.agency_fees_include_vat is not None
            else defaults.agency_fees_include_vat
        ),
    )


def result_to_response(
    result: CalculationResult,
    deal: DealInput,
    conventions: Conventions,
) -> AnalysisResponse:
    """Convert engine CalculationResult to API response."""
    scenarios = result.rental_analysis
    return AnalysisResponse(
        total_project_cost=result.total_project_cost,
        sale_profitability=result.sale_profitability,
        sale_profit_before_tax=result.sale_profit_before_tax,
        net_profit_after_tax=result.net_profit_after_tax,
        total_purchase_cost=result.total_purchase_cost,
        total_renovation_cost=result.total_renovation_cost,
        total_licenses_cost=result.total_licenses_cost,
        total_other_costs=result.total_other_costs,
        total_sale_expenses=result.total_sale_expenses,
        loan_amount=result.loan_amount,
        loan_associated_costs=result.loan_associated_costs,
        total_capital_provided=result.total_capital_provided,
        return_on_capital=result.return_on_capital,
        investor_breakdown=[
            InvestorBreakdownResponse(**asdict(b)) for b in result.investor_breakdown
        ],
        details=CalculationDetailsResponse(**asdict(result.details)),
        gross_rental_yield=result.gross_rental_yield,
        net_rental_yield=result.net_rental_yield,
        rental_analysis=RentalScenariosResponse(
            traditional=RentalAnalysisResponse(**asdict(scenarios.traditional)),
            by_rooms=RentalAnalysisResponse(**asdict(scenarios.by_rooms)),
        ),
        participation_total=total_participation(deal.investors),
        participation_valid=participation_is_valid(deal.investors),
        loan_basis=conventions.loan_basis,
        agency_fees_include_vat=conventions.agency_fees_include_vat,
    )
