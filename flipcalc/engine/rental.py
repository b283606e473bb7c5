"""Rental yield for the whole-unit and per-room scenarios.

Pure functions. No I/O.
"""

from decimal import Decimal

from flipcalc.engine.purchase import VAT_RATE
from flipcalc.engine.sale import ratio_pct
from flipcalc.models.deal import DealInput, RentalModel
from flipcalc.models.results import RentalAnalysis, RentalScenarios

CLEANING_FEE_MONTHLY = Decimal("30")  # Net of VAT


def scenario_monthly_rent(deal: DealInput, model: RentalModel) -> Decimal:
    if model is RentalModel.TRADITIONAL:
        return deal.monthly_rent
    return deal.number_of_rooms * deal.rent_per_room


def annual_cleaning_fee() -> Decimal:
    return CLEANING_FEE_MONTHLY * (1 + VAT_RATE) * 12


def rental_analysis(
    deal: DealInput,
    model: RentalModel,
    total_project_cost: Decimal,
) -> RentalAnalysis:
    """Gross and net yield of one rental scenario.

    Management costs one month's rent per year; cleaning is a fixed monthly
    fee plus VAT.
    """
    monthly = scenario_monthly_rent(deal, model)
    management_fee = monthly if deal.include_management_fee else Decimal("0")
    cleaning_fee = annual_cleaning_fee() if deal.include_cleaning_fee else Decimal("0")

    gross_annual = monthly * 12
    expenses = deal.ibi_fee + deal.insurance_fee + management_fee + cleaning_fee
    net_annual = gross_annual - expenses

    return RentalAnalysis(
        monthly_rent=monthly,
        management_fee=management_fee,
        cleaning_fee=cleaning_fee,
        gross_annual_rent=gross_annual,
        annual_expenses=expenses,
        net_annual_rent=net_annual,
        gross_rental_yield=ratio_pct(gross_annual, total_project_cost),
        net_rental_yield=ratio_pct(net_annual, total_project_cost),
    )


def rental_scenarios(deal: DealInput, total_project_cost: Decimal) -> RentalScenarios:
    """Both scenarios, always, so the caller can switch without recomputing."""
    return RentalScenarios(
        traditional=rental_analysis(deal, RentalModel.TRADITIONAL, total_project_cost),
        by_rooms=rental_analysis(deal, RentalModel.ROOMS, total_project_cost),
    )


def selected_scenario(deal: DealInput, scenarios: RentalScenarios) -> RentalAnalysis:
    """Scenario chosen in the input; anything but 'traditional' means rooms."""
    try:
        model = RentalModel(deal.rental_type)
    except ValueError:
        model = RentalModel.ROOMS
    if model is RentalModel.TRADITIONAL:
        return scenarios.traditional
    return scenarios.by_rooms
