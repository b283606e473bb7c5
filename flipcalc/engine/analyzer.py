"""Deal analyzer: composes all engine sub-modules into a full analysis.

Pure computation. No I/O. DealInput in, CalculationResult out.
"""

import logging

from flipcalc.engine.financing import investor_breakdown, summarize_financing
from flipcalc.engine.purchase import compute_purchase_costs
from flipcalc.engine.renovation import compute_renovation_costs
from flipcalc.engine.rental import rental_scenarios, selected_scenario
from flipcalc.engine.sale import compute_sale_projection, ratio_pct
from flipcalc.models.deal import DealInput, Conventions, DEFAULT_CONVENTIONS
from flipcalc.models.results import CalculationResult, CalculationDetails

logger = logging.getLogger(__name__)


def analyze(
    deal: DealInput,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> CalculationResult:
    """Run the complete deal analysis.

    Investor participations are expected to add up to 100. That is not
    checked here: when they don't, the per-investor figures will not
    reconcile with the deal totals.
    """
    # 1-3. Costs
    purchase = compute_purchase_costs(deal, conventions.agency_fees_include_vat)
    renovation = compute_renovation_costs(deal)
    total_project_cost = purchase.total + renovation.total

    # 4. Sale
    sale = compute_sale_projection(
        sale_price=deal.sale_price,
        capital_gains_tax_rate=deal.capital_gains_tax_rate,
        cee_cost=deal.cee_cost,
        notary_sale_cost=deal.notary_sale_cost,
        total_project_cost=total_project_cost,
    )

    # 5-6. Financing and investor split
    breakdown = tuple(
        investor_breakdown(
            investor,
            total_project_cost=total_project_cost,
            profit_before_tax=sale.profit_before_tax,
            property_value=deal.property_value,
            loan_basis=conventions.loan_basis,
        )
        for investor in deal.investors
    )
    financing = summarize_financing(breakdown)

    # 7. Rental
    scenarios = rental_scenarios(deal, total_project_cost)
    rental = selected_scenario(deal, scenarios)

    details = CalculationDetails(
        property_value=purchase.property_value,
        purchase_tax=purchase.purchase_tax,
        notary_fees=purchase.notary_fees,
        registry_fees=purchase.registry_fees,
        agency_fees=purchase.agency_fees,
        brokerage_fees=purchase.brokerage_fees,
        agency_fees_vat=purchase.agency_fees_vat,
        renovation_base_cost=renovation.renovation_base_cost,
        renovation_vat=renovation.renovation_vat,
        furniture_base_cost=renovation.furniture_base_cost,
        furniture_vat=renovation.furniture_vat,
        contingency_amount=renovation.contingency_amount,
        general_expenses=renovation.general_expenses,
        technical_fees_base=renovation.technical_fees_base,
        technical_fees_vat=renovation.technical_fees_vat,
        icio_tax=renovation.icio_tax,
        supply_setup_cost=renovation.supply_setup_cost,
        capital_gains_tax=sale.capital_gains_tax,
        cee_cost=sale.cee_cost,
        notary_sale_cost=sale.notary_sale_cost,
        gross_annual_rent=rental.gross_annual_rent,
        annual_expenses=rental.annual_expenses,
        net_annual_rent=rental.net_annual_rent,
        gross_rental_yield=rental.gross_rental_yield,
        net_rental_yield=rental.net_rental_yield,
    )

    logger.debug(
        "Analyzed deal: cost=%s profit=%s investors=%d basis=%s",
        total_project_cost,
        sale.profit_before_tax,
        len(breakdown),
        conventions.loan_basis.value,
    )

    return CalculationResult(
        total_project_cost=total_project_cost,
        sale_profitability=sale.profitability,
        sale_profit_before_tax=sale.profit_before_tax,
        net_profit_after_tax=financing.net_profit_after_tax,
        total_purchase_cost=purchase.total,
        total_renovation_cost=renovation.total,
        total_licenses_cost=renovation.icio_tax,
        total_other_costs=renovation.other_costs,
        total_sale_expenses=sale.total_sale_expenses,
        loan_amount=financing.loan_amount,
        loan_associated_costs=financing.loan_associated_costs,
        total_capital_provided=financing.total_capital_provided,
        return_on_capital=ratio_pct(sale.profit_before_tax, financing.total_capital_provided),
        investor_breakdown=breakdown,
        details=details,
        gross_rental_yield=rental.gross_rental_yield,
        net_rental_yield=rental.net_rental_yield,
        rental_analysis=scenarios,
    )
