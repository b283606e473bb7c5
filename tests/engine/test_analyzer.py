"""End-to-end analysis of the canonical deal."""

from dataclasses import replace
from decimal import Decimal

from flipcalc.engine.analyzer import analyze
from flipcalc.models.deal import Conventions, Investor, RentalModel


class TestCanonicalDeal:
    def test_cost_totals(self, canonical_deal):
        result = analyze(canonical_deal)
        assert result.total_purchase_cost == Decimal("122350")
        assert result.total_renovation_cost == Decimal("45220")
        assert result.total_project_cost == Decimal("167570")
        assert result.total_licenses_cost == Decimal("1750")
        assert result.total_other_costs == Decimal("0")

    def test_sale(self, canonical_deal):
        result = analyze(canonical_deal)
        assert result.total_sale_expenses == Decimal("4650")
        assert result.sale_profit_before_tax == Decimal("22780")
        assert round(result.sale_profitability, 2) == Decimal("13.59")

    def test_financing(self, canonical_deal):
        result = analyze(canonical_deal)
        assert result.loan_amount == Decimal("134056")
        assert result.loan_associated_costs == Decimal("2010.84")
        assert result.total_capital_provided == Decimal("35524.84")
        assert result.net_profit_after_tax == Decimal("18116.20")
        assert round(result.return_on_capital, 2) == Decimal("64.12")

    def test_details(self, canonical_deal):
        d = analyze(canonical_deal).details
        assert d.purchase_tax == Decimal("11000")
        assert d.renovation_base_cost == Decimal("35000")
        assert d.furniture_base_cost == Decimal("2800")
        assert d.renovation_vat == Decimal("3780")
        assert d.contingency_amount == Decimal("1890")
        assert d.icio_tax == Decimal("1750")
        assert d.capital_gains_tax == Decimal("3900")

    def test_rental_mirrors_selected_scenario(self, canonical_deal):
        result = analyze(canonical_deal)
        traditional = result.rental_analysis.traditional
        assert result.gross_rental_yield == traditional.gross_rental_yield
        assert result.net_rental_yield == traditional.net_rental_yield
        assert result.details.net_annual_rent == traditional.net_annual_rent

        rooms = analyze(replace(canonical_deal, rental_type=RentalModel.ROOMS))
        assert rooms.net_rental_yield == rooms.rental_analysis.by_rooms.net_rental_yield

    def test_idempotent(self, canonical_deal):
        assert analyze(canonical_deal) == analyze(canonical_deal)


class TestTotalsReconcile:
    def test_project_cost_is_purchase_plus_renovation(self, two_investor_deal):
        result = analyze(two_investor_deal)
        assert result.total_project_cost == result.total_purchase_cost + result.total_renovation_cost

    def test_renovation_includes_licenses_and_other_costs(self, canonical_deal):
        deal = replace(canonical_deal, general_expenses=Decimal("1500"), setup_water=True)
        result = analyze(deal)
        assert result.total_other_costs == Decimal("1802.50")
        assert result.total_renovation_cost == Decimal("45220") + Decimal("1802.50")

    def test_profit_identity(self, two_investor_deal):
        result = analyze(two_investor_deal)
        assert result.sale_profit_before_tax == (
            two_investor_deal.sale_price - result.total_project_cost - result.total_sale_expenses
        )

    def test_aggregates_are_sums(self, two_investor_deal):
        result = analyze(two_investor_deal)
        breakdown = result.investor_breakdown
        assert result.loan_amount == sum(b.loan_amount for b in breakdown)
        assert result.total_capital_provided == sum(b.capital_provided for b in breakdown)
        assert result.net_profit_after_tax == sum(b.net_profit for b in breakdown)

    def test_gross_profits_add_up_to_deal_profit(self, two_investor_deal):
        result = analyze(two_investor_deal)
        assert sum(b.gross_profit for b in result.investor_breakdown) == result.sale_profit_before_tax

    def test_capital_identity(self, two_investor_deal):
        result = analyze(two_investor_deal)
        assert result.total_capital_provided == (
            result.total_project_cost - result.loan_amount + result.loan_associated_costs
        )

    def test_capital_identity_property_value_basis(self, two_investor_deal, property_value_conventions):
        result = analyze(two_investor_deal, property_value_conventions)
        assert result.total_capital_provided == (
            result.total_project_cost - result.loan_amount + result.loan_associated_costs
        )
        assert sum(b.gross_profit for b in result.investor_breakdown) == result.sale_profit_before_tax

    def test_capital_identity_per_investor(self, two_investor_deal):
        for b in analyze(two_investor_deal).investor_breakdown:
            assert b.capital_provided == b.cost_share - b.loan_amount + b.loan_associated_costs


class TestMultipleInvestors:
    def test_split(self, two_investor_deal):
        result = analyze(two_investor_deal)
        first, second = result.investor_breakdown
        assert first.cost_share == Decimal("100542")
        assert second.cost_share == Decimal("67028")
        assert first.tax_amount == Decimal("2750.28")
        assert second.tax_amount == Decimal("2278")
        assert result.net_profit_after_tax == Decimal("17751.72")

    def test_per_investor_financing(self, two_investor_deal):
        result = analyze(two_investor_deal)
        first, second = result.investor_breakdown
        assert first.loan_amount == Decimal("80433.6")
        assert second.loan_amount == Decimal("33514")
        assert second.loan_associated_costs == Decimal("670.28")
        assert result.total_capital_provided == Decimal("55499.184")

    def test_order_follows_input(self, two_investor_deal):
        result = analyze(two_investor_deal)
        assert [b.id for b in result.investor_breakdown] == [1, 2]

    def test_participation_not_totalling_100_still_computes(self, canonical_deal):
        deal = replace(canonical_deal, investors=(Investor(id=1, participation=Decimal("50")),))
        result = analyze(deal)
        assert result.investor_breakdown[0].cost_share == Decimal("83785")
        assert result.total_project_cost == Decimal("167570")


class TestConventions:
    def test_property_value_basis(self, canonical_deal, property_value_conventions):
        result = analyze(canonical_deal, property_value_conventions)
        assert result.loan_amount == Decimal("88000")
        assert result.total_capital_provided == Decimal("80890")
        # Costs and profit do not depend on the loan basis
        assert result.total_project_cost == Decimal("167570")
        assert result.sale_profit_before_tax == Decimal("22780")

    def test_net_agency_fees(self, canonical_deal):
        result = analyze(canonical_deal, Conventions(agency_fees_include_vat=False))
        assert result.details.agency_fees_vat == Decimal("63")
        assert result.total_purchase_cost == Decimal("122413")


class TestDegenerateInputs:
    def test_zero_cost(self, zero_cost_deal):
        result = analyze(zero_cost_deal)
        assert result.total_project_cost == Decimal("0")
        assert result.sale_profitability == Decimal("0")
        assert result.gross_rental_yield == Decimal("0")
        assert result.rental_analysis.by_rooms.net_rental_yield == Decimal("0")
        assert result.return_on_capital == Decimal("0")

    def test_no_investors(self, canonical_deal):
        result = analyze(replace(canonical_deal, investors=()))
        assert result.investor_breakdown == ()
        assert result.loan_amount == Decimal("0")
        assert result.net_profit_after_tax == Decimal("0")
        assert result.return_on_capital == Decimal("0")

    def test_loss(self, canonical_deal):
        result = analyze(replace(canonical_deal, sale_price=Decimal("150000")))
        assert result.sale_profit_before_tax < 0
        assert result.sale_profitability < 0
