from dataclasses import replace
from decimal import Decimal

from flipcalc.engine.rental import (
    annual_cleaning_fee,
    rental_analysis,
    rental_scenarios,
    selected_scenario,
)
from flipcalc.models.deal import RentalModel

TOTAL_COST = Decimal("167570")


class TestRentalAnalysis:
    def test_traditional(self, canonical_deal):
        r = rental_analysis(canonical_deal, RentalModel.TRADITIONAL, TOTAL_COST)
        assert r.monthly_rent == Decimal("700")
        assert r.gross_annual_rent == Decimal("8400")
        assert r.annual_expenses == Decimal("300")
        assert r.net_annual_rent == Decimal("8100")
        assert round(r.gross_rental_yield, 2) == Decimal("5.01")
        assert round(r.net_rental_yield, 2) == Decimal("4.83")

    def test_by_rooms(self, canonical_deal):
        r = rental_analysis(canonical_deal, RentalModel.ROOMS, TOTAL_COST)
        assert r.monthly_rent == Decimal("1050")
        assert r.gross_annual_rent == Decimal("12600")
        assert r.net_annual_rent == Decimal("12300")

    def test_management_fee_is_one_month(self, canonical_deal):
        deal = replace(canonical_deal, include_management_fee=True)
        r = rental_analysis(deal, RentalModel.TRADITIONAL, TOTAL_COST)
        assert r.management_fee == Decimal("700")
        assert r.annual_expenses == Decimal("1000")

    def test_cleaning_fee(self, canonical_deal):
        deal = replace(canonical_deal, include_cleaning_fee=True)
        r = rental_analysis(deal, RentalModel.ROOMS, TOTAL_COST)
        assert annual_cleaning_fee() == Decimal("435.60")
        assert r.cleaning_fee == Decimal("435.60")
        assert r.annual_expenses == Decimal("735.60")

    def test_zero_cost_yields_zero(self, canonical_deal):
        r = rental_analysis(canonical_deal, RentalModel.TRADITIONAL, Decimal("0"))
        assert r.gross_rental_yield == Decimal("0")
        assert r.net_rental_yield == Decimal("0")


class TestScenarios:
    def test_both_computed_regardless_of_selection(self, canonical_deal):
        traditional = rental_scenarios(canonical_deal, TOTAL_COST)
        rooms = rental_scenarios(replace(canonical_deal, rental_type=RentalModel.ROOMS), TOTAL_COST)
        assert traditional == rooms

    def test_room_inputs_do_not_affect_traditional(self, canonical_deal):
        before = rental_scenarios(canonical_deal, TOTAL_COST)
        after = rental_scenarios(replace(canonical_deal, rent_per_room=Decimal("500")), TOTAL_COST)
        assert after.traditional == before.traditional
        assert after.by_rooms != before.by_rooms

    def test_selected_traditional(self, canonical_deal):
        scenarios = rental_scenarios(canonical_deal, TOTAL_COST)
        assert selected_scenario(canonical_deal, scenarios) is scenarios.traditional

    def test_selected_rooms(self, canonical_deal):
        deal = replace(canonical_deal, rental_type=RentalModel.ROOMS)
        scenarios = rental_scenarios(deal, TOTAL_COST)
        assert selected_scenario(deal, scenarios) is scenarios.by_rooms

    def test_unknown_model_selects_rooms(self, canonical_deal):
        deal = replace(canonical_deal, rental_type="holiday")
        scenarios = rental_scenarios(deal, TOTAL_COST)
        assert selected_scenario(deal, scenarios) is scenarios.by_rooms
