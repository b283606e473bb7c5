from dataclasses import replace
from decimal import Decimal

from flipcalc.engine.analyzer import analyze
from flipcalc.engine.report import investment_growth, summary_highlights


class TestInvestmentGrowth:
    def test_split(self):
        growth = investment_growth(Decimal("75"), Decimal("110"), Decimal("25"))
        assert growth.cost_pct == Decimal("75")
        assert growth.profit_pct == Decimal("25")
        assert growth.sale_price == Decimal("110")

    def test_loss_not_drawn(self):
        growth = investment_growth(Decimal("100000"), Decimal("90000"), Decimal("-15000"))
        assert growth.cost_pct == Decimal("100")
        assert growth.profit_pct == Decimal("0")
        assert growth.profit == Decimal("-15000")

    def test_empty_bar(self):
        growth = investment_growth(Decimal("0"), Decimal("0"), Decimal("0"))
        assert growth.cost_pct == Decimal("100")
        assert growth.profit_pct == Decimal("0")


class TestSummaryHighlights:
    def test_canonical_deal_is_below_thresholds(self, canonical_deal):
        highlights = summary_highlights(analyze(canonical_deal))
        assert not highlights.sale_profitability_good
        assert not highlights.rental_yield_good

    def test_good_deal(self, canonical_deal):
        deal = replace(canonical_deal, sale_price=Decimal("230000"), monthly_rent=Decimal("1000"))
        highlights = summary_highlights(analyze(deal))
        assert highlights.sale_profitability_good
        assert highlights.rental_yield_good
