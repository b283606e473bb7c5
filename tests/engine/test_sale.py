from decimal import Decimal

from flipcalc.engine.sale import compute_sale_projection, ratio_pct


class TestRatioPct:
    def test_basic(self):
        assert ratio_pct(Decimal("15"), Decimal("60")) == Decimal("25")

    def test_zero_denominator(self):
        assert ratio_pct(Decimal("100"), Decimal("0")) == Decimal("0")

    def test_negative_denominator(self):
        assert ratio_pct(Decimal("100"), Decimal("-50")) == Decimal("0")


class TestSaleProjection:
    def test_canonical_sale(self):
        sale = compute_sale_projection(
            sale_price=Decimal("195000"),
            capital_gains_tax_rate=Decimal("2"),
            cee_cost=Decimal("250"),
            notary_sale_cost=Decimal("500"),
            total_project_cost=Decimal("167570"),
        )
        assert sale.capital_gains_tax == Decimal("3900")
        assert sale.total_sale_expenses == Decimal("4650")
        assert sale.profit_before_tax == Decimal("22780")
        assert round(sale.profitability, 2) == Decimal("13.59")

    def test_loss(self):
        sale = compute_sale_projection(
            sale_price=Decimal("100000"),
            capital_gains_tax_rate=Decimal("0"),
            cee_cost=Decimal("0"),
            notary_sale_cost=Decimal("0"),
            total_project_cost=Decimal("125000"),
        )
        assert sale.profit_before_tax == Decimal("-25000")
        assert sale.profitability == Decimal("-20")

    def test_zero_project_cost(self):
        """Profitability is 0, not a division error, when nothing was spent."""
        sale = compute_sale_projection(
            sale_price=Decimal("50000"),
            capital_gains_tax_rate=Decimal("2"),
            cee_cost=Decimal("0"),
            notary_sale_cost=Decimal("0"),
            total_project_cost=Decimal("0"),
        )
        assert sale.profit_before_tax == Decimal("49000")
        assert sale.profitability == Decimal("0")
