from decimal import Decimal

from flipcalc.engine.tax import corporate_tax, irpf_tax, profit_tax
from flipcalc.models.deal import TaxSubjectType


class TestIrpf:
    def test_first_bracket(self):
        assert irpf_tax(Decimal("6000")) == Decimal("1140")

    def test_second_bracket_boundary(self):
        """6000 * 19% + 44000 * 21%."""
        assert irpf_tax(Decimal("50000")) == Decimal("10380")

    def test_third_bracket_boundary(self):
        assert irpf_tax(Decimal("200000")) == Decimal("44880")

    def test_top_bracket(self):
        assert irpf_tax(Decimal("250000")) == Decimal("57880")

    def test_canonical_profit(self):
        assert irpf_tax(Decimal("22780")) == Decimal("4663.80")

    def test_zero(self):
        assert irpf_tax(Decimal("0")) == Decimal("0")

    def test_loss_gives_credit(self):
        """Losses fall in the first bracket and come back negative."""
        assert irpf_tax(Decimal("-5000")) == Decimal("-950")


class TestCorporate:
    def test_flat_rate(self):
        assert corporate_tax(Decimal("10000")) == Decimal("2500")

    def test_loss_is_untaxed(self):
        assert corporate_tax(Decimal("-5000")) == Decimal("0")

    def test_zero(self):
        assert corporate_tax(Decimal("0")) == Decimal("0")


class TestProfitTax:
    def test_dispatch_individual(self):
        assert profit_tax(Decimal("6000"), TaxSubjectType.INDIVIDUAL) == Decimal("1140")

    def test_dispatch_company(self):
        assert profit_tax(Decimal("6000"), TaxSubjectType.COMPANY) == Decimal("1500")

    def test_raw_value(self):
        assert profit_tax(Decimal("6000"), "company") == Decimal("1500")

    def test_unknown_type_taxed_as_individual(self):
        assert profit_tax(Decimal("6000"), "trust") == Decimal("1140")
