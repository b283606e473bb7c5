from decimal import Decimal

from flipcalc.engine.financing import (
    investor_breakdown,
    investor_loan_amount,
    summarize_financing,
)
from flipcalc.models.deal import Investor, LoanBasis, TaxSubjectType

TOTAL_COST = Decimal("167570")
PROFIT = Decimal("22780")
PROPERTY_VALUE = Decimal("110000")


class TestLoanAmount:
    def test_project_cost_basis(self):
        investor = Investor(id=1)
        loan = investor_loan_amount(investor, TOTAL_COST, PROPERTY_VALUE)
        assert loan == Decimal("134056")

    def test_property_value_basis(self):
        investor = Investor(id=1)
        loan = investor_loan_amount(investor, TOTAL_COST, PROPERTY_VALUE, LoanBasis.PROPERTY_VALUE)
        assert loan == Decimal("88000")

    def test_property_value_basis_is_pro_rata(self):
        investor = Investor(id=1, participation=Decimal("25"))
        loan = investor_loan_amount(
            investor, TOTAL_COST / 4, PROPERTY_VALUE, LoanBasis.PROPERTY_VALUE,
        )
        assert loan == Decimal("22000")

    def test_no_financing(self):
        investor = Investor(id=1, financing_percentage=Decimal("0"))
        assert investor_loan_amount(investor, TOTAL_COST, PROPERTY_VALUE) == Decimal("0")


class TestInvestorBreakdown:
    def test_single_investor(self):
        b = investor_breakdown(Investor(id=1), TOTAL_COST, PROFIT, PROPERTY_VALUE)
        assert b.cost_share == TOTAL_COST
        assert b.loan_amount == Decimal("134056")
        assert b.loan_associated_costs == Decimal("2010.84")
        assert b.capital_provided == Decimal("35524.84")
        assert b.gross_profit == PROFIT
        assert b.tax_amount == Decimal("4663.80")
        assert b.net_profit == Decimal("18116.20")

    def test_property_value_basis_capital(self):
        b = investor_breakdown(
            Investor(id=1), TOTAL_COST, PROFIT, PROPERTY_VALUE, LoanBasis.PROPERTY_VALUE,
        )
        assert b.loan_associated_costs == Decimal("1320")
        assert b.capital_provided == Decimal("80890")

    def test_company_share(self):
        investor = Investor(id=2, participation=Decimal("40"), tax_type=TaxSubjectType.COMPANY)
        b = investor_breakdown(investor, TOTAL_COST, PROFIT, PROPERTY_VALUE)
        assert b.cost_share == Decimal("67028")
        assert b.gross_profit == Decimal("9112")
        assert b.tax_amount == Decimal("2278")
        assert b.net_profit == Decimal("6834")

    def test_loss_with_company_has_no_credit(self):
        investor = Investor(id=1, tax_type=TaxSubjectType.COMPANY)
        b = investor_breakdown(investor, TOTAL_COST, Decimal("-1000"), PROPERTY_VALUE)
        assert b.tax_amount == Decimal("0")
        assert b.net_profit == Decimal("-1000")

    def test_loss_with_individual_gets_credit(self):
        b = investor_breakdown(Investor(id=1), TOTAL_COST, Decimal("-1000"), PROPERTY_VALUE)
        assert b.tax_amount == Decimal("-190")
        assert b.net_profit == Decimal("-810")

    def test_unknown_tax_type_reported_as_individual(self):
        b = investor_breakdown(Investor(id=1, tax_type="trust"), TOTAL_COST, PROFIT, PROPERTY_VALUE)
        assert b.tax_type is TaxSubjectType.INDIVIDUAL


class TestSummarizeFinancing:
    def test_sums_over_investors(self):
        breakdown = (
            investor_breakdown(Investor(id=1, participation=Decimal("60")), TOTAL_COST, PROFIT, PROPERTY_VALUE),
            investor_breakdown(Investor(id=2, participation=Decimal("40")), TOTAL_COST, PROFIT, PROPERTY_VALUE),
        )
        summary = summarize_financing(breakdown)
        assert summary.loan_amount == Decimal("134056")
        assert summary.loan_associated_costs == Decimal("2010.84")
        assert summary.total_capital_provided == sum(b.capital_provided for b in breakdown)
        assert summary.net_profit_after_tax == sum(b.net_profit for b in breakdown)

    def test_empty(self):
        summary = summarize_financing(())
        assert summary.loan_amount == Decimal("0")
        assert summary.total_capital_provided == Decimal("0")
