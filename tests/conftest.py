"""Canonical test fixtures used across all tests.

Fixture: 110K€ flat, ITP 10%, 70 m² renovated at 500 €/m² + 40 €/m²
furniture, sold at 195K€. Single individual investor, 80% financed.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from flipcalc.models.deal import (
    DealInput,
    Investor,
    LoanBasis,
    Conventions,
    TaxSubjectType,
)


@pytest.fixture
def canonical_deal() -> DealInput:
    """The example deal the form opens with."""
    return DealInput()


@pytest.fixture
def two_investor_deal(canonical_deal) -> DealInput:
    """Same deal split 60/40 between a person and a company."""
    return replace(canonical_deal, investors=(
        Investor(id=1, participation=Decimal("60")),
        Investor(
            id=2,
            participation=Decimal("40"),
            tax_type=TaxSubjectType.COMPANY,
            financing_percentage=Decimal("50"),
            associated_costs_rate=Decimal("2"),
        ),
    ))


@pytest.fixture
def zero_cost_deal() -> DealInput:
    """Nothing to buy and nothing to renovate."""
    return DealInput(
        property_value=Decimal("0"),
        notary_fees=Decimal("0"),
        registry_fees=Decimal("0"),
        agency_fees=Decimal("0"),
        brokerage_fees=Decimal("0"),
        area_sqm=Decimal("0"),
    )


@pytest.fixture
def property_value_conventions() -> Conventions:
    return Conventions(loan_basis=LoanBasis.PROPERTY_VALUE)
