"""Form-side helpers: apply typed edits, rebalance investors, check participation.

Pure functions: every edit returns a new DealInput.
"""

import itertools
from dataclasses import fields, replace
from decimal import Decimal, ROUND_HALF_UP

from flipcalc.models.deal import DealInput, Investor, TaxSubjectType
from flipcalc.models.updates import (
    DealUpdate,
    InvestorUpdate,
    PurchaseUpdate,
    RenovationUpdate,
    RentalUpdate,
    SaleUpdate,
)

TWO_PLACES = Decimal("0.01")
FULL_PARTICIPATION = Decimal("100")

# Defaults for investors added by rebalance()
DEFAULT_TAX_TYPE = TaxSubjectType.INDIVIDUAL
DEFAULT_FINANCING_PCT = Decimal("80")
DEFAULT_LOAN_RATE = Decimal("3")
DEFAULT_ASSOCIATED_COSTS_RATE = Decimal("1.5")

# Starts above the id of the default investor
_investor_ids = itertools.count(2)


def new_investor_id() -> int:
    return next(_investor_ids)


def _changes(update) -> dict:
    return {
        f.name: getattr(update, f.name)
        for f in fields(update)
        if f.name != "investor_id" and getattr(update, f.name) is not None
    }


def _clamp_participation(value: Decimal) -> Decimal:
    if value.is_nan() or value < 0:
        return Decimal("0")
    return value


def _update_investor(deal: DealInput, update: InvestorUpdate) -> DealInput:
    changes = _changes(update)
    if "participation" in changes:
        changes["participation"] = _clamp_participation(changes["participation"])

    investors = tuple(
        replace(inv, **changes) if inv.id == update.investor_id else inv
        for inv in deal.investors
    )
    return replace(deal, investors=investors)


def apply_update(deal: DealInput, update: DealUpdate) -> DealInput:
    """Return a new deal with the update's non-None fields applied.

    Unknown investor ids leave the deal unchanged.
    """
    if isinstance(update, InvestorUpdate):
        return _update_investor(deal, update)
    if isinstance(update, (PurchaseUpdate, RenovationUpdate, SaleUpdate, RentalUpdate)):
        return replace(deal, **_changes(update))
    raise TypeError(f"Unsupported deal update: {type(update).__name__}")


def rebalance(investors: tuple[Investor, ...], new_count: int) -> tuple[Investor, ...]:
    """Resize the investor list and split participation evenly.

    Each investor gets 100 / n rounded to 2 decimals; the last one absorbs the
    rounding remainder so the total is exactly 100. Investors whose index
    survives keep their other fields.
    """
    if new_count < 1:
        raise ValueError(f"Investor count must be at least 1, got {new_count}")

    share = (FULL_PARTICIPATION / new_count).quantize(TWO_PLACES, ROUND_HALF_UP)

    resized: list[Investor] = []
    for i in range(new_count):
        if i < len(investors):
            resized.append(replace(investors[i], participation=share))
        else:
            resized.append(Investor(
                id=new_investor_id(),
                participation=share,
                tax_type=DEFAULT_TAX_TYPE,
                financing_percentage=DEFAULT_FINANCING_PCT,
                loan_interest_rate=DEFAULT_LOAN_RATE,
                associated_costs_rate=DEFAULT_ASSOCIATED_COSTS_RATE,
            ))

    remainder = FULL_PARTICIPATION - share * new_count
    last = resized[-1]
    resized[-1] = replace(
        last,
        participation=(last.participation + remainder).quantize(TWO_PLACES, ROUND_HALF_UP),
    )
    return tuple(resized)


def total_participation(investors: tuple[Investor, ...]) -> Decimal:
    return sum((inv.participation for inv in investors), Decimal("0"))


def participation_is_valid(investors: tuple[Investor, ...]) -> bool:
    """Participation must total exactly 100 after rounding to 2 decimals."""
    total = total_participation(investors).quantize(TWO_PLACES, ROUND_HALF_UP)
    return total == FULL_PARTICIPATION


def reset_deal() -> DealInput:
    return DealInput()
