"""Analysis routes — the primary API entry point."""

from fastapi import APIRouter, Depends

from flipcalc.api.convert import conventions_for, deal_from_request, deal_to_request, result_to_response
from flipcalc.api.deps import get_conventions
from flipcalc.api.schemas import AnalysisResponse, DealRequest
from flipcalc.engine.analyzer import analyze
from flipcalc.engine.editing import reset_deal
from flipcalc.models.deal import Conventions

router = APIRouter(prefix="/api/v1", tags=["analysis"])


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_deal(
    req: DealRequest,
    defaults: Conventions = Depends(get_conventions),
):
    """Deal parameters → full cost, profit, financing and rental analysis.

    Participation that does not total 100% is reported in the response,
    not rejected.
    """
    deal = deal_from_request(req)
    conventions = conventions_for(req, defaults)
    result = analyze(deal, conventions)
    return result_to_response(result, deal, conventions)


@router.get("/deal/default", response_model=DealRequest)
async def default_deal():
    """The example deal the form starts from."""
    return deal_to_request(reset_deal())
