"""Investor list routes."""

from fastapi import APIRouter, HTTPException

from flipcalc.api.convert import investor_from_schema, investor_to_schema
from flipcalc.api.schemas import RebalanceRequest, RebalanceResponse
from flipcalc.engine.editing import rebalance, total_participation

router = APIRouter(prefix="/api/v1/investors", tags=["investor"])


@router.post("/rebalance", response_model=RebalanceResponse)
async def rebalance_investors(req: RebalanceRequest):
    """Resize the investor list and split participation evenly."""
    investors = tuple(investor_from_schema(inv) for inv in req.investors)
    try:
        resized = rebalance(investors, req.count)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return RebalanceResponse(
        investors=[investor_to_schema(inv) for inv in resized],
        participation_total=total_participation(resized),
    )
