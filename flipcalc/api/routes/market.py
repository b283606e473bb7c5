"""Market data routes."""

from fastapi import APIRouter, Depends, HTTPException, Query

from flipcalc.api.deps import get_market_source
from flipcalc.api.schemas import ListingResponse, MarketResponse
from flipcalc.data.base import MarketDataSource
from flipcalc.models.errors import MarketLookupError

router = APIRouter(prefix="/api/v1/market", tags=["market"])


@router.get("/lookup", response_model=MarketResponse)
async def lookup_market(
    address: str = Query(..., min_length=1, description="Free-text address"),
    source: MarketDataSource = Depends(get_market_source),
):
    """Average price per m2 around an address. Display only."""
    try:
        snapshot = await source.lookup(address)
    except MarketLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return MarketResponse(
        address=snapshot.address,
        average_price_per_sqm=snapshot.average_price_per_sqm,
        similar_listings=[
            ListingResponse(
                description=listing.description,
                price=listing.price,
                surface=listing.surface,
                url=listing.url,
            )
            for listing in snapshot.similar_listings
        ],
        map_url=snapshot.map_url,
    )
