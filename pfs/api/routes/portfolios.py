"""Portfolio endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from pfs.api.dependencies import get_service
from pfs.api.responses import NOT_FOUND, PortfolioListResponse, unwrap_or_404
from pfs.core.models import (CursorPage, Portfolio, PortfolioPayload,
                             PortfolioUpdate)
from pfs.services import PortfolioService

router = APIRouter(tags=["Portfolios"])


@router.get("/portfolios", response_model=PortfolioListResponse)
async def list_portfolios(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0, description="Offset (Number of items to skip)"),
    service: PortfolioService = Depends(get_service),
):
    """List portfolios in id order."""
    portfolios = (await service.list_portfolios(limit=limit, offset=offset)).value
    return PortfolioListResponse(
        results=portfolios,
        page=CursorPage(
            hasMore=limit is not None and len(portfolios) == limit,
            offset=offset,
            count=len(portfolios),
        ),
    )


@router.get("/portfolios/{id}", response_model=Portfolio, responses=NOT_FOUND)
async def get_portfolio(
    id: str = Path(..., description="Portfolio ID"),
    service: PortfolioService = Depends(get_service),
):
    return unwrap_or_404(await service.get_portfolio(id))


@router.post("/portfolios", response_model=Portfolio, status_code=201)
async def create_portfolio(
    payload: PortfolioPayload,
    service: PortfolioService = Depends(get_service),
):
    """Create an empty portfolio carrying the given metadata."""
    return (await service.create_portfolio(payload)).value


@router.patch("/portfolios/{id}", response_model=Portfolio, responses=NOT_FOUND)
async def update_portfolio(
    payload: PortfolioUpdate,
    id: str = Path(..., description="Portfolio ID"),
    service: PortfolioService = Depends(get_service),
):
    """Update metadata and education. Omitted fields are kept."""
    return unwrap_or_404(await service.update_portfolio(id, payload))


@router.delete("/portfolios/{id}", response_model=Portfolio, responses=NOT_FOUND)
async def delete_portfolio(
    id: str = Path(..., description="Portfolio ID"),
    service: PortfolioService = Depends(get_service),
):
    """Delete a portfolio and return the removed record."""
    return unwrap_or_404(await service.delete_portfolio(id))
