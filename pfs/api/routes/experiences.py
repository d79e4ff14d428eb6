"""Experience endpoints, nested under a portfolio."""

from fastapi import APIRouter, Depends, Path

from pfs.api.dependencies import get_service
from pfs.api.responses import NOT_FOUND, unwrap_or_404
from pfs.core.models import ExperiencePayload, ExperienceUpdate, Portfolio
from pfs.services import PortfolioService

router = APIRouter(tags=["Experiences"])


@router.post(
    "/portfolios/{id}/experiences",
    response_model=Portfolio,
    status_code=201,
    responses=NOT_FOUND,
)
async def add_experience(
    payload: ExperiencePayload,
    id: str = Path(..., description="Portfolio ID"),
    service: PortfolioService = Depends(get_service),
):
    """Append an experience to the portfolio."""
    return unwrap_or_404(await service.add_experience(id, payload))


@router.patch(
    "/portfolios/{id}/experiences/{experience_id}",
    response_model=Portfolio,
    responses=NOT_FOUND,
)
async def update_experience(
    payload: ExperienceUpdate,
    id: str = Path(..., description="Portfolio ID"),
    experience_id: str = Path(..., description="Experience ID"),
    service: PortfolioService = Depends(get_service),
):
    return unwrap_or_404(await service.update_experience(id, experience_id, payload))


@router.delete(
    "/portfolios/{id}/experiences/{experience_id}",
    response_model=Portfolio,
    responses=NOT_FOUND,
)
async def delete_experience(
    id: str = Path(..., description="Portfolio ID"),
    experience_id: str = Path(..., description="Experience ID"),
    service: PortfolioService = Depends(get_service),
):
    return unwrap_or_404(await service.delete_experience(id, experience_id))
