"""Project endpoints, nested under a portfolio."""

from fastapi import APIRouter, Depends, Path

from pfs.api.dependencies import get_service
from pfs.api.responses import NOT_FOUND, unwrap_or_404
from pfs.core.models import Portfolio, ProjectPayload, ProjectUpdate
from pfs.services import PortfolioService

router = APIRouter(tags=["Projects"])


@router.post(
    "/portfolios/{id}/projects",
    response_model=Portfolio,
    status_code=201,
    responses=NOT_FOUND,
)
async def add_project(
    payload: ProjectPayload,
    id: str = Path(..., description="Portfolio ID"),
    service: PortfolioService = Depends(get_service),
):
    """Append a project to the portfolio."""
    return unwrap_or_404(await service.add_project(id, payload))


@router.patch(
    "/portfolios/{id}/projects/{project_id}",
    response_model=Portfolio,
    responses=NOT_FOUND,
)
async def update_project(
    payload: ProjectUpdate,
    id: str = Path(..., description="Portfolio ID"),
    project_id: str = Path(..., description="Project ID"),
    service: PortfolioService = Depends(get_service),
):
    return unwrap_or_404(await service.update_project(id, project_id, payload))


@router.delete(
    "/portfolios/{id}/projects/{project_id}",
    response_model=Portfolio,
    responses=NOT_FOUND,
)
async def delete_project(
    id: str = Path(..., description="Portfolio ID"),
    project_id: str = Path(..., description="Project ID"),
    service: PortfolioService = Depends(get_service),
):
    return unwrap_or_404(await service.delete_project(id, project_id))
