"""API response models."""

from typing import List

from fastapi import HTTPException
from pydantic import BaseModel

from pfs.core.models import CursorPage, Portfolio
from pfs.core.result import Result


class PortfolioListResponse(BaseModel):
    results: List[Portfolio]
    page: CursorPage


class ErrorResponse(BaseModel):
    detail: str


NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}


def unwrap_or_404(result: Result):
    """Return the value of an ``Ok`` or raise a 404 carrying the error message."""
    if result.is_err:
        raise HTTPException(status_code=404, detail=result.message)
    return result.value
