"""Experience models using Pydantic."""

from typing import Optional

from pydantic import BaseModel, Field

from .base import MAX_U64


class ExperiencePayload(BaseModel):
    model_config = {"extra": "forbid"}

    position: str = Field(..., description="Job title or position held")
    startTime: int = Field(..., ge=0, le=MAX_U64, description="Start timestamp")
    endTime: int = Field(..., ge=0, le=MAX_U64, description="End timestamp")
    description: str = Field("", description="What the work involved")


class Experience(ExperiencePayload):
    """A single employment or engagement record nested in a portfolio."""

    experienceId: str = Field(
        ..., description="Identifier, unique within the parent portfolio"
    )


class ExperienceUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    position: Optional[str] = None
    startTime: Optional[int] = Field(None, ge=0, le=MAX_U64)
    endTime: Optional[int] = Field(None, ge=0, le=MAX_U64)
    description: Optional[str] = None
