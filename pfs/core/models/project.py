"""Project models using Pydantic."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectPayload(BaseModel):
    model_config = {"extra": "forbid"}

    role: str = Field(..., description="Role played in the project")
    description: str = Field("", description="Summary of the project")
    techStack: List[str] = Field(
        default_factory=list, description="Technologies used, in order"
    )


class Project(ProjectPayload):
    """A single project record nested in a portfolio."""

    projectId: str = Field(
        ..., description="Identifier, unique within the parent portfolio"
    )


class ProjectUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    role: Optional[str] = None
    description: Optional[str] = None
    techStack: Optional[List[str]] = None
