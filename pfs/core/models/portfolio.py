"""Portfolio aggregate and its payloads.

A portfolio owns one education record and two ordered collections
(experiences and projects). The nested entities have no storage of their
own; they are always read and written through the portfolio.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .base import MAX_U64
from .education import Education
from .experience import Experience
from .project import Project

# Fields a caller may change through an update. Everything else on the
# aggregate is either system managed or owned by a nested operation.
UPDATABLE_FIELDS = ("title", "body", "attachmentURL", "education")


class PortfolioPayload(BaseModel):
    """Caller-controlled metadata accepted when creating a portfolio."""

    model_config = {"extra": "forbid"}

    title: str = ""
    body: str = ""
    attachmentURL: str = ""


class PortfolioUpdate(BaseModel):
    """Partial update. Only fields present in the payload are applied."""

    model_config = {"extra": "forbid"}

    title: Optional[str] = None
    body: Optional[str] = None
    attachmentURL: Optional[str] = None
    education: Optional[Education] = None


class Portfolio(BaseModel):
    portfolioId: str = Field(..., description="Generated, immutable identifier")
    title: str = Field("", description="Portfolio title")
    body: str = Field("", description="Free-form body text")
    attachmentURL: str = Field("", description="Link to an attached document")
    education: Education = Field(default_factory=Education)
    experiences: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    createdAt: int = Field(
        ..., ge=0, le=MAX_U64, description="Creation time in nanoseconds"
    )
    updatedAt: Optional[int] = Field(
        None,
        ge=0,
        le=MAX_U64,
        description="Time of the most recent mutation, absent until the first one",
    )

    def has_experience(self, experience_id: str) -> bool:
        return any(e.experienceId == experience_id for e in self.experiences)

    def has_project(self, project_id: str) -> bool:
        return any(p.projectId == project_id for p in self.projects)
