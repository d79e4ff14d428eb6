"""Models for Portfolio Service."""

from .base import CursorPage
from .education import Education
from .experience import Experience, ExperiencePayload, ExperienceUpdate
from .portfolio import (UPDATABLE_FIELDS, Portfolio, PortfolioPayload,
                        PortfolioUpdate)
from .project import Project, ProjectPayload, ProjectUpdate

__all__ = [
    "CursorPage",
    "Education",
    "Experience",
    "ExperiencePayload",
    "ExperienceUpdate",
    "Portfolio",
    "PortfolioPayload",
    "PortfolioUpdate",
    "Project",
    "ProjectPayload",
    "ProjectUpdate",
    "UPDATABLE_FIELDS",
]
