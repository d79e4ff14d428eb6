"""Portfolio service.

The service is the only writer of portfolios. Every operation is a single
read-modify-write against the database: the portfolio is looked up, checked,
changed in memory and written back as one record. A missing portfolio or
nested entry is reported as an ``Err`` before anything is written.
"""

import logging
from typing import List, Optional

from pfs.core.clock import Clock, SystemClock
from pfs.core.errors import (ExperienceNotFound, NotFoundError,
                             PortfolioNotFound, ProjectNotFound)
from pfs.core.identifiers import IdGenerator, UuidIdGenerator
from pfs.core.models import (UPDATABLE_FIELDS, Experience, ExperiencePayload,
                             ExperienceUpdate, Portfolio, PortfolioPayload,
                             PortfolioUpdate, Project, ProjectPayload,
                             ProjectUpdate)
from pfs.core.result import Err, Ok, Result
from pfs.database import PortfolioDatabase

logger = logging.getLogger(__name__)


class PortfolioService:
    """CRUD over portfolios and their experience and project collections."""

    def __init__(
        self,
        database: PortfolioDatabase,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Clock] = None,
    ):
        self.database = database
        self.id_generator = id_generator or UuidIdGenerator()
        self.clock = clock or SystemClock()

    # ------------------------------------------------------------------
    # Portfolios
    # ------------------------------------------------------------------

    async def list_portfolios(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> Result[List[Portfolio]]:
        return Ok(await self.database.list_portfolios(limit=limit, offset=offset))

    async def get_portfolio(self, portfolio_id: str) -> Result[Portfolio]:
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, "get"))
        return Ok(portfolio)

    async def create_portfolio(self, payload: PortfolioPayload) -> Result[Portfolio]:
        portfolio_id = self.id_generator.new_id()
        while await self.database.contains_portfolio(portfolio_id):
            portfolio_id = self.id_generator.new_id()

        portfolio = Portfolio(
            portfolioId=portfolio_id,
            createdAt=self.clock.now(),
            **payload.model_dump(),
        )
        await self.database.put_portfolio(portfolio)
        logger.info(f"Created portfolio {portfolio_id}")
        return Ok(portfolio)

    async def update_portfolio(
        self, portfolio_id: str, payload: PortfolioUpdate
    ) -> Result[Portfolio]:
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, "update"))

        changes = {
            name: getattr(payload, name)
            for name in payload.model_fields_set
            if name in UPDATABLE_FIELDS
        }
        # Explicit nulls mean "leave as is"; education is replaced wholesale
        changes = {name: value for name, value in changes.items() if value is not None}
        updated = portfolio.model_copy(update=changes)
        return Ok(await self._touch_and_save(updated))

    async def delete_portfolio(self, portfolio_id: str) -> Result[Portfolio]:
        removed = await self.database.delete_portfolio(portfolio_id)
        if removed is None:
            return self._not_found(PortfolioNotFound(portfolio_id, "delete"))
        logger.info(f"Deleted portfolio {portfolio_id}")
        return Ok(removed)

    # ------------------------------------------------------------------
    # Experiences
    # ------------------------------------------------------------------

    async def add_experience(
        self, portfolio_id: str, payload: ExperiencePayload
    ) -> Result[Portfolio]:
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(
                PortfolioNotFound(portfolio_id, "add an experience")
            )

        experience_id = self.id_generator.new_id()
        while portfolio.has_experience(experience_id):
            experience_id = self.id_generator.new_id()

        experience = Experience(experienceId=experience_id, **payload.model_dump())
        updated = portfolio.model_copy(
            update={"experiences": [*portfolio.experiences, experience]}
        )
        return Ok(await self._touch_and_save(updated))

    async def update_experience(
        self, portfolio_id: str, experience_id: str, payload: ExperienceUpdate
    ) -> Result[Portfolio]:
        operation = "update an experience"
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, operation))
        if not portfolio.has_experience(experience_id):
            return self._not_found(
                ExperienceNotFound(portfolio_id, experience_id, operation)
            )

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        experiences = [
            e.model_copy(update=changes) if e.experienceId == experience_id else e
            for e in portfolio.experiences
        ]
        updated = portfolio.model_copy(update={"experiences": experiences})
        return Ok(await self._touch_and_save(updated))

    async def delete_experience(
        self, portfolio_id: str, experience_id: str
    ) -> Result[Portfolio]:
        operation = "delete an experience"
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, operation))
        if not portfolio.has_experience(experience_id):
            return self._not_found(
                ExperienceNotFound(portfolio_id, experience_id, operation)
            )

        experiences = [
            e for e in portfolio.experiences if e.experienceId != experience_id
        ]
        updated = portfolio.model_copy(update={"experiences": experiences})
        return Ok(await self._touch_and_save(updated))

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def add_project(
        self, portfolio_id: str, payload: ProjectPayload
    ) -> Result[Portfolio]:
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, "add a project"))

        project_id = self.id_generator.new_id()
        while portfolio.has_project(project_id):
            project_id = self.id_generator.new_id()

        project = Project(projectId=project_id, **payload.model_dump())
        updated = portfolio.model_copy(
            update={"projects": [*portfolio.projects, project]}
        )
        return Ok(await self._touch_and_save(updated))

    async def update_project(
        self, portfolio_id: str, project_id: str, payload: ProjectUpdate
    ) -> Result[Portfolio]:
        operation = "update a project"
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, operation))
        if not portfolio.has_project(project_id):
            return self._not_found(ProjectNotFound(portfolio_id, project_id, operation))

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        projects = [
            p.model_copy(update=changes) if p.projectId == project_id else p
            for p in portfolio.projects
        ]
        updated = portfolio.model_copy(update={"projects": projects})
        return Ok(await self._touch_and_save(updated))

    async def delete_project(
        self, portfolio_id: str, project_id: str
    ) -> Result[Portfolio]:
        operation = "delete a project"
        portfolio = await self.database.get_portfolio(portfolio_id)
        if portfolio is None:
            return self._not_found(PortfolioNotFound(portfolio_id, operation))
        if not portfolio.has_project(project_id):
            return self._not_found(ProjectNotFound(portfolio_id, project_id, operation))

        projects = [p for p in portfolio.projects if p.projectId != project_id]
        updated = portfolio.model_copy(update={"projects": projects})
        return Ok(await self._touch_and_save(updated))

    # ------------------------------------------------------------------

    async def _touch_and_save(self, portfolio: Portfolio) -> Portfolio:
        portfolio = portfolio.model_copy(update={"updatedAt": self.clock.now()})
        await self.database.put_portfolio(portfolio)
        logger.info(f"Updated portfolio {portfolio.portfolioId}")
        return portfolio

    def _not_found(self, error: NotFoundError) -> Err:
        logger.warning(error.message)
        return Err(error)
