"""Not-found errors raised or returned by the portfolio store."""

from typing import Optional


class NotFoundError(Exception):
    """A referenced portfolio or nested entry does not exist."""

    def __init__(self, message: str, operation: str, portfolio_id: str):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.portfolio_id = portfolio_id


class PortfolioNotFound(NotFoundError):
    def __init__(self, portfolio_id: str, operation: str = "get"):
        if operation == "get":
            message = f"a portfolio with id={portfolio_id} not found"
        elif operation == "update":
            message = (
                f"couldn't update a portfolio with id={portfolio_id}. "
                "portfolio not found"
            )
        elif operation == "delete":
            message = (
                f"couldn't delete a portfolio with id={portfolio_id}. "
                "portfolio not found."
            )
        else:
            message = (
                f"couldn't {operation} at portfolio with id={portfolio_id}. "
                "portfolio not found."
            )
        super().__init__(message, operation, portfolio_id)


class ExperienceNotFound(NotFoundError):
    def __init__(
        self, portfolio_id: str, experience_id: str, operation: Optional[str] = None
    ):
        operation = operation or "delete an experience"
        message = (
            f"couldn't {operation} at portfolio with id={portfolio_id}. "
            f"experience with id={experience_id} not found."
        )
        super().__init__(message, operation, portfolio_id)
        self.experience_id = experience_id


class ProjectNotFound(NotFoundError):
    def __init__(
        self, portfolio_id: str, project_id: str, operation: Optional[str] = None
    ):
        operation = operation or "delete a project"
        message = (
            f"couldn't {operation} at portfolio with id={portfolio_id}. "
            f"project with id={project_id} not found."
        )
        super().__init__(message, operation, portfolio_id)
        self.project_id = project_id
