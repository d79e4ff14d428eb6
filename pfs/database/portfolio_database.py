"""Abstract PortfolioDatabase class for CRUD operations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pfs.core.models import Portfolio


class PortfolioDatabase(ABC):
    """Abstract base class for portfolio storage.

    A database is a map from portfolio id to portfolio. Implementations
    iterate in ascending key order so that listing is stable for a given
    state.
    """

    @abstractmethod
    async def put_portfolio(self, portfolio: Portfolio) -> Portfolio:
        pass

    @abstractmethod
    async def get_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        pass

    @abstractmethod
    async def delete_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        """Remove a portfolio and return it, or None when it was absent."""
        pass

    @abstractmethod
    async def list_portfolios(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Portfolio]:
        pass

    @abstractmethod
    async def contains_portfolio(self, portfolio_id: str) -> bool:
        pass

    async def count_portfolios(self) -> int:
        return len(await self.list_portfolios())
