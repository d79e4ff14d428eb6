"""Dictionary-backed PortfolioDatabase."""

from typing import Dict, List, Optional

from pfs.core.models import Portfolio

from .portfolio_database import PortfolioDatabase


class InMemoryDatabase(PortfolioDatabase):
    """Keeps portfolios in process memory.

    Records are copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self):
        self._portfolios: Dict[str, Portfolio] = {}

    async def put_portfolio(self, portfolio: Portfolio) -> Portfolio:
        self._portfolios[portfolio.portfolioId] = portfolio.model_copy(deep=True)
        return portfolio

    async def get_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        portfolio = self._portfolios.get(portfolio_id)
        if portfolio is None:
            return None
        return portfolio.model_copy(deep=True)

    async def delete_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        return self._portfolios.pop(portfolio_id, None)

    async def list_portfolios(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Portfolio]:
        keys = sorted(self._portfolios)[offset:]
        if limit is not None:
            keys = keys[:limit]
        return [self._portfolios[key].model_copy(deep=True) for key in keys]

    async def contains_portfolio(self, portfolio_id: str) -> bool:
        return portfolio_id in self._portfolios

    async def count_portfolios(self) -> int:
        return len(self._portfolios)
