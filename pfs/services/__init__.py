"""Services for Portfolio Service."""

from .portfolio import PortfolioService

__all__ = ["PortfolioService"]
