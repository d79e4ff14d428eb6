"""Shared FastAPI dependencies."""

from fastapi import Depends

from pfs.config import Config
from pfs.database import PortfolioDatabase
from pfs.services import PortfolioService


def get_database() -> PortfolioDatabase:
    """Get database instance."""
    return Config.get_database()


def get_service(db: PortfolioDatabase = Depends(get_database)) -> PortfolioService:
    return PortfolioService(database=db)
