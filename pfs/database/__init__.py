"""Database package for Portfolio Service."""

from typing import Optional

from .file_database import FileDatabase
from .in_memory_database import InMemoryDatabase
from .portfolio_database import PortfolioDatabase


def get_database(path: Optional[str] = None) -> PortfolioDatabase:
    """Return a file database at ``path``, or at the configured default."""
    from pfs.config import Config

    return FileDatabase(base_path=str(Config.get_db_path(path)))


__all__ = ["PortfolioDatabase", "FileDatabase", "InMemoryDatabase", "get_database"]
