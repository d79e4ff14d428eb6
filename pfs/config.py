"""Configuration for Portfolio Service."""

import os
from pathlib import Path
from typing import Optional

from pfs.database import FileDatabase, InMemoryDatabase, PortfolioDatabase


class Config:
    """Configuration class for pfs."""

    # Default database path
    DEFAULT_DB_PATH = "pfs-db"
    DEFAULT_DB_BACKEND = "file"
    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000

    # Shared database instance, created on first use
    _database: Optional[PortfolioDatabase] = None

    @classmethod
    def get_db_path(cls, override_path: Optional[str] = None) -> Path:
        """Get the database path.

        Args:
            override_path: Optional path to override the default database path

        Returns:
            Path object for the database directory
        """
        if override_path:
            return Path(override_path)

        # Check for environment variable
        env_path = os.getenv("PFS_DB_PATH")
        if env_path:
            return Path(env_path)

        return Path(cls.DEFAULT_DB_PATH)

    @classmethod
    def ensure_db_path_exists(cls, db_path: Optional[Path] = None) -> Path:
        """Ensure the database path exists, creating it if necessary."""
        if db_path is None:
            db_path = cls.get_db_path()

        db_path.mkdir(parents=True, exist_ok=True)
        return db_path

    @classmethod
    def get_db_backend(cls) -> str:
        backend = os.getenv("PFS_DB_BACKEND", cls.DEFAULT_DB_BACKEND).lower()
        if backend not in ("file", "memory"):
            raise ValueError(
                f"Unsupported PFS_DB_BACKEND {backend!r}, expected 'file' or 'memory'"
            )
        return backend

    @classmethod
    def get_database(cls) -> PortfolioDatabase:
        """Return the shared database, building it on first call."""
        if cls._database is None:
            if cls.get_db_backend() == "memory":
                cls._database = InMemoryDatabase()
            else:
                db_path = cls.ensure_db_path_exists()
                cls._database = FileDatabase(base_path=str(db_path))
        return cls._database

    @classmethod
    def get_log_level(cls) -> str:
        return os.getenv("PFS_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL).upper()

    @classmethod
    def get_host(cls) -> str:
        return os.getenv("PFS_HOST", cls.DEFAULT_HOST)

    @classmethod
    def get_port(cls) -> int:
        return int(os.getenv("PFS_PORT", cls.DEFAULT_PORT))


# Global configuration instance
config = Config()
