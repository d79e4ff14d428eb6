"""File-backed PortfolioDatabase.

Each portfolio is stored as a JSON document at
``<base_path>/portfolio/<portfolio_id>.json``. Writes go to a hidden
``.<portfolio_id>.json.tmp`` sibling first and are moved into place, so a
reader never sees a half-written document.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from pfs.core.models import Portfolio

from .portfolio_database import PortfolioDatabase

logger = logging.getLogger(__name__)


class FileDatabase(PortfolioDatabase):
    def __init__(self, base_path: str = "pfs-db"):
        self.base_path = Path(base_path)
        self.portfolio_dir = self.base_path / "portfolio"
        self.portfolio_dir.mkdir(parents=True, exist_ok=True)

    def _id_to_path(self, portfolio_id: str) -> Path:
        if not portfolio_id or "/" in portfolio_id or portfolio_id.startswith("."):
            raise ValueError(f"Invalid portfolio id: {portfolio_id!r}")
        return self.portfolio_dir / f"{portfolio_id}.json"

    def _existing_path(self, portfolio_id: str) -> Optional[Path]:
        """Path of a stored portfolio, or None when no such file can exist."""
        try:
            path = self._id_to_path(portfolio_id)
            if path.is_file():
                return path
        except (ValueError, OSError):
            # Ids that cannot name a file were never stored
            logger.debug(f"Portfolio id {portfolio_id!r} does not map to a file")
        return None

    def _read(self, path: Path) -> Portfolio:
        return Portfolio.model_validate_json(path.read_text(encoding="utf-8"))

    async def put_portfolio(self, portfolio: Portfolio) -> Portfolio:
        path = self._id_to_path(portfolio.portfolioId)
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_text(portfolio.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
        return portfolio

    async def get_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        path = self._existing_path(portfolio_id)
        if path is None:
            return None
        return self._read(path)

    async def delete_portfolio(self, portfolio_id: str) -> Optional[Portfolio]:
        path = self._existing_path(portfolio_id)
        if path is None:
            return None
        portfolio = self._read(path)
        path.unlink()
        logger.debug(f"Removed {path}")
        return portfolio

    def _document_paths(self) -> List[Path]:
        return sorted(self.portfolio_dir.glob("[!.]*.json"), key=lambda p: p.stem)

    async def list_portfolios(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Portfolio]:
        paths = self._document_paths()[offset:]
        if limit is not None:
            paths = paths[:limit]
        return [self._read(path) for path in paths]

    async def contains_portfolio(self, portfolio_id: str) -> bool:
        return self._existing_path(portfolio_id) is not None

    async def count_portfolios(self) -> int:
        return len(self._document_paths())
