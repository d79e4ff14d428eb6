"""HTTP API for Portfolio Service."""

from .app import app

__all__ = ["app"]
