"""Portfolio Service - stores professional portfolios with their education, experiences and projects."""

__version__ = "0.1.0"

# Core exports
from .core.models import *
