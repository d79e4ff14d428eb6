"""Main entry point for the FastAPI server."""

import uvicorn

from pfs.api import app
from pfs.config import Config

if __name__ == "__main__":
    uvicorn.run(app, host=Config.get_host(), port=Config.get_port())
