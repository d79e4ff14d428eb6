"""FastAPI application."""

from fastapi import FastAPI

from pfs import __version__

from .routes import experiences, portfolios, projects

app = FastAPI(
    title="Portfolio Service API",
    description="Stores professional portfolios (education, experiences and projects) and exposes endpoints to create, read, update and delete them and their nested entries.",
    version=__version__,
)

app.include_router(portfolios.router)
app.include_router(experiences.router)
app.include_router(projects.router)
