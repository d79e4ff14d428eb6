"""Pytest configuration and fixtures for pfs tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from pfs.core.clock import FixedClock
from pfs.core.identifiers import SequentialIdGenerator
from pfs.core.models import ExperiencePayload, PortfolioPayload, ProjectPayload
from pfs.database import FileDatabase, InMemoryDatabase
from pfs.services import PortfolioService

START_TIME = 1_700_000_000_000_000_000


@pytest.fixture
def temp_db_path():
    """Create a temporary database directory for testing."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def file_db(temp_db_path):
    return FileDatabase(base_path=str(temp_db_path))


@pytest.fixture
def memory_db():
    return InMemoryDatabase()


@pytest.fixture
def clock():
    return FixedClock(START_TIME)


@pytest.fixture
def service(memory_db, clock):
    """Service over an isolated in-memory database with deterministic ids and time."""
    return PortfolioService(
        database=memory_db,
        id_generator=SequentialIdGenerator("id"),
        clock=clock,
    )


@pytest.fixture
def sample_payload():
    return PortfolioPayload(
        title="Backend engineer", body="Five years of APIs", attachmentURL="u"
    )


@pytest.fixture
def sample_experience():
    return ExperiencePayload(
        position="Software Engineer",
        startTime=1_577_836_800,
        endTime=1_640_995_200,
        description="Built payment services",
    )


@pytest.fixture
def sample_project():
    return ProjectPayload(
        role="Lead developer",
        description="Open data portal",
        techStack=["python", "fastapi", "postgres"],
    )
