"""Tests shared by every PortfolioDatabase implementation."""

from abc import ABC

import pytest

from pfs.core.models import Experience, Portfolio
from pfs.database import FileDatabase, InMemoryDatabase
from pfs.database.portfolio_database import PortfolioDatabase


@pytest.fixture(params=["memory", "file"])
def db(request, temp_db_path):
    if request.param == "memory":
        return InMemoryDatabase()
    return FileDatabase(base_path=str(temp_db_path))


def make_portfolio(portfolio_id: str, **kwargs) -> Portfolio:
    return Portfolio(portfolioId=portfolio_id, createdAt=1, **kwargs)


def test_portfolio_database_is_abstract():
    assert issubclass(PortfolioDatabase, ABC)
    with pytest.raises(TypeError):
        PortfolioDatabase()


@pytest.mark.asyncio
async def test_put_and_get(db):
    portfolio = make_portfolio("p-1", title="Hello")

    result = await db.put_portfolio(portfolio)
    assert result == portfolio

    retrieved = await db.get_portfolio("p-1")
    assert retrieved == portfolio


@pytest.mark.asyncio
async def test_get_nonexistent_portfolio(db):
    assert await db.get_portfolio("missing") is None


@pytest.mark.asyncio
async def test_contains_and_count(db):
    assert not await db.contains_portfolio("p-1")
    assert await db.count_portfolios() == 0

    await db.put_portfolio(make_portfolio("p-1"))

    assert await db.contains_portfolio("p-1")
    assert await db.count_portfolios() == 1


@pytest.mark.asyncio
async def test_put_overwrites_existing_entry(db):
    await db.put_portfolio(make_portfolio("p-1", title="old"))
    await db.put_portfolio(make_portfolio("p-1", title="new"))

    assert (await db.get_portfolio("p-1")).title == "new"
    assert await db.count_portfolios() == 1


@pytest.mark.asyncio
async def test_delete_returns_removed_record(db):
    portfolio = make_portfolio("p-1", body="gone soon")
    await db.put_portfolio(portfolio)

    removed = await db.delete_portfolio("p-1")

    assert removed == portfolio
    assert await db.get_portfolio("p-1") is None


@pytest.mark.asyncio
async def test_delete_nonexistent_portfolio(db):
    assert await db.delete_portfolio("missing") is None


@pytest.mark.asyncio
async def test_list_is_in_key_order(db):
    for portfolio_id in ["c", "a", "b"]:
        await db.put_portfolio(make_portfolio(portfolio_id))

    result = await db.list_portfolios()
    assert [p.portfolioId for p in result] == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_list_with_pagination(db):
    for i in range(5):
        await db.put_portfolio(make_portfolio(f"p-{i}"))

    result = await db.list_portfolios(limit=2, offset=1)
    assert [p.portfolioId for p in result] == ["p-1", "p-2"]


@pytest.mark.asyncio
async def test_returned_records_are_detached(db):
    """Mutating a record read from the database does not change the stored one."""
    await db.put_portfolio(make_portfolio("p-1"))

    retrieved = await db.get_portfolio("p-1")
    retrieved.experiences.append(
        Experience(experienceId="e-1", position="x", startTime=0, endTime=0)
    )

    assert (await db.get_portfolio("p-1")).experiences == []
