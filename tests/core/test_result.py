"""Tests for result values and not-found errors."""

import pytest

from pfs.core.errors import (ExperienceNotFound, NotFoundError,
                             PortfolioNotFound, ProjectNotFound)
from pfs.core.result import Err, Ok


def test_ok_unwraps_value():
    result = Ok(42)
    assert result.is_ok
    assert not result.is_err
    assert result.unwrap() == 42


def test_err_unwrap_raises_carried_error():
    error = PortfolioNotFound("p-1")
    result = Err(error)

    assert result.is_err
    assert result.message == "a portfolio with id=p-1 not found"
    with pytest.raises(PortfolioNotFound) as exc_info:
        result.unwrap()
    assert exc_info.value is error


@pytest.mark.parametrize(
    "operation,expected",
    [
        ("get", "a portfolio with id=p-9 not found"),
        ("update", "couldn't update a portfolio with id=p-9. portfolio not found"),
        ("delete", "couldn't delete a portfolio with id=p-9. portfolio not found."),
        (
            "add an experience",
            "couldn't add an experience at portfolio with id=p-9. portfolio not found.",
        ),
    ],
)
def test_portfolio_not_found_messages(operation, expected):
    error = PortfolioNotFound("p-9", operation)
    assert error.message == expected
    assert str(error) == expected
    assert error.operation == operation
    assert error.portfolio_id == "p-9"


def test_nested_errors_name_both_ids():
    experience = ExperienceNotFound("p-1", "e-7")
    project = ProjectNotFound("p-1", "pr-3", "update a project")

    assert "p-1" in experience.message and "e-7" in experience.message
    assert experience.experience_id == "e-7"
    assert project.message == (
        "couldn't update a project at portfolio with id=p-1. "
        "project with id=pr-3 not found."
    )
    assert project.project_id == "pr-3"
    assert isinstance(experience, NotFoundError)
    assert isinstance(project, NotFoundError)
