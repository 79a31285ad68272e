"""Shared pytest fixtures and configuration."""

from datetime import UTC, datetime

import pytest

from taskboard.board import (
    Board,
    Card,
    Checklist,
    ChecklistItem,
    Column,
    Person,
    Priority,
)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for overdue checks."""
    return datetime(2026, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def sample_board() -> Board:
    """Board with a todo, an in-progress and a done column."""
    return Board(
        id="board-1",
        name="Sprint 12",
        columns=[
            Column(
                id="col-todo",
                name="To Do",
                status="todo",
                cards=[
                    Card(
                        id="card-1",
                        title="Write release notes",
                        priority=Priority.HIGH,
                        due_date=datetime(2026, 3, 1, tzinfo=UTC),
                        assignees=[Person("Ada", "Lovelace"), Person("Alan", "Turing")],
                        tags=["docs", "release"],
                        checklists=[
                            Checklist(
                                title="Steps",
                                items=[
                                    ChecklistItem("Draft", completed=True),
                                    ChecklistItem("Review", completed=False),
                                ],
                            )
                        ],
                        comment_count=3,
                    ),
                    Card(id="card-2", title="Plain card"),
                ],
            ),
            Column(id="col-doing", name="In Progress", status="in_progress", cards=[]),
            Column(
                id="col-done",
                name="Done",
                status="done",
                cards=[
                    Card(
                        id="card-3",
                        title="Shipped feature",
                        priority=Priority.LOW,
                        due_date=datetime(2026, 2, 1, tzinfo=UTC),
                        is_blocked=True,
                        blocked_reason="Waiting on legal",
                    )
                ],
            ),
        ],
    )
