"""Unit tests for building snapshots from REST payloads."""

from datetime import UTC, datetime

import pytest

from taskboard.board import Priority
from taskboard.sources.payload import (
    board_from_payload,
    card_from_payload,
    parse_datetime,
    parse_priority,
)


@pytest.mark.unit
class TestParsers:
    """Tests for scalar parsers."""

    def test_parse_datetime_zulu(self) -> None:
        assert parse_datetime("2026-03-01T10:00:00.000Z") == datetime(2026, 3, 1, 10, tzinfo=UTC)

    def test_parse_datetime_empty(self) -> None:
        assert parse_datetime(None) is None
        assert parse_datetime("") is None

    def test_parse_priority_unknown_is_none(self) -> None:
        assert parse_priority("HIGH") is Priority.HIGH
        assert parse_priority("whatever") is Priority.NONE


@pytest.mark.unit
class TestBoardFromPayload:
    """Tests for board_from_payload."""

    def test_nested_shape(self) -> None:
        board = board_from_payload(
            {
                "id": "b1",
                "name": "Board",
                "columns": [
                    {
                        "id": "c1",
                        "name": "Todo",
                        "status": "todo",
                        "cards": [
                            {
                                "id": "k1",
                                "title": "Card",
                                "priority": "MEDIUM",
                                "dueDate": "2026-03-01T00:00:00Z",
                                "isBlocked": True,
                                "blockedReason": "Waiting",
                                "assignees": [{"person": {"firstName": "Ada", "lastName": "L"}}],
                                "tags": [{"tag": {"name": "bug"}}],
                                "checklists": [
                                    {"title": "T", "items": [{"title": "i", "completed": True}]}
                                ],
                                "_count": {"comments": 4},
                            }
                        ],
                    },
                    {"id": "c2", "name": "Done", "status": "done", "cards": []},
                ],
            }
        )

        assert [c.name for c in board.columns] == ["Todo", "Done"]
        card = board.columns[0].cards[0]
        assert card.priority is Priority.MEDIUM
        assert card.is_blocked
        assert card.blocked_reason == "Waiting"
        assert card.assignees[0].display_name == "Ada L"
        assert card.tags == ["bug"]
        assert card.checklists[0].done_count == 1
        assert card.comment_count == 4

    def test_missing_optional_fields(self) -> None:
        board = board_from_payload(
            {"id": "b1", "name": "Board", "columns": [{"id": "c1", "name": "X"}]}
        )

        assert board.columns[0].cards == []
        assert board.columns[0].status is None


@pytest.mark.unit
class TestCardFromPayload:
    """Tests for card_from_payload."""

    def test_detail_shape(self) -> None:
        card = card_from_payload(
            {
                "id": "k1",
                "title": "Card",
                "priority": "URGENT",
                "description": "<p>x</p>",
                "createdAt": "2026-01-01T00:00:00Z",
                "column": {"name": "Doing", "status": "in_progress", "board": {"name": "B"}},
                "blockedByCard": {"id": "k0", "title": "Other"},
                "isBlocked": True,
                "comments": [
                    {
                        "content": "hi",
                        "createdAt": "2026-01-02T00:00:00Z",
                        "author": {"firstName": "Ada", "lastName": "Lovelace"},
                    }
                ],
                "activities": [
                    {"action": "created", "createdAt": "2026-01-01T00:00:00Z", "author": None}
                ],
                "links": [{"entityType": "DOC", "entityId": "d1"}],
            }
        )

        assert card.column is not None
        assert card.column.board_name == "B"
        assert card.blocked_by is not None
        assert card.blocked_by.title == "Other"
        assert card.comments[0].author is not None
        assert card.comments[0].author.display_name == "Ada Lovelace"
        assert card.activities[0].author is None
        assert card.links[0].entity_type == "DOC"
        assert card.comment_count == 1

    def test_minimal_card_defaults(self) -> None:
        card = card_from_payload({"id": 5, "title": "T"})

        assert card.id == "5"
        assert card.priority is Priority.NONE
        assert card.description is None
        assert card.assignees == []
        assert card.column is None
