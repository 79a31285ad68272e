"""Build snapshots from the REST API JSON shape."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from taskboard.board.models import (
    Activity,
    BlockingCard,
    Board,
    Card,
    Checklist,
    ChecklistItem,
    Column,
    ColumnRef,
    Comment,
    Link,
    Person,
    Priority,
)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp; a trailing Z is read as UTC."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip().replace("Z", "+00:00")
    return datetime.fromisoformat(text)


def parse_priority(value: Any) -> Priority:
    try:
        return Priority(str(value).upper())
    except ValueError:
        return Priority.NONE


def _person(data: dict[str, Any] | None) -> Person | None:
    if not data:
        return None
    return Person(
        first_name=data.get("firstName") or "",
        last_name=data.get("lastName") or "",
    )


def _assignees(entries: list[dict[str, Any]] | None) -> list[Person]:
    people = []
    for entry in entries or []:
        person = _person(entry.get("person"))
        if person is not None:
            people.append(person)
    return people


def _tags(entries: list[dict[str, Any]] | None) -> list[str]:
    return [entry["tag"]["name"] for entry in entries or [] if entry.get("tag")]


def _checklists(entries: list[dict[str, Any]] | None) -> list[Checklist]:
    return [
        Checklist(
            title=cl.get("title") or "",
            items=[
                ChecklistItem(title=item.get("title") or "", completed=bool(item.get("completed")))
                for item in cl.get("items") or []
            ],
        )
        for cl in entries or []
    ]


def card_from_payload(data: dict[str, Any]) -> Card:
    """Build a Card from either a board-embedded or a detailed card payload."""
    counts = data.get("_count") or {}

    column = None
    column_data = data.get("column")
    if column_data:
        column = ColumnRef(
            id=column_data.get("id"),
            name=column_data.get("name") or "",
            status=column_data.get("status"),
            board_name=(column_data.get("board") or {}).get("name"),
        )

    blocked_by = None
    blocked_data = data.get("blockedByCard")
    if blocked_data:
        blocked_by = BlockingCard(id=str(blocked_data["id"]), title=blocked_data.get("title") or "")

    comments = [
        Comment(
            content=c.get("content") or "",
            created_at=parse_datetime(c.get("createdAt")),  # type: ignore[arg-type]
            author=_person(c.get("author")),
        )
        for c in data.get("comments") or []
    ]
    activities = [
        Activity(
            action=a.get("action") or "",
            created_at=parse_datetime(a.get("createdAt")),  # type: ignore[arg-type]
            author=_person(a.get("author")),
        )
        for a in data.get("activities") or []
    ]

    return Card(
        id=str(data["id"]),
        title=data.get("title") or "",
        priority=parse_priority(data.get("priority") or Priority.NONE),
        description=data.get("description") or None,
        due_date=parse_datetime(data.get("dueDate")),
        created_at=parse_datetime(data.get("createdAt")),
        is_blocked=bool(data.get("isBlocked")),
        blocked_reason=data.get("blockedReason") or None,
        blocked_by=blocked_by,
        assignees=_assignees(data.get("assignees")),
        tags=_tags(data.get("tags")),
        checklists=_checklists(data.get("checklists")),
        comments=comments,
        activities=activities,
        links=[
            Link(entity_type=str(link.get("entityType")), entity_id=str(link.get("entityId")))
            for link in data.get("links") or []
        ],
        column=column,
        comment_count=int(counts.get("comments") or len(comments)),
        checklist_count=int(counts.get("checklists") or 0),
    )


def board_from_payload(data: dict[str, Any]) -> Board:
    """Build a Board; column and card order is kept as delivered."""
    return Board(
        id=str(data["id"]),
        name=data.get("name") or "",
        columns=[
            Column(
                id=str(col["id"]),
                name=col.get("name") or "",
                status=col.get("status") or None,
                cards=[card_from_payload(card) for card in col.get("cards") or []],
            )
            for col in data.get("columns") or []
        ],
    )
