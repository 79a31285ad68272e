"""Snapshot data models for boards and cards.

Both data sources (REST API and direct database) build these same objects,
so rendering never needs to know where a snapshot came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003 - used at runtime by dataclasses
from enum import StrEnum

DONE_STATUS = "done"


class Priority(StrEnum):
    """Card priority."""

    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NONE = "NONE"


@dataclass
class Person:
    """A board member referenced as assignee or author."""

    first_name: str = ""
    last_name: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class ChecklistItem:
    title: str
    completed: bool = False


@dataclass
class Checklist:
    title: str
    items: list[ChecklistItem] = field(default_factory=list)

    @property
    def done_count(self) -> int:
        return sum(1 for item in self.items if item.completed)


@dataclass
class Comment:
    """A card comment. Sources deliver these newest first."""

    content: str
    created_at: datetime
    author: Person | None = None


@dataclass
class Activity:
    """A card activity entry. Sources deliver these newest first."""

    action: str
    created_at: datetime
    author: Person | None = None


@dataclass
class Link:
    """Typed reference from a card to an external entity."""

    entity_type: str
    entity_id: str


@dataclass
class BlockingCard:
    id: str
    title: str


@dataclass
class ColumnRef:
    """Column context attached to a single card snapshot."""

    name: str
    status: str | None = None
    board_name: str | None = None
    id: str | None = None


@dataclass
class Card:
    """A unit of work on the board.

    ``comment_count`` and ``checklist_count`` are aggregates used when the
    full comment/checklist lists were not loaded (board overview).
    """

    id: str
    title: str
    priority: Priority = Priority.NONE
    description: str | None = None
    due_date: datetime | None = None
    created_at: datetime | None = None
    is_blocked: bool = False
    blocked_reason: str | None = None
    blocked_by: BlockingCard | None = None
    assignees: list[Person] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    checklists: list[Checklist] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    column: ColumnRef | None = None
    comment_count: int = 0
    checklist_count: int = 0


@dataclass
class Column:
    """A lane of the board holding non-archived cards in explicit order."""

    id: str
    name: str
    status: str | None = None
    cards: list[Card] = field(default_factory=list)


@dataclass
class Board:
    id: str
    name: str
    columns: list[Column] = field(default_factory=list)
