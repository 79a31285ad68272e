"""Board - Snapshot models, errors and text rendering for task boards."""

from taskboard.board.exceptions import (
    BoardError,
    BoardNotFoundError,
    CardNotFoundError,
    RemoteNotConfiguredError,
    TransportError,
)
from taskboard.board.formatter import format_date, render_board, render_card, strip_html
from taskboard.board.models import (
    DONE_STATUS,
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

__all__ = [
    "DONE_STATUS",
    "Activity",
    "BlockingCard",
    "Board",
    "BoardError",
    "BoardNotFoundError",
    "Card",
    "CardNotFoundError",
    "Checklist",
    "ChecklistItem",
    "Column",
    "ColumnRef",
    "Comment",
    "Link",
    "Person",
    "Priority",
    "RemoteNotConfiguredError",
    "TransportError",
    "format_date",
    "render_board",
    "render_card",
    "strip_html",
]
