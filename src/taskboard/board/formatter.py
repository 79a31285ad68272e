"""Render board and card snapshots as plain text for an agent to read.

Pure functions: no I/O, and missing optional fields render as placeholders
or omitted sections.
"""

from __future__ import annotations

import html
import re
from datetime import UTC, datetime

from taskboard.board.models import (
    DONE_STATUS,
    Board,
    Card,
    Column,
    Person,
    Priority,
)

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_P_CLOSE_RE = re.compile(r"</p>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")

OVERDUE_MARKER = " ⚠ OVERDUE"
BLOCKED_MARKER = "⛔ BLOCKED"


def strip_html(text: str) -> str:
    """Reduce rich-text HTML to plain text.

    Line breaks and closing paragraphs become newlines, remaining tags are
    dropped and entities decoded.
    """
    text = _BR_RE.sub("\n", text)
    text = _P_CLOSE_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text).replace("\xa0", " ")
    return text.strip()


def format_date(value: datetime) -> str:
    """Format a timestamp as day.month.year."""
    return value.strftime("%d.%m.%Y")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _assignee_names(people: list[Person]) -> str:
    names = ", ".join(p.display_name for p in people)
    return names or "none"


def _author_name(author: Person | None) -> str:
    if author is None:
        return "System"
    return author.display_name


def is_overdue(card: Card, column_status: str | None, now: datetime) -> bool:
    """Past due and not sitting in a done column."""
    if card.due_date is None:
        return False
    return _as_utc(card.due_date) < _as_utc(now) and column_status != DONE_STATUS


def _render_column(
    column: Column, lines: list[str], now: datetime
) -> tuple[int, int]:
    """Append a column section and return its (blocked, overdue) counts."""
    blocked = 0
    overdue = 0
    status = column.status or ""
    heading = f"## {column.name}"
    if status:
        heading += f" ({status})"
    lines.append(f"{heading} - {len(column.cards)} cards")
    lines.append(f"   Column ID: {column.id}")
    lines.append("")

    if not column.cards:
        lines.append("_No cards_")
        lines.append("")
        return blocked, overdue

    for index, card in enumerate(column.cards, start=1):
        prefix = f"[{card.priority}] " if card.priority != Priority.NONE else ""
        lines.append(f"### {index}. {prefix}{card.title}")
        lines.append(f"   ID: {card.id}")
        lines.append(f"   Assignees: {_assignee_names(card.assignees)}")

        if card.due_date is not None:
            late = is_overdue(card, status, now)
            lines.append(f"   Due: {format_date(card.due_date)}{OVERDUE_MARKER if late else ''}")
            if late:
                overdue += 1

        if card.is_blocked:
            blocked += 1
            reason = f": {card.blocked_reason}" if card.blocked_reason else ""
            lines.append(f"   {BLOCKED_MARKER}{reason}")

        if card.tags:
            lines.append("   Tags: " + ", ".join(f"#{tag}" for tag in card.tags))

        if card.checklists:
            total = sum(len(cl.items) for cl in card.checklists)
            done = sum(cl.done_count for cl in card.checklists)
            lines.append(f"   Checklist: {done}/{total} done")
        elif card.checklist_count > 0:
            lines.append(f"   Checklists: {card.checklist_count}")

        if card.comment_count > 0:
            lines.append(f"   Comments: {card.comment_count}")

        lines.append("")

    return blocked, overdue


def render_board(board: Board, source: str, now: datetime | None = None) -> str:
    """Render a board overview.

    Args:
        board: Board snapshot with columns and cards in display order
        source: Human-readable label of the data source, shown in the summary
        now: Reference time for overdue checks (defaults to current UTC time)

    Returns:
        Multi-line text ending with a summary line
    """
    if now is None:
        now = datetime.now(UTC)

    lines = [f"# {board.name}", ""]
    total = 0
    blocked = 0
    overdue = 0
    for column in board.columns:
        total += len(column.cards)
        column_blocked, column_overdue = _render_column(column, lines, now)
        blocked += column_blocked
        overdue += column_overdue

    lines.append("---")
    summary = f"Summary: {total} active cards across {len(board.columns)} columns."
    if blocked > 0:
        summary += f" {blocked} blocked."
    if overdue > 0:
        summary += f" {overdue} overdue."
    lines.append(f"{summary} | Source: {source}")
    return "\n".join(lines)


def render_card(card: Card) -> str:
    """Render full card details: metadata, description, checklists, links,
    comments and activity (the latter two oldest first)."""
    lines = [f"# {card.title}", ""]

    column = card.column
    if column is not None and column.board_name:
        lines.append(f"**Board:** {column.board_name}")
    if column is not None and column.name:
        lines.append(f"**Column:** {column.name} ({column.status or ''})")
    lines.append(f"**Priority:** {card.priority}")
    if card.created_at is not None:
        lines.append(f"**Created:** {format_date(card.created_at)}")
    if card.due_date is not None:
        lines.append(f"**Due:** {format_date(card.due_date)}")
    lines.append(f"**Assignees:** {_assignee_names(card.assignees)}")
    if card.tags:
        lines.append(f"**Tags:** {', '.join(card.tags)}")

    if card.is_blocked:
        lines.append("")
        reason = f": {card.blocked_reason}" if card.blocked_reason else ""
        lines.append(f"⛔ **BLOCKED**{reason}")
        if card.blocked_by is not None:
            lines.append(f"   Blocked by: {card.blocked_by.title} ({card.blocked_by.id})")

    lines.extend(["", "## Description", ""])
    lines.append(strip_html(card.description) if card.description else "_No description_")

    if card.checklists:
        lines.extend(["", "## Checklists"])
        for checklist in card.checklists:
            lines.append("")
            lines.append(f"### {checklist.title} ({checklist.done_count}/{len(checklist.items)})")
            for item in checklist.items:
                mark = "x" if item.completed else " "
                lines.append(f"- [{mark}] {item.title}")

    if card.links:
        lines.extend(["", "## Linked Entities"])
        for link in card.links:
            lines.append(f"- {link.entity_type}: {link.entity_id}")

    if card.comments:
        lines.extend(["", "## Comments (recent)"])
        for comment in reversed(card.comments):
            lines.append("")
            lines.append(f"**{_author_name(comment.author)}** ({format_date(comment.created_at)}):")
            lines.append(strip_html(comment.content))

    if card.activities:
        lines.extend(["", "## Activity (recent)"])
        for activity in reversed(card.activities):
            lines.append(
                f"- {format_date(activity.created_at)} | {_author_name(activity.author)}"
                f" | {activity.action}"
            )

    return "\n".join(lines)
