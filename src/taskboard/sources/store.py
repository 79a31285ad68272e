"""StoreDataSource - Reads boards and cards directly from the database."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from taskboard.board.exceptions import BoardNotFoundError, CardNotFoundError
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
)
from taskboard.sources import schema
from taskboard.sources.database import Database
from taskboard.sources.payload import parse_priority

logger = logging.getLogger("taskboard.sources.store")

RECENT_LIMIT = 20


def _person(row: schema.Person | None) -> Person | None:
    if row is None:
        return None
    return Person(first_name=row.first_name or "", last_name=row.last_name or "")


def _checklists(rows: list[schema.CardChecklist]) -> list[Checklist]:
    return [
        Checklist(
            title=cl.title,
            items=[ChecklistItem(title=item.title, completed=item.completed) for item in cl.items],
        )
        for cl in rows
    ]


def _card(row: schema.BoardCard) -> Card:
    """Fields shared by the board overview and card detail reads."""
    return Card(
        id=row.id,
        title=row.title,
        priority=parse_priority(row.priority),
        description=row.description,
        due_date=row.due_date,
        created_at=row.created_at,
        is_blocked=row.is_blocked,
        blocked_reason=row.blocked_reason,
        assignees=[p for p in (_person(a.person) for a in row.assignees) if p is not None],
        tags=[t.tag.name for t in row.tags],
        checklists=_checklists(row.checklists),
        comment_count=row.comment_count,  # type: ignore[attr-defined]
    )


class StoreDataSource:
    """Direct database strategy.

    Ordering and the archived filter live in the queries; rows are converted
    as returned.
    """

    is_remote = False

    def __init__(self, database: Database) -> None:
        self._db = database

    def describe(self) -> str:
        return "local database"

    def fetch_board(self, board_id: str) -> Board:
        """Fetch a board with ordered columns and their non-archived cards.

        Raises:
            BoardNotFoundError: If no board has this ID
        """
        stmt = (
            select(schema.Board)
            .where(schema.Board.id == board_id)
            .options(
                selectinload(schema.Board.columns)
                .selectinload(schema.BoardColumn.active_cards)
                .options(
                    selectinload(schema.BoardCard.assignees).joinedload(
                        schema.CardAssignee.person
                    ),
                    selectinload(schema.BoardCard.tags).joinedload(schema.CardTag.tag),
                    selectinload(schema.BoardCard.checklists).selectinload(
                        schema.CardChecklist.items
                    ),
                )
            )
        )
        with self._db.session() as session:
            row = session.scalars(stmt).first()
            if row is None:
                raise BoardNotFoundError(f"Board not found: {board_id}")
            board = Board(
                id=row.id,
                name=row.name,
                columns=[
                    Column(
                        id=col.id,
                        name=col.name,
                        status=col.status,
                        cards=[_card(card) for card in col.active_cards],
                    )
                    for col in row.columns
                ],
            )
        logger.debug("Loaded board %s with %d column(s)", board_id, len(board.columns))
        return board

    def fetch_card(self, card_id: str) -> Card:
        """Fetch full card details with the 20 most recent comments and activities.

        Raises:
            CardNotFoundError: If no card has this ID
        """
        stmt = (
            select(schema.BoardCard)
            .where(schema.BoardCard.id == card_id)
            .options(
                joinedload(schema.BoardCard.column).joinedload(schema.BoardColumn.board),
                joinedload(schema.BoardCard.blocked_by_card),
                selectinload(schema.BoardCard.assignees).joinedload(schema.CardAssignee.person),
                selectinload(schema.BoardCard.tags).joinedload(schema.CardTag.tag),
                selectinload(schema.BoardCard.checklists).selectinload(
                    schema.CardChecklist.items
                ),
                selectinload(schema.BoardCard.links),
            )
        )
        comments_stmt = (
            select(schema.CardComment)
            .where(schema.CardComment.card_id == card_id)
            .order_by(schema.CardComment.created_at.desc())
            .limit(RECENT_LIMIT)
            .options(joinedload(schema.CardComment.author))
        )
        activities_stmt = (
            select(schema.CardActivity)
            .where(schema.CardActivity.card_id == card_id)
            .order_by(schema.CardActivity.created_at.desc())
            .limit(RECENT_LIMIT)
            .options(joinedload(schema.CardActivity.author))
        )

        with self._db.session() as session:
            row = session.scalars(stmt).first()
            if row is None:
                raise CardNotFoundError(f"Card not found: {card_id}")

            card = _card(row)
            card.column = ColumnRef(
                id=row.column.id,
                name=row.column.name,
                status=row.column.status,
                board_name=row.column.board.name,
            )
            if row.blocked_by_card is not None:
                card.blocked_by = BlockingCard(
                    id=row.blocked_by_card.id, title=row.blocked_by_card.title
                )
            card.links = [
                Link(entity_type=link.entity_type, entity_id=link.entity_id) for link in row.links
            ]
            card.comments = [
                Comment(content=c.content, created_at=c.created_at, author=_person(c.author))
                for c in session.scalars(comments_stmt)
            ]
            card.activities = [
                Activity(action=a.action, created_at=a.created_at, author=_person(a.author))
                for a in session.scalars(activities_stmt)
            ]
        return card

    def close(self) -> None:
        self._db.close()
