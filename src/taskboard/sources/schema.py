"""SQLAlchemy mapping of the board tables read in direct-store mode.

The schema is owned by the board application; only the columns needed for
snapshots are mapped here.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
    select,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    column_property,
    mapped_column,
    relationship,
)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Person(Base):
    __tablename__ = "persons"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")


class Board(Base):
    __tablename__ = "boards"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    columns: Mapped[list[BoardColumn]] = relationship(
        "BoardColumn", back_populates="board", order_by="BoardColumn.order"
    )


class BoardColumn(Base):
    __tablename__ = "board_columns"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    board_id: Mapped[str] = mapped_column(String(64), ForeignKey("boards.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    board: Mapped[Board] = relationship("Board", back_populates="columns")
    cards: Mapped[list[BoardCard]] = relationship(
        "BoardCard", back_populates="column", order_by="BoardCard.order"
    )
    # Archived cards are excluded by the join itself
    active_cards: Mapped[list[BoardCard]] = relationship(
        "BoardCard",
        primaryjoin="and_(BoardColumn.id == BoardCard.column_id, BoardCard.archived_at.is_(None))",
        order_by="BoardCard.order",
        viewonly=True,
    )


class BoardCard(Base):
    __tablename__ = "board_cards"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    column_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("board_columns.id"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[str] = mapped_column(String(10), nullable=False, default="NONE")
    color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    archived_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    is_blocked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    blocked_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    blocked_by_card_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("board_cards.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    column: Mapped[BoardColumn] = relationship("BoardColumn", back_populates="cards")
    blocked_by_card: Mapped[BoardCard | None] = relationship(
        "BoardCard", remote_side="BoardCard.id"
    )
    assignees: Mapped[list[CardAssignee]] = relationship(
        "CardAssignee", order_by="CardAssignee.id"
    )
    tags: Mapped[list[CardTag]] = relationship("CardTag", order_by="CardTag.id")
    checklists: Mapped[list[CardChecklist]] = relationship(
        "CardChecklist", order_by="CardChecklist.order"
    )
    links: Mapped[list[CardLink]] = relationship("CardLink", order_by="CardLink.id")


class CardAssignee(Base):
    __tablename__ = "card_assignees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    person_id: Mapped[str] = mapped_column(String(64), ForeignKey("persons.id"), nullable=False)

    person: Mapped[Person] = relationship("Person")


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class CardTag(Base):
    __tablename__ = "card_tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    tag_id: Mapped[str] = mapped_column(String(64), ForeignKey("tags.id"), nullable=False)

    tag: Mapped[Tag] = relationship("Tag")


class CardChecklist(Base):
    __tablename__ = "card_checklists"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    items: Mapped[list[ChecklistItem]] = relationship(
        "ChecklistItem", order_by="ChecklistItem.order"
    )


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    checklist_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("card_checklists.id"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CardComment(Base):
    __tablename__ = "card_comments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    author_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("persons.id"), nullable=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    author: Mapped[Person | None] = relationship("Person")


class CardActivity(Base):
    __tablename__ = "card_activities"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    author_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("persons.id"), nullable=True
    )
    action: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    author: Mapped[Person | None] = relationship("Person")


class CardLink(Base):
    __tablename__ = "card_links"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    card_id: Mapped[str] = mapped_column(String(64), ForeignKey("board_cards.id"), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    entity_id: Mapped[str] = mapped_column(String(64), nullable=False)


# Loaded with the card row itself, so board reads need no per-card count query
BoardCard.comment_count = column_property(  # type: ignore[attr-defined]
    select(func.count(CardComment.id))
    .where(CardComment.card_id == BoardCard.id)
    .correlate_except(CardComment)
    .scalar_subquery()
)
