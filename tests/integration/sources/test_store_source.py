"""Integration tests for StoreDataSource against an in-memory SQLite database."""

from datetime import datetime, timedelta

import pytest

from taskboard.board import BoardNotFoundError, CardNotFoundError, Priority, render_board
from taskboard.sources import Database, StoreDataSource
from taskboard.sources import schema


@pytest.fixture
def database() -> Database:
    """Create an in-memory database with tables."""
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def seeded(database: Database) -> Database:
    """Board with two columns, archived and live cards, comments and activity."""
    base = datetime(2026, 1, 1, 9, 0)
    session = database.get_session()
    try:
        ada = schema.Person(id="p1", first_name="Ada", last_name="Lovelace")
        session.add_all(
            [
                ada,
                schema.Board(id="b1", name="Roadmap"),
                # inserted out of order on purpose
                schema.BoardColumn(id="c2", board_id="b1", name="Done", status="done", order=2),
                schema.BoardColumn(id="c1", board_id="b1", name="Todo", status="todo", order=1),
                schema.Tag(id="t1", name="backend"),
            ]
        )
        session.flush()
        session.add_all(
            [
                schema.BoardCard(
                    id="k2", column_id="c1", title="Second", order=2, priority="LOW",
                    created_at=base,
                ),
                schema.BoardCard(
                    id="k1", column_id="c1", title="First", order=1, priority="HIGH",
                    due_date=base - timedelta(days=1), created_at=base,
                    is_blocked=True, blocked_reason="Waiting", blocked_by_card_id="k2",
                    description="<p>Plan</p>",
                ),
                schema.BoardCard(
                    id="k3", column_id="c1", title="Archived", order=0, created_at=base,
                    archived_at=base,
                ),
                schema.BoardCard(
                    id="k4", column_id="c2", title="Shipped", order=1, created_at=base
                ),
            ]
        )
        session.flush()
        session.add_all(
            [
                schema.CardAssignee(card_id="k1", person_id="p1"),
                schema.CardTag(card_id="k1", tag_id="t1"),
                schema.CardChecklist(id="cl1", card_id="k1", title="Steps", order=1),
                schema.ChecklistItem(
                    id="i2", checklist_id="cl1", title="Ship", completed=False, order=2
                ),
                schema.ChecklistItem(
                    id="i1", checklist_id="cl1", title="Build", completed=True, order=1
                ),
                schema.CardLink(id="l1", card_id="k1", entity_type="ISSUE", entity_id="GH-1"),
                schema.CardActivity(
                    id="a1", card_id="k1", author_id=None, action="created", created_at=base
                ),
            ]
        )
        for i in range(25):
            session.add(
                schema.CardComment(
                    id=f"m{i}",
                    card_id="k1",
                    author_id="p1",
                    content=f"comment {i}",
                    created_at=base + timedelta(minutes=i),
                )
            )
        session.commit()
    finally:
        session.close()
    return database


@pytest.fixture
def source(seeded: Database) -> StoreDataSource:
    return StoreDataSource(seeded)


@pytest.mark.integration
class TestFetchBoard:
    """Tests for board reads."""

    def test_columns_ordered(self, source: StoreDataSource) -> None:
        board = source.fetch_board("b1")

        assert [c.name for c in board.columns] == ["Todo", "Done"]

    def test_archived_excluded_and_cards_ordered(self, source: StoreDataSource) -> None:
        board = source.fetch_board("b1")

        assert [c.title for c in board.columns[0].cards] == ["First", "Second"]

    def test_card_summary_fields(self, source: StoreDataSource) -> None:
        card = source.fetch_board("b1").columns[0].cards[0]

        assert card.priority is Priority.HIGH
        assert card.assignees[0].display_name == "Ada Lovelace"
        assert card.tags == ["backend"]
        assert [i.title for i in card.checklists[0].items] == ["Build", "Ship"]
        assert card.comment_count == 25
        assert card.is_blocked

    def test_renders_with_local_source(self, source: StoreDataSource) -> None:
        text = render_board(source.fetch_board("b1"), source.describe(), now=datetime(2026, 1, 2))

        assert "Summary: 3 active cards across 2 columns. 1 blocked. 1 overdue." in text
        assert text.endswith("| Source: local database")

    def test_unknown_board(self, source: StoreDataSource) -> None:
        with pytest.raises(BoardNotFoundError):
            source.fetch_board("nope")


@pytest.mark.integration
class TestFetchCard:
    """Tests for card detail reads."""

    def test_context_and_blocking_card(self, source: StoreDataSource) -> None:
        card = source.fetch_card("k1")

        assert card.column is not None
        assert card.column.name == "Todo"
        assert card.column.board_name == "Roadmap"
        assert card.blocked_by is not None
        assert card.blocked_by.title == "Second"
        assert card.links[0].entity_id == "GH-1"
        assert card.description == "<p>Plan</p>"

    def test_recent_comments_newest_first_and_limited(self, source: StoreDataSource) -> None:
        card = source.fetch_card("k1")

        assert len(card.comments) == 20
        assert card.comments[0].content == "comment 24"
        assert card.comments[-1].content == "comment 5"

    def test_activity_without_author(self, source: StoreDataSource) -> None:
        card = source.fetch_card("k1")

        assert card.activities[0].action == "created"
        assert card.activities[0].author is None

    def test_unknown_card(self, source: StoreDataSource) -> None:
        with pytest.raises(CardNotFoundError):
            source.fetch_card("nope")


@pytest.mark.integration
class TestConnectionLifecycle:
    """The engine is created once and reused until close."""

    def test_engine_reused(self, seeded: Database) -> None:
        source = StoreDataSource(seeded)
        engine = seeded.engine

        source.fetch_board("b1")
        source.fetch_card("k1")

        assert seeded.engine is engine

    def test_close_disposes_engine(self) -> None:
        db = Database("sqlite://")
        StoreDataSource(db).close()
        assert not db.is_connected

        db.create_tables()
        assert db.is_connected
        StoreDataSource(db).close()
        assert not db.is_connected

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("sqlite://", True),
            ("sqlite:///:memory:", True),
            ("sqlite:///board.db", False),
            ("postgresql://u:p@localhost/board", False),
        ],
    )
    def test_is_memory(self, url: str, expected: bool) -> None:
        assert Database(url).is_memory is expected
