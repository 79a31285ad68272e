"""DataSource protocol shared by the REST and database strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskboard.board.models import Board, Card


class DataSource(Protocol):
    """Read side of the board: one strategy is chosen at startup.

    Implementations return fully built snapshots and raise
    BoardNotFoundError / CardNotFoundError for unknown IDs.
    """

    is_remote: bool

    def fetch_board(self, board_id: str) -> Board: ...

    def fetch_card(self, card_id: str) -> Card: ...

    def describe(self) -> str:
        """Label shown in board summaries."""
        ...

    def close(self) -> None: ...
