"""BoardTools - Text-returning operations exposed to the agent.

This is the only layer that turns exceptions into text: every method returns
a message, whatever happened below it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.exceptions import (
    BoardNotFoundError,
    CardNotFoundError,
    RemoteNotConfiguredError,
)
from taskboard.board.formatter import render_board, render_card
from taskboard.gateway import CardUpdate

if TYPE_CHECKING:
    from taskboard.gateway import WriteGateway
    from taskboard.sources.base import DataSource

logger = logging.getLogger("taskboard.tools")

NO_BOARD_MESSAGE = "No board ID provided. Set MCP_BOARD_ID env variable or pass boardId parameter."
NO_FIELDS_MESSAGE = "No fields to update"


class BoardTools:
    """Read and write tools over one data source and one write gateway."""

    def __init__(
        self,
        source: DataSource,
        gateway: WriteGateway,
        default_board_id: str = "",
    ) -> None:
        self.source = source
        self.gateway = gateway
        self.default_board_id = default_board_id

    def get_board_tasks(self, board_id: str | None = None) -> str:
        board_id = board_id or self.default_board_id
        if not board_id:
            return NO_BOARD_MESSAGE
        try:
            board = self.source.fetch_board(board_id)
            return render_board(board, self.source.describe())
        except BoardNotFoundError:
            return f"Board not found: {board_id}"
        except Exception as e:
            logger.exception("Failed to fetch board %s", board_id)
            return f"Error fetching board: {e}"

    def get_card_details(self, card_id: str) -> str:
        try:
            return render_card(self.source.fetch_card(card_id))
        except CardNotFoundError:
            return f"Card not found: {card_id}"
        except Exception as e:
            logger.exception("Failed to fetch card %s", card_id)
            return f"Error fetching card: {e}"

    def move_card(self, card_id: str, target_column_id: str) -> str:
        try:
            card = self.gateway.move_card(card_id, target_column_id)
        except RemoteNotConfiguredError as e:
            return str(e)
        except Exception as e:
            logger.exception("Failed to move card %s", card_id)
            return f"Error moving card: {e}"
        column_name = (card.get("column") or {}).get("name") or target_column_id
        return f'Card "{card.get("title", card_id)}" moved to column "{column_name}"'

    def add_comment(self, card_id: str, content: str) -> str:
        try:
            comment = self.gateway.add_comment(card_id, content)
        except RemoteNotConfiguredError as e:
            return str(e)
        except Exception as e:
            logger.exception("Failed to comment on card %s", card_id)
            return f"Error adding comment: {e}"
        card_title = (comment.get("card") or {}).get("title") or card_id
        return f'Comment added to card "{card_title}"'

    def update_card(self, card_id: str, update: CardUpdate) -> str:
        try:
            card = self.gateway.update_card(card_id, update)
        except RemoteNotConfiguredError as e:
            return str(e)
        except Exception as e:
            logger.exception("Failed to update card %s", card_id)
            return f"Error updating card: {e}"
        if card is None:
            return NO_FIELDS_MESSAGE
        changed = ", ".join(update.field_names)
        return f'Card "{card.get("title", card_id)}" updated: {changed}'

    def create_card(
        self,
        column_id: str,
        title: str,
        description: str | None = None,
        priority: str | None = None,
    ) -> str:
        try:
            card = self.gateway.create_card(column_id, title, description, priority)
        except RemoteNotConfiguredError as e:
            return str(e)
        except Exception as e:
            logger.exception("Failed to create card in column %s", column_id)
            return f"Error creating card: {e}"
        column_name = (card.get("column") or {}).get("name") or column_id
        return f'Card "{card.get("title", title)}" created in column "{column_name}"'

    def close(self) -> None:
        self.source.close()
        self.gateway.close()
