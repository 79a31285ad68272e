"""RestDataSource - Reads boards and cards through the REST API."""

from __future__ import annotations

import logging

from taskboard.board.exceptions import BoardNotFoundError, CardNotFoundError
from taskboard.board.models import Board, Card
from taskboard.client import RestClient
from taskboard.sources.payload import board_from_payload, card_from_payload

logger = logging.getLogger("taskboard.sources.rest")


class RestDataSource:
    """Fetches fresh snapshots with one authenticated GET per request."""

    is_remote = True

    def __init__(self, client: RestClient, api_url: str) -> None:
        """Initialize the REST source.

        Args:
            client: Shared REST client
            api_url: Public API URL, shown in board summaries
        """
        self.client = client
        self.api_url = api_url

    def describe(self) -> str:
        return f"REST API ({self.api_url})"

    def fetch_board(self, board_id: str) -> Board:
        """Fetch a board with its columns and active cards.

        Raises:
            BoardNotFoundError: If the API returns no data
            TransportError: On non-success status
        """
        logger.debug("Fetching board %s via REST", board_id)
        data = self.client.get(f"/boards/{board_id}")
        if not data:
            raise BoardNotFoundError(f"Board not found: {board_id}")
        return board_from_payload(data)

    def fetch_card(self, card_id: str) -> Card:
        """Fetch full card details.

        Raises:
            CardNotFoundError: If the API returns no data
            TransportError: On non-success status
        """
        logger.debug("Fetching card %s via REST", card_id)
        data = self.client.get(f"/boards/cards/{card_id}")
        if not data:
            raise CardNotFoundError(f"Card not found: {card_id}")
        return card_from_payload(data)

    def close(self) -> None:
        self.client.close()
