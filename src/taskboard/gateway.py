"""WriteGateway - Mutating card operations against the REST API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from taskboard.board.exceptions import RemoteNotConfiguredError
from taskboard.board.models import Priority

if TYPE_CHECKING:
    from taskboard.client import RestClient

logger = logging.getLogger("taskboard.gateway")


class CardUpdate(BaseModel):
    """Request model for updating a card (partial update).

    Only fields that were explicitly given a value are sent.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    priority: Priority | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    color: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)

    @property
    def is_empty(self) -> bool:
        return not self.to_payload()

    @property
    def field_names(self) -> list[str]:
        """Wire names of the fields being changed, in declaration order."""
        return list(self.to_payload())


class CardCreate(BaseModel):
    """Request model for creating a card."""

    model_config = ConfigDict(populate_by_name=True)

    column_id: str = Field(..., alias="columnId")
    title: str
    description: str | None = None
    priority: Priority | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not payload.get("description"):
            payload.pop("description", None)
        return payload


class WriteGateway:
    """Sends card mutations to the REST API.

    Without a configured client every operation raises
    RemoteNotConfiguredError before anything goes over the network.
    """

    def __init__(self, client: RestClient | None) -> None:
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _require_remote(self) -> RestClient:
        if self._client is None:
            raise RemoteNotConfiguredError()
        return self._client

    def move_card(self, card_id: str, target_column_id: str) -> dict[str, Any]:
        """Move a card to the top of another column.

        Returns:
            The moved card as returned by the API
        """
        client = self._require_remote()
        logger.info("Moving card %s to column %s", card_id, target_column_id)
        data = client.post(
            f"/boards/cards/{card_id}/move",
            {"targetColumnId": target_column_id, "newOrder": 0},
        )
        return data or {}

    def add_comment(self, card_id: str, content: str) -> dict[str, Any]:
        """Add a comment to a card.

        Returns:
            The created comment as returned by the API
        """
        client = self._require_remote()
        logger.info("Adding comment to card %s", card_id)
        data = client.post(f"/boards/cards/{card_id}/comments", {"content": content})
        return data or {}

    def update_card(self, card_id: str, update: CardUpdate) -> dict[str, Any] | None:
        """Apply a partial update.

        Returns:
            The updated card, or None when the update had no fields and
            no request was made
        """
        client = self._require_remote()
        payload = update.to_payload()
        if not payload:
            logger.debug("Skipping update of card %s: no fields", card_id)
            return None
        logger.info("Updating card %s: %s", card_id, ", ".join(payload))
        data = client.patch(f"/boards/cards/{card_id}", payload)
        return data or {}

    def create_card(
        self,
        column_id: str,
        title: str,
        description: str | None = None,
        priority: Priority | str | None = None,
    ) -> dict[str, Any]:
        """Create a card in a column.

        Returns:
            The created card as returned by the API
        """
        client = self._require_remote()
        request = CardCreate(
            column_id=column_id,
            title=title,
            description=description,
            priority=priority,  # type: ignore[arg-type]
        )
        logger.info("Creating card %r in column %s", title, column_id)
        data = client.post("/boards/cards", request.to_payload())
        return data or {}

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
