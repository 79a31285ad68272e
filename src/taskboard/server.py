"""Board MCP server - exposes board tools over the stdio transport."""

from __future__ import annotations

import logging
import signal
import sys
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from taskboard import __version__
from taskboard.config import load_settings
from taskboard.gateway import CardUpdate, WriteGateway
from taskboard.logging import setup_logging
from taskboard.sources import create_data_source, create_rest_client
from taskboard.tools import BoardTools

logger = logging.getLogger("taskboard.server")

PriorityName = Literal["URGENT", "HIGH", "MEDIUM", "LOW", "NONE"]

SERVER_NAME = "board"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True)
WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=False)


def create_server(tools: BoardTools) -> FastMCP:
    """Register the board tools on a new FastMCP server.

    Argument names are camelCase because they form the public tool schema.
    """
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(
        name="get_board_tasks",
        description="Get current board state: columns, cards, priorities, assignees, due dates."
        " Use at the start of planning.",
        annotations=READ_ONLY,
    )
    def get_board_tasks(
        boardId: Annotated[str | None, Field(description="Board ID")] = None,  # noqa: N803
    ) -> str:
        return tools.get_board_tasks(boardId)

    @mcp.tool(
        name="get_card_details",
        description="Get detailed card info: description, checklists, comments, activity."
        " Use before starting task work.",
        annotations=READ_ONLY,
    )
    def get_card_details(
        cardId: Annotated[str, Field(description="Card ID")],  # noqa: N803
    ) -> str:
        return tools.get_card_details(cardId)

    @mcp.tool(
        name="move_card",
        description="Move card to a different column (change status). Use to update task status.",
        annotations=WRITE,
    )
    def move_card(
        cardId: Annotated[str, Field(description="Card ID")],  # noqa: N803
        targetColumnId: Annotated[str, Field(description="Target column ID")],  # noqa: N803
    ) -> str:
        return tools.move_card(cardId, targetColumnId)

    @mcp.tool(
        name="add_comment",
        description="Add a comment to a card. Use for notes, questions, status updates.",
        annotations=WRITE,
    )
    def add_comment(
        cardId: Annotated[str, Field(description="Card ID")],  # noqa: N803
        content: Annotated[str, Field(description="Comment text")],
    ) -> str:
        return tools.add_comment(cardId, content)

    @mcp.tool(
        name="update_card",
        description="Update card: title, description, priority, due date, color.",
        annotations=WRITE,
    )
    def update_card(
        cardId: Annotated[str, Field(description="Card ID")],  # noqa: N803
        title: Annotated[str | None, Field(description="New title")] = None,
        description: Annotated[
            str | None, Field(description="New description (HTML format)")
        ] = None,
        priority: Annotated[PriorityName | None, Field(description="Priority")] = None,
        dueDate: Annotated[  # noqa: N803
            str | None, Field(description="Due date (ISO 8601)")
        ] = None,
        color: Annotated[str | None, Field(description="Card color")] = None,
    ) -> str:
        update = CardUpdate(
            title=title,
            description=description,
            priority=priority,
            due_date=dueDate,
            color=color,
        )
        return tools.update_card(cardId, update)

    @mcp.tool(
        name="create_card",
        description="Create a new card on the board. Specify column, title, optional description"
        " and priority.",
        annotations=WRITE,
    )
    def create_card(
        columnId: Annotated[str, Field(description="Column ID to add the card to")],  # noqa: N803
        title: Annotated[str, Field(description="Card title")],
        description: Annotated[str | None, Field(description="Description (HTML format)")] = None,
        priority: Annotated[PriorityName | None, Field(description="Priority")] = None,
    ) -> str:
        return tools.create_card(columnId, title, description, priority)

    return mcp


def _handle_sigterm(signum: int, _frame: object) -> None:
    logger.info("Received signal %d, shutting down", signum)
    raise SystemExit(0)


def build_tools() -> BoardTools:
    """Load settings and wire the data source and write gateway."""
    settings = load_settings()
    setup_logging()
    client = create_rest_client(settings)
    source = create_data_source(settings, client)
    return BoardTools(source, WriteGateway(client), default_board_id=settings.default_board_id)


def main() -> None:
    """Entry point for the taskboard-mcp console script."""
    try:
        tools = build_tools()
        server = create_server(tools)
    except Exception:
        logger.exception("[board] Failed to start")
        sys.exit(1)

    signal.signal(signal.SIGTERM, _handle_sigterm)
    logger.info("[board] MCP server %s started - %s", __version__, tools.source.describe())
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        tools.close()


if __name__ == "__main__":
    main()
