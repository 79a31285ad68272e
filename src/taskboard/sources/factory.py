"""Pick the data source strategy for this process."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.client import RestClient
from taskboard.sources.database import Database
from taskboard.sources.rest import RestDataSource
from taskboard.sources.store import StoreDataSource

if TYPE_CHECKING:
    from taskboard.config import Settings
    from taskboard.sources.base import DataSource

logger = logging.getLogger("taskboard.sources")


def create_rest_client(settings: Settings) -> RestClient | None:
    """REST client for remote-API mode, or None when it is not configured."""
    if not settings.use_rest_api:
        return None
    return RestClient(
        base_url=settings.api_base,
        token=settings.api_key or "",
        timeout=settings.http_timeout,
    )


def create_data_source(settings: Settings, client: RestClient | None = None) -> DataSource:
    """Create the single data source used for the process lifetime.

    REST API when both MCP_API_URL and MCP_API_KEY are set, otherwise the
    database at DATABASE_URL (connected lazily on first read).
    """
    if settings.use_rest_api:
        if client is None:
            client = create_rest_client(settings)
        assert client is not None
        logger.info("Using REST API data source (%s)", settings.api_url)
        return RestDataSource(client, api_url=settings.api_url or "")

    logger.info("Using local database data source")
    return StoreDataSource(Database(settings.database_url))
