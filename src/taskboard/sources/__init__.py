"""Sources - Interchangeable REST API and database readers for boards."""

from taskboard.sources.base import DataSource
from taskboard.sources.database import Database
from taskboard.sources.factory import create_data_source, create_rest_client
from taskboard.sources.rest import RestDataSource
from taskboard.sources.store import StoreDataSource

__all__ = [
    "DataSource",
    "Database",
    "RestDataSource",
    "StoreDataSource",
    "create_data_source",
    "create_rest_client",
]
