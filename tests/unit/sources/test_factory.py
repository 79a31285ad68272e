"""Unit tests for data source selection."""

import pytest

from taskboard.config import Settings
from taskboard.sources import (
    RestDataSource,
    StoreDataSource,
    create_data_source,
    create_rest_client,
)


@pytest.mark.unit
class TestCreateDataSource:
    """Tests for create_data_source."""

    def test_rest_when_url_and_key_set(self) -> None:
        settings = Settings(api_url="https://app.example.com/", api_key="sk_test_1")

        source = create_data_source(settings)

        assert isinstance(source, RestDataSource)
        assert source.client.base_url == "https://app.example.com/api/v1"
        assert source.client.token == "sk_test_1"

    def test_store_when_key_missing(self) -> None:
        source = create_data_source(Settings(api_url="https://app.example.com"))

        assert isinstance(source, StoreDataSource)
        assert not source.is_remote

    def test_store_connection_is_lazy(self) -> None:
        source = create_data_source(Settings(database_url="sqlite://"))

        assert isinstance(source, StoreDataSource)
        assert not source._db.is_connected

    def test_shared_client_reused(self) -> None:
        settings = Settings(api_url="https://x", api_key="k")
        client = create_rest_client(settings)

        source = create_data_source(settings, client)

        assert isinstance(source, RestDataSource)
        assert source.client is client

    def test_no_client_without_remote_mode(self) -> None:
        assert create_rest_client(Settings()) is None
