"""Tests for package version metadata."""

import pytest

from taskboard import __version__, get_version
from taskboard.server import SERVER_NAME


@pytest.mark.unit
class TestVersion:
    """Tests for the version exposed by the package."""

    def test_semver(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_get_version(self) -> None:
        assert get_version() == __version__ == "0.1.0"

    def test_server_name(self) -> None:
        assert SERVER_NAME == "board"
