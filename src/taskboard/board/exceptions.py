"""Custom exceptions for board access."""

REMOTE_REQUIRED_MESSAGE = (
    "Write operations require REST API. Set MCP_API_URL and MCP_API_KEY environment variables."
)


class BoardError(Exception):
    """Base exception for board access errors."""


class BoardNotFoundError(BoardError):
    """Board with given ID does not exist."""


class CardNotFoundError(BoardError):
    """Card with given ID does not exist."""


class TransportError(BoardError):
    """Remote API returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoteNotConfiguredError(BoardError):
    """A write was attempted while only the direct database is configured."""

    def __init__(self, message: str = REMOTE_REQUIRED_MESSAGE) -> None:
        super().__init__(message)
