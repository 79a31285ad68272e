"""RestClient - Authenticated JSON client for the board REST API."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from taskboard.board.exceptions import TransportError
from taskboard.logging import sanitize_for_log, truncate_output

logger = logging.getLogger("taskboard.client")


class RestClient:
    """Thin wrapper over httpx for the board REST API.

    Every request carries the bearer token. Successful responses are unwrapped
    to their ``data`` field; anything else becomes a TransportError.
    """

    def __init__(self, base_url: str, token: str, timeout: float = 30.0) -> None:
        """Initialize the client.

        Args:
            base_url: API base, e.g. "https://app.example.com/api/v1"
            token: API key sent as bearer token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def get(self, path: str) -> Any:
        """GET a resource and return its ``data`` field.

        Raises:
            TransportError: On network failure or non-success status; the
                message carries the raw response body.
        """
        response = self._send("GET", path)
        if not response.is_success:
            body = response.text
            logger.warning(
                "GET %s failed: %s %s",
                path,
                response.status_code,
                sanitize_for_log(truncate_output(body, 500)),
            )
            raise TransportError(
                f"REST API error {response.status_code}: {body}",
                status_code=response.status_code,
                body=body,
            )
        return response.json().get("data")

    def post(self, path: str, body: dict[str, Any]) -> Any:
        """POST a JSON body and return the ``data`` field of the reply."""
        return self._write("POST", path, body)

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        """PATCH a JSON body and return the ``data`` field of the reply."""
        return self._write("PATCH", path, body)

    def _write(self, method: str, path: str, body: dict[str, Any]) -> Any:
        response = self._send(method, path, body)
        try:
            payload: Any = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            detail = _error_detail(payload, response.text)
            logger.warning(
                "%s %s failed: %s %s",
                method,
                path,
                response.status_code,
                sanitize_for_log(truncate_output(detail, 500)),
            )
            raise TransportError(
                f"REST API error {response.status_code}: {detail}",
                status_code=response.status_code,
                body=response.text,
            )

        if not isinstance(payload, dict):
            raise TransportError(
                f"REST API returned a non-JSON response for {method} {path}",
                status_code=response.status_code,
                body=response.text,
            )
        return payload.get("data")

    def _send(self, method: str, path: str, body: dict[str, Any] | None = None) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            return self.client.request(method, path, json=body)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError(f"REST API request failed: {e}") from e


def _error_detail(payload: Any, raw: str) -> str:
    """Server-reported error message when present, else the raw body."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return json.dumps(payload)
    return raw
