"""
HTTP transport for the command executor.

The executor only depends on the ``Transport`` protocol, so tests and
embedders can inject their own exchange. ``HttpxTransport`` is the default.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx
import structlog

from seleniumclient.config import settings
from seleniumclient.core.errors import TransportError

logger = structlog.get_logger()


@dataclass
class TransportReply:
    """Raw reply of one HTTP exchange."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


class Transport(Protocol):
    def request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> TransportReply: ...

    def close(self) -> None: ...


class HttpxTransport:
    """
    Synchronous transport backed by ``httpx.Client``.

    Usage:
        transport = HttpxTransport(timeout=10)
        reply = transport.request("GET", "http://localhost:4444/wd/hub/status")
    """

    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.http_timeout,
            follow_redirects=True,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json;charset=UTF-8",
            },
        )

    def request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> TransportReply:
        content = json.dumps(payload) if payload is not None else None

        try:
            response = self._client.request(method, url, content=content)
        except httpx.HTTPError as e:
            logger.warning("http_request_failed", method=method, url=url, error=str(e))
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.content.strip():
            return TransportReply(status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {url} returned a non-JSON body "
                f"(HTTP {response.status_code})"
            ) from e

        if not isinstance(body, dict):
            raise TransportError(
                f"{method} {url} returned {type(body).__name__}, expected an object"
            )

        return TransportReply(status_code=response.status_code, body=body)

    def close(self) -> None:
        self._client.close()
