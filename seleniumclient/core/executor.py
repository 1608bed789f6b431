"""
Command Executor

Turns a ``Command`` into one HTTP exchange with the hub and decodes the
reply. Failures come back as exceptions classified by wire status; a
command is never re-issued here.
"""

import time
from typing import Any

import structlog
from pydantic import ValidationError

from seleniumclient.config import settings
from seleniumclient.core.commands import Command, HttpMethod
from seleniumclient.core.errors import (
    STATUS_KINDS,
    ErrorKind,
    TransportError,
    error_for,
)
from seleniumclient.core.transport import HttpxTransport, Transport, TransportReply
from seleniumclient.schemas.wire import WireResponse

logger = structlog.get_logger()


def _status_for_error_name(name: str) -> int:
    """Wire status for a W3C style ``{"error": "<kind>"}`` value."""
    try:
        kind = ErrorKind(name)
    except ValueError:
        kind = ErrorKind.UNKNOWN
    for code, known in STATUS_KINDS.items():
        if known is kind:
            return code
    return 13


def decode_reply(reply: TransportReply) -> WireResponse:
    """Decode a transport reply into a wire response."""
    body = dict(reply.body)

    if "status" not in body:
        value = body.get("value")
        if isinstance(value, dict) and isinstance(value.get("error"), str):
            body["status"] = _status_for_error_name(value["error"])
        elif reply.status_code >= 400:
            body["status"] = 13

    try:
        return WireResponse.model_validate(body)
    except ValidationError as e:
        raise TransportError(f"Malformed response: {e}") from e


class CommandExecutor:
    """
    Executes protocol commands against a hub.

    Usage:
        executor = CommandExecutor("http://localhost:4444/wd/hub")
        response = executor.execute(Command.create("get_title"), session_id)
    """

    def __init__(
        self,
        hub_url: str | None = None,
        transport: Transport | None = None,
    ):
        self.hub_url = (hub_url or settings.hub_url).rstrip("/")
        self.transport = transport or HttpxTransport()

    def url_for(self, command: Command, session_id: str | None = None) -> str:
        return f"{self.hub_url}{command.path(session_id)}"

    def execute(self, command: Command, session_id: str | None = None) -> WireResponse:
        """
        Execute a command once.

        Args:
            command: Command to send
            session_id: Session the command is bound to, if it needs one

        Returns:
            The decoded response, only when its status is 0

        Raises:
            TransportError: the exchange failed or the reply is malformed
            ProtocolError: the server reported a non-zero status
        """
        url = self.url_for(command, session_id)
        payload: dict[str, Any] | None = None
        if command.method is HttpMethod.POST:
            payload = command.body

        log = logger.bind(command=command.name, session_id=session_id)
        start = time.time()

        reply = self.transport.request(command.method.value, url, payload)
        response = decode_reply(reply)
        duration_ms = (time.time() - start) * 1000

        if not response.ok:
            error = error_for(response.status, response.message)
            log.debug(
                "command_failed",
                status=response.status,
                kind=error.kind.value,
                duration_ms=round(duration_ms, 2),
            )
            raise error

        log.debug(
            "command_executed",
            method=command.method.value,
            duration_ms=round(duration_ms, 2),
        )
        return response

    def close(self) -> None:
        self.transport.close()
