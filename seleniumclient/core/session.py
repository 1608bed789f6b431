"""
Session lifecycle: Unstarted -> Active -> Quit.

The session id and the negotiated capabilities are written once by
``start`` and only read afterwards.
"""

from enum import Enum
from typing import Any

import structlog

from seleniumclient.core.commands import Command
from seleniumclient.core.errors import (
    CapabilityError,
    SeleniumClientError,
    SessionStateError,
    TransportError,
)
from seleniumclient.core.executor import CommandExecutor
from seleniumclient.core.locator import ElementHandle
from seleniumclient.schemas.wire import DesiredCapabilities, WireResponse

logger = structlog.get_logger()


class SessionState(str, Enum):
    UNSTARTED = "unstarted"
    ACTIVE = "active"
    QUIT = "quit"


class Session:
    """
    A remote browser session.

    Usage:
        with Session(executor) as session:
            session.start(DesiredCapabilities(browser_name="firefox"))
            session.execute(Command.create("get_title"))
    """

    def __init__(self, executor: CommandExecutor):
        self.executor = executor
        self._id: str | None = None
        self._capabilities: dict[str, Any] = {}
        self._state = SessionState.UNSTARTED

    @property
    def id(self) -> str:
        self.require_active()
        return self._id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    @property
    def capabilities(self) -> dict[str, Any]:
        """Capabilities negotiated with the server."""
        self.require_active()
        return dict(self._capabilities)

    @property
    def javascript_enabled(self) -> bool:
        enabled = self._capabilities.get("javascriptEnabled")
        return enabled is True or str(enabled).strip() == "1"

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.is_active:
            self.quit()

    def start(self, capabilities: DesiredCapabilities | dict[str, Any]) -> str:
        """
        Create the remote session and cache its negotiated capabilities.

        Args:
            capabilities: Requested capabilities; a browser name is required

        Returns:
            The new session id
        """
        if self._state is not SessionState.UNSTARTED:
            raise SessionStateError(f"Session cannot be started while {self._state.value}")

        if isinstance(capabilities, dict):
            capabilities = DesiredCapabilities.model_validate(capabilities)

        browser_name = capabilities.browser_name
        if browser_name is None or not browser_name.strip():
            raise CapabilityError("Can not start session if browser name is not specified")

        log = logger.bind(browser=browser_name)
        log.info("starting_session")

        response = self.executor.execute(
            Command.create(
                "new_session",
                {"desiredCapabilities": capabilities.to_wire()},
            )
        )
        session_id = response.session_id
        if not session_id and isinstance(response.value, dict):
            session_id = response.value.get("sessionId")
        if not session_id:
            raise TransportError("New session response carries no session id")

        self._id = str(session_id)
        self._state = SessionState.ACTIVE

        # The server may negotiate different capabilities than requested
        try:
            negotiated = self.execute(Command.create("get_capabilities")).value
            if negotiated is None:
                negotiated = {}
            if not isinstance(negotiated, dict):
                raise TransportError(
                    f"Malformed capabilities: expected an object, got {type(negotiated).__name__}"
                )
        except SeleniumClientError:
            self._abandon(log)
            raise
        self._capabilities = dict(negotiated)

        log.info("session_started", session_id=self._id)
        return self._id

    def _abandon(self, log) -> None:
        """Delete a half-started remote session and mark this one quit."""
        try:
            self.executor.execute(Command.create("quit"), self._id)
        except SeleniumClientError as e:
            log.warning("session_cleanup_failed", session_id=self._id, error=str(e))
        finally:
            self._state = SessionState.QUIT

    def require_active(self) -> None:
        if self._state is SessionState.UNSTARTED:
            raise SessionStateError("Session has not been started")
        if self._state is SessionState.QUIT:
            raise SessionStateError(f"Session {self._id} has been quit")

    def check_handle(self, handle: ElementHandle) -> None:
        """Refuse element handles that belong to another session."""
        self.require_active()
        if handle.session_id != self._id:
            raise SessionStateError(
                f"Element {handle.element_id} belongs to session {handle.session_id}, "
                f"not {self._id}"
            )

    def execute(self, command: Command) -> WireResponse:
        """Execute a command bound to this session."""
        self.require_active()
        return self.executor.execute(command, self._id)

    def quit(self) -> None:
        """Delete the remote session. The session is unusable afterwards."""
        self.require_active()
        try:
            self.executor.execute(Command.create("quit"), self._id)
        finally:
            self._state = SessionState.QUIT
            logger.info("session_quit", session_id=self._id)

    def current_sessions(self) -> list[dict[str, Any]]:
        """Sessions currently open on the hub."""
        return self.executor.execute(Command.create("get_sessions")).value or []

    def status(self) -> dict[str, Any]:
        """Hub status; does not require an active session."""
        return self.executor.execute(Command.create("status")).model_dump(by_alias=True)
