"""
Wire protocol command catalogue.

Each entry maps a command name to its HTTP method and path template. Path
templates may reference ``{session_id}`` and ``{element_id}``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


COMMANDS: dict[str, tuple[HttpMethod, str]] = {
    # Sessions
    "status": (HttpMethod.GET, "/status"),
    "new_session": (HttpMethod.POST, "/session"),
    "get_sessions": (HttpMethod.GET, "/sessions"),
    "get_capabilities": (HttpMethod.GET, "/session/{session_id}"),
    "quit": (HttpMethod.DELETE, "/session/{session_id}"),
    # Navigation
    "get": (HttpMethod.POST, "/session/{session_id}/url"),
    "get_current_url": (HttpMethod.GET, "/session/{session_id}/url"),
    "go_back": (HttpMethod.POST, "/session/{session_id}/back"),
    "go_forward": (HttpMethod.POST, "/session/{session_id}/forward"),
    "refresh": (HttpMethod.POST, "/session/{session_id}/refresh"),
    # Timeouts
    "implicit_wait": (HttpMethod.POST, "/session/{session_id}/timeouts/implicit_wait"),
    "set_timeouts": (HttpMethod.POST, "/session/{session_id}/timeouts"),
    "async_script_timeout": (HttpMethod.POST, "/session/{session_id}/timeouts/async_script"),
    # Page
    "get_page_source": (HttpMethod.GET, "/session/{session_id}/source"),
    "get_title": (HttpMethod.GET, "/session/{session_id}/title"),
    "screenshot": (HttpMethod.GET, "/session/{session_id}/screenshot"),
    # Elements
    "find_element": (HttpMethod.POST, "/session/{session_id}/element"),
    "find_elements": (HttpMethod.POST, "/session/{session_id}/elements"),
    "find_child_element": (HttpMethod.POST, "/session/{session_id}/element/{element_id}/element"),
    "find_child_elements": (HttpMethod.POST, "/session/{session_id}/element/{element_id}/elements"),
    # Scripts
    "execute_script": (HttpMethod.POST, "/session/{session_id}/execute"),
    "execute_async_script": (HttpMethod.POST, "/session/{session_id}/execute_async"),
    # Windows
    "get_window_handle": (HttpMethod.GET, "/session/{session_id}/window_handle"),
    "get_window_handles": (HttpMethod.GET, "/session/{session_id}/window_handles"),
}


@dataclass(frozen=True)
class Command:
    """A single protocol request, bound to a session when executed."""

    name: str
    method: HttpMethod
    path_template: str
    body: dict[str, Any] = field(default_factory=dict)
    element_id: str | None = None

    @classmethod
    def create(
        cls,
        name: str,
        body: dict[str, Any] | None = None,
        element_id: str | None = None,
    ) -> "Command":
        """Build a command from the catalogue."""
        try:
            method, path = COMMANDS[name]
        except KeyError:
            raise ValueError(f"Unknown command '{name}'") from None
        return cls(
            name=name,
            method=method,
            path_template=path,
            body=dict(body or {}),
            element_id=element_id,
        )

    @property
    def needs_session(self) -> bool:
        return "{session_id}" in self.path_template

    @property
    def needs_element(self) -> bool:
        return "{element_id}" in self.path_template

    def path(self, session_id: str | None = None) -> str:
        """Fill the path template."""
        if self.needs_session and not session_id:
            raise ValueError(f"Command '{self.name}' requires a session id")
        if self.needs_element and self.element_id is None:
            raise ValueError(f"Command '{self.name}' requires an element id")
        return self.path_template.format(
            session_id=session_id,
            element_id=self.element_id,
        )
