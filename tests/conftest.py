"""
Shared fixtures: a scripted in-memory transport standing in for the hub.
"""

from typing import Any, Callable

import pytest

from seleniumclient.core.executor import CommandExecutor
from seleniumclient.core.resolver import ElementResolver
from seleniumclient.core.session import Session
from seleniumclient.core.transport import TransportReply
from seleniumclient.schemas.wire import DesiredCapabilities

HUB_URL = "http://hub:4444/wd/hub"
SESSION_ID = "s-1"

Reply = dict[str, Any] | Callable[[dict[str, Any] | None], dict[str, Any]]


class FakeTransport:
    """Answers requests from a route table and records every call."""

    def __init__(self, hub_url: str = HUB_URL):
        self.hub_url = hub_url
        self.routes: dict[tuple[str, str], Reply] = {}
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []
        self.closed = False

    def route(self, method: str, path: str, reply: Reply) -> None:
        self.routes[(method, path)] = reply

    def request(self, method, url, payload=None) -> TransportReply:
        path = url[len(self.hub_url):]
        self.calls.append((method, path, payload))
        try:
            reply = self.routes[(method, path)]
        except KeyError:
            raise AssertionError(f"Unexpected request {method} {path}") from None
        body = reply(payload) if callable(reply) else reply
        return TransportReply(status_code=200, body=body)

    def close(self) -> None:
        self.closed = True

    def paths(self) -> list[str]:
        return [path for _, path, _ in self.calls]

    def scripts(self) -> list[str]:
        return [
            payload["script"]
            for _, path, payload in self.calls
            if path.endswith("/execute")
        ]


def ok(value: Any = None, **extra) -> dict[str, Any]:
    return {"status": 0, "value": value, **extra}


def fail(status: int, message: str = "") -> dict[str, Any]:
    return {"status": status, "value": {"message": message}}


def script_router(handlers: dict[str, Any], default: Any = None):
    """Reply to execute requests by the first handler key found in the script."""

    def reply(payload):
        for marker, value in handlers.items():
            if marker in payload["script"]:
                return value if isinstance(value, dict) else ok(value)
        return ok(default)

    return reply


@pytest.fixture
def transport() -> FakeTransport:
    fake = FakeTransport()
    fake.route("POST", "/session", ok({}, sessionId=SESSION_ID))
    fake.route(
        "GET",
        f"/session/{SESSION_ID}",
        ok({"browserName": "firefox", "javascriptEnabled": True}),
    )
    fake.route("DELETE", f"/session/{SESSION_ID}", ok())
    return fake


@pytest.fixture
def executor(transport) -> CommandExecutor:
    return CommandExecutor(HUB_URL, transport=transport)


@pytest.fixture
def session(executor) -> Session:
    session = Session(executor)
    session.start(DesiredCapabilities(browser_name="firefox"))
    return session


@pytest.fixture
def resolver(session) -> ElementResolver:
    return ElementResolver(session)
