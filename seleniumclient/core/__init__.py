"""
Core command-dispatch and element-resolution components.
"""

from seleniumclient.core.commands import Command, HttpMethod
from seleniumclient.core.errors import (
    CapabilityError,
    ErrorKind,
    InvalidSelectorError,
    NoSuchElementError,
    ProtocolError,
    SeleniumClientError,
    SessionStateError,
    StaleElementReferenceError,
    TransportError,
    WaitTimeout,
)
from seleniumclient.core.executor import CommandExecutor
from seleniumclient.core.locator import (
    By,
    ElementHandle,
    Locator,
    NativeLocator,
    ScriptLocator,
    Strategy,
)
from seleniumclient.core.resolver import ElementResolver
from seleniumclient.core.scripts import ScriptRunner
from seleniumclient.core.session import Session, SessionState
from seleniumclient.core.transport import HttpxTransport, Transport, TransportReply
from seleniumclient.core.waiter import PollingWaiter

__all__ = [
    "By",
    "CapabilityError",
    "Command",
    "CommandExecutor",
    "ElementHandle",
    "ElementResolver",
    "ErrorKind",
    "HttpMethod",
    "HttpxTransport",
    "InvalidSelectorError",
    "Locator",
    "NativeLocator",
    "NoSuchElementError",
    "PollingWaiter",
    "ProtocolError",
    "ScriptLocator",
    "ScriptRunner",
    "SeleniumClientError",
    "Session",
    "SessionState",
    "SessionStateError",
    "StaleElementReferenceError",
    "Strategy",
    "Transport",
    "TransportError",
    "TransportReply",
    "WaitTimeout",
]
