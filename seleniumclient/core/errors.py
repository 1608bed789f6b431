"""
Client error taxonomy.

Wire protocol status codes are mapped to a closed set of error kinds through
STATUS_KINDS; the exception raised for a failed response is chosen from the
kind, never from the call site.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error kinds reported by the remote end."""

    NO_SUCH_DRIVER = "no such driver"
    NO_SUCH_ELEMENT = "no such element"
    NO_SUCH_FRAME = "no such frame"
    UNKNOWN_COMMAND = "unknown command"
    STALE_ELEMENT_REFERENCE = "stale element reference"
    ELEMENT_NOT_VISIBLE = "element not visible"
    INVALID_ELEMENT_STATE = "invalid element state"
    UNKNOWN = "unknown error"
    ELEMENT_NOT_SELECTABLE = "element is not selectable"
    JAVASCRIPT_ERROR = "javascript error"
    INVALID_SELECTOR = "invalid selector"
    TIMEOUT = "timeout"
    NO_SUCH_WINDOW = "no such window"
    INVALID_COOKIE_DOMAIN = "invalid cookie domain"
    UNABLE_TO_SET_COOKIE = "unable to set cookie"
    UNEXPECTED_ALERT_OPEN = "unexpected alert open"
    NO_ALERT_OPEN = "no alert open"
    SCRIPT_TIMEOUT = "script timeout"
    INVALID_ELEMENT_COORDINATES = "invalid element coordinates"
    IME_NOT_AVAILABLE = "ime not available"
    IME_ENGINE_ACTIVATION_FAILED = "ime engine activation failed"
    SESSION_NOT_CREATED = "session not created"
    MOVE_TARGET_OUT_OF_BOUNDS = "move target out of bounds"


# JSON wire protocol status codes
STATUS_KINDS: dict[int, ErrorKind] = {
    6: ErrorKind.NO_SUCH_DRIVER,
    7: ErrorKind.NO_SUCH_ELEMENT,
    8: ErrorKind.NO_SUCH_FRAME,
    9: ErrorKind.UNKNOWN_COMMAND,
    10: ErrorKind.STALE_ELEMENT_REFERENCE,
    11: ErrorKind.ELEMENT_NOT_VISIBLE,
    12: ErrorKind.INVALID_ELEMENT_STATE,
    13: ErrorKind.UNKNOWN,
    15: ErrorKind.ELEMENT_NOT_SELECTABLE,
    17: ErrorKind.JAVASCRIPT_ERROR,
    19: ErrorKind.INVALID_SELECTOR,  # XPath lookup error
    21: ErrorKind.TIMEOUT,
    23: ErrorKind.NO_SUCH_WINDOW,
    24: ErrorKind.INVALID_COOKIE_DOMAIN,
    25: ErrorKind.UNABLE_TO_SET_COOKIE,
    26: ErrorKind.UNEXPECTED_ALERT_OPEN,
    27: ErrorKind.NO_ALERT_OPEN,
    28: ErrorKind.SCRIPT_TIMEOUT,
    29: ErrorKind.INVALID_ELEMENT_COORDINATES,
    30: ErrorKind.IME_NOT_AVAILABLE,
    31: ErrorKind.IME_ENGINE_ACTIVATION_FAILED,
    32: ErrorKind.INVALID_SELECTOR,
    33: ErrorKind.SESSION_NOT_CREATED,
    34: ErrorKind.MOVE_TARGET_OUT_OF_BOUNDS,
}

NO_SUCH_ELEMENT_STATUS = 7
INVALID_SELECTOR_STATUS = 32


def classify(status: int) -> ErrorKind:
    """Map a non-zero wire status to its error kind."""
    return STATUS_KINDS.get(status, ErrorKind.UNKNOWN)


class SeleniumClientError(Exception):
    """Base error for the client."""


class TransportError(SeleniumClientError):
    """The HTTP exchange with the hub failed or returned garbage."""


class ProtocolError(SeleniumClientError):
    """The server answered a command with a non-zero status."""

    def __init__(
        self,
        message: str = "",
        code: int = 13,
        kind: ErrorKind | None = None,
    ):
        self.code = code
        self.kind = kind or classify(code)
        super().__init__(message or self.kind.value)


class NoSuchElementError(ProtocolError):
    """No element matched the locator."""

    def __init__(self, message: str = "", code: int = NO_SUCH_ELEMENT_STATUS, kind=None):
        super().__init__(message, code, kind)


class InvalidSelectorError(ProtocolError):
    """The selector is malformed or its predicate function is not defined."""

    def __init__(self, message: str = "", code: int = INVALID_SELECTOR_STATUS, kind=None):
        super().__init__(message, code, kind)


class StaleElementReferenceError(ProtocolError):
    """The referenced element is no longer attached to the page."""


class ScriptError(ProtocolError):
    """Script evaluation raised in the browser."""


class ScriptTimeoutError(ProtocolError):
    """An asynchronous script did not complete in time."""


class NoSuchWindowError(ProtocolError):
    """The targeted window is gone."""


class SessionNotCreatedError(ProtocolError):
    """The server refused to create a session."""


class CapabilityError(SeleniumClientError):
    """The requested or negotiated capabilities do not allow the operation."""


class SessionStateError(SeleniumClientError):
    """An operation was issued against a session that is not active."""


class WaitTimeout(SeleniumClientError):
    """A polling wait ran out of time."""

    def __init__(self, message: str, timeout: float, attempts: int = 0):
        super().__init__(message)
        self.timeout = timeout
        self.attempts = attempts


_KIND_ERRORS: dict[ErrorKind, type[ProtocolError]] = {
    ErrorKind.NO_SUCH_ELEMENT: NoSuchElementError,
    ErrorKind.INVALID_SELECTOR: InvalidSelectorError,
    ErrorKind.STALE_ELEMENT_REFERENCE: StaleElementReferenceError,
    ErrorKind.JAVASCRIPT_ERROR: ScriptError,
    ErrorKind.SCRIPT_TIMEOUT: ScriptTimeoutError,
    ErrorKind.NO_SUCH_WINDOW: NoSuchWindowError,
    ErrorKind.SESSION_NOT_CREATED: SessionNotCreatedError,
}


def error_for(code: int, message: str = "") -> ProtocolError:
    """Build the exception matching a wire status code."""
    kind = classify(code)
    error_class = _KIND_ERRORS.get(kind, ProtocolError)
    return error_class(message, code=code, kind=kind)
