"""
Script execution and predicate script generation.

The builders are pure functions so the generated JavaScript can be checked
without a server.
"""

import json
from typing import Any, Iterable

import structlog

from seleniumclient.core.commands import Command
from seleniumclient.core.errors import CapabilityError
from seleniumclient.core.locator import ElementHandle
from seleniumclient.core.session import Session

logger = structlog.get_logger()

DOCUMENT_PREFIX = "document."


def escape_selector(selector: str) -> str:
    """Quote a selector as a JavaScript string literal."""
    return json.dumps(selector)


def function_check_script(function_name: str) -> str:
    """Script answering the ``typeof`` of a global function."""
    return f"return typeof window.{function_name};"


def build_predicate_script(
    function_name: str,
    escaped_selector: str,
    has_scope: bool,
) -> str:
    """
    Build the lookup script for a script locator.

    Without a scope the function is called with the selector only. With a
    scope element (passed as ``arguments[0]``), ``document.<method>`` names
    are called as ``<method>`` on the scope element and any other name is
    called as ``function(selector, scope)``.
    """
    if not has_scope:
        return f"return {function_name}({escaped_selector})"

    if function_name.startswith(DOCUMENT_PREFIX):
        method = function_name[len(DOCUMENT_PREFIX):]
        return f"return arguments[0].{method}({escaped_selector})"

    return f"return {function_name}({escaped_selector}, arguments[0])"


class ScriptRunner:
    """Runs JavaScript in the session's current page."""

    def __init__(self, session: Session):
        self.session = session

    def to_wire_args(self, args: Iterable[Any] | None) -> list[Any]:
        wire_args = []
        for arg in args or ():
            if isinstance(arg, ElementHandle):
                self.session.check_handle(arg)
                arg = arg.to_wire()
            wire_args.append(arg)
        return wire_args

    def execute(
        self,
        script: str,
        args: Iterable[Any] | None = None,
        asynchronous: bool = False,
    ) -> Any:
        """
        Execute a script and return its result value.

        Args:
            script: Function body to run
            args: Script arguments; element handles become element references
            asynchronous: Use the asynchronous variant of the command
        """
        self.session.require_active()
        if not self.session.javascript_enabled:
            raise CapabilityError(
                "You must be using an underlying instance of WebDriver "
                "that supports executing javascript"
            )

        name = "execute_async_script" if asynchronous else "execute_script"
        command = Command.create(name, {"script": script, "args": self.to_wire_args(args)})

        logger.debug("executing_script", asynchronous=asynchronous, length=len(script))
        return self.session.execute(command).value
