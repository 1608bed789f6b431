"""
Element Resolver

Resolves locators into element handles. Native locators are sent to the
server's find commands; script locators are evaluated in the page through
script execution, after checking that their function exists.
"""

import time
from typing import Any

import structlog

from seleniumclient.core.commands import Command
from seleniumclient.core.errors import InvalidSelectorError, NoSuchElementError
from seleniumclient.core.locator import (
    ElementHandle,
    Locator,
    NativeLocator,
    ScriptLocator,
    element_id_from,
)
from seleniumclient.core.scripts import (
    ScriptRunner,
    build_predicate_script,
    escape_selector,
    function_check_script,
)
from seleniumclient.core.session import Session

logger = structlog.get_logger()


class ElementResolver:
    """
    Finds elements for a session.

    Usage:
        resolver = ElementResolver(session)
        button = resolver.find_element(By.css_selector("button.submit"))
        items = resolver.find_elements(By.js_selector("li"), scope=button)
    """

    def __init__(self, session: Session, scripts: ScriptRunner | None = None):
        self.session = session
        self.scripts = scripts or ScriptRunner(session)

    def find_element(
        self,
        locator: Locator,
        scope: ElementHandle | None = None,
    ) -> ElementHandle:
        """Find the first matching element or raise ``NoSuchElementError``."""
        return self.resolve(locator, scope=scope, many=False)[0]

    def find_elements(
        self,
        locator: Locator,
        scope: ElementHandle | None = None,
    ) -> list[ElementHandle]:
        """Find all matching elements; no match gives an empty list."""
        return self.resolve(locator, scope=scope, many=True)

    def resolve(
        self,
        locator: Locator,
        scope: ElementHandle | None = None,
        many: bool = False,
    ) -> list[ElementHandle]:
        """
        Resolve a locator.

        Args:
            locator: Native or script locator
            scope: Element to search within, if any
            many: Return every match instead of exactly one

        Returns:
            One handle when ``many`` is false, otherwise all matches in order
        """
        self.session.require_active()
        if scope is not None:
            self.session.check_handle(scope)

        start = time.time()
        log = logger.bind(
            strategy=locator.strategy_name,
            selector=locator.selector,
            scoped=scope is not None,
            many=many,
        )

        match locator:
            case NativeLocator():
                handles = self._resolve_native(locator, scope, many)
            case ScriptLocator():
                handles = self._resolve_script(locator, scope)
            case _:
                raise TypeError(f"Unsupported locator {locator!r}")

        duration_ms = (time.time() - start) * 1000

        if not many:
            if not handles:
                log.debug("element_not_found", duration_ms=round(duration_ms, 2))
                raise NoSuchElementError(f"No element matches {locator.strategy_name}={locator.selector!r}")
            handles = handles[:1]

        log.debug("element_lookup", found=len(handles), duration_ms=round(duration_ms, 2))
        return handles

    def _resolve_native(
        self,
        locator: NativeLocator,
        scope: ElementHandle | None,
        many: bool,
    ) -> list[ElementHandle]:
        name = "find_elements" if many else "find_element"
        element_id = None
        if scope is not None:
            name = name.replace("find_", "find_child_")
            element_id = scope.element_id

        command = Command.create(name, locator.to_wire(), element_id=element_id)
        value = self.session.execute(command).value

        if many:
            return self._to_handles(value)

        element_id = element_id_from(value)
        return [] if element_id is None else [self._handle(element_id)]

    def _resolve_script(
        self,
        locator: ScriptLocator,
        scope: ElementHandle | None,
    ) -> list[ElementHandle]:
        function_name = locator.function_name

        if self.scripts.execute(function_check_script(function_name)) != "function":
            raise InvalidSelectorError(f"The selector function '{function_name}' is not defined")

        script = build_predicate_script(
            function_name,
            escape_selector(locator.selector),
            has_scope=scope is not None,
        )
        args = [scope] if scope is not None else []

        return self._to_handles(self.scripts.execute(script, args))

    def _to_handles(self, value: Any) -> list[ElementHandle]:
        """Map a lookup result to handles, wrapping a single result."""
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]

        handles = []
        for raw in value:
            element_id = element_id_from(raw)
            if element_id is not None:
                handles.append(self._handle(element_id))
        return handles

    def _handle(self, element_id: str) -> ElementHandle:
        return ElementHandle(session_id=self.session.id, element_id=element_id)
