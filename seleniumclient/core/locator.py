"""
Element Locators

A locator describes how to find elements on the remote page. It is either
a native locator, resolved by the server with one of its built-in
strategies, or a script locator, resolved in the page by calling a
client-supplied JavaScript function with the selector.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Prefix that marks script locators in their wire-style strategy name
SCRIPT_STRATEGY_PREFIX = "js selector "

# Reference key used by the JSON wire protocol, and the W3C variant
ELEMENT_KEY = "ELEMENT"
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


class Strategy(str, Enum):
    """Native strategies understood by the remote end."""

    CSS_SELECTOR = "css selector"
    XPATH = "xpath"
    ID = "id"
    NAME = "name"
    TAG_NAME = "tag name"
    CLASS_NAME = "class name"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"


@dataclass(frozen=True)
class NativeLocator:
    """Locator resolved by the server."""

    strategy: Strategy
    selector: str

    def __post_init__(self):
        if not self.selector:
            raise ValueError("Locator selector must not be empty")
        # Accept the wire name as well as the enum member
        object.__setattr__(self, "strategy", Strategy(self.strategy))

    @property
    def strategy_name(self) -> str:
        return self.strategy.value

    def to_wire(self) -> dict[str, str]:
        return {"using": self.strategy.value, "value": self.selector}


@dataclass(frozen=True)
class ScriptLocator:
    """Locator resolved by calling a JavaScript function in the page."""

    function_name: str
    selector: str

    def __post_init__(self):
        if not self.selector:
            raise ValueError("Locator selector must not be empty")
        if not self.function_name or not self.function_name.strip():
            raise ValueError("Script locator needs a function name")

    @property
    def strategy_name(self) -> str:
        return f"{SCRIPT_STRATEGY_PREFIX}{self.function_name}"


Locator = NativeLocator | ScriptLocator


class By:
    """
    Locator constructors, one per strategy.

    Usage:
        driver.find_element(By.css_selector("form.login button"))
        driver.find_elements(By.js_selector("[data-role=item]"))
        driver.find_elements(By.js_selector("item", "findByRole"))
    """

    @staticmethod
    def css_selector(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.CSS_SELECTOR, selector)

    @staticmethod
    def xpath(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.XPATH, selector)

    @staticmethod
    def id(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.ID, selector)

    @staticmethod
    def name(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.NAME, selector)

    @staticmethod
    def tag_name(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.TAG_NAME, selector)

    @staticmethod
    def class_name(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.CLASS_NAME, selector)

    @staticmethod
    def link_text(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.LINK_TEXT, selector)

    @staticmethod
    def partial_link_text(selector: str) -> NativeLocator:
        return NativeLocator(Strategy.PARTIAL_LINK_TEXT, selector)

    @staticmethod
    def js_selector(
        selector: str,
        function_name: str = "document.querySelectorAll",
    ) -> ScriptLocator:
        """
        Locate through a global JavaScript function.

        Args:
            selector: Argument passed to the function
            function_name: Global function returning an element or a list of
                elements. Names starting with ``document.`` are called as a
                method of the scope element for scoped lookups.
        """
        return ScriptLocator(function_name, selector)


@dataclass(frozen=True)
class ElementHandle:
    """Opaque reference to a remote element within one session."""

    session_id: str
    element_id: str

    def to_wire(self) -> dict[str, str]:
        return {ELEMENT_KEY: self.element_id}

    def __str__(self) -> str:
        return self.element_id


def element_id_from(raw: Any) -> str | None:
    """Extract an element id from a bare id or an element reference map."""
    if isinstance(raw, dict):
        raw = raw.get(ELEMENT_KEY, raw.get(W3C_ELEMENT_KEY))
    if raw is None or isinstance(raw, (dict, list, bool)):
        return None
    return str(raw)
