"""
Tests for locators and element handles.
"""

import pytest

from seleniumclient.core.locator import (
    By,
    ElementHandle,
    NativeLocator,
    ScriptLocator,
    Strategy,
    element_id_from,
)


class TestBy:
    """Tests for the locator constructors."""

    @pytest.mark.parametrize(
        "factory, strategy",
        [
            (By.css_selector, Strategy.CSS_SELECTOR),
            (By.xpath, Strategy.XPATH),
            (By.id, Strategy.ID),
            (By.name, Strategy.NAME),
            (By.tag_name, Strategy.TAG_NAME),
            (By.class_name, Strategy.CLASS_NAME),
            (By.link_text, Strategy.LINK_TEXT),
            (By.partial_link_text, Strategy.PARTIAL_LINK_TEXT),
        ],
    )
    def test_native_constructors(self, factory, strategy):
        locator = factory("value")

        assert isinstance(locator, NativeLocator)
        assert locator.strategy is strategy
        assert locator.to_wire() == {"using": strategy.value, "value": "value"}

    def test_js_selector_defaults_to_query_selector_all(self):
        locator = By.js_selector("div.item")

        assert isinstance(locator, ScriptLocator)
        assert locator.function_name == "document.querySelectorAll"
        assert locator.strategy_name == "js selector document.querySelectorAll"

    def test_js_selector_custom_function(self):
        locator = By.js_selector("item", "findMatches")

        assert locator.function_name == "findMatches"
        assert locator.selector == "item"


class TestLocatorValidation:
    def test_empty_native_selector_rejected(self):
        with pytest.raises(ValueError):
            By.css_selector("")

    def test_empty_script_selector_rejected(self):
        with pytest.raises(ValueError):
            By.js_selector("")

    def test_blank_function_name_rejected(self):
        with pytest.raises(ValueError):
            ScriptLocator("  ", "x")

    def test_wire_strategy_name_accepted(self):
        assert NativeLocator("xpath", "//a").strategy is Strategy.XPATH

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            NativeLocator("sizzle", "a")

    def test_locators_are_immutable_values(self):
        locator = By.id("main")

        with pytest.raises(AttributeError):
            locator.selector = "other"
        assert locator == By.id("main")


class TestElementHandle:
    def test_wire_reference(self):
        handle = ElementHandle(session_id="s", element_id="7")

        assert handle.to_wire() == {"ELEMENT": "7"}
        assert str(handle) == "7"

    def test_handles_compare_by_identity_fields(self):
        assert ElementHandle("s", "7") == ElementHandle("s", "7")
        assert ElementHandle("s", "7") != ElementHandle("t", "7")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("7", "7"),
            (7, "7"),
            ({"ELEMENT": "9"}, "9"),
            ({"element-6066-11e4-a52e-4f735466cecf": "w3c"}, "w3c"),
            ({}, None),
            (None, None),
        ],
    )
    def test_element_id_from(self, raw, expected):
        assert element_id_from(raw) == expected
