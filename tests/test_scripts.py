"""
Tests for predicate script generation and script execution.
"""

import pytest

from seleniumclient.core.errors import CapabilityError, SessionStateError
from seleniumclient.core.locator import ElementHandle
from seleniumclient.core.scripts import (
    ScriptRunner,
    build_predicate_script,
    escape_selector,
    function_check_script,
)
from tests.conftest import SESSION_ID, ok


class TestScriptBuilders:
    def test_escape_selector_quotes(self):
        assert escape_selector("div.item") == '"div.item"'

    def test_escape_selector_escapes_quotes_and_backslashes(self):
        assert escape_selector('a[title="x\\y"]') == '"a[title=\\"x\\\\y\\"]"'

    def test_unscoped_script(self):
        script = build_predicate_script("document.querySelectorAll", '"li"', has_scope=False)

        assert script == 'return document.querySelectorAll("li")'

    def test_scoped_document_method_runs_on_scope(self):
        script = build_predicate_script("document.querySelectorAll", '"li"', has_scope=True)

        assert script == 'return arguments[0].querySelectorAll("li")'

    def test_scoped_free_function_gets_scope_argument(self):
        script = build_predicate_script("findMatches", '"li"', has_scope=True)

        assert script == 'return findMatches("li", arguments[0])'

    def test_function_check_script(self):
        assert function_check_script("findMatches") == "return typeof window.findMatches;"


class TestScriptRunner:
    def test_execute_returns_value(self, transport, session):
        transport.route("POST", f"/session/{SESSION_ID}/execute", ok(42))

        assert ScriptRunner(session).execute("return 42") == 42
        assert transport.calls[-1][2] == {"script": "return 42", "args": []}

    def test_element_arguments_become_references(self, transport, session):
        transport.route("POST", f"/session/{SESSION_ID}/execute", ok())

        ScriptRunner(session).execute("return 1", [ElementHandle(SESSION_ID, "5"), "x"])

        assert transport.calls[-1][2]["args"] == [{"ELEMENT": "5"}, "x"]

    def test_async_variant(self, transport, session):
        transport.route("POST", f"/session/{SESSION_ID}/execute_async", ok("done"))

        assert ScriptRunner(session).execute("cb()", asynchronous=True) == "done"

    def test_javascript_disabled(self, transport, executor):
        from seleniumclient.core.session import Session

        transport.route(
            "GET",
            f"/session/{SESSION_ID}",
            ok({"browserName": "htmlunit", "javascriptEnabled": False}),
        )
        session = Session(executor)
        session.start({"browserName": "htmlunit"})
        sent = len(transport.calls)

        with pytest.raises(CapabilityError):
            ScriptRunner(session).execute("return 1")
        assert len(transport.calls) == sent

    def test_string_flag_enables_javascript(self, transport, executor):
        from seleniumclient.core.session import Session

        transport.route("GET", f"/session/{SESSION_ID}", ok({"javascriptEnabled": "1"}))
        transport.route("POST", f"/session/{SESSION_ID}/execute", ok(True))
        session = Session(executor)
        session.start({"browserName": "firefox"})

        assert ScriptRunner(session).execute("return true") is True

    def test_foreign_handle_rejected(self, session):
        with pytest.raises(SessionStateError):
            ScriptRunner(session).execute("return 1", [ElementHandle("other", "5")])
