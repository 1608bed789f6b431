"""
Remote WebDriver

High-level client for a remote hub providing:
- Session lifecycle (started on construction, quit on context exit)
- Element lookup through native and script locators
- Polling waits for elements to appear or disappear
- Script execution, navigation, timeouts and screenshots
"""

import base64
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Generator

import structlog

from seleniumclient.config import settings
from seleniumclient.core.commands import Command
from seleniumclient.core.errors import NoSuchElementError, SeleniumClientError, WaitTimeout
from seleniumclient.core.executor import CommandExecutor
from seleniumclient.core.locator import ElementHandle, Locator
from seleniumclient.core.resolver import ElementResolver
from seleniumclient.core.scripts import ScriptRunner
from seleniumclient.core.session import Session
from seleniumclient.core.transport import Transport
from seleniumclient.core.waiter import PollingWaiter
from seleniumclient.schemas.wire import DesiredCapabilities

logger = structlog.get_logger()


class ElementStillPresent(SeleniumClientError):
    """Polling signal: the element has not disappeared yet."""


class Navigation:
    """Browser history navigation for a driver."""

    def __init__(self, driver: "WebDriver"):
        self._driver = driver

    def to(self, url: str) -> None:
        self._driver.execute(Command.create("get", {"url": url}))

    def back(self) -> None:
        self._driver.execute(Command.create("go_back"))

    def forward(self) -> None:
        self._driver.execute(Command.create("go_forward"))

    def refresh(self) -> None:
        self._driver.execute(Command.create("refresh"))


class WebDriver:
    """
    Client for one remote browser session.

    Usage:
        with WebDriver(DesiredCapabilities(browser_name="chrome")) as driver:
            driver.get("https://example.com")
            button = driver.wait_for_element_until_is_present(By.id("login"))
            rows = driver.find_elements(By.js_selector("tr"), scope=table)
    """

    def __init__(
        self,
        desired_capabilities: DesiredCapabilities | None = None,
        host: str | None = None,
        port: int | None = None,
        transport: Transport | None = None,
        waiter: PollingWaiter | None = None,
        screenshots_directory: str | None = None,
    ):
        host = host or settings.hub_host
        port = port or settings.hub_port
        self.hub_url = f"{host}:{port}{settings.hub_path}"
        self.screenshots_directory = screenshots_directory or settings.screenshots_directory

        self.executor = CommandExecutor(self.hub_url, transport=transport)
        self.session = Session(self.executor)
        self.scripts = ScriptRunner(self.session)
        self.resolver = ElementResolver(self.session, self.scripts)
        self.waiter = waiter or PollingWaiter()
        self._navigation: Navigation | None = None

        if desired_capabilities is None:
            desired_capabilities = DesiredCapabilities(browser_name=settings.default_browser)
        try:
            self.session.start(desired_capabilities)
        except Exception:
            self.executor.close()
            raise

    def __enter__(self) -> "WebDriver":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if self.session.is_active:
                self.quit()
        finally:
            self.executor.close()

    @property
    def session_id(self) -> str:
        return self.session.id

    @property
    def capabilities(self) -> dict[str, Any]:
        return self.session.capabilities

    def execute(self, command: Command) -> Any:
        """Execute a session command and return its value."""
        return self.session.execute(command).value

    def quit(self) -> None:
        self.session.quit()

    def status(self) -> dict[str, Any]:
        return self.session.status()

    def current_sessions(self) -> list[dict[str, Any]]:
        return self.session.current_sessions()

    # Elements

    def find_element(
        self,
        locator: Locator,
        scope: ElementHandle | None = None,
    ) -> ElementHandle:
        return self.resolver.find_element(locator, scope=scope)

    def find_elements(
        self,
        locator: Locator,
        scope: ElementHandle | None = None,
    ) -> list[ElementHandle]:
        return self.resolver.find_elements(locator, scope=scope)

    def wait_for_element_until_is_present(
        self,
        locator: Locator,
        timeout: float | None = None,
    ) -> ElementHandle:
        """
        Wait for an element to appear.

        Raises:
            WaitTimeout: the element did not appear within ``timeout`` seconds
        """
        effective_timeout = timeout if timeout is not None else settings.wait_timeout
        return self.waiter.until(lambda: self.find_element(locator), effective_timeout)

    def wait_for_element_until_is_not_present(
        self,
        locator: Locator,
        timeout: float | None = None,
    ) -> bool:
        """
        Wait for an element to disappear.

        Returns:
            True once the element is gone, False if it is still there when
            the time is up
        """
        effective_timeout = timeout if timeout is not None else settings.wait_timeout

        def element_gone() -> bool:
            try:
                self.find_element(locator)
            except NoSuchElementError:
                return True
            raise ElementStillPresent(f"{locator.strategy_name}={locator.selector!r}")

        try:
            return self.waiter.until(
                element_gone,
                effective_timeout,
                retry_on=(ElementStillPresent,),
            )
        except WaitTimeout:
            return False

    # Scripts

    def execute_script(self, script: str, args: list[Any] | None = None) -> Any:
        return self.scripts.execute(script, args)

    def execute_async_script(self, script: str, args: list[Any] | None = None) -> Any:
        return self.scripts.execute(script, args, asynchronous=True)

    # Navigation and page

    def navigate(self) -> Navigation:
        if self._navigation is None:
            self._navigation = Navigation(self)
        return self._navigation

    def get(self, url: str) -> None:
        self.navigate().to(url)

    @property
    def current_url(self) -> str:
        return self.execute(Command.create("get_current_url"))

    @property
    def title(self) -> str:
        return self.execute(Command.create("get_title"))

    @property
    def page_source(self) -> str:
        return self.execute(Command.create("get_page_source"))

    @property
    def window_handle(self) -> str:
        return self.execute(Command.create("get_window_handle"))

    @property
    def window_handles(self) -> list[str]:
        return self.execute(Command.create("get_window_handles"))

    # Timeouts

    def set_implicit_wait(self, milliseconds: int) -> None:
        self.execute(Command.create("implicit_wait", {"ms": milliseconds}))

    def set_page_load_timeout(self, milliseconds: int) -> None:
        self.execute(Command.create("set_timeouts", {"type": "page load", "ms": milliseconds}))

    def set_async_script_timeout(self, milliseconds: int) -> None:
        self.execute(Command.create("async_script_timeout", {"ms": milliseconds}))

    # Screenshots

    def screenshot(self, directory: str | None = None) -> str | None:
        """
        Take a screenshot and store it under ``<directory>/<session id>/``.

        Args:
            directory: Overrides the driver's screenshots directory

        Returns:
            The file name, or None if the server sent an empty image
        """
        target = directory or self.screenshots_directory
        if not target:
            raise ValueError("Must specify a screenshots directory")

        image = self.execute(Command.create("screenshot"))
        if not image or not str(image).strip():
            return None

        session_dir = Path(target) / self.session_id
        session_dir.mkdir(parents=True, exist_ok=True)

        count = len(list(session_dir.glob("*.png"))) + 1
        file_name = f"{datetime.now().strftime('%Y%m%d%H%M%S%f')}-{count}.png"
        with open(session_dir / file_name, "wb") as f:
            f.write(base64.b64decode(image))

        logger.info("screenshot_saved", session_id=self.session_id, file=file_name)
        return file_name


@contextmanager
def create_driver(
    desired_capabilities: DesiredCapabilities | None = None,
    **kwargs,
) -> Generator[WebDriver, None, None]:
    """
    Convenience context manager for a driver session.

    Usage:
        with create_driver() as driver:
            driver.get("https://example.com")
    """
    driver = WebDriver(desired_capabilities, **kwargs)
    with driver:
        yield driver
