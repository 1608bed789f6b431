"""
Seleniumclient - JSON wire protocol client for remote browser automation.
"""

__version__ = "0.1.0"

from seleniumclient.core import (
    By,
    ElementHandle,
    NativeLocator,
    ScriptLocator,
    Strategy,
)
from seleniumclient.driver import WebDriver
from seleniumclient.schemas import DesiredCapabilities

__all__ = [
    "__version__",
    "By",
    "DesiredCapabilities",
    "ElementHandle",
    "NativeLocator",
    "ScriptLocator",
    "Strategy",
    "WebDriver",
]
