"""
Pydantic schemas for the JSON wire protocol.
"""

from seleniumclient.schemas.wire import (
    DesiredCapabilities,
    WireResponse,
)

__all__ = [
    "DesiredCapabilities",
    "WireResponse",
]
