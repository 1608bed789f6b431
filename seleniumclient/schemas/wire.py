"""
Pydantic schemas for wire protocol payloads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireResponse(BaseModel):
    """A decoded command response: status 0 is success."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: int = Field(0, description="Wire protocol status code")
    value: Any = Field(None, description="Command result or error details")
    session_id: str | None = Field(None, alias="sessionId")

    @property
    def ok(self) -> bool:
        return self.status == 0

    @property
    def message(self) -> str:
        """Server supplied error message, if any."""
        if isinstance(self.value, dict) and self.value.get("message"):
            return str(self.value["message"])
        if isinstance(self.value, str):
            return self.value
        return ""


class DesiredCapabilities(BaseModel):
    """Capabilities requested when a session is started."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "browserName": "firefox",
                "version": "",
                "platform": "ANY",
                "javascriptEnabled": True,
            }
        },
    )

    browser_name: str | None = Field(None, alias="browserName")
    version: str = ""
    platform: str = "ANY"
    javascript_enabled: bool = Field(True, alias="javascriptEnabled")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
