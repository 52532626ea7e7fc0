"""
Response envelope shared by every MobilityLabs endpoint.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str              # "00" ok, "01" ok (login), "02" ok (whoami)
    description: Optional[str] = None
    data: Optional[Any] = None

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:02d}"
        return value
