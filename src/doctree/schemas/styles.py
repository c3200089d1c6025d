"""Style context passed to width measurement."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StyleContext(BaseModel):
    """Font attributes in effect for one style key (e.g. ``level0``)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    font_type: str = "times"
    font_size: float = Field(default=12.0, gt=0)
    font_style: str = ""
    font_spacing: float = 0.0
    font_stretching: float = 100.0
