"""Pydantic schemas for tool inputs and outputs.

These models define the JSON contracts used by the MCP tools.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

Style = Literal[
    "integer",
    "rss",
    "usenglish",
    "usenglish_long_ampm",
    "cms_publishdate",
    "w3c",
]


class FormatDateInput(BaseModel):
    """Input for a single formatting call.

    Attributes:
        value: Date or datetime in ``YYYY-MM-DD[ HH:MM:SS]`` form.
        style: Name of the output format.
        timezone: IANA zone for the RSS and W3C styles.
        strict: Reject malformed values instead of formatting leniently.
    """

    value: Optional[str] = Field(default=None, description="YYYY-MM-DD or YYYY-MM-DD HH:MM:SS")
    style: Style
    timezone: Optional[str] = Field(default=None, description="IANA zone name, e.g. 'Europe/London'")
    strict: Optional[bool] = None


class FormatDateOutput(BaseModel):
    value: Optional[str] = None
    style: Style
    result: str


class FormatAllInput(BaseModel):
    value: Optional[str] = None
    timezone: Optional[str] = None
    strict: Optional[bool] = None


class FormatAllOutput(BaseModel):
    value: Optional[str] = None
    results: Dict[str, str] = Field(default_factory=dict)


class StylesOutput(BaseModel):
    styles: List[str]
    zoned: List[str] = Field(default_factory=list, description="Styles that depend on the timezone")
