"""Pydantic models for filter rules and API request/response."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field


class FilterRule(BaseModel):
    """A word filter applied to post bodies before parsing.

    `replace_with` uses `re.sub` syntax (`\\1`, `\\g<name>`).
    """

    pattern: re.Pattern[str]
    replace_with: str = ""


class RenderRequest(BaseModel):
    body: str


class RenderResponse(BaseModel):
    html: str
    block_count: int


class ParseResponse(BaseModel):
    blocks: list[dict[str, Any]] = Field(default_factory=list)
