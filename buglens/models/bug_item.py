"""
Bug Item Model
==============
Pydantic model for a single finding parsed from the reviewer model's report.

Fields:
    line      — 1-based position of the finding in the raw report (NOT a
                verified source-code line number)
    severity  — "error" or "warning", heuristically derived from the text
    message   — finding text with its enumeration marker stripped
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class BugItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    severity: Literal["error", "warning"]
    message: str
