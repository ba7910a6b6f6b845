"""
Analysis Models
===============
Request and result shapes of the /analyze contract.

The request accepts any JSON value for `code` and `language`; the
orchestrator owns the type checks so that a bad `code` is reported as
{"error": "Code is required"} rather than a framework validation error.

The result serializes `optimized_code` as `optimizedCode`, matching the
frontend's field name.
"""
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field

from .bug_item import BugItem


class AnalysisRequest(BaseModel):
    code: Any = None
    language: Any = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bugs: List[BugItem]
    explanation: str
    optimized_code: str = Field(alias="optimizedCode")
