"""
DEV: Mock Analysis Endpoint
===========================
Development-only endpoint that returns canned analyses instead of calling
the upstream model service.

Route: POST /dev/mock-analyze

Safety:
    - Disabled by default (requires ENABLE_DEV_ENDPOINT=true)
    - Never calls the network and never needs a credential
    - Same request body and response shape as POST /analyze
"""
import logging

from fastapi import APIRouter, HTTPException

from buglens.core.config import ENABLE_DEV_ENDPOINT, MOCK_ANALYSIS_DELAY_SECONDS
from buglens.core.errors import ValidationError
from buglens.models.analysis import AnalysisRequest, AnalysisResult
from buglens.services.mock_analysis import get_mock_analysis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dev", tags=["Dev"])

# ---------------------------------------------------------------------------
# Environment gate
# ---------------------------------------------------------------------------
_DEV_ENABLED = ENABLE_DEV_ENDPOINT
_MOCK_DELAY = MOCK_ANALYSIS_DELAY_SECONDS


@router.post("/mock-analyze", response_model=AnalysisResult)
async def mock_analyze(request: AnalysisRequest):
    """Return the fixture for the requested language after a simulated delay."""
    if not _DEV_ENABLED:
        raise HTTPException(status_code=404, detail="Not Found")

    if not request.code or not isinstance(request.code, str):
        raise ValidationError("Code is required")

    language = str(request.language or "")
    logger.info(f"[DEV] Mock analysis for language={language or 'unknown'}")
    return await get_mock_analysis(language, delay_seconds=_MOCK_DELAY)
