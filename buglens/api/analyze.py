"""
POST /analyze
=============
Bridge endpoint between the code-editor frontend and the AnalysisOrchestrator.

Accepts {code, language}, runs the three-step analysis, and returns
{bugs, explanation, optimizedCode}. Every failure is raised as an
AnalysisError and rendered by the app's exception handler as
{"error": message} with the matching status code.
"""
import logging

from fastapi import APIRouter

from buglens.agents.orchestrator import AnalysisOrchestrator
from buglens.core.errors import AnalysisError, UnexpectedError, UpstreamError
from buglens.llm.client import ChatCompletionClient
from buglens.llm.provider import OPENROUTER_CONFIG
from buglens.models.analysis import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(request: AnalysisRequest):
    """
    Detect bugs, explain them and rewrite the submitted code.

    Each request builds its own client so concurrent analyses share nothing.
    """
    client = ChatCompletionClient(OPENROUTER_CONFIG)
    orchestrator = AnalysisOrchestrator(client=client)

    try:
        return await orchestrator.analyze(request.code, request.language)
    except UpstreamError as exc:
        logger.warning(f"[API] Upstream failure: {exc.message}")
        raise
    except AnalysisError:
        raise
    except Exception as exc:
        logger.error(f"[API] FATAL: analysis failed: {exc}", exc_info=True)
        raise UnexpectedError(str(exc) or "An unexpected error occurred") from exc
    finally:
        await client.close()
