"""
Analysis Orchestrator
=====================
Runs one code analysis as three sequential chat-completion calls.

Flow:
    1. Validate input (code must be a non-empty string)
    2. Check the provider credential (before any network call)
    3. bug_detection  → raw bug report
    4. explanation    → prose restatement of the raw report
    5. optimization   → corrected code
    6. parse_bugs(raw report) → AnalysisResult

Failure Policy:
    - The first failing step aborts the run; later steps are never called.
    - No retries and no partial results.
    - The orchestrator holds no state between runs.
"""
import logging
import time
from typing import Any, Optional

from buglens.llm.client import ChatCompletionClient
from buglens.core.errors import ConfigurationError, ValidationError
from buglens.llm.prompts import AnalysisStep, AnalysisSteps, DEFAULT_STEPS
from buglens.models.analysis import AnalysisResult
from buglens.parser.bug_parser import parse_bugs

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "unknown"


def _language_label(language: Any) -> str:
    """Return the language label, falling back to "unknown" when unset."""
    if not language:
        return DEFAULT_LANGUAGE
    return str(language)


class AnalysisOrchestrator:
    """
    Sequences the bug-detection, explanation and optimization calls.

    Usage:
        client = ChatCompletionClient(OPENROUTER_CONFIG)
        orchestrator = AnalysisOrchestrator(client=client)
        result = await orchestrator.analyze(code, "python")
    """

    def __init__(
        self,
        client: ChatCompletionClient,
        steps: Optional[AnalysisSteps] = None,
    ) -> None:
        self.client = client
        self.steps = steps or DEFAULT_STEPS

    async def analyze(self, code: Any, language: Any = None) -> AnalysisResult:
        """
        Run the full three-step analysis.

        Parameters
        ----------
        code : Any
            Source code to analyse. Must be a non-empty string.
        language : Any
            Free-form language label. Falls back to "unknown".

        Returns
        -------
        AnalysisResult
            Parsed bugs, explanation and optimized code.

        Raises
        ------
        ValidationError
            If ``code`` is missing, empty or not a string.
        ConfigurationError
            If the provider has no credential.
        UpstreamError
            If any of the three calls fails.
        """
        if not code or not isinstance(code, str):
            raise ValidationError("Code is required")

        provider = self.client.provider
        if not provider.is_configured:
            raise ConfigurationError(
                f"{provider.api_key_env or provider.name + ' API key'} is not configured"
            )

        lang = _language_label(language)
        start = time.time()

        bug_report = await self._run_step(self.steps.bug_detection, language=lang, code=code)
        explanation = await self._run_step(self.steps.explanation, bug_report=bug_report)
        optimized_code = await self._run_step(self.steps.optimization, language=lang, code=code)

        bugs = parse_bugs(bug_report)
        logger.info(
            "Analysis finished in %.1fs (language=%s, bugs=%d)",
            time.time() - start, lang, len(bugs),
        )
        return AnalysisResult(
            bugs=bugs,
            explanation=explanation,
            optimized_code=optimized_code,
        )

    async def _run_step(self, step: AnalysisStep, **fields: str) -> str:
        prompt = step.render(**fields)
        logger.info("Step %s: calling %s", step.name, step.model)
        text = await self.client.complete(step.model, prompt)
        logger.info("Step %s: received %d chars", step.name, len(text))
        return text
