"""
LLM Prompts
===========
Centralised store for the three analysis steps: which model runs each step
and the prompt it receives.

Steps (run strictly in order):
    1. bug_detection  — reviewer model lists bugs, one per line
    2. explanation    — smaller model restates the report for beginners
    3. optimization   — reviewer model returns ONLY the fixed code

Templates use str.format fields:
    bug_detection  → {language}, {code}
    explanation    → {bug_report}
    optimization   → {language}, {code}

Steps are plain values so callers (and tests) can swap models or prompts
without touching the orchestrator.
"""
from dataclasses import dataclass

from buglens.core.config import REVIEWER_MODEL, EXPLAINER_MODEL


@dataclass(frozen=True)
class AnalysisStep:
    """One upstream call: a model id plus its prompt template."""
    name: str
    model: str
    template: str

    def render(self, **fields: str) -> str:
        return self.template.format(**fields)


@dataclass(frozen=True)
class AnalysisSteps:
    bug_detection: AnalysisStep
    explanation: AnalysisStep
    optimization: AnalysisStep


# ---------------------------------------------------------------------------
# Prompt Templates
# ---------------------------------------------------------------------------
BUG_DETECTION_TEMPLATE = (
    "You are a code reviewer. Analyze the following {language} code and list "
    "all bugs, one per line. For each bug, mention the line number and whether "
    "it's an error or a warning. Be concise.\n\nCode:\n{code}"
)

EXPLANATION_TEMPLATE = (
    "You are a coding mentor. Given the following bug report, explain the "
    "issues in simple, beginner-friendly language. Be concise and helpful, "
    "no markdown formatting.\n\nBug report:\n{bug_report}"
)

OPTIMIZATION_TEMPLATE = (
    "You are an expert {language} developer. Rewrite the following code with "
    "all bugs fixed and optimized. Return ONLY the code, no explanations, no "
    "markdown fences.\n\nOriginal code:\n{code}"
)


def default_steps(
    reviewer_model: str = REVIEWER_MODEL,
    explainer_model: str = EXPLAINER_MODEL,
) -> AnalysisSteps:
    """Build the standard three-step pipeline for the given models."""
    return AnalysisSteps(
        bug_detection=AnalysisStep("bug_detection", reviewer_model, BUG_DETECTION_TEMPLATE),
        explanation=AnalysisStep("explanation", explainer_model, EXPLANATION_TEMPLATE),
        optimization=AnalysisStep("optimization", reviewer_model, OPTIMIZATION_TEMPLATE),
    )


DEFAULT_STEPS = default_steps()
