"""
Orchestrator Tests
==================
Tests the three-step analysis with the chat-completion client mocked.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from buglens.agents.orchestrator import AnalysisOrchestrator
from buglens.core.errors import (
    ConfigurationError, UpstreamError, UpstreamTimeoutError, ValidationError,
)
from buglens.llm.client import ChatCompletionClient
from buglens.llm.prompts import AnalysisStep, AnalysisSteps, default_steps
from buglens.llm.provider import ProviderConfig

BUG_REPORT = "1. Error: division by zero on line 4\n\n- Warning: unused import on line 1\n"
EXPLANATION = "Your function divides by the list length without checking it."
OPTIMIZED = "def avg(xs):\n    return sum(xs) / len(xs) if xs else 0"

CODE = "def avg(xs):\n    return sum(xs) / len(xs)"


def _provider(api_key="sk-test"):
    return ProviderConfig(
        name="openrouter", label="OpenRouter", api_key=api_key,
        base_url="https://openrouter.ai/api/v1", api_key_env="OPENROUTER_API_KEY",
    )


@pytest.fixture
def mock_client():
    client = MagicMock(spec=ChatCompletionClient)
    client.provider = _provider()
    client.complete = AsyncMock(side_effect=[BUG_REPORT, EXPLANATION, OPTIMIZED])
    return client


@pytest.fixture
def orchestrator(mock_client):
    return AnalysisOrchestrator(client=mock_client, steps=default_steps("reviewer", "explainer"))


def test_successful_analysis(orchestrator, mock_client):
    """Three calls in order; result aggregates all three outputs."""
    result = asyncio.run(orchestrator.analyze(CODE, "python"))

    assert [b.line for b in result.bugs] == [1, 2]
    assert [b.severity for b in result.bugs] == ["error", "warning"]
    assert result.bugs[0].message == "Error: division by zero on line 4"
    assert result.explanation == EXPLANATION
    assert result.optimized_code == OPTIMIZED
    assert mock_client.complete.await_count == 3


def test_step_models_and_prompts(orchestrator, mock_client):
    """Each step uses its model and receives the right context."""
    asyncio.run(orchestrator.analyze(CODE, "python"))

    calls = mock_client.complete.await_args_list
    (m1, p1), (m2, p2), (m3, p3) = (c.args for c in calls)

    assert m1 == "reviewer"
    assert "python code" in p1 and CODE in p1 and "one per line" in p1

    assert m2 == "explainer"
    assert BUG_REPORT in p2 and "beginner-friendly" in p2

    assert m3 == "reviewer"
    assert "expert python developer" in p3 and CODE in p3 and "ONLY the code" in p3


def test_bug_count_matches_non_blank_report_lines(mock_client):
    report = "a\n\n b \n\t\nerror c\nd"
    mock_client.complete = AsyncMock(side_effect=[report, EXPLANATION, OPTIMIZED])
    result = asyncio.run(AnalysisOrchestrator(client=mock_client).analyze(CODE, "go"))
    assert len(result.bugs) == 4


@pytest.mark.parametrize("language", [None, ""])
def test_language_defaults_to_unknown(orchestrator, mock_client, language):
    asyncio.run(orchestrator.analyze(CODE, language))
    first_prompt = mock_client.complete.await_args_list[0].args[1]
    assert "following unknown code" in first_prompt


@pytest.mark.parametrize("code", [None, "", 42, ["print(1)"]])
def test_invalid_code_raises_validation_error(orchestrator, mock_client, code):
    with pytest.raises(ValidationError, match="Code is required"):
        asyncio.run(orchestrator.analyze(code, "python"))
    mock_client.complete.assert_not_called()


def test_missing_credential_makes_no_network_call(mock_client):
    mock_client.provider = _provider(api_key="")
    orch = AnalysisOrchestrator(client=mock_client)

    with pytest.raises(ConfigurationError, match="OPENROUTER_API_KEY is not configured"):
        asyncio.run(orch.analyze(CODE, "python"))
    mock_client.complete.assert_not_called()


def test_validation_checked_before_credential(mock_client):
    mock_client.provider = _provider(api_key="")
    with pytest.raises(ValidationError):
        asyncio.run(AnalysisOrchestrator(client=mock_client).analyze("", "python"))


@pytest.mark.parametrize("failing_step", [0, 1, 2])
def test_upstream_failure_aborts_remaining_steps(mock_client, failing_step):
    """A failure in any step stops the run; later steps are never called."""
    outputs = [BUG_REPORT, EXPLANATION, OPTIMIZED]
    outputs[failing_step] = UpstreamError(
        "OpenRouter API error (503): upstream overloaded", upstream_status=503,
    )
    mock_client.complete = AsyncMock(side_effect=outputs)

    with pytest.raises(UpstreamError, match=r"\(503\): upstream overloaded"):
        asyncio.run(AnalysisOrchestrator(client=mock_client).analyze(CODE, "java"))
    assert mock_client.complete.await_count == failing_step + 1


def test_timeout_aborts_run(mock_client):
    mock_client.complete = AsyncMock(side_effect=UpstreamTimeoutError("timed out"))
    with pytest.raises(UpstreamTimeoutError):
        asyncio.run(AnalysisOrchestrator(client=mock_client).analyze(CODE, "java"))
    assert mock_client.complete.await_count == 1


def test_injected_steps_are_used(mock_client):
    steps = AnalysisSteps(
        bug_detection=AnalysisStep("bug_detection", "m1", "BUGS[{language}]:{code}"),
        explanation=AnalysisStep("explanation", "m2", "EXPLAIN:{bug_report}"),
        optimization=AnalysisStep("optimization", "m3", "FIX[{language}]:{code}"),
    )
    asyncio.run(AnalysisOrchestrator(client=mock_client, steps=steps).analyze("x = {1}", "py"))

    calls = [c.args for c in mock_client.complete.await_args_list]
    assert calls == [
        ("m1", "BUGS[py]:x = {1}"),
        ("m2", f"EXPLAIN:{BUG_REPORT}"),
        ("m3", "FIX[py]:x = {1}"),
    ]


def test_orchestrator_is_stateless_between_runs(mock_client):
    mock_client.complete = AsyncMock(
        side_effect=[BUG_REPORT, EXPLANATION, OPTIMIZED, "only one", "e", "o"]
    )
    orch = AnalysisOrchestrator(client=mock_client)
    first = asyncio.run(orch.analyze(CODE, "python"))
    second = asyncio.run(orch.analyze(CODE, "python"))
    assert len(first.bugs) == 2
    assert len(second.bugs) == 1
    assert second.bugs[0].line == 1
