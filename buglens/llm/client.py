"""
LLM Client
==========
Asynchronous client for an OpenAI-compatible chat-completion API.

Request:
    POST {base_url}/chat/completions
    Authorization: Bearer <api_key>
    {"model": ..., "messages": [{"role": "user", "content": prompt}]}

Response Decoding:
    - The body is decoded into ChatCompletionResponse (pydantic)
    - Missing / mistyped fields → UpstreamError("Malformed response ...")
    - Empty choices or null content → UpstreamError("No response from model")
    - Non-2xx → UpstreamError("OpenRouter API error (<status>): <body>")

Failure Policy:
    - One attempt per call. No retries, no provider fallback.
    - Timeouts raise UpstreamTimeoutError so the caller aborts the run.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import BaseModel, ValidationError as SchemaError

from buglens.core.errors import UpstreamError, UpstreamTimeoutError
from buglens.llm.provider import ProviderConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Response Schema
# ---------------------------------------------------------------------------
class ChatMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    choices: List[ChatChoice] = []


def decode_completion(data: object, status_code: Optional[int] = None) -> str:
    """
    Decode a chat-completion JSON body and return the generated text.

    Parameters
    ----------
    data : object
        Parsed JSON body from the upstream response.
    status_code : int, optional
        Upstream HTTP status, attached to any raised error.

    Returns
    -------
    str
        ``choices[0].message.content``.

    Raises
    ------
    UpstreamError
        If the body does not match the schema or holds no generated text.
    """
    try:
        parsed = ChatCompletionResponse.model_validate(data)
    except SchemaError as e:
        raise UpstreamError(
            f"Malformed response from model: {e.error_count()} invalid field(s)",
            upstream_status=status_code,
            upstream_body=str(data),
        ) from e

    if not parsed.choices or parsed.choices[0].message.content is None:
        raise UpstreamError(
            "No response from model",
            upstream_status=status_code,
            upstream_body=str(data),
        )
    return parsed.choices[0].message.content


# ---------------------------------------------------------------------------
# Chat Completion Client
# ---------------------------------------------------------------------------
class ChatCompletionClient:
    """
    Async HTTP client for one chat-completion provider.

    Usage:
        client = ChatCompletionClient(OPENROUTER_CONFIG)
        text = await client.complete("google/gemma-3-12b-it:free", "Review...")
        await client.close()
    """

    def __init__(self, provider: ProviderConfig) -> None:
        self.provider = provider
        self._http: Optional[httpx.AsyncClient] = None

    async def _get_http(self) -> httpx.AsyncClient:
        """Lazy-initialise the HTTP client."""
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self.provider.timeout_seconds)
            )
        return self._http

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http and not self._http.is_closed:
            await self._http.aclose()
            self._http = None

    async def complete(self, model: str, prompt: str) -> str:
        """
        Send a single user prompt to ``model`` and return the generated text.

        Raises
        ------
        UpstreamTimeoutError
            If the request exceeds the provider timeout.
        UpstreamError
            On transport failure, non-2xx status, or an unusable body.
        """
        http = await self._get_http()
        headers = {
            "Authorization": f"Bearer {self.provider.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            resp = await http.post(
                self.provider.completions_url, json=payload, headers=headers
            )
        except httpx.TimeoutException as e:
            logger.warning("Provider %s: timeout calling %s", self.provider.name, model)
            raise UpstreamTimeoutError(
                f"{self.provider.label or self.provider.name} request timed out after "
                f"{self.provider.timeout_seconds:g}s"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Provider %s: transport error: %s", self.provider.name, e)
            raise UpstreamError(f"{self.provider.label or self.provider.name} request failed: {e}") from e

        if not resp.is_success:
            logger.warning(
                "Provider %s: HTTP %d for model %s",
                self.provider.name, resp.status_code, model,
            )
            raise UpstreamError(
                f"{self.provider.label or self.provider.name} API error "
                f"({resp.status_code}): {resp.text}",
                upstream_status=resp.status_code,
                upstream_body=resp.text,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(
                "Malformed response from model: body is not valid JSON",
                upstream_status=resp.status_code,
                upstream_body=resp.text,
            ) from e

        return decode_completion(data, resp.status_code)
