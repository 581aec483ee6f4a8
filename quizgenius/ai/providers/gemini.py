"""Gemini provider implementation using the google-genai SDK."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from quizgenius.ai.errors import UpstreamCallError, is_transient_message
from quizgenius.ai.providers.base import AIModel, ModelResponse

logger = logging.getLogger(__name__)

_TRANSIENT_STATUS_CODES: Final[frozenset[int]] = frozenset({408, 429, 500, 502, 503, 504})


class GeminiModel(AIModel):
  """Gemini text-generation client with an explicit per-call timeout."""

  provider = "gemini"

  def __init__(self, name: str, *, api_key: str, timeout_seconds: float, temperature: float, top_p: float, max_output_tokens: int) -> None:
    self.name = name
    self._timeout_seconds = timeout_seconds
    self._config = types.GenerateContentConfig(temperature=temperature, top_p=top_p, max_output_tokens=max_output_tokens)
    self._client = genai.Client(api_key=api_key)

  async def generate(self, prompt: str) -> ModelResponse:
    """Generate text from Gemini, mapping transport and API failures to UpstreamCallError."""
    try:
      response = await asyncio.wait_for(self._client.aio.models.generate_content(model=self.name, contents=prompt, config=self._config), timeout=self._timeout_seconds)
    except TimeoutError as exc:
      raise UpstreamCallError(f"Gemini call timed out after {self._timeout_seconds}s", provider=self.provider, transient=True) from exc
    except genai_errors.APIError as exc:
      code = exc.code if isinstance(exc.code, int) else None
      transient = code in _TRANSIENT_STATUS_CODES or is_transient_message(str(exc))
      raise UpstreamCallError(f"Gemini call failed: {exc}", provider=self.provider, transient=transient, status_code=code) from exc
    except httpx.HTTPError as exc:
      raise UpstreamCallError(f"Gemini connection error: {exc}", provider=self.provider, transient=True) from exc

    # Blocked or empty candidates come back without text; the pipeline reports that as unparseable output.
    content = response.text or ""
    logger.debug("Gemini response model=%s chars=%d", self.name, len(content))

    usage = None
    if response.usage_metadata:
      usage = {
        "prompt_tokens": response.usage_metadata.prompt_token_count or 0,
        "completion_tokens": response.usage_metadata.candidates_token_count or 0,
        "total_tokens": response.usage_metadata.total_token_count or 0,
      }
    return ModelResponse(content=content, usage=usage)
