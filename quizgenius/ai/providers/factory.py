"""Generation model selection from settings."""

from __future__ import annotations

from quizgenius.ai.providers.base import AIModel
from quizgenius.ai.providers.gemini import GeminiModel
from quizgenius.config import Settings


def build_model(settings: Settings) -> AIModel:
  """Return the configured generation model client."""
  # Refuse to build a client without credentials so the failure names the missing variable.
  if not settings.gemini_api_key:
    raise ValueError("GEMINI_API_KEY must be set to call the generation model.")

  return GeminiModel(
    settings.gemini_model,
    api_key=settings.gemini_api_key,
    timeout_seconds=settings.generation_timeout_seconds,
    temperature=settings.temperature,
    top_p=settings.top_p,
    max_output_tokens=settings.max_output_tokens,
  )
