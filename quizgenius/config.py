"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_DEFAULT_ORIGINS = "http://localhost:5173,http://localhost:5000"


@dataclass(frozen=True)
class Settings:
  """Typed settings for the QuizGenius service."""

  environment: str
  debug: bool
  allowed_origins: tuple[str, ...]
  log_level: str
  log_http_4xx: bool
  gemini_api_key: str | None
  gemini_model: str
  generation_timeout_seconds: float
  max_output_tokens: int
  temperature: float
  top_p: float
  generation_retry_delays: tuple[float, ...]
  default_question_count: int
  max_question_count: int


def _parse_origins(raw: str | None) -> tuple[str, ...]:
  origins = [origin.strip() for origin in (raw or _DEFAULT_ORIGINS).split(",") if origin.strip()]

  if not origins:
    raise ValueError("QUIZGENIUS_ALLOWED_ORIGINS must include at least one origin.")

  if "*" in origins:
    raise ValueError("QUIZGENIUS_ALLOWED_ORIGINS must not include wildcard origins.")

  return tuple(origins)


def _parse_bool(raw: str | None) -> bool:
  """Parse a boolean-ish string from environment variables."""

  if raw is None:
    return False

  normalized = raw.strip().lower()
  return normalized in {"1", "true", "yes", "on"}


def _parse_delays(raw: str | None) -> tuple[float, ...]:
  """Parse a comma-separated list of retry delays in seconds."""
  if raw is None or raw.strip() == "":
    return (1.0, 4.0)

  delays = tuple(float(part) for part in raw.split(",") if part.strip())
  # Negative sleeps are a configuration mistake, not a request to skip waiting.
  if any(delay < 0 for delay in delays):
    raise ValueError("QUIZGENIUS_GENERATION_RETRY_DELAYS must contain non-negative numbers.")

  return delays


def _optional_str(raw: str | None) -> str | None:
  if raw is None:
    return None
  value = raw.strip()
  if value == "":
    return None
  return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings once per process."""

  environment = os.getenv("QUIZGENIUS_ENV", "development").lower()

  # Toggle verbose error output and diagnostics in non-production environments.
  debug = _parse_bool(os.getenv("QUIZGENIUS_DEBUG"))

  log_level = (os.getenv("QUIZGENIUS_LOG_LEVEL") or ("DEBUG" if debug else "INFO")).strip().upper()
  if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
    raise ValueError("QUIZGENIUS_LOG_LEVEL must be a standard logging level name.")

  generation_timeout_seconds = float(os.getenv("QUIZGENIUS_GENERATION_TIMEOUT_SECONDS", "30"))
  if generation_timeout_seconds <= 0:
    raise ValueError("QUIZGENIUS_GENERATION_TIMEOUT_SECONDS must be a positive number.")

  max_output_tokens = int(os.getenv("QUIZGENIUS_MAX_OUTPUT_TOKENS", "2048"))
  if max_output_tokens <= 0:
    raise ValueError("QUIZGENIUS_MAX_OUTPUT_TOKENS must be a positive integer.")

  temperature = float(os.getenv("QUIZGENIUS_TEMPERATURE", "0.8"))
  top_p = float(os.getenv("QUIZGENIUS_TOP_P", "0.9"))
  if not 0 < top_p <= 1:
    raise ValueError("QUIZGENIUS_TOP_P must be within (0, 1].")

  default_question_count = int(os.getenv("QUIZGENIUS_DEFAULT_QUESTION_COUNT", "5"))
  max_question_count = int(os.getenv("QUIZGENIUS_MAX_QUESTION_COUNT", "20"))
  if default_question_count <= 0 or max_question_count < default_question_count:
    raise ValueError("QUIZGENIUS_DEFAULT_QUESTION_COUNT must be positive and not exceed QUIZGENIUS_MAX_QUESTION_COUNT.")

  return Settings(
    environment=environment,
    debug=debug,
    allowed_origins=_parse_origins(os.getenv("QUIZGENIUS_ALLOWED_ORIGINS")),
    log_level=log_level,
    log_http_4xx=_parse_bool(os.getenv("QUIZGENIUS_LOG_HTTP_4XX")),
    gemini_api_key=_optional_str(os.getenv("GEMINI_API_KEY")),
    gemini_model=(os.getenv("QUIZGENIUS_GEMINI_MODEL") or "gemini-2.0-flash").strip(),
    generation_timeout_seconds=generation_timeout_seconds,
    max_output_tokens=max_output_tokens,
    temperature=temperature,
    top_p=top_p,
    generation_retry_delays=_parse_delays(os.getenv("QUIZGENIUS_GENERATION_RETRY_DELAYS")),
    default_question_count=default_question_count,
    max_question_count=max_question_count,
  )
