"""Error taxonomy for generation calls and model-output recovery."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from quizgenius.ai.normalization.pipeline import Unrecoverable


_TRANSIENT_HINTS: tuple[str, ...] = (
  "rate limit",
  "too many requests",
  "resource exhausted",
  "quota exceeded",
  "timeout",
  "timed out",
  "connection",
  "network",
  "service unavailable",
  "bad gateway",
  "gateway",
  "temporarily unavailable",
)


def _match_hint(message: str, hints: Iterable[str]) -> bool:
  """Return True when any hint appears in the message."""
  # Scan for known substrings to categorize retryable provider errors.
  for hint in hints:
    if hint in message:
      return True
  return False


def is_transient_message(message: str) -> bool:
  """Return True when an upstream error message describes a retryable condition."""
  return _match_hint(message.lower(), _TRANSIENT_HINTS)


class UpstreamCallError(RuntimeError):
  """Raised when the generation call itself fails (network, auth, quota, timeout)."""

  def __init__(self, message: str, *, provider: str, transient: bool = False, status_code: int | None = None) -> None:
    super().__init__(message)
    self.provider = provider
    self.transient = transient
    self.status_code = status_code


class StructuredParseError(ValueError):
  """Raised when repaired model text still does not decode as a structured value."""

  def __init__(self, message: str, *, raw_text: str, position: int | None = None) -> None:
    super().__init__(message)
    self.message = message
    # Keep the pre-repair text so operators can tell which repair stage fell short.
    self.raw_text = raw_text
    self.position = position


class SchemaValidationError(ValueError):
  """Raised when a decoded value does not match the target schema."""

  def __init__(self, path: str, reason: str) -> None:
    super().__init__(f"{path}: {reason}")
    self.path = path
    self.reason = reason


class GenerationOutputError(RuntimeError):
  """Raised by the service layer when model text could not be recovered."""

  def __init__(self, result: Unrecoverable) -> None:
    super().__init__(f"{result.stage.value} stage failed: {result.message}")
    self.result = result
