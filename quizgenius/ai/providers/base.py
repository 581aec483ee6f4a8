"""Base interfaces for AI providers and models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ModelResponse:
  """Raw text returned by a generation model plus optional token usage."""

  content: str
  usage: dict[str, int] | None = None


class AIModel(ABC):
  """Abstract base class for text-generation models."""

  name: str
  provider: str

  @abstractmethod
  async def generate(self, prompt: str) -> ModelResponse:
    """
    Generate a response for the given prompt.

    Implementations raise UpstreamCallError when the call itself fails; any text the
    model returns, however malformed, is a successful response.
    """
