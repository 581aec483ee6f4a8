"""Provider implementations."""

from quizgenius.ai.providers.base import AIModel, ModelResponse
from quizgenius.ai.providers.factory import build_model
from quizgenius.ai.providers.gemini import GeminiModel

__all__ = ["AIModel", "GeminiModel", "ModelResponse", "build_model"]
