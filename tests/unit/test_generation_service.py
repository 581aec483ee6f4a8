"""Unit tests for the quiz and lesson generation services."""

from __future__ import annotations

import dataclasses
import json
import logging

import pytest

from quizgenius.ai.errors import GenerationOutputError, UpstreamCallError
from quizgenius.ai.normalization import PipelineStage
from quizgenius.ai.providers.factory import build_model
from quizgenius.ai.providers.gemini import GeminiModel
from quizgenius.api.models import LessonRequest, QuizRequest
from quizgenius.config import Settings
from quizgenius.services.generation import generate_lesson, generate_quiz

QUIZ_TEXT = json.dumps([{"question": "2 + 2?", "options": ["3", "4", "5", "6"], "correctAnswer": "4", "explanation": "Basic addition."}])


@pytest.mark.anyio
async def test_generate_quiz_returns_recovered_items(fake_model, settings: Settings) -> None:
  """Recovered items are returned and the prompt reflects the request."""
  fake_model.queue(f"```json\n{QUIZ_TEXT}\n```")
  request = QuizRequest.model_validate({"selectedSubject": "Math", "selectedTopic": "Addition"})
  items = await generate_quiz(fake_model, request, question_count=1, settings=settings)
  assert [item.correct_answer for item in items] == ["4"]
  assert "Generate 1 multiple-choice" in fake_model.prompts[0]


@pytest.mark.anyio
async def test_generate_quiz_logs_count_mismatch(fake_model, settings: Settings, caplog: pytest.LogCaptureFixture) -> None:
  """Under-production is accepted and logged."""
  fake_model.queue(QUIZ_TEXT)
  request = QuizRequest.model_validate({"selectedSubject": "Math"})
  with caplog.at_level(logging.INFO, logger="quizgenius.services.generation"):
    items = await generate_quiz(fake_model, request, question_count=3, settings=settings)
  assert len(items) == 1
  assert any("count mismatch" in record.getMessage() for record in caplog.records)


@pytest.mark.anyio
async def test_generate_quiz_raises_with_stage_on_unusable_output(fake_model, settings: Settings) -> None:
  """Unusable text raises GenerationOutputError carrying the pipeline result."""
  fake_model.queue("Sorry, I cannot do that.")
  request = QuizRequest.model_validate({"selectedSubject": "Math"})
  with pytest.raises(GenerationOutputError) as exc_info:
    await generate_quiz(fake_model, request, question_count=1, settings=settings)
  assert exc_info.value.result.stage is PipelineStage.PARSE
  assert exc_info.value.result.raw_text == "Sorry, I cannot do that."
  # A bad answer is not retried; only the call itself is.
  assert len(fake_model.prompts) == 1


@pytest.mark.anyio
async def test_generate_quiz_retries_transient_upstream_errors(fake_model, settings: Settings) -> None:
  """Transient call failures are retried before the pipeline runs."""
  fake_model.queue(UpstreamCallError("busy", provider="fake", transient=True), QUIZ_TEXT)
  request = QuizRequest.model_validate({"selectedSubject": "Math"})
  items = await generate_quiz(fake_model, request, question_count=1, settings=settings)
  assert len(items) == 1
  assert len(fake_model.prompts) == 2


@pytest.mark.anyio
async def test_generate_lesson_reports_validation_stage(fake_model, settings: Settings) -> None:
  """Lessons missing required keys fail at validation."""
  fake_model.queue('{"title": "Only a title"}')
  request = LessonRequest.model_validate({"selectedSubject": "Art"})
  with pytest.raises(GenerationOutputError) as exc_info:
    await generate_lesson(fake_model, request, settings=settings)
  assert exc_info.value.result.stage is PipelineStage.VALIDATE
  assert exc_info.value.result.message.startswith("lesson.subject: ")


def test_build_model_requires_api_key(settings: Settings) -> None:
  """A missing key fails fast instead of building an unusable client."""
  with pytest.raises(ValueError):
    build_model(dataclasses.replace(settings, gemini_api_key=None))
  model = build_model(dataclasses.replace(settings, gemini_api_key="test-key"))
  assert isinstance(model, GeminiModel)
  assert model.name == settings.gemini_model
