"""Unit tests for request parameter resolution."""

from __future__ import annotations

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from quizgenius.api.models import LessonRequest, QuizRequest
from quizgenius.config import Settings
from quizgenius.services.request_validation import _resolve_page, _resolve_question_count


def test_quiz_request_reads_wire_names() -> None:
  """Query keys use the camelCase names the client sends."""
  request = QuizRequest.model_validate({"selectedSubject": " Physics ", "selectedTopic": "Optics", "numOfQuestions": "3", "levelOfQuestions": "Beginner", "cacheBust": "1"})
  assert request.subject == "Physics"
  assert request.topic == "Optics"
  assert request.sub_topic == ""
  assert request.question_count == 3
  assert request.difficulty == "Beginner"


def test_quiz_request_requires_subject() -> None:
  """A blank subject is rejected."""
  with pytest.raises(ValidationError):
    QuizRequest.model_validate({"selectedSubject": "  "})
  with pytest.raises(ValidationError):
    QuizRequest.model_validate({})


def test_lesson_request_rejects_unknown_fields() -> None:
  """Lesson bodies are strict about their keys."""
  with pytest.raises(ValidationError):
    LessonRequest.model_validate({"selectedSubject": "Art", "unexpected": True})
  request = LessonRequest.model_validate({"selectedSubject": "Art", "topics": "Color", "subTopics": "Hue"})
  assert (request.subject, request.topic, request.sub_topic, request.difficulty) == ("Art", "Color", "Hue", None)


def test_resolve_question_count_applies_default_and_maximum(settings: Settings) -> None:
  """Missing counts use the default and oversized counts are rejected."""
  assert _resolve_question_count(QuizRequest.model_validate({"selectedSubject": "Art"}), settings) == settings.default_question_count
  assert _resolve_question_count(QuizRequest.model_validate({"selectedSubject": "Art", "numOfQuestions": "2"}), settings) == 2
  with pytest.raises(HTTPException) as exc_info:
    _resolve_question_count(QuizRequest.model_validate({"selectedSubject": "Art", "numOfQuestions": str(settings.max_question_count + 1)}), settings)
  assert exc_info.value.status_code == 400


def test_resolve_page_bounds() -> None:
  """Pagination rejects non-positive limits and negative offsets."""
  assert _resolve_page(10, 0) == (10, 0)
  for limit, offset in ((0, 0), (101, 0), (10, -1)):
    with pytest.raises(HTTPException):
      _resolve_page(limit, offset)
