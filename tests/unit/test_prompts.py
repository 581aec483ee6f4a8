"""Unit tests for generation prompt builders."""

from __future__ import annotations

from quizgenius.ai.prompts import build_lesson_prompt, build_quiz_prompt


def test_build_quiz_prompt_includes_request_details() -> None:
  """The quiz prompt names the subject, scope, difficulty and output format."""
  prompt = build_quiz_prompt("Mathematics", "Calculus", "Limits", "Advanced", 7)
  assert prompt.startswith('Generate 7 multiple-choice quiz questions on the subject "Mathematics".')
  assert 'Focus on the topic: "Calculus".' in prompt
  assert 'Drill down into the sub-topic: "Limits".' in prompt
  assert '"Advanced" difficulty level' in prompt
  assert "Have 4 distinct answer options." in prompt
  assert '"correctAnswer"' in prompt
  assert prompt.endswith("Only return JSON, no additional text.")


def test_build_quiz_prompt_omits_empty_scope() -> None:
  """Missing topics leave their lines out."""
  prompt = build_quiz_prompt("History", "", None, "Beginner", 5)
  assert "Focus on the topic" not in prompt
  assert "sub-topic" not in prompt


def test_build_lesson_prompt_includes_schema_example() -> None:
  """The lesson prompt carries the document shape with subsections."""
  prompt = build_lesson_prompt("Biology", "Cells", None, None)
  assert 'Generate a structured lesson on the subject "Biology".' in prompt
  assert 'Include topic: "Cells".' in prompt
  assert "Difficulty level" not in prompt
  assert '"subSections"' in prompt
  assert prompt.endswith("Only return JSON, no additional text.")
