"""Unit tests for API exception sanitization behavior."""

from __future__ import annotations

from quizgenius.core.exceptions import _coerce_json_safe, _sanitize_validation_errors


def test_sanitize_validation_errors_removes_input_and_serializes_exception_ctx() -> None:
  """Ensure validation errors stay JSON-serializable and redact raw request payloads."""
  errors = [{"type": "value_error", "loc": ("query", "selectedSubject"), "msg": "Value error, must not be blank", "input": "   ", "url": "https://errors.pydantic.dev", "ctx": {"error": ValueError("must not be blank"), "input": "   "}}]
  sanitized = _sanitize_validation_errors(errors)
  assert "input" not in sanitized[0]
  assert "url" not in sanitized[0]
  assert sanitized[0]["loc"] == ["query", "selectedSubject"]
  assert sanitized[0]["ctx"]["error"] == "ValueError: must not be blank"
  assert "input" not in sanitized[0]["ctx"]


def test_coerce_json_safe_handles_nested_and_custom_values() -> None:
  """Unknown objects become strings while JSON primitives pass through."""
  value = {"a": (1, 2.5, None), 3: {True}, "b": object}
  coerced = _coerce_json_safe(value)
  assert coerced["a"] == [1, 2.5, None]
  assert coerced["3"] == [True]
  assert coerced["b"] == str(object)
  assert _coerce_json_safe(RuntimeError()) == "RuntimeError"
