"""Quiz item schema produced by the quiz generation flow."""

from __future__ import annotations

from typing import Final

from pydantic import Field, ValidationInfo, field_validator

from .fields import NonBlankStr, SingleLineStr, WireModel

OPTION_COUNT: Final[int] = 4


class QuizItem(WireModel):
  """One multiple-choice question with its answer key."""

  question: SingleLineStr
  options: list[NonBlankStr]
  correct_answer: NonBlankStr = Field(alias="correctAnswer")
  explanation: SingleLineStr

  @field_validator("options")
  @classmethod
  def validate_options(cls, value: list[str]) -> list[str]:
    if len(value) != OPTION_COUNT:
      raise ValueError(f"expected exactly {OPTION_COUNT} options, got {len(value)}")
    if len(set(value)) != len(value):
      raise ValueError("options must be distinct")
    return value

  @field_validator("correct_answer")
  @classmethod
  def validate_correct_answer(cls, value: str, info: ValidationInfo) -> str:
    # Options that already failed validation are absent here and were reported first.
    options = info.data.get("options")
    if options is not None and value not in options:
      raise ValueError(f"correct answer {value!r} is not one of the options")
    return value
