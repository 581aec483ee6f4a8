"""Shared field types and base model for generated content schemas."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, StrictStr, model_validator


def _require_text(value: str) -> str:
  if not value.strip():
    raise ValueError("must not be blank")
  return value


def _require_single_line(value: str) -> str:
  # Escaped newlines survive whitespace collapsing, so they are rejected here instead.
  if "\n" in value or "\r" in value:
    raise ValueError("must be a single line")
  return value


NonBlankStr = Annotated[StrictStr, AfterValidator(_require_text)]
SingleLineStr = Annotated[StrictStr, AfterValidator(_require_text), AfterValidator(_require_single_line)]


class WireModel(BaseModel):
  """Base for schemas read from model output, which must use the camelCase wire keys."""

  @model_validator(mode="before")
  @classmethod
  def reject_field_names(cls, data: Any) -> Any:
    # A snake_case key would otherwise be dropped as an unknown key or reported as missing.
    if isinstance(data, dict):
      for name, field in cls.model_fields.items():
        if field.alias and field.alias != name and name in data:
          raise ValueError(f"use key {field.alias!r} instead of {name!r}")
    return data
