"""Whitespace collapsing so every string field ends up on a single line."""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"[\r\n]+")
_SPACE_RUN_RE = re.compile(r" {2,}")


def collapse_whitespace(text: str) -> str:
  """Fold line breaks into single spaces, then squeeze repeated spaces."""
  # Literal newlines inside quoted strings are invalid JSON; folding them keeps the payload decodable.
  text = _LINE_BREAK_RE.sub(" ", text)
  return _SPACE_RUN_RE.sub(" ", text)
