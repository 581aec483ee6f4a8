"""Markdown code-fence removal for model output."""

from __future__ import annotations

import re

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_fences(text: str) -> str:
  """Remove JSON code-fence markers and surrounding whitespace."""
  return _FENCE_RE.sub("", text).strip()
