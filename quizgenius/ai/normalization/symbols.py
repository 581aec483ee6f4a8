"""Unicode math glyph normalization for model output."""

from __future__ import annotations

import re
from typing import Final

# Glyphs rewritten to an ASCII word.
SYMBOL_REPLACEMENTS: Final[dict[str, str]] = {"√": "sqrt"}

# Vulgar fractions have no ASCII form that survives every display layer, so they are dropped.
FRACTION_GLYPHS: Final[str] = "½¼¾⅓⅔⅛⅜⅝⅞"

_FRACTION_RE = re.compile(f"[{FRACTION_GLYPHS}] ?")


def normalize_symbols(text: str) -> str:
  """Rewrite known problematic Unicode glyphs into ASCII-safe text."""
  for glyph, replacement in SYMBOL_REPLACEMENTS.items():
    text = text.replace(glyph, replacement)

  # Drop the glyph with the space that separated it from the following word.
  return _FRACTION_RE.sub("", text)
