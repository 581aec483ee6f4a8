"""Model-output normalization and recovery pipeline."""

from .fences import strip_fences
from .parser import parse_structured
from .pipeline import TEXT_STEPS, OutputKind, PipelineResult, PipelineStage, Recovered, Unrecoverable, normalize_lesson_output, normalize_output, normalize_quiz_output, prepare_text
from .repair import recover_truncation, repair_trailing_commas
from .symbols import normalize_symbols
from .whitespace import collapse_whitespace

__all__ = [
  "OutputKind",
  "PipelineResult",
  "PipelineStage",
  "Recovered",
  "TEXT_STEPS",
  "Unrecoverable",
  "collapse_whitespace",
  "normalize_lesson_output",
  "normalize_output",
  "normalize_quiz_output",
  "normalize_symbols",
  "parse_structured",
  "prepare_text",
  "recover_truncation",
  "repair_trailing_commas",
  "strip_fences",
]
