"""Prompt builders for quiz and lesson generation."""

from __future__ import annotations

from quizgenius.schema.quiz import OPTION_COUNT

_QUIZ_EXAMPLE = """[
  {
    "question": "What is the limit of (sin x)/x as x approaches 0?",
    "options": ["1", "0", "Infinity", "-1"],
    "correctAnswer": "1",
    "explanation": "By the squeeze theorem, (sin x)/x tends to 1 as x approaches 0."
  }
]"""

_LESSON_EXAMPLE = """{
  "title": "Lesson Title",
  "subject": "Mathematics",
  "topic": "Algebra",
  "introduction": "Brief introduction...",
  "objectives": ["Objective 1", "Objective 2"],
  "sections": [
    {
      "heading": "Section 1 Heading",
      "content": "Detailed content for section 1.",
      "subSections": [
        {"heading": "Subsection Heading", "content": "Detailed content for the subsection."}
      ]
    },
    {
      "heading": "Section 2 Heading",
      "content": "Detailed content for section 2.",
      "subSections": []
    }
  ],
  "conclusion": "Summary of the lesson..."
}"""


def build_quiz_prompt(subject: str, topic: str | None, sub_topic: str | None, difficulty: str, question_count: int) -> str:
  """Build the multiple-choice quiz prompt."""
  lines = [f'Generate {question_count} multiple-choice quiz questions on the subject "{subject}".']
  if topic:
    lines.append(f'Focus on the topic: "{topic}".')
  if sub_topic:
    lines.append(f'Drill down into the sub-topic: "{sub_topic}".')

  lines.extend(
    [
      "",
      "Each question should:",
      f"- Have {OPTION_COUNT} distinct answer options.",
      "- Clearly indicate the correct answer, copied exactly from one of the options.",
      "- Include a one-sentence explanation of the correct answer.",
      f'- Be at a "{difficulty}" difficulty level.',
      "- Be formatted as a JSON array like this:",
      "",
      _QUIZ_EXAMPLE,
      "",
      "Only return JSON, no additional text.",
    ]
  )
  return "\n".join(lines)


def build_lesson_prompt(subject: str, topic: str | None, sub_topic: str | None, difficulty: str | None) -> str:
  """Build the structured lesson prompt."""
  lines = [f'Generate a structured lesson on the subject "{subject}".']
  if topic:
    lines.append(f'Include topic: "{topic}".')
  if sub_topic:
    lines.append(f'Focus on sub-topic: "{sub_topic}".')
  if difficulty:
    lines.append(f'Difficulty level: "{difficulty}".')

  lines.extend(["", "The lesson should be formatted as valid JSON:", _LESSON_EXAMPLE, "Only return JSON, no additional text."])
  return "\n".join(lines)
