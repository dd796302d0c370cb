"""Prompt templates for the LLM collaborator."""

from __future__ import annotations

from typing import Final

from songvocab.analyzer.models import CEFRLevel

LANGUAGE_SAMPLE_LENGTH: Final[int] = 2500

LEVEL_DESCRIPTIONS: Final[dict[CEFRLevel, str]] = {
    CEFRLevel.A1: "beginner (A1) - basic vocabulary, simple words",
    CEFRLevel.A2: "elementary (A2) - common everyday words",
    CEFRLevel.B1: "intermediate (B1) - moderately complex vocabulary",
    CEFRLevel.B2: "upper-intermediate (B2) - advanced vocabulary",
    CEFRLevel.C1: "advanced (C1) - sophisticated vocabulary",
    CEFRLevel.C2: "proficient (C2) - very advanced and nuanced vocabulary",
}

LANGUAGE_DETECTION_SYSTEM = "You identify languages. Reply with only the language name in English."

TRANSLATION_SYSTEM = (
    "You are a translator. Respond only with valid JSON. Return a \"translations\" "
    "array with one string per input item in the same order."
)


def build_language_detection_prompt(lyrics: str) -> str:
    """Ask for the language name of a lyrics sample."""
    sample = lyrics[:LANGUAGE_SAMPLE_LENGTH].strip()
    return (
        "Identify the language of the following text. Reply with ONLY the language "
        "name in English (e.g. English, Spanish, Dutch, Hindi, Korean). No other text.\n\n"
        f'Text:\n"""\n{sample}\n"""'
    )


def build_extraction_system_prompt(language_label: str) -> str:
    return (
        f"You are a helpful {language_label} language learning assistant. Always respond "
        'with valid JSON only. Return a JSON object with a "words" array.'
    )


def build_extraction_prompt(lyrics: str, level: CEFRLevel, language_label: str) -> str:
    """Ask for learnable words and phrases for a learner level."""
    level_description = LEVEL_DESCRIPTIONS[level]
    return f"""You are a {language_label} language learning assistant. Analyze the following song lyrics (in {language_label}) and identify words and phrases that would be appropriate for a learner at {level_description} level in {language_label}.

Song lyrics ({language_label}):
\"\"\"
{lyrics}
\"\"\"

Please identify words and phrases (2-4 words) that:
1. Are appropriate for {level_description} level learners of {language_label}
2. Would help expand their vocabulary
3. Are not too basic (they should challenge the learner slightly)
4. Include useful idiomatic expressions or phrasal verbs when appropriate for {language_label}

For each item, provide:
- The word or phrase in {language_label}
- Difficulty level: "comfortable" (just right), "stretch" (slightly challenging), or "challenging" (more difficult but still appropriate)
- A brief explanation of why this is useful to learn (in English)
- The exact line from the song where it appears

Return your response as a JSON object with a "words" array property:
{{
  "words": [
    {{
      "word": "example",
      "phrase": "optional phrase if it's a multi-word expression",
      "difficulty": "comfortable",
      "explanation": "brief explanation",
      "example": "exact line from song"
    }}
  ]
}}

Return ONLY valid JSON, no additional text before or after."""


def build_translation_prompt(
    terms: list[str],
    source_label: str,
    target_code: str,
    target_label: str,
) -> str:
    """Ask for one flashcard translation per term, in order."""
    term_list = "\n".join(f"{i}. {term}" for i, term in enumerate(terms, 1))
    return f"""Translate the following {source_label} words or phrases into {target_label} (target language code: {target_code}).
Return ONLY a JSON object with a "translations" array: one translation per item, in the exact same order.
Each translation should be a single string (the most natural translation for a flashcard).

{source_label} items:
{term_list}

Example format: {{ "translations": ["translation1", "translation2", ...] }}
Return ONLY valid JSON, no other text."""
