"""Two-column flashcard export (Quizlet/Anki tab-separated import).

Each line holds the word, a tab, and the best available translation text:
the translation, else the translation error, else nothing.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from songvocab.analyzer.models import LearningItem

DEFAULT_FLASHCARD_FILENAME: Final[str] = "learn-by-song-quizlet.txt"

# Tabs and line breaks would split a card into extra columns or rows
FIELD_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\t\r\n]+")


def _clean_field(text: str) -> str:
    return FIELD_BREAK_PATTERN.sub(" ", text).strip()


def flashcard_definition(item: LearningItem) -> str:
    """Best available back-of-card text for an item."""
    return item.translation or item.translation_error or ""


def to_flashcard_line(item: LearningItem) -> str:
    """Format one item as ``word<TAB>definition``."""
    return f"{_clean_field(item.word)}\t{_clean_field(flashcard_definition(item))}"


def export_flashcards(items: Iterable[LearningItem]) -> str:
    """Serialize items as tab-separated lines, one card per line."""
    return "\n".join(to_flashcard_line(item) for item in items)


def write_flashcards(items: Iterable[LearningItem], path: Path) -> Path:
    """Write the flashcard export to a UTF-8 file.

    Returns:
        The path written to.
    """
    path.write_text(export_flashcards(items), encoding="utf-8")
    return path


def slugify(text: str) -> str:
    """Convert text to a filename-safe slug.

    Args:
        text: Input text to slugify.

    Returns:
        Lowercase ASCII slug with hyphens.
    """
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def generate_filename(title: str | None = None) -> str:
    """Suggest a flashcard filename for a song title.

    Returns:
        ``{title-slug}-flashcards.txt``, or the default name when the title
        is missing or has no usable characters.
    """
    slug = slugify(title) if title else ""
    if not slug:
        return DEFAULT_FLASHCARD_FILENAME
    return f"{slug}-flashcards.txt"
