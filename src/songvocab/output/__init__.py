"""Output formats for songvocab."""

from songvocab.output.flashcards import (
    DEFAULT_FLASHCARD_FILENAME,
    export_flashcards,
    flashcard_definition,
    generate_filename,
    slugify,
    to_flashcard_line,
    write_flashcards,
)

__all__ = [
    "DEFAULT_FLASHCARD_FILENAME",
    "export_flashcards",
    "flashcard_definition",
    "generate_filename",
    "slugify",
    "to_flashcard_line",
    "write_flashcards",
]
