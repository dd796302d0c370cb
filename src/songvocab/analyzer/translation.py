"""Attach translations to learning items.

Translation failures stay local: a batch that fails marks only its own
items, and a missing entry marks only that item.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Final, Protocol

from songvocab.analyzer.models import LearningItem
from songvocab.logging import get_logger

logger = get_logger("analyzer.translation")

NO_TRANSLATION: Final[str] = "No translation"
DEFAULT_BATCH_SIZE: Final[int] = 25
DEFAULT_MAX_WORKERS: Final[int] = 4


class Translator(Protocol):
    """Translation collaborator.

    Must return one translation per term, in the same order.
    """

    def translate(
        self, terms: list[str], target_language: str, source_language: str = "English"
    ) -> list[str]: ...


def apply_translations(
    items: Sequence[LearningItem], translations: Sequence[str | None]
) -> list[LearningItem]:
    """Pair items with translations by index.

    Items without a usable translation get translation_error "No translation".
    """
    if len(translations) != len(items):
        logger.warning(
            "Translation count mismatch: got %d, expected %d",
            len(translations),
            len(items),
        )

    translated: list[LearningItem] = []
    for index, item in enumerate(items):
        text = translations[index] if index < len(translations) else None
        if isinstance(text, str) and text.strip():
            translated.append(
                item.model_copy(update={"translation": text.strip(), "translation_error": None})
            )
        else:
            translated.append(
                item.model_copy(update={"translation": None, "translation_error": NO_TRANSLATION})
            )
    return translated


def mark_failed(items: Sequence[LearningItem], message: str) -> list[LearningItem]:
    """Attach the same translation error to every item."""
    return [
        item.model_copy(update={"translation": None, "translation_error": message})
        for item in items
    ]


def _translate_batch(
    batch: Sequence[LearningItem],
    translator: Translator,
    target_language: str,
    source_language: str,
) -> list[LearningItem]:
    terms = [item.word for item in batch]
    try:
        translations = translator.translate(terms, target_language, source_language)
    except Exception as e:
        logger.warning("Translation of %d terms failed: %s", len(terms), e)
        return mark_failed(batch, str(e) or "Translation failed")
    return apply_translations(batch, translations)


def translate_items(
    items: Sequence[LearningItem],
    translator: Translator,
    target_language: str,
    source_language: str = "English",
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[LearningItem]:
    """Translate item words, batching requests across a thread pool.

    Args:
        items: Items to translate.
        translator: Translation collaborator.
        target_language: Language code to translate into (e.g. "es").
        source_language: Name of the lyrics' language.
        batch_size: Terms per translator call.
        max_workers: Maximum concurrent translator calls.

    Returns:
        New items in the original order, each carrying either a
        translation or a translation_error.
    """
    if not items:
        return []
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    batches = [list(items[i : i + batch_size]) for i in range(0, len(items), batch_size)]
    results: list[list[LearningItem]] = [[] for _ in batches]

    logger.debug(
        "Translating %d terms into %s in %d batches", len(items), target_language, len(batches)
    )
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(batches)))) as executor:
        futures = {
            executor.submit(
                _translate_batch, batch, translator, target_language, source_language
            ): index
            for index, batch in enumerate(batches)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    return [item for batch in results for item in batch]
