"""Package logging for songvocab.

All records go to stderr so that JSON and flashcard output on stdout stay
machine-readable. Per-token pipeline decisions are logged at DEBUG by
``LoggingTraceHook`` and only show up with ``--verbose``.
"""

import logging
import sys
from typing import Final, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("songvocab")


def setup_logging(level: LogLevel = "WARNING", verbose: bool = False) -> None:
    """Route songvocab records to stderr at the given level.

    Safe to call once per CLI invocation: the stderr handler is installed on
    the first call and later calls only change levels.

    Args:
        level: Minimum level to emit.
        verbose: Force DEBUG, which includes LLM request and token trace lines.
    """
    numeric_level = logging.DEBUG if verbose else getattr(logging, level)
    logger.setLevel(numeric_level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger, e.g. ``get_logger("llm.client")``."""
    return logging.getLogger(f"songvocab.{name}")
