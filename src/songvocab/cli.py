"""CLI entry point for songvocab."""

from __future__ import annotations

import json
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from songvocab.analyzer import (
    LEVEL_THRESHOLDS,
    CEFRLevel,
    CombinedSource,
    ExtractionConfig,
    ExtractionSource,
    ExtractionTrace,
    HeuristicSource,
    LearningItem,
    LLMSource,
    LoggingTraceHook,
    TokenDecision,
    get_level_threshold,
    normalize_token,
    parse_level,
    score_breakdown,
    translate_items,
    validate_lyrics,
)
from songvocab.config import settings
from songvocab.exceptions import LLMAPIError, SongVocabError
from songvocab.llm import OpenAIClient
from songvocab.logging import setup_logging
from songvocab.output import export_flashcards, generate_filename, write_flashcards

app = typer.Typer(
    name="songvocab",
    help="Find the words worth learning in a song.",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    TSV = "tsv"


class SourceMode(StrEnum):
    """Where learning items come from."""

    HEURISTIC = "heuristic"
    LLM = "llm"
    BOTH = "both"


def read_lyrics(path: Path) -> str:
    """Read lyrics from a file, or from stdin when the path is '-'."""
    if str(path) == "-":
        return sys.stdin.read()
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise typer.BadParameter(f"File is not UTF-8 text: {path}") from None


def build_source(
    mode: SourceMode,
    config: ExtractionConfig,
    client: OpenAIClient | None,
    language: str,
    trace: ExtractionTrace | LoggingTraceHook | None = None,
) -> ExtractionSource:
    """Assemble the extraction source for a mode."""
    heuristic = HeuristicSource(config=config, trace=trace)
    if mode == SourceMode.HEURISTIC:
        return heuristic
    if client is None:
        raise LLMAPIError("OpenAI client is required for LLM extraction")
    llm = LLMSource(client, language_label=language)
    if mode == SourceMode.LLM:
        return llm
    return CombinedSource(llm, heuristic)


@app.command()
def analyze(
    lyrics_file: Annotated[
        Path,
        typer.Argument(..., help="Lyrics text file, or '-' to read stdin"),
    ],
    level: Annotated[
        str | None,
        typer.Option(
            "--level",
            "-l",
            help="Your level in the song's language (A1-C2)",
        ),
    ] = None,
    source: Annotated[
        SourceMode,
        typer.Option(
            "--source",
            "-s",
            help="Extraction source: heuristic, llm, or both",
            case_sensitive=False,
        ),
    ] = SourceMode.HEURISTIC,
    song_language: Annotated[
        str | None,
        typer.Option(
            "--song-language",
            help="Language of the lyrics (detected by the LLM if omitted)",
        ),
    ] = None,
    translate_to: Annotated[
        str | None,
        typer.Option(
            "--translate-to",
            "-T",
            help="Translate words into this language code (e.g. es, ru)",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file or directory (default: stdout)",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option(
            "--title",
            "-t",
            help="Song title, used to name the flashcard file when --output is a directory",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            help="Additional words to exclude (can be used multiple times)",
        ),
    ] = None,
    lemmatize: Annotated[
        bool,
        typer.Option(
            "--lemmatize",
            help="Merge inflected forms (troubles -> trouble) before scoring",
        ),
    ] = False,
    strip_headers: Annotated[
        bool,
        typer.Option(
            "--strip-headers",
            help="Ignore section headers like [Chorus]",
        ),
    ] = False,
    trace: Annotated[
        bool,
        typer.Option(
            "--trace",
            help="Show what happened to every token",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose debug output to stderr",
        ),
    ] = False,
) -> None:
    """Find words worth learning in a song's lyrics."""
    setup_logging(verbose=verbose)

    text = read_lyrics(lyrics_file)
    try:
        validate_lyrics(text, max_length=settings.max_lyrics_length)
        cefr_level = parse_level(level or settings.default_level)
    except SongVocabError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from None

    if output_file is not None and output_file.is_dir():
        if output_format != OutputFormat.TSV:
            error_console.print("[red]Error:[/red] An output directory needs --format tsv.")
            raise typer.Exit(1)
        output_file = output_file / generate_filename(title)

    needs_llm = source != SourceMode.HEURISTIC or translate_to is not None
    if translate_to is not None and not translate_to.strip():
        error_console.print("[red]Error:[/red] Please choose or enter your native language code.")
        raise typer.Exit(1)
    if needs_llm and not settings.is_configured():
        error_console.print(
            "[red]Error:[/red] OpenAI API key not configured.\n"
            "Set SONGVOCAB_OPENAI_API_KEY environment variable or add to .env file."
        )
        raise typer.Exit(1)

    config = ExtractionConfig(
        custom_stop_words=frozenset(exclude) if exclude else frozenset(),
        use_lemmatization=lemmatize,
        strip_section_headers=strip_headers,
    )
    collector = ExtractionTrace() if trace else None
    hook: ExtractionTrace | LoggingTraceHook | None = collector
    if hook is None and verbose:
        hook = LoggingTraceHook()

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=error_console,
            transient=True,
        ) as progress:
            client = OpenAIClient(settings_obj=settings) if needs_llm else None
            language = song_language or "English"
            if client is not None and source != SourceMode.HEURISTIC and song_language is None:
                progress.add_task("Detecting lyrics language...", total=None)
                language = client.detect_language(text)

            progress.add_task("Analyzing lyrics...", total=None)
            extraction = build_source(source, config, client, language, hook)
            items = extraction.extract(text, cefr_level)

            if items and client is not None and translate_to is not None:
                progress.add_task("Translating words...", total=None)
                items = translate_items(
                    items,
                    client,
                    translate_to.strip(),
                    source_language=language,
                    batch_size=settings.translation_batch_size,
                    max_workers=settings.translation_max_workers,
                )
    except SongVocabError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    if collector is not None:
        display_trace(collector)

    if not items:
        console.print(
            f"[yellow]No learning items found.[/yellow] This song looks too simple for "
            f"level {cefr_level}. Try a lower level or another song."
        )
        raise typer.Exit(0)

    if output_file:
        if output_format == OutputFormat.TSV:
            write_flashcards(items, output_file)
        else:
            output_file.write_text(
                format_output(items, output_format, cefr_level), encoding="utf-8"
            )
        console.print(f"Results written to [bold]{output_file}[/bold]")
    elif output_format == OutputFormat.TABLE:
        display_table(items, cefr_level)
    else:
        typer.echo(format_output(items, output_format, cefr_level))


def format_output(
    items: list[LearningItem],
    output_format: OutputFormat,
    level: CEFRLevel,
) -> str:
    """Format learning items for output."""
    if output_format == OutputFormat.TSV:
        return export_flashcards(items)

    if output_format == OutputFormat.JSON:
        data = {
            "level": str(level),
            "threshold": get_level_threshold(level),
            "items": [item.model_dump(mode="json") for item in items],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    # TABLE format for file output
    lines = [
        f"Level: {level} (threshold {get_level_threshold(level)})",
        f"Words to learn: {len(items)}",
        "",
        "Rank\tWord\tScore\tBand\tCount\tTranslation\tExample",
    ]
    for i, item in enumerate(items, 1):
        translation = item.translation or item.translation_error or ""
        lines.append(
            f"{i}\t{item.word}\t{item.difficulty_score:.1f}\t{item.difficulty_band}\t"
            f"{item.count}\t{translation}\t{item.example}"
        )
    return "\n".join(lines)


def display_table(items: list[LearningItem], level: CEFRLevel) -> None:
    """Display learning items as a Rich table."""
    console.print()
    console.print(f"[bold]Level:[/bold] {level} (threshold {get_level_threshold(level)})")
    console.print(f"[bold]Words to learn:[/bold] {len(items)}")
    console.print()

    show_translation = any(item.translation or item.translation_error for item in items)

    table = Table(title="Words to learn from this song")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Word", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Band")
    table.add_column("Count", justify="right", style="green")
    if show_translation:
        table.add_column("Translation")
    table.add_column("Line from song", style="dim")

    band_styles = {"comfortable": "green", "stretch": "yellow", "challenging": "red"}
    for i, item in enumerate(items, 1):
        band = str(item.difficulty_band)
        row = [
            str(i),
            escape(item.word),
            f"{item.difficulty_score:.1f}",
            f"[{band_styles[band]}]{band}[/{band_styles[band]}]",
            str(item.count),
        ]
        if show_translation:
            if item.translation:
                row.append(escape(item.translation))
            elif item.translation_error:
                row.append(f"[red]{escape(item.translation_error)}[/red]")
            else:
                row.append("")
        row.append(escape(item.example))
        table.add_row(*row)

    console.print(table)


def display_trace(trace: ExtractionTrace) -> None:
    """Display every token decision and a summary on stderr."""
    table = Table(title="Token Trace")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Token")
    table.add_column("Word", style="cyan")
    table.add_column("Decision")
    table.add_column("Score", justify="right")

    for event in trace.events:
        table.add_row(
            str(event.example_index + 1),
            escape(event.token),
            escape(event.word),
            str(event.decision),
            "" if event.score is None else f"{event.score:.1f}",
        )
    error_console.print(table)

    summary = ", ".join(
        f"{decision}: {trace.count(decision)}" for decision in TokenDecision
    )
    error_console.print(f"[dim]Scanned {trace.total_tokens} tokens ({summary})[/dim]")


@app.command()
def score(
    words: Annotated[
        list[str],
        typer.Argument(..., help="Words to score"),
    ],
) -> None:
    """Show how difficulty scores are built up for words."""
    table = Table(title="Difficulty Scores")
    table.add_column("Word", style="cyan")
    table.add_column("Tier", justify="right")
    table.add_column("Base", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Syllables", justify="right")
    table.add_column("Syllable bonus", justify="right")
    table.add_column("Suffix", justify="right")
    table.add_column("Cluster", justify="right")
    table.add_column("Score", justify="right", style="bold")

    for raw in words:
        word = normalize_token(raw)
        if not word:
            error_console.print(f"[yellow]Warning:[/yellow] '{raw}' is not a word, skipped")
            continue
        breakdown = score_breakdown(word)
        table.add_row(
            word,
            str(breakdown.tier),
            f"{breakdown.base:g}",
            f"{breakdown.length_bonus:g}",
            str(breakdown.syllables),
            f"{breakdown.syllable_bonus:g}",
            f"{breakdown.suffix_bonus:g}",
            f"{breakdown.cluster_bonus:g}",
            f"{breakdown.total:.1f}",
        )

    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="songvocab Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    # API key (masked)
    key = settings.get_api_key()
    if key:
        masked = key[:4] + "*" * (len(key) - 8) + key[-4:] if len(key) > 8 else "****"
        key_display = f"[green]{masked}[/green]"
    else:
        key_display = "[red]Not set[/red]"
    table.add_row("SONGVOCAB_OPENAI_API_KEY", key_display)

    table.add_row("SONGVOCAB_OPENAI_BASE_URL", settings.openai_base_url)
    table.add_row("SONGVOCAB_EXTRACTION_MODEL", settings.extraction_model)
    table.add_row("SONGVOCAB_TRANSLATION_MODEL", settings.translation_model)
    table.add_row("SONGVOCAB_DEFAULT_LEVEL", settings.default_level)
    table.add_row("SONGVOCAB_MAX_LYRICS_LENGTH", f"{settings.max_lyrics_length:,}")

    console.print(table)

    levels = Table(title="Level Thresholds")
    levels.add_column("Level", style="cyan")
    levels.add_column("Threshold", justify="right")
    for cefr_level, threshold in LEVEL_THRESHOLDS.items():
        levels.add_row(str(cefr_level), str(threshold))

    console.print()
    console.print(levels)


if __name__ == "__main__":
    app()
