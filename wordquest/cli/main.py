"""
WordQuest CLI - developer tooling for the word scheduler.

Commands:
    wordquest categories                     # Categories with word counts
    wordquest session -c animals             # Generate the next session
    wordquest answer 12 --correct            # Record an answer (persisted)
    wordquest next-review 12 --incorrect     # Day-granularity review date
    wordquest practice -n 5                  # Forgotten-words practice list

History and progress are read from and written to the JSON files named
by HISTORY_PATH and PROGRESS_PATH (default ~/.wordquest/).
"""

from __future__ import annotations

import random
import sys
from datetime import datetime
from typing import Annotated, NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import Settings, get_settings
from wordquest.core.clock import HOUR_MS
from wordquest.core.errors import WordQuestError
from wordquest.core.models import (
    ALL_CATEGORIES,
    Difficulty,
    PerformanceStats,
    SessionStrategy,
    Word,
)
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.delivery.history_file import (
    load_history,
    load_progress,
    save_history,
    save_progress,
)
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.learning.smart_selector import SmartWordSelector
from wordquest.scheduler import WordScheduler
from wordquest.study.spaced_repetition import EnhancedSpacedRepetition

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="wordquest",
    help="WordQuest scheduler - adaptive word sessions and spaced repetition",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

DIFFICULTY_STYLES = {
    Difficulty.EASY: "green",
    Difficulty.MEDIUM: "yellow",
    Difficulty.HARD: "red",
}


def _load_catalog(settings: Settings) -> WordCatalog:
    if settings.catalog_path:
        return WordCatalog.load(settings.catalog_path)
    return WordCatalog.load_default()


def _build_stats(accuracy: float | None, sessions: int | None) -> PerformanceStats | None:
    if accuracy is None and sessions is None:
        return None
    return PerformanceStats(
        average_accuracy=accuracy or 0.0,
        total_review_sessions=sessions or 0,
    )


def _fail(error: WordQuestError) -> NoReturn:
    console.print(f"[red]✗ {error}[/]")
    raise typer.Exit(1)


def _words_table(title: str, words: list[Word] | tuple[Word, ...]) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("ID", justify="right")
    table.add_column("Word", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Difficulty")

    for i, word in enumerate(words, start=1):
        style = DIFFICULTY_STYLES[word.difficulty]
        table.add_row(
            str(i),
            str(word.id),
            f"{word.emoji} {word.text}".strip(),
            word.category,
            f"[{style}]{word.difficulty.value}[/]",
        )
    return table


# =============================================================================
# Catalog Commands
# =============================================================================


@app.command()
def categories() -> None:
    """List catalog categories with word counts and difficulty mix."""
    settings = get_settings()
    try:
        catalog = _load_catalog(settings)
    except WordQuestError as e:
        _fail(e)

    table = Table(title=f"Categories ({len(catalog)} words)")
    table.add_column("Category", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Easy", justify="right", style="green")
    table.add_column("Medium", justify="right", style="yellow")
    table.add_column("Hard", justify="right", style="red")

    for category in catalog.categories():
        words = catalog.by_category(category)
        counts = {d: sum(1 for w in words if w.difficulty is d) for d in Difficulty}
        table.add_row(
            category,
            str(len(words)),
            str(counts[Difficulty.EASY]),
            str(counts[Difficulty.MEDIUM]),
            str(counts[Difficulty.HARD]),
        )

    console.print(table)


# =============================================================================
# Session Commands
# =============================================================================


@app.command()
def session(
    category: Annotated[
        str, typer.Option("--category", "-c", help="Category name or 'all'")
    ] = ALL_CATEGORIES,
    session_number: Annotated[
        int, typer.Option("--session-number", help="Caller's session counter")
    ] = 1,
    accuracy: Annotated[
        float | None, typer.Option("--accuracy", "-a", help="Average accuracy (0-100)")
    ] = None,
    sessions: Annotated[
        int | None, typer.Option("--sessions", help="Completed review sessions")
    ] = None,
    strategy: Annotated[
        SessionStrategy | None, typer.Option("--strategy", help="Force a strategy")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed for ordering")
    ] = None,
) -> None:
    """
    Generate the next learning session.

    Examples:
        wordquest session                      # All categories
        wordquest session -c animals           # One category
        wordquest session -a 92 --sessions 12  # With performance signal
        wordquest session --strategy targeted_review
    """
    settings = get_settings()
    try:
        catalog = _load_catalog(settings)
        history = load_history(settings.history_path)
        progress = load_progress(settings.progress_path)
    except WordQuestError as e:
        _fail(e)

    scheduler = WordScheduler.from_seed(
        catalog,
        SchedulerConfig.from_settings(settings),
        seed=seed if seed is not None else settings.random_seed,
    )
    result = scheduler.generate_session(
        category,
        history,
        progress,
        stats=_build_stats(accuracy, sessions),
        session_number=session_number,
        strategy=strategy,
    )

    if not result.words:
        console.print("[yellow]No words available for this session.[/]")
        return

    info = result.session_info
    console.print(_words_table(f"Session {info.session_number}", result.words))
    console.print(
        Panel(
            f"Strategy: [bold]{info.session_strategy.value}[/]\n"
            f"Exhaustion: {info.exhaustion_level:.0%}\n"
            f"New: {info.total_new_words}  Review: {info.review_words}\n"
            f"Difficulty: {info.difficulty.value}\n"
            f"Categories: {', '.join(info.categories)}",
            title="Session Info",
            border_style="cyan",
        )
    )


@app.command()
def answer(
    word_id: Annotated[int, typer.Argument(help="Answered word id")],
    correct: Annotated[
        bool, typer.Option("--correct/--incorrect", help="Whether the answer was correct")
    ] = True,
) -> None:
    """
    Record an answer and reschedule the word.

    Updates the history file and moves the word between the remembered
    and forgotten sets in the progress file.
    """
    settings = get_settings()
    try:
        catalog = _load_catalog(settings)
        history = load_history(settings.history_path)
        progress = load_progress(settings.progress_path)

        scheduler = WordScheduler(catalog, SchedulerConfig.from_settings(settings))
        record = scheduler.update_history(word_id, correct, history)
        progress = progress.record_answer(word_id, correct)

        save_history(settings.history_path, history)
        save_progress(settings.progress_path, progress)
    except WordQuestError as e:
        _fail(e)

    word = catalog.get(word_id)
    cooldown_hours = (record.next_eligible_time - record.last_seen) / HOUR_MS
    next_time = datetime.fromtimestamp(record.next_eligible_time / 1000)

    status = "[green]✓ correct[/]" if correct else "[red]✗ incorrect[/]"
    console.print(
        Panel(
            f"{word.emoji} [bold]{word.text}[/] ({word.category}, {word.difficulty.value}) {status}\n"
            f"Times shown: {record.times_shown}\n"
            f"Streak: {record.consecutive_correct}\n"
            f"Accuracy: {record.average_accuracy:.1f}%\n"
            f"Cooldown: {cooldown_hours:.1f}h (until {next_time:%Y-%m-%d %H:%M})",
            title="Answer Recorded",
            border_style="green" if correct else "red",
        )
    )


# =============================================================================
# Review Commands
# =============================================================================


@app.command("next-review")
def next_review(
    word_id: Annotated[int, typer.Argument(help="Word id")],
    correct: Annotated[
        bool, typer.Option("--correct/--incorrect", help="Whether the answer was correct")
    ] = True,
    attempts: Annotated[
        int, typer.Option("--attempts", help="Previous attempts on this word")
    ] = 0,
    accuracy: Annotated[
        float, typer.Option("--accuracy", "-a", help="Previous accuracy (0-100)")
    ] = 0.0,
) -> None:
    """Show the day-granularity next review date for a word."""
    settings = get_settings()
    try:
        word = _load_catalog(settings).get(word_id)
    except WordQuestError as e:
        _fail(e)

    days = EnhancedSpacedRepetition.interval_days(word.difficulty, correct, attempts, accuracy)
    review_at = EnhancedSpacedRepetition.next_review_date(word, correct, attempts, accuracy)

    console.print(
        f"[bold]{word.text}[/]: next review in [cyan]{days:.1f} days[/] "
        f"({review_at:%Y-%m-%d %H:%M})"
    )


@app.command()
def practice(
    count: Annotated[
        int, typer.Option("--count", "-n", help="Maximum number of words")
    ] = 10,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed")
    ] = None,
) -> None:
    """List forgotten words for a practice round."""
    settings = get_settings()
    try:
        catalog = _load_catalog(settings)
        progress = load_progress(settings.progress_path)
    except WordQuestError as e:
        _fail(e)

    selector = SmartWordSelector(catalog, rng=random.Random(seed))
    words = selector.practice_words(progress.forgotten_words, max_count=count)

    if not words:
        console.print("[green]No forgotten words to practice. 🎉[/]")
        return

    console.print(_words_table("Practice", words))


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    settings = get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB")

    app()


if __name__ == "__main__":
    main()
