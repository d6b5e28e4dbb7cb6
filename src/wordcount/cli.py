"""
Word-count benchmark command line interface.

Usage:
    wordcount --help
    wordcount memory --corpus war_and_peace.txt
    wordcount memory --corpus war_and_peace.txt --level 5 --strategy compiled
    wordcount time --corpus war_and_peace.txt --warmup 5 --iterations 10
    wordcount verify --corpus war_and_peace.txt

The ``memory`` command writes one ``<strategy>\\t<level>\\t<bytes>`` line per
measured pair to stdout and nothing else; logs go to stderr.

Environment Variables:
    WORDCOUNT_CONFIG_PATH: Path to a YAML or JSON settings file
    WORDCOUNT_CORPUS: Corpus file used when ``--corpus`` is not given
    WORDCOUNT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""
from __future__ import annotations

import logging
import os
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from wordcount import __version__
from wordcount.config import HarnessSettings, load_settings
from wordcount.corpus import Corpus, load_corpus
from wordcount.driver import run_memory_sweep, verify_equivalence
from wordcount.exceptions import ConfigurationError, WordCountError
from wordcount.strategies import STRATEGIES, select_strategies
from wordcount.timing import run_timing_sweep, save_timing_results

console = Console()
err_console = Console(stderr=True)


def _log_level_from_env() -> str:
    """Level named by WORDCOUNT_LOG_LEVEL, or WARNING when unset or unknown."""
    level = os.environ.get("WORDCOUNT_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


logging.basicConfig(
    level=_log_level_from_env(),
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=err_console, rich_tracebacks=True)]
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wordcount",
    help="Word-frequency map benchmarks across load-factor configurations",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]}
)

# Shared options resolved by the callback
state = {"config_path": None}

CorpusOption = Annotated[Optional[str], typer.Option("--corpus", help="Corpus text file (UTF-8).")]
LevelOption = Annotated[Optional[List[int]], typer.Option("--level", "-l", help="Load level 1..9; repeatable.")]
StrategyOption = Annotated[Optional[List[str]], typer.Option("--strategy", "-s", help="Strategy name; repeatable.")]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wordcount {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output.")] = False,
    config_path: Annotated[Optional[str], typer.Option("--config", "-c", help="Path to settings file.")] = None,
    version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True,
                                          help="Show the version and exit.")] = False,
):
    """
    Word-count map benchmark harness.
    """
    if verbose:
        logging.getLogger("wordcount").setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    state["config_path"] = config_path


def _resolve(corpus: Optional[str], levels: Optional[List[int]], strategies: Optional[List[str]],
             **extra) -> tuple[HarnessSettings, Corpus]:
    try:
        settings = load_settings(
            state["config_path"],
            corpus_path=corpus,
            load_levels=levels or None,
            strategies=strategies or None,
            **extra,
        )
        if not settings.corpus_path:
            raise ConfigurationError("No corpus given; pass --corpus or set WORDCOUNT_CORPUS")
        return settings, load_corpus(settings.corpus_path)
    except WordCountError as e:
        logger.error(e.message)
        raise typer.Exit(code=1)


@app.command()
def memory(
    corpus: CorpusOption = None,
    level: LevelOption = None,
    strategy: StrategyOption = None,
    pretty: Annotated[bool, typer.Option("--pretty", help="Render a pivot table instead of TSV lines.")] = False,
) -> None:
    """
    Measure retained memory of each populated map, minus the distinct-token baseline.
    """
    settings, words = _resolve(corpus, level, strategy)
    results = run_memory_sweep(words, settings.load_levels, select_strategies(settings.strategies))

    if pretty:
        console.print(results.render())
        return
    for line in results.format_lines():
        typer.echo(line)


@app.command()
def time(
    corpus: CorpusOption = None,
    level: LevelOption = None,
    strategy: StrategyOption = None,
    warmup: Annotated[Optional[int], typer.Option("--warmup", help="Untimed invocations per trial.")] = None,
    iterations: Annotated[Optional[int], typer.Option("--iterations", "-i", help="Timed invocations per trial.")] = None,
    output_dir: Annotated[Optional[str], typer.Option("--output-dir", "-o", help="Directory for the JSON results.")] = None,
) -> None:
    """
    Time the counting pass (average time per invocation, milliseconds).
    """
    settings, words = _resolve(
        corpus, level, strategy,
        warmup_iterations=warmup,
        measurement_iterations=iterations,
        results_dir=output_dir,
    )
    results = run_timing_sweep(
        words,
        settings.load_levels,
        select_strategies(settings.strategies),
        warmup_iterations=settings.warmup_iterations,
        measurement_iterations=settings.measurement_iterations,
    )

    table = Table(title="Counting pass, ms/op")
    table.add_column("Strategy", style="cyan")
    table.add_column("Level", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("σ", justify="right")
    for result in results:
        stats = result.get_stats()
        table.add_row(
            result.strategy,
            str(result.load_level),
            f"{stats['mean']:.3f}",
            f"{stats['median']:.3f}",
            f"{stats['std']:.3f}",
        )
    console.print(table)

    path = save_timing_results(results, settings.results_dir)
    console.print(f"Results saved to: {path}")


@app.command()
def verify(
    corpus: CorpusOption = None,
    strategy: StrategyOption = None,
) -> None:
    """
    Check that every strategy produces identical counts for the corpus.
    """
    settings, words = _resolve(corpus, None, strategy)
    mismatches = verify_equivalence(words, select_strategies(settings.strategies))
    if mismatches:
        for m in mismatches[:20]:
            console.print(f"[red]{m.strategy}[/red]: '{escape(m.token)}' expected {m.expected}, got {m.actual}")
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] {len(settings.strategies)} strategies, {words.distinct_count} distinct tokens")


@app.command()
def strategies() -> None:
    """
    List the available strategies in declaration order.
    """
    for s in STRATEGIES:
        typer.echo(f"{s.name}\t{s.probe_key}\t{type(s).__name__}")


if __name__ == "__main__":
    app()
