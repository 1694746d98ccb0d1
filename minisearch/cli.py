"""
MiniSearch command-line interface.

Loads a corpus (a pipe-delimited data file, or the built-in samples), prints
index statistics, then either runs the given --query arguments once or starts
an interactive prompt. Type 'quit' or 'exit' to leave the prompt.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .config import Settings, load_environment
from .loader import load_documents
from .logging_config import setup_logging
from .sample_data import load_sample_documents
from .tfidf.engine import SearchEngine, SearchResult

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"quit", "exit"})
PROMPT = "\n[bold]Enter your search query[/bold] (or 'quit' to exit): "


def print_results(results: Sequence[SearchResult], query: str, console: Optional[Console] = None) -> None:
    """Render ranked results: rank, title, url, snippet and score"""
    console = console or Console()

    console.print(f"\n[bold cyan]=== Results for: \"{escape(query)}\" ===[/bold cyan]")
    console.print(f"Found {len(results)} results\n")

    for rank, result in enumerate(results, start=1):
        console.print(f"[bold]{escape(f'[{rank}]')}[/bold] [cyan]{escape(result.title)}[/cyan]")
        if result.url:
            console.print(f"    URL: [blue]{escape(result.url)}[/blue]")
        console.print(f"    {escape(result.snippet)}")
        console.print(f"    Score: [green]{result.score:.3f}[/green]\n")


def print_stats(engine: SearchEngine, console: Optional[Console] = None) -> None:
    console = console or Console()
    stats = engine.stats()

    console.print("\n[bold]=== Search Engine Statistics ===[/bold]")
    console.print(f"Indexed documents: {stats.document_count}")
    console.print(f"Unique terms: {stats.term_count}")
    console.print("================================")


def run_repl(
    engine: SearchEngine,
    console: Optional[Console] = None,
    input_fn: Optional[Callable[[str], str]] = None,
    max_results: Optional[int] = None,
) -> int:
    """
    Read queries until 'quit', 'exit', EOF or Ctrl-C.

    Empty lines are ignored. Everything else is passed verbatim to search().

    Returns:
        Number of queries executed
    """
    console = console or Console()
    input_fn = input_fn or console.input
    executed = 0

    while True:
        try:
            query = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if query in EXIT_COMMANDS:
            break
        if not query:
            continue

        results = engine.search(query, max_results)
        print_results(results, query, console)
        executed += 1

    console.print("Thank you for using the Mini Search Engine!")
    return executed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minisearch",
        description="In-memory TF-IDF search over short text documents",
    )
    parser.add_argument(
        "--data",
        metavar="FILE",
        help="Pipe-delimited corpus (title|content|url per line); overrides MINISEARCH_DATA_FILE",
    )
    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Do not load the built-in sample documents when no data file is given",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        metavar="N",
        help="Maximum results per query; overrides MINISEARCH_MAX_RESULTS",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level; overrides LOG_LEVEL",
    )
    parser.add_argument(
        "--query", "-q",
        action="append",
        metavar="TEXT",
        help="Run this query and exit (repeatable)",
    )
    return parser


def build_engine(settings: Settings, data_file: Optional[str] = None, use_samples: bool = True) -> SearchEngine:
    """
    Create an engine and load its corpus.

    Raises:
        FileNotFoundError: If data_file does not exist
        OSError: If data_file cannot be read
    """
    engine = SearchEngine(
        max_results=settings.max_results,
        snippet_window=settings.snippet_window,
        snippet_lead=settings.snippet_lead,
    )

    if data_file:
        load_documents(engine, data_file)
    elif use_samples:
        count = load_sample_documents(engine)
        logger.info(f"Loaded {count} sample documents")

    return engine


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    load_environment()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        return 2

    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    setup_logging(log_file=settings.log_file, console_level=settings.console_level)

    data_file = args.data or settings.data_file
    try:
        engine = build_engine(settings, data_file, use_samples=not args.no_samples)
    except FileNotFoundError:
        console.print(f"[bold red]Data file not found:[/bold red] {escape(str(data_file))}")
        return 1
    except OSError as e:
        console.print(f"[bold red]Cannot read data file:[/bold red] {escape(str(e))}")
        return 1

    print_stats(engine, console)

    max_results = args.max_results if args.max_results is not None else settings.max_results

    if args.query:
        for query in args.query:
            print_results(engine.search(query, max_results), query, console)
        return 0

    run_repl(engine, console, max_results=max_results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
