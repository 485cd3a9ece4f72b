"""
CLI entry point for flashmaster.
"""

# Standard library imports
import random
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Local application imports
from flashmaster.cli.study_ui import load_deck_or_report, start_study_flow
from flashmaster.constants import DEFAULT_DELIMITER, SEED_ENVVAR
from flashmaster.parser import RecordParserConfig
from flashmaster.session import StudySession


console = Console()

app = typer.Typer(
    name="flashmaster",
    help="FlashMaster: study question,answer files one random card at a time.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# Common typer options reused across commands
_file_argument = typer.Argument(  # noqa: B008
    ...,
    help="Text file with one 'question,answer' pair per line. "
    "The first comma splits; later commas belong to the answer.",
)

_delimiter_option = typer.Option(  # noqa: B008
    DEFAULT_DELIMITER,
    "--delimiter",
    help="Single character separating question from answer.",
)


def _build_config(delimiter: str) -> RecordParserConfig:
    """Create the parser configuration, exiting with code 1 on a bad delimiter."""
    try:
        return RecordParserConfig(delimiter=delimiter)
    except ValueError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# Study
# ---------------------------------------------------------------------------


@app.command()
def study(
    file_path: Path = _file_argument,
    seed: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--seed",
        help="Seed for a reproducible card order. "
        f"Falls back to {SEED_ENVVAR} env var.",
        envvar=SEED_ENVVAR,
    ),
    delimiter: str = _delimiter_option,
):
    """
    Load a deck file and start an interactive study session.

    Exits with code 1 when the file is empty, unreadable or contains no valid question/answer lines.
    """
    config = _build_config(delimiter)
    deck = load_deck_or_report(file_path, config)
    if deck is None:
        raise typer.Exit(code=1)

    session = StudySession(deck, rng=random.Random(seed))
    start_study_flow(session, config)


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------


@app.command()
def check(
    file_path: Path = _file_argument,
    delimiter: str = _delimiter_option,
):
    """Parse a deck file and list the cards it contains without studying."""
    config = _build_config(delimiter)
    deck = load_deck_or_report(file_path, config)
    if deck is None:
        raise typer.Exit(code=1)

    table = Table(title=f"Cards in {deck.name}")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Question", style="green")
    table.add_column("Answer", style="blue")
    for record in deck.records:
        table.add_row(
            str(record.line_number),
            Text(record.question),
            Text(record.answer),
        )
    console.print(table)


# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
