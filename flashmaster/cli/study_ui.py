"""
Command-line interface for studying a deck card by card.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from flashmaster.constants import EMPTY_INPUT_MESSAGE, NO_VALID_RECORDS_MESSAGE
from flashmaster.exceptions import EmptyInputError, NoValidRecordsError
from flashmaster.models import CardFace, Deck
from flashmaster.parser import RecordParserConfig, read_deck_file
from flashmaster.session import StudySession

logger = logging.getLogger(__name__)
console = Console()

_ACTIONS = {"", "f", "n", "u", "q"}


def _display_card(session: StudySession) -> None:
    """
    Show the visible face of the current card.

    Card text is printed literally so brackets and math markup are not read as rich markup.
    """
    card = session.current
    if session.face is CardFace.Revealed:
        console.print(
            Panel(Text(card.answer), title="Answer", border_style="blue")
        )
    else:
        console.print(
            Panel(Text(card.question), title="Question", border_style="green")
        )


def _get_user_action() -> str:
    """
    Prompt until the user enters a known action key.

    Returns:
        str: One of "" / "f" (flip), "n" (next card), "u" (upload another file) or "q" (quit).
    """
    while True:
        action = (
            console.input(
                "[bold]Enter/f: flip, n: next card, u: new file, q: quit: [/bold]"
            )
            .strip()
            .lower()
        )
        if action in _ACTIONS:
            return action
        console.print(
            "[bold red]Unknown action. Please enter f, n, u or q.[/bold red]"
        )


def load_deck_or_report(
    file_path: Path, config: Optional[RecordParserConfig] = None
) -> Optional[Deck]:
    """
    Read a deck file, printing a targeted message instead of raising on failure.

    Returns:
        Optional[Deck]: The loaded deck, or None if the file was empty, unreadable or held no valid records.
    """
    try:
        deck = read_deck_file(file_path, config)
    except EmptyInputError as e:
        logger.info(f"Could not load {file_path}: {e}")
        console.print(f"[bold red]{EMPTY_INPUT_MESSAGE}[/bold red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        return None
    except NoValidRecordsError:
        console.print(f"[bold red]{NO_VALID_RECORDS_MESSAGE}[/bold red]")
        return None

    console.print(f"[green]{len(deck)} cards loaded successfully.[/green]")
    return deck


def _load_new_deck(
    session: StudySession, config: Optional[RecordParserConfig]
) -> StudySession:
    """
    Ask for another deck file and switch to it if it loads.

    Returns:
        StudySession: The new session, or the unchanged `session` when loading fails.
    """
    path_str = console.input("[bold]Path to new deck file: [/bold]").strip()
    if not path_str:
        return session

    deck = load_deck_or_report(Path(path_str), config)
    if deck is None:
        return session

    new_session = session.replace(deck.records, name=deck.name)
    console.print(f"Loaded from: [bold]{escape(new_session.name)}[/bold]")
    new_session.draw()
    return new_session


def start_study_flow(
    session: StudySession, config: Optional[RecordParserConfig] = None
) -> StudySession:
    """
    Run the interactive study loop until the user quits.

    Args:
        session: A session for the initial deck.
        config: Parser configuration used when the user loads another file.

    Returns:
        The session active when the user quit.
    """
    if session.name:
        console.print(f"Loaded from: [bold]{escape(session.name)}[/bold]")
    session.draw()

    while True:
        console.rule(f"[bold]Card {session.draw_count}[/bold]")
        _display_card(session)
        action = _get_user_action()

        if action in ("", "f"):
            session.flip()
        elif action == "n":
            if session.can_advance:
                session.draw()
            else:
                console.print(
                    "[yellow]This deck has only one card.[/yellow]"
                )
        elif action == "u":
            session = _load_new_deck(session, config)
        else:
            break

    console.print(
        f"[bold cyan]Study session finished. "
        f"{session.draw_count} cards drawn.[/bold cyan]"
    )
    return session
