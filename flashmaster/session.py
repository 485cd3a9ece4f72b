"""
Study session state for a single loaded deck.

A StudySession owns the active Deck, the DeckSampler drawing from it, the
current card and which face of that card is showing. Loading a new file
produces a new session; a failed load leaves the existing one untouched.
"""

import logging
import random
import uuid
from typing import Optional, Sequence
from uuid import UUID

from pydantic import ValidationError

from .exceptions import ContractViolationError, EmptyDeckError
from .models import CardFace, CardRecord, Deck
from .parser import IdFactory, RecordParserConfig, parse_records
from .sampler import DeckSampler

logger = logging.getLogger(__name__)


class StudySession:
    """
    Drives a single-card study session over one deck.

    - `draw()` advances to a random card other than the current one.
    - `flip()` toggles between the question and answer faces.
    - `replace()` / `load_text()` return a new session for a new deck.

    The answer face is tied to the identity of the card that was flipped, so
    a newly drawn card always starts on its question.
    """

    def __init__(self, deck: Deck, rng: Optional[random.Random] = None):
        """
        Create a session for an already validated deck.

        Parameters:
            deck (Deck): The deck to study.
            rng (Optional[random.Random]): Random source shared with the sampler and passed on to replacement sessions.
        """
        self.deck = deck
        self.rng = rng or random.Random()
        self.sampler = DeckSampler(deck.records, rng=self.rng)
        self.current: Optional[CardRecord] = None
        self.draw_count: int = 0
        self._revealed_id: Optional[UUID] = None

    @property
    def name(self) -> Optional[str]:
        return self.deck.name

    @property
    def can_advance(self) -> bool:
        """Whether drawing can show a different card."""
        return len(self.deck) > 1

    @property
    def face(self) -> CardFace:
        if self.current is not None and self._revealed_id == self.current.id:
            return CardFace.Revealed
        return CardFace.Hidden

    def draw(self) -> CardRecord:
        """
        Draw the next card and show its question face.

        Returns:
            CardRecord: The new current card.
        """
        self.current = self.sampler.draw()
        self._revealed_id = None
        self.draw_count += 1
        logger.debug(f"Drew card {self.current.id} (draw #{self.draw_count})")
        return self.current

    def flip(self) -> CardFace:
        """
        Toggle the current card between its question and answer faces.

        Returns:
            CardFace: The face showing after the flip.

        Raises:
            ContractViolationError: If no card has been drawn yet.
        """
        if self.face is CardFace.Revealed:
            return self.hide()
        return self.reveal()

    def reveal(self) -> CardFace:
        self._require_current()
        self._revealed_id = self.current.id
        return self.face

    def hide(self) -> CardFace:
        self._require_current()
        self._revealed_id = None
        return self.face

    def _require_current(self) -> None:
        if self.current is None:
            raise ContractViolationError(
                "No card drawn yet. Call draw() first."
            )

    def replace(
        self, records: Sequence[CardRecord], name: Optional[str] = None
    ) -> "StudySession":
        """
        Create a new session over `records` with fresh sampler state.

        The anti-repeat memory is not carried over, so the first draw of the
        new session may return a record with the previously shown id. This
        session is not modified.

        Raises:
            EmptyDeckError: If `records` is empty.
            ContractViolationError: If two records share an id.
        """
        return create_session(records, rng=self.rng, name=name)

    def load_text(
        self,
        raw_text: Optional[str],
        name: Optional[str] = None,
        config: Optional[RecordParserConfig] = None,
        id_factory: IdFactory = uuid.uuid4,
    ) -> "StudySession":
        """
        Parse `raw_text` and return a new session for the resulting records.

        Parameters:
            raw_text (Optional[str]): Text of the new deck.
            name (Optional[str]): Display name of the new deck source.
            config (Optional[RecordParserConfig]): Parser configuration.
            id_factory (Callable[[], UUID]): Source of fresh record ids.

        Raises:
            EmptyInputError: If the text is empty. This session is unchanged.
            NoValidRecordsError: If no line produced a record. This session is unchanged.
        """
        records = parse_records(raw_text, config, id_factory=id_factory)
        logger.info(
            f"Replacing deck '{self.name}' with {len(records)} cards "
            f"from '{name}'"
        )
        return self.replace(records, name=name)


def create_session(
    records: Sequence[CardRecord],
    rng: Optional[random.Random] = None,
    name: Optional[str] = None,
) -> StudySession:
    """
    Start a study session over `records`.

    Parameters:
        records (Sequence[CardRecord]): Non-empty records, typically from `parse_records`.
        rng (Optional[random.Random]): Random source for the sampler.
        name (Optional[str]): Display name of the deck source.

    Returns:
        StudySession: A session with no card drawn yet.

    Raises:
        EmptyDeckError: If `records` is empty.
        ContractViolationError: If two records share an id.
    """
    if not records:
        raise EmptyDeckError("Cannot start a session with zero records.")
    try:
        deck = Deck(records=tuple(records), name=name)
    except ValidationError as e:
        raise ContractViolationError(f"Invalid deck: {e}", e) from e
    logger.info(f"Started session with {len(deck)} cards")
    return StudySession(deck, rng=rng)
