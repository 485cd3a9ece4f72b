"""FlashMaster - Parse question/answer text files and study them card by card."""

from .models import CardRecord, Deck, CardFace
from .exceptions import (
    FlashMasterError,
    EmptyInputError,
    NoValidRecordsError,
    ContractViolationError,
    EmptyDeckError,
)
from .parser import RecordParser, RecordParserConfig, parse_records, read_deck_file
from .sampler import DeckSampler
from .session import StudySession, create_session

__all__ = [
    "CardRecord",
    "Deck",
    "CardFace",
    "FlashMasterError",
    "EmptyInputError",
    "NoValidRecordsError",
    "ContractViolationError",
    "EmptyDeckError",
    "RecordParser",
    "RecordParserConfig",
    "parse_records",
    "read_deck_file",
    "DeckSampler",
    "StudySession",
    "create_session",
]
