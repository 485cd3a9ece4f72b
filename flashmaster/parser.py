import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union
from uuid import UUID

from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    EMPTY_INPUT_MESSAGE,
    NO_VALID_RECORDS_MESSAGE,
)
from .exceptions import EmptyInputError, NoValidRecordsError
from .models import CardRecord, Deck

logger = logging.getLogger(__name__)

IdFactory = Callable[[], UUID]


@dataclass
class RecordParserConfig:
    """Configuration for turning delimited text into card records."""

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got {self.delimiter!r}."
            )


class RecordParser:
    def __init__(
        self,
        config: Optional[RecordParserConfig] = None,
        id_factory: IdFactory = uuid.uuid4,
    ):
        """
        Initialize the RecordParser.

        Parameters:
            config (Optional[RecordParserConfig]): Delimiter and encoding settings; defaults to a comma-delimited UTF-8 configuration.
            id_factory (Callable[[], UUID]): Source of fresh record ids. Each call must return a value not returned before.
        """
        self.config = config or RecordParserConfig()
        self.id_factory = id_factory

    def parse(self, raw_text: str) -> List[CardRecord]:
        """
        Parse raw text into card records, one per qualifying line, in line order.

        Lines end at a line feed only. A carriage return before it is trimmed with the other surrounding whitespace; form feeds, Unicode line separators and similar characters stay inside the line.

        Lines that are blank, have no delimiter, or leave the question or the answer empty after trimming are skipped. Skipped lines never raise.

        Parameters:
            raw_text (str): Complete text buffer to parse.

        Returns:
            List[CardRecord]: Records in source order; empty when no line qualifies.
        """
        records: List[CardRecord] = []
        skipped = 0

        for line_number, line in enumerate(raw_text.split("\n"), start=1):
            result = self._split_line(line)
            if isinstance(result, str):
                skipped += 1
                logger.debug("Skipping line %s: %s", line_number, result)
                continue

            question, answer = result
            records.append(
                CardRecord(
                    id=self.id_factory(),
                    question=question,
                    answer=answer,
                    line_number=line_number,
                )
            )

        logger.info(
            "Parsed %s records (%s lines skipped).", len(records), skipped
        )
        return records

    def _split_line(self, line: str) -> Union[Tuple[str, str], str]:
        """
        Split one line at the first delimiter.

        Returns:
            Union[Tuple[str, str], str]: The trimmed (question, answer) pair, or a short reason string when the line does not qualify.
        """
        stripped = line.strip()
        if not stripped:
            return "blank line"

        question, sep, answer = stripped.partition(self.config.delimiter)
        if not sep:
            return "no delimiter"

        question = question.strip()
        answer = answer.strip()
        if not question:
            return "empty question"
        if not answer:
            return "empty answer"
        return question, answer


def parse_records(
    raw_text: Optional[str],
    config: Optional[RecordParserConfig] = None,
    id_factory: IdFactory = uuid.uuid4,
) -> List[CardRecord]:
    """
    Parse raw text and report whole-input failures as exceptions.

    Parameters:
        raw_text (Optional[str]): Text read from a deck file.
        config (Optional[RecordParserConfig]): Parser configuration.
        id_factory (Callable[[], UUID]): Source of fresh record ids.

    Returns:
        List[CardRecord]: A non-empty list of records in line order.

    Raises:
        EmptyInputError: If `raw_text` is None or the empty string.
        NoValidRecordsError: If the text was read but no line produced a record.
    """
    if not raw_text:
        raise EmptyInputError(EMPTY_INPUT_MESSAGE)

    records = RecordParser(config, id_factory=id_factory).parse(raw_text)
    if not records:
        raise NoValidRecordsError(NO_VALID_RECORDS_MESSAGE)
    return records


def read_deck_file(
    file_path: Path,
    config: Optional[RecordParserConfig] = None,
    id_factory: IdFactory = uuid.uuid4,
) -> Deck:
    """
    Read a deck file from disk and parse it into a Deck named after the file.

    Parameters:
        file_path (Path): Path of the delimited-text file.
        config (Optional[RecordParserConfig]): Parser configuration; its `encoding` is used to decode the file.
        id_factory (Callable[[], UUID]): Source of fresh record ids.

    Returns:
        Deck: The parsed deck with `name` set to the file name.

    Raises:
        EmptyInputError: If the file is missing, unreadable, not decodable with the configured encoding, or empty.
        NoValidRecordsError: If the file contains no qualifying lines.
    """
    config = config or RecordParserConfig()
    file_path = Path(file_path)
    try:
        with file_path.open(encoding=config.encoding, newline="") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise EmptyInputError(f"File not found: {file_path}", e) from e
    except UnicodeDecodeError as e:
        raise EmptyInputError(
            f"Could not decode {file_path.name} as {config.encoding}.", e
        ) from e
    except OSError as e:
        raise EmptyInputError(f"Could not read file: {e}", e) from e

    records = parse_records(content, config, id_factory=id_factory)
    logger.info("Loaded %s cards from %s", len(records), file_path)
    return Deck(records=tuple(records), name=file_path.name)
