"""
Parsing constants and user-facing messages.

Pure constants only. Runtime configuration lives in RecordParserConfig and
the CLI options.
"""

# Field separator between question and answer. Only the first occurrence on a
# line splits; later ones belong to the answer.
DEFAULT_DELIMITER: str = ","

# Encoding used when reading deck files. "utf-8-sig" also accepts a leading BOM.
DEFAULT_ENCODING: str = "utf-8-sig"

# Environment variable consulted by the CLI for a reproducible draw order.
SEED_ENVVAR: str = "FLASHMASTER_SEED"

# Messages shown by the presentation layer.
EMPTY_INPUT_MESSAGE: str = "File content is empty or unreadable."
NO_VALID_RECORDS_MESSAGE: str = (
    "No valid question-answer pairs found. "
    "Ensure format is 'question,answer' per line."
)
