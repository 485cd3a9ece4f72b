"""
Data models for parsed card records and study decks.
"""

from __future__ import annotations

import uuid
from enum import IntEnum
from uuid import UUID
from typing import Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class CardFace(IntEnum):
    """
    Which side of the current card is showing.
    """

    Hidden = 0
    Revealed = 1


class CardRecord(BaseModel):
    """
    A validated question/answer pair parsed from one line of input.

    Question and answer are stored trimmed and are never empty. Both are
    opaque text: math markup such as ``$x^2$`` is kept as written.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(
        default_factory=uuid.uuid4,
        description="Unique identifier minted at parse time.",
    )
    question: str = Field(
        ...,
        min_length=1,
        description="Question text (segment before the first delimiter).",
    )
    answer: str = Field(
        ...,
        min_length=1,
        description="Answer text (everything after the first delimiter).",
    )
    line_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="1-based line of the source text this record came from.",
    )

    @field_validator("question", "answer", mode="before")
    @classmethod
    def strip_text(cls, v):
        """Trim surrounding whitespace so blank fields fail min_length."""
        if isinstance(v, str):
            return v.strip()
        return v


class Deck(BaseModel):
    """
    The ordered set of records loaded for one study session.

    A deck is never mutated; loading a new file produces a new Deck.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    records: Tuple[CardRecord, ...] = Field(
        ...,
        min_length=1,
        description="Records in source line order.",
    )
    name: Optional[str] = Field(
        default=None,
        description="Display name of the source, usually the file name.",
    )

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Deck":
        seen = set()
        for record in self.records:
            if record.id in seen:
                raise ValueError(f"Duplicate record id in deck: {record.id}")
            seen.add(record.id)
        return self

    def __len__(self) -> int:
        return len(self.records)
