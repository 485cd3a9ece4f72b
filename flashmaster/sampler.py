"""
Random card selection with a no-immediate-repeat guarantee.

DeckSampler draws uniformly from a fixed sequence of records, excluding the
record it returned last. With two or more records the same record is never
returned twice in a row; with a single record that record is always returned.
"""

import logging
import random
from typing import Optional, Sequence, Tuple
from uuid import UUID

from .exceptions import EmptyDeckError
from .models import CardRecord

logger = logging.getLogger(__name__)


class DeckSampler:
    """
    Draws records from a deck in random order without direct repeats.

    The random source is injected so draws can be reproduced in tests. The
    sampler is single-owner and not thread-safe.
    """

    def __init__(
        self,
        records: Sequence[CardRecord],
        rng: Optional[random.Random] = None,
    ):
        """
        Create a sampler over a non-empty sequence of records.

        Parameters:
            records (Sequence[CardRecord]): Records to draw from. Stored as a tuple; later changes to the caller's sequence have no effect.
            rng (Optional[random.Random]): Random source; a fresh unseeded `random.Random` when omitted.

        Raises:
            EmptyDeckError: If `records` is empty.
        """
        self.rng = rng or random.Random()
        self._records: Tuple[CardRecord, ...] = ()
        self._last_index: Optional[int] = None
        self.reset(records)

    @property
    def records(self) -> Tuple[CardRecord, ...]:
        return self._records

    @property
    def size(self) -> int:
        return len(self._records)

    @property
    def last_shown_id(self) -> Optional[UUID]:
        """Id of the record returned by the most recent draw, if any."""
        if self._last_index is None:
            return None
        return self._records[self._last_index].id

    def reset(self, records: Sequence[CardRecord]) -> None:
        """
        Replace the records and forget the last shown record.

        Raises:
            EmptyDeckError: If `records` is empty. The sampler is left unchanged.
        """
        new_records = tuple(records)
        if not new_records:
            raise EmptyDeckError("Cannot sample from an empty deck.")
        self._records = new_records
        self._last_index = None
        logger.debug(f"Sampler reset with {len(new_records)} records")

    def draw(self) -> CardRecord:
        """
        Return a random record different from the previous draw.

        With n >= 2 records the pick is uniform over the n-1 records other
        than the last shown one. The previous index is skipped by drawing
        from n-1 slots and shifting picks at or above it up by one, so every
        draw takes exactly one call to the random source.

        Returns:
            CardRecord: The drawn record, which becomes `last_shown_id`.
        """
        n = len(self._records)
        if n == 1:
            index = 0
        elif self._last_index is None:
            index = self.rng.randrange(n)
        else:
            index = self.rng.randrange(n - 1)
            if index >= self._last_index:
                index += 1

        self._last_index = index
        return self._records[index]
