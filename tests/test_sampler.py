"""
Tests for the no-immediate-repeat random draw in flashmaster.sampler.
"""

import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from flashmaster.exceptions import ContractViolationError, EmptyDeckError
from flashmaster.sampler import DeckSampler


class TestDeckSamplerConstruction:
    def test_empty_records_raise(self):
        with pytest.raises(EmptyDeckError):
            DeckSampler([])

    def test_empty_deck_is_contract_violation(self):
        assert issubclass(EmptyDeckError, ContractViolationError)

    def test_initial_state(self, five_records, seeded_rng):
        sampler = DeckSampler(five_records, rng=seeded_rng)
        assert sampler.size == 5
        assert sampler.records == tuple(five_records)
        assert sampler.last_shown_id is None

    def test_records_are_copied(self, five_records):
        sampler = DeckSampler(five_records)
        five_records.clear()
        assert sampler.size == 5


class TestDraw:
    def test_single_record_always_returned(self, single_record, seeded_rng):
        sampler = DeckSampler(single_record, rng=seeded_rng)
        for _ in range(20):
            assert sampler.draw() is single_record[0]
        assert sampler.last_shown_id == single_record[0].id

    def test_single_record_does_not_use_rng(self, single_record):
        rng = MagicMock(spec=random.Random)
        sampler = DeckSampler(single_record, rng=rng)
        sampler.draw()
        sampler.draw()
        rng.randrange.assert_not_called()

    def test_updates_last_shown_id(self, five_records, seeded_rng):
        sampler = DeckSampler(five_records, rng=seeded_rng)
        record = sampler.draw()
        assert sampler.last_shown_id == record.id

    @pytest.mark.parametrize("count", [2, 3, 5, 10])
    def test_no_consecutive_repeats(self, make_records, count):
        sampler = DeckSampler(make_records(count), rng=random.Random(count))
        previous = sampler.draw()
        for _ in range(2000):
            current = sampler.draw()
            assert current.id != previous.id
            previous = current

    def test_two_records_alternate(self, make_records, seeded_rng):
        records = make_records(2)
        sampler = DeckSampler(records, rng=seeded_rng)
        first = sampler.draw()
        drawn = [sampler.draw() for _ in range(10)]
        expected_other = records[1] if first is records[0] else records[0]
        assert drawn[0] is expected_other
        assert drawn[::2] == [expected_other] * 5

    def test_one_random_call_per_draw(self, five_records):
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 0
        sampler = DeckSampler(five_records, rng=rng)
        sampler.draw()
        sampler.draw()
        sampler.draw()
        assert rng.randrange.call_count == 3

    def test_first_draw_uses_whole_deck(self, five_records):
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 4
        sampler = DeckSampler(five_records, rng=rng)
        assert sampler.draw() is five_records[4]
        rng.randrange.assert_called_once_with(5)

    def test_previous_index_is_skipped(self, five_records):
        rng = MagicMock(spec=random.Random)
        # First draw lands on index 2, later picks are from 4 slots.
        rng.randrange.side_effect = [2, 0, 2, 3]
        sampler = DeckSampler(five_records, rng=rng)
        assert sampler.draw() is five_records[2]
        # 0 < previous index 2: unchanged
        assert sampler.draw() is five_records[0]
        # 2 >= previous index 0: shifted to 3
        assert sampler.draw() is five_records[3]
        # 3 >= previous index 3: shifted to 4
        assert sampler.draw() is five_records[4]
        assert [c.args for c in rng.randrange.call_args_list] == [
            (5,),
            (4,),
            (4,),
            (4,),
        ]

    def test_selection_is_uniform_over_other_records(self, make_records):
        records = make_records(4)
        sampler = DeckSampler(records, rng=random.Random(42))
        transitions = {r.id: Counter() for r in records}

        previous = sampler.draw()
        for _ in range(40000):
            current = sampler.draw()
            transitions[previous.id][current.id] += 1
            previous = current

        for source_id, counts in transitions.items():
            assert source_id not in counts
            total = sum(counts.values())
            assert len(counts) == 3
            for count in counts.values():
                assert count / total == pytest.approx(1 / 3, abs=0.03)

    def test_seeded_draws_are_reproducible(self, five_records):
        first = DeckSampler(five_records, rng=random.Random(7))
        second = DeckSampler(five_records, rng=random.Random(7))
        assert [first.draw().id for _ in range(50)] == [
            second.draw().id for _ in range(50)
        ]


class TestReset:
    def test_clears_last_shown(self, five_records, make_records, seeded_rng):
        sampler = DeckSampler(five_records, rng=seeded_rng)
        sampler.draw()
        new_records = make_records(3)
        sampler.reset(new_records)
        assert sampler.last_shown_id is None
        assert sampler.records == tuple(new_records)

    def test_first_draw_after_reset_may_repeat(self, make_records):
        records = make_records(2)
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 0
        sampler = DeckSampler(records, rng=rng)
        assert sampler.draw() is records[0]

        sampler.reset(records)
        assert sampler.draw() is records[0]

    def test_empty_reset_leaves_sampler_intact(self, five_records, seeded_rng):
        sampler = DeckSampler(five_records, rng=seeded_rng)
        drawn = sampler.draw()
        with pytest.raises(EmptyDeckError):
            sampler.reset([])
        assert sampler.size == 5
        assert sampler.last_shown_id == drawn.id
