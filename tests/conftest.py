import itertools
import random
import uuid
from pathlib import Path
from typing import Callable, List

import pytest

from flashmaster.models import CardRecord


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir.

    Parameters:
        request: The pytest `request` fixture used to obtain the per-test `tmpdir` fixture.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture
def sequential_ids() -> Callable[[], uuid.UUID]:
    """
    Provide an id factory returning UUIDs 1, 2, 3, ... in call order.

    Returns:
        Callable[[], uuid.UUID]: A factory whose ids are predictable in tests.
    """
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a deterministic random source."""
    return random.Random(1234)


def _build_records(count: int) -> List[CardRecord]:
    return [
        CardRecord(
            id=uuid.UUID(int=i + 1),
            question=f"Q{i}",
            answer=f"A{i}",
            line_number=i + 1,
        )
        for i in range(count)
    ]


@pytest.fixture
def make_records() -> Callable[[int], List[CardRecord]]:
    """
    Provide a builder for `count` records with predictable ids and text.

    Record i has id UUID(int=i + 1), question "Q{i}" and answer "A{i}".
    """
    return _build_records


@pytest.fixture
def single_record() -> List[CardRecord]:
    return _build_records(1)


@pytest.fixture
def five_records() -> List[CardRecord]:
    return _build_records(5)


@pytest.fixture
def deck_file(tmp_path: Path) -> Path:
    """
    Create a small deck file with two valid lines and a few that are skipped.

    Returns:
        Path: Path to `capitals.csv` inside `tmp_path`.
    """
    file_path = tmp_path / "capitals.csv"
    file_path.write_text(
        "Capital of France?,Paris\n"
        "\n"
        "no delimiter here\n"
        "Capital of Japan?, Tokyo \n",
        encoding="utf-8",
    )
    return file_path
