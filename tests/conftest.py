"""Shared fixtures for the analysis test-suite."""

import random

import pytest

LOW = list(range(1, 16))    # 1..15
HIGH = list(range(11, 26))  # 11..25


def make_draw(sequence_id: int, numbers, date: str = "") -> dict:
    return {"sequence_id": sequence_id, "date": date, "numbers": list(numbers)}


@pytest.fixture
def single_draw():
    return [make_draw(1, LOW, "01/01/2023")]


@pytest.fixture
def closing_pair():
    return [make_draw(1, LOW), make_draw(2, HIGH)]


@pytest.fixture
def random_history():
    """200 reproducible pseudo-random draws with contiguous ids."""
    rng = random.Random(2024)
    return [
        make_draw(i, sorted(rng.sample(range(1, 26), 15)))
        for i in range(1, 201)
    ]


@pytest.fixture
def history_without_25():
    """20 draws rotating over 1..24, so 25 never appears."""
    return [
        make_draw(i, [(i + k) % 24 + 1 for k in range(15)])
        for i in range(1, 21)
    ]
