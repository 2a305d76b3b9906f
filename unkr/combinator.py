"""Sequences of element indexes used to combine cryptors."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product


def _generate(elements_count: int, picks: int) -> Iterator[tuple[int, ...]]:
    for length in range(1, picks + 1):
        yield from product(range(elements_count), repeat=length)


def combine_elements(elements_count: int, picks: int) -> set[tuple[int, ...]]:
    """Return every sequence of 1 to ``picks`` indexes below ``elements_count``."""
    return set(_generate(elements_count, picks))


def print_combine_elements(elements_count: int, picks: int) -> None:
    """Print every sequence of :func:`combine_elements`, one per line, in order."""
    for combination in _generate(elements_count, picks):
        print(list(combination))