"""Enumeration of candidate strings in letter order, with optional rules."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence

from unkr.base import increment, increment_with_bases
from unkr.cryptors.char_utils import char_position, get_alphabet_prefixed, vec_to_pairs

UNIQUE_LETTERS = "UniqueLetters"
EVEN_COUNT = "EvenCount"
SORTED_LETTERS_BY_PAIR = "SortedLettersByPair"


def _to_digits(text: str) -> list[int]:
    alphabet = get_alphabet_prefixed()
    positions = (char_position(c, alphabet) for c in text)
    return [p for p in positions if p is not None]


def _to_text(digits: Sequence[int]) -> str:
    alphabet = get_alphabet_prefixed()
    return "".join(alphabet[d] for d in digits)


def unique_letters(digits: Sequence[int]) -> bool:
    """True when no digit repeats."""
    return len(set(digits)) == len(digits)


def pair_length(digits: Sequence[int]) -> bool:
    """True when the number of digits is even."""
    return len(digits) % 2 == 0


def sorted_letters_by_pair(digits: Sequence[int]) -> bool:
    """True when each pair is ascending and the pairs are ordered by first item."""
    pairs = vec_to_pairs(digits)
    ordered = sorted(
        ((min(a, b), max(a, b)) for a, b in pairs), key=lambda pair: pair[0]
    )
    return pairs == ordered


def fuzz_next(digits: Sequence[int], len_max: int, base: int) -> list[int] | None:
    """Return the next digit list, or None after the last one of ``len_max`` digits."""
    if len(digits) == len_max and all(d == base - 1 for d in digits):
        return None
    return increment(digits, base)


def fuzz_next_r(
    digits: Sequence[int],
    len_max: int,
    base: int,
    unique_letters_constraint: bool,
    pair_length_constraint: bool,
    sorted_by_pair_constraint: bool,
) -> list[int] | None:
    """Return the next digit list that satisfies every enabled constraint."""
    current = fuzz_next(digits, len_max, base)
    while current is not None:
        if (
            (not unique_letters_constraint or unique_letters(current))
            and (not pair_length_constraint or pair_length(current))
            and (not sorted_by_pair_constraint or sorted_letters_by_pair(current))
        ):
            return current
        current = fuzz_next(current, len_max, base)
    return None


def fuzz_next_string_ruled(
    text: str,
    len_max: int,
    base: int,
    unique_letters_constraint: bool,
    pair_length_constraint: bool,
    sorted_by_pair_constraint: bool,
) -> str | None:
    """Return the string that follows ``text`` under the enabled constraints."""
    result = fuzz_next_r(
        _to_digits(text),
        len_max,
        base,
        unique_letters_constraint,
        pair_length_constraint,
        sorted_by_pair_constraint,
    )
    return None if result is None else _to_text(result)


def iter_fuzz(
    start: str, len_max: int, base: int, rules: Collection[str]
) -> Iterator[str]:
    """Yield every string after ``start`` up to length ``len_max`` that obeys ``rules``.

    Known rules are "UniqueLetters", "EvenCount" and "SortedLettersByPair".
    """
    unique = UNIQUE_LETTERS in rules
    even = EVEN_COUNT in rules
    sorted_pairs = SORTED_LETTERS_BY_PAIR in rules
    current = fuzz_next_string_ruled(start, len_max, base, unique, even, sorted_pairs)
    while current is not None:
        yield current
        current = fuzz_next_string_ruled(
            current, len_max, base, unique, even, sorted_pairs
        )


def fuzz_from(start: str, len_max: int, base: int, rules: Collection[str]) -> None:
    """Print every string produced by :func:`iter_fuzz`, one per line."""
    for text in iter_fuzz(start, len_max, base, rules):
        print(text)


def fuzz_next_bases(digits: Sequence[int], bases: Sequence[int]) -> list[int] | None:
    """Return the next mixed-base digit list, or None when every digit is at its maximum."""
    if all(d == b - 1 for d, b in zip(digits, bases)):
        return None
    return increment_with_bases(digits, bases)


def fuzz_next_string_bases(text: str, bases: Sequence[int]) -> str | None:
    """Return the string that follows ``text`` when each position has its own base."""
    result = fuzz_next_bases(_to_digits(text), bases)
    return None if result is None else _to_text(result)