"""Alphabets, letter positions and letter shifting."""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")

_ALPHABET = tuple(string.ascii_uppercase)


def get_alphabet() -> list[str]:
    """Return the letters A to Z."""
    return list(_ALPHABET)


def get_alphabet_prefixed() -> list[str]:
    """Return a space followed by the letters A to Z."""
    return [" ", *_ALPHABET]


def pairs_to_vec(pairs: Mapping[T, T]) -> list[T]:
    """Flatten a mapping into key, value, key, value ... in key order."""
    return [item for key, value in sorted(pairs.items()) for item in (key, value)]


def vec_to_pairs(items: Sequence[T]) -> list[tuple[T, T]]:
    """Group a sequence into consecutive pairs, dropping a trailing odd item."""
    return list(zip(items[::2], items[1::2]))


def char_position(c: str, alphabet: Iterable[str]) -> int | None:
    """Return the index of ``c`` in ``alphabet``, or None when absent."""
    for index, letter in enumerate(alphabet):
        if letter == c:
            return index
    return None


def char_position_base(c: str) -> int:
    """Return the offset of ``c`` from 'A'."""
    position = ord(c) - ord("A")
    if position < 0:
        raise ValueError(f"character {c!r} comes before 'A'")
    return position


def merge_alphabets(primary: Iterable[str], secondary: Iterable[str]) -> list[str]:
    """Return ``primary`` followed by the letters of ``secondary`` it lacks."""
    merged = list(primary)
    for c in secondary:
        if c not in merged:
            merged.append(c)
    return merged


def merge_custom_alphabet(primary: Iterable[str]) -> list[str]:
    """Complete ``primary`` with the remaining letters A to Z."""
    return merge_alphabets(primary, _ALPHABET)


def char_mod_custom_alphabet(
    c: str, number: int, forward: bool, custom_alphabet: Iterable[str]
) -> str:
    """Shift ``c`` by ``number`` places within a keyed alphabet.

    Characters outside the alphabet are returned unchanged.
    """
    alphabet = merge_custom_alphabet(custom_alphabet)
    index = char_position(c, alphabet)
    if index is None:
        return c
    shifted = index + number if forward else 26 + index - number
    return alphabet[shifted % 26]


def char_mod(c: str, number: int, forward: bool) -> str:
    """Shift ``c`` by ``number`` places within A to Z."""
    return char_mod_custom_alphabet(c, number, forward, [])