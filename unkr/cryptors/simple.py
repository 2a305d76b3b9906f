"""Ciphers without a key: atbash, cut, join and reverse."""

from __future__ import annotations

import string
from collections.abc import Iterable

from unkr.models import NumberArgs

_ATBASH = str.maketrans(string.ascii_uppercase, string.ascii_uppercase[::-1])


def atbash(strings: Iterable[str]) -> list[str]:
    """Mirror each letter A to Z; other characters are kept."""
    return [s.translate(_ATBASH) for s in strings]


def cut(strings: Iterable[str], args: NumberArgs) -> list[str]:
    """Split each string in two after ``args.number`` characters."""
    return [part for s in strings for part in (s[: args.number], s[args.number :])]


def join(strings: Iterable[str]) -> list[str]:
    """Concatenate all strings into one."""
    return ["".join(strings)]


def reverse(strings: Iterable[str]) -> list[str]:
    """Reverse each string."""
    return [s[::-1] for s in strings]