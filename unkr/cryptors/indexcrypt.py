"""Index cipher: each letter picks and removes a character from a base string."""

from __future__ import annotations

from collections.abc import Iterable

from unkr.cryptors.char_utils import char_position_base
from unkr.models import StringArgs


def decrypt_string(text: str, base: str) -> str:
    """Use each letter's offset from 'A' to pop a character from ``base``."""
    remaining = list(base)
    result = []
    for c in text:
        if not remaining:
            raise ValueError(f"base {base!r} is too short for {text!r}")
        index = char_position_base(c) % len(remaining)
        result.append(remaining.pop(index))
    return "".join(result)


def encrypt(strings: Iterable[str], args: StringArgs) -> list[str]:
    """Apply the index cipher with ``args.letters`` as base."""
    return [decrypt_string(s, args.letters) for s in strings]


def decrypt(strings: Iterable[str], args: StringArgs) -> list[str]:
    """Apply the index cipher with ``args.letters`` as base."""
    return [decrypt_string(s, args.letters) for s in strings]