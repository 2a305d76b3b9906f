"""Columnar transposition."""

from __future__ import annotations

from collections.abc import Sequence

from unkr.models import NumberArgs


def init() -> NumberArgs:
    """Return the first column count of the enumeration."""
    return NumberArgs(number=1)


def next_args(strings: Sequence[str], args: NumberArgs) -> NumberArgs | None:
    """Return the next column count, bounded by the first string's length."""
    if args.number < len(strings[0]) - 1:
        return NumberArgs(number=args.number + 1)
    return None


def _columns(text: str, number: int) -> list[str]:
    columns = (text[index::number] for index in range(number))
    return [column.rstrip() for column in columns if column]


def encrypt(strings: Sequence[str], args: NumberArgs) -> list[str]:
    """Write the joined text in rows of ``args.number`` and read the columns."""
    text = "".join(strings)
    number = args.number
    padded = text + " " * (number - len(text) % number)
    return _columns(padded, number)


def decrypt(strings: Sequence[str], args: NumberArgs) -> list[str]:
    """Undo :func:`encrypt`, restoring the padding the columns lost."""
    text = "".join(strings)
    number = args.number
    size = len(text)
    rows = -(-size // number)
    padded = list(text)
    for i in range(number - size % number):
        position = len(padded) - rows * i
        if position < 0:
            raise ValueError(f"cannot transpose {size} characters by {number}")
        padded.insert(position, " ")
    return _columns("".join(padded), rows)