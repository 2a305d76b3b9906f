"""Caesar shift cipher."""

from __future__ import annotations

from collections.abc import Iterable

from unkr.cryptors.char_utils import char_mod
from unkr.models import NumberArgs

_SIZE = 26


def init() -> NumberArgs:
    """Return the first shift of the enumeration."""
    return NumberArgs(number=0)


def next_args(args: NumberArgs) -> NumberArgs | None:
    """Return the next shift, or None after 25."""
    if args.number >= 25:
        return None
    return NumberArgs(number=args.number + 1)


def decrypt(strings: Iterable[str], args: NumberArgs) -> list[str]:
    """Shift every letter forward by ``args.number``."""
    return ["".join(char_mod(c, args.number, True) for c in s) for s in strings]


def encrypt(strings: Iterable[str], args: NumberArgs) -> list[str]:
    """Undo :func:`decrypt` with the same shift."""
    return decrypt(strings, NumberArgs(number=_SIZE - args.number))