"""Reordering of a list of strings."""

from __future__ import annotations

from collections.abc import Sequence

from unkr.fuzzer import fuzz_next_r
from unkr.models import SwapArgs


def init() -> SwapArgs:
    """Return the first order of the enumeration."""
    return SwapArgs(order=(0,))


def next_args(args: SwapArgs, str_count: int) -> SwapArgs | None:
    """Return the next order without repeated indexes, or None."""
    following = fuzz_next_r(args.order, str_count, str_count, True, False, False)
    return None if following is None else SwapArgs(order=tuple(following))


def encrypt(strings: Sequence[str], args: SwapArgs) -> list[str]:
    """Put the strings named by ``args.order`` first, then the others."""
    result = [strings[i] for i in args.order if i < len(strings)]
    for s in strings:
        if s not in result:
            result.append(s)
    return result


def decrypt(strings: Sequence[str], args: SwapArgs) -> list[str]:
    """Undo :func:`encrypt` with the same order."""
    order = list(args.order)
    result = []
    unordered = len(order)
    for i in range(len(strings)):
        if i in order:
            result.append(strings[order.index(i)])
        else:
            result.append(strings[unordered])
            unordered += 1
    return result