"""Brute force entry points: building and filtering step combinations."""

from __future__ import annotations

from collections.abc import Sequence

from unkr.combinator import combine_elements
from unkr.models import BruteForceCryptor, BruteForceKind
from unkr.parser import read_bruteforce_parameters
from unkr.thread_system import start

_JOIN = BruteForceCryptor(BruteForceKind.JOIN)
_CUT = BruteForceCryptor(BruteForceKind.CUT)
_ATBASH = BruteForceCryptor(BruteForceKind.ATBASH)
_REVERSE = BruteForceCryptor(BruteForceKind.REVERSE)
_SWAP = BruteForceCryptor(BruteForceKind.SWAP)

_NOT_FIRST = (_JOIN,)
_NOT_LAST = (_JOIN, _CUT)

_SKIP_AFTER: dict[BruteForceKind, tuple[BruteForceCryptor, ...]] = {
    BruteForceKind.ATBASH: (_ATBASH,),
    BruteForceKind.REVERSE: (_REVERSE,),
    BruteForceKind.SWAP: (_SWAP, _JOIN),
    BruteForceKind.JOIN: (_JOIN, _CUT),
}


def _pointless_after(previous: BruteForceCryptor, current: BruteForceCryptor) -> bool:
    if current.kind is BruteForceKind.PERMUTE:
        return previous == current
    return previous in _SKIP_AFTER.get(current.kind, ())


def skip_combination(combination: Sequence[BruteForceCryptor]) -> bool:
    """Tell whether a combination is pointless to try."""
    if not combination:
        return False
    if combination[0] in _NOT_FIRST or combination[-1] in _NOT_LAST:
        return True
    return any(
        _pointless_after(previous, current)
        for previous, current in zip(combination, combination[1:])
    )


def brute_force_decrypt(
    text: str,
    clues: Sequence[str],
    steps: int,
    decryptors: Sequence[str],
    threads_count: int,
    cache_name: str,
) -> set[str]:
    """Try every useful combination of up to ``steps`` of the given steps."""
    cryptors = [read_bruteforce_parameters(d) for d in decryptors]
    combinations = [
        tuple(cryptors[i] for i in indexes)
        for indexes in sorted(combine_elements(len(cryptors), steps))
    ]
    kept = [c for c in combinations if not skip_combination(c)]
    return start(text, threads_count, kept, clues, cache_name, True)


def brute_force_unique_combination(
    text: str,
    clues: Sequence[str],
    decryptors: Sequence[str],
    threads_count: int,
    cache_name: str,
    intermediate_steps: bool,
) -> set[str]:
    """Try every parameter of a single combination of steps."""
    combination = tuple(read_bruteforce_parameters(d) for d in decryptors)
    return start(
        text, threads_count, [combination], clues, cache_name, intermediate_steps
    )