"""Detection of clues in decrypted strings."""

from __future__ import annotations

import queue
from collections.abc import Iterable, MutableSet, Sequence
from typing import Any

from unkr.cache import push_hit
from unkr.models import CacheArgs, Cryptor, HitLine
from unkr.parser import format_cryptor


def clue_is_in_string(text: str, clues: Iterable[str]) -> list[str]:
    """Return a message for each clue contained in ``text``."""
    return [f"{clue} was found in {text}" for clue in clues if clue in text]


def find_candidates(strings: Iterable[str], clues: Iterable[str]) -> list[str]:
    """Look for the clues in the concatenation of ``strings``."""
    return clue_is_in_string("".join(strings), clues)


def _describe(cryptors: Sequence[Cryptor]) -> str:
    return "[" + ", ".join(format_cryptor(cryptor) for cryptor in cryptors) + "]"


def consume_candidates(
    candidate_queue: queue.Queue[Any],
    cache_args: CacheArgs,
    results: MutableSet[str],
    messages: queue.Queue[Any],
) -> None:
    """Check queued (strings, clues, cryptors) items until a None arrives.

    Each hit is reported on ``messages``, its steps added to ``results`` and
    written to the hits cache.
    """
    while (item := candidate_queue.get()) is not None:
        strings, clues, cryptors = item
        candidates = find_candidates(strings, clues)
        if not candidates:
            continue
        description = _describe(cryptors)
        messages.put(f"{candidates!r} {description}")
        results.add(description)
        push_hit(cache_args, HitLine(args=cryptors, result="".join(candidates)))