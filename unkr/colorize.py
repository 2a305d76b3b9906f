"""Highlighting of chosen letters with terminal colour codes."""

from __future__ import annotations

from collections.abc import Iterable

from unkr.models import StringArgs

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _colorize_letter(c: str) -> str:
    return f"{_RED}{c}{_RESET}"


def colorize_letters(strings: Iterable[str], args: StringArgs) -> list[str]:
    """Wrap every character found in ``args.letters`` in red colour codes."""
    return [
        "".join(_colorize_letter(c) if c in args.letters else c for c in s)
        for s in strings
    ]