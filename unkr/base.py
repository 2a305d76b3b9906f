"""Arithmetic on digit lists in a fixed base or in mixed bases, skipping zero digits."""

from __future__ import annotations

from collections.abc import Sequence


def to_digits(number: int, base: int) -> list[int]:
    """Return the digits of ``number`` in ``base``, most significant first.

    Zero has no digits and gives an empty list.
    """
    digits: list[int] = []
    while number > 0:
        number, digit = divmod(number, base)
        digits.append(digit)
    digits.reverse()
    return digits


def from_digits(digits: Sequence[int], base: int) -> int:
    """Return the number written by ``digits`` in ``base``."""
    number = 0
    for digit in digits:
        number = number * base + digit
    return number


def increment(digits: Sequence[int], base: int) -> list[int]:
    """Return the next digit list in ``base`` that contains no zero digit."""
    number = from_digits(digits, base)
    result = to_digits(number + 1, base)
    while 0 in result:
        number += 1
        result = to_digits(number + 1, base)
    return result


def increment_with_bases(digits: Sequence[int], bases: Sequence[int]) -> list[int]:
    """Increment a mixed-base digit list, aligned on the right with ``bases``.

    Digits wrap from their maximum back to 1, never to 0. Carrying past the
    first digit raises ``IndexError``.
    """
    result = list(digits)
    last = (result[-1] + 1) % bases[-1]
    if last == 0:
        last = 1
        offset = 2
        carry = True
        while carry:
            value = (result[-offset] + 1) % bases[-offset]
            carry = value == 0
            result[-offset] = 1 if carry else value
            offset += 1
    result[-1] = last
    return result