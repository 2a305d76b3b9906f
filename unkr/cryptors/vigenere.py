"""Vigenère cipher over a keyed alphabet."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from unkr.cryptors.char_utils import char_position, merge_custom_alphabet
from unkr.fuzzer import fuzz_next_string_ruled
from unkr.models import VigenereArgs, VigenereBruteForceState


def init() -> VigenereArgs:
    """Return the first key and alphabet of the enumeration."""
    return VigenereArgs(key="", alphabet="")


def next_args(state: VigenereBruteForceState) -> VigenereArgs | None:
    """Advance the key; when exhausted, advance the alphabet and restart the key."""
    depths = state.brute_force_args
    key = fuzz_next_string_ruled(state.args.key, depths.key_depth, 27, False, False, False)
    if key is not None:
        return VigenereArgs(key=key, alphabet=state.args.alphabet)
    alphabet = fuzz_next_string_ruled(
        state.args.alphabet, depths.alphabet_depth, 27, False, False, False
    )
    if alphabet is None:
        return None
    return VigenereArgs(key="A", alphabet=alphabet)


def _encrypt_one(text: str, key: str, forward: bool, alphabet: Sequence[str]) -> str:
    custom_alphabet = merge_custom_alphabet(alphabet)
    result = []
    key_index = 0
    for c in text:
        if not key:
            raise ValueError("vigenere key is empty")
        key_letter = key[key_index % len(key)]
        position = char_position(c, custom_alphabet)
        if position is None:
            result.append(c)
            continue
        key_position = char_position(key_letter, custom_alphabet)
        if key_position is None:
            raise ValueError(f"key letter {key_letter!r} is not in the alphabet")
        key_index += 1
        shifted = position + key_position if forward else position - key_position
        result.append(custom_alphabet[shifted % 26])
    return "".join(result)


def encrypt_from_key(
    strings: Iterable[str], key: str, forward: bool, alphabet: Sequence[str]
) -> list[str]:
    """Shift each letter by the matching key letter, forwards or backwards."""
    return [_encrypt_one(s, key, forward, alphabet) for s in strings]


def encrypt(strings: Iterable[str], args: VigenereArgs) -> list[str]:
    """Encrypt with ``args.key`` over the alphabet keyed by ``args.alphabet``."""
    return encrypt_from_key(strings, args.key, True, list(args.alphabet))


def decrypt(strings: Iterable[str], args: VigenereArgs) -> list[str]:
    """Decrypt with ``args.key`` over the alphabet keyed by ``args.alphabet``."""
    return encrypt_from_key(strings, args.key, False, list(args.alphabet))