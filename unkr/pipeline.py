"""Running a list of textual cipher steps over some strings."""

from __future__ import annotations

from collections.abc import Iterable

from unkr.colorize import colorize_letters
from unkr.cryptors import caesar, enigma, indexcrypt, permute, swap, transpose, vigenere
from unkr.cryptors.simple import atbash, cut, join, reverse
from unkr.models import CLIPermuteArgs, Cryptor, CryptorKind
from unkr.parser import read_parameters


def _permute(strings: list[str], args: object) -> list[str]:
    if isinstance(args, CLIPermuteArgs):
        return permute.cli_decrypt(strings, args)
    return permute.decrypt(strings, args)


def _decrypt_step(strings: list[str], cryptor: Cryptor) -> list[str]:
    args = cryptor.args
    match cryptor.kind:
        case CryptorKind.VIGENERE:
            return vigenere.decrypt(strings, args)
        case CryptorKind.CUT:
            return join(strings)
        case CryptorKind.CAESAR:
            return caesar.decrypt(strings, args)
        case CryptorKind.TRANSPOSE:
            return transpose.decrypt(strings, args)
        case CryptorKind.ATBASH:
            return atbash(strings)
        case CryptorKind.REVERSE:
            return reverse(strings)
        case CryptorKind.SWAP:
            return swap.decrypt(strings, args)
        case CryptorKind.JOIN:
            return join(strings)
        case CryptorKind.COLORS:
            return colorize_letters(strings, args)
        case CryptorKind.INDEXCRYPT:
            return indexcrypt.decrypt(strings, args)
        case CryptorKind.PERMUTE:
            return _permute(strings, args)
        case CryptorKind.ENIGMA:
            return enigma.decrypt(strings, args)
    raise ValueError(f"unsupported cryptor {cryptor.kind}")


def _encrypt_step(strings: list[str], cryptor: Cryptor) -> list[str]:
    args = cryptor.args
    match cryptor.kind:
        case CryptorKind.VIGENERE:
            return vigenere.encrypt(strings, args)
        case CryptorKind.CUT:
            return cut(strings, args)
        case CryptorKind.CAESAR:
            return caesar.encrypt(strings, args)
        case CryptorKind.TRANSPOSE:
            return transpose.encrypt(strings, args)
        case CryptorKind.ATBASH:
            return atbash(strings)
        case CryptorKind.REVERSE:
            return reverse(strings)
        case CryptorKind.SWAP:
            return swap.encrypt(strings, args)
        case CryptorKind.JOIN:
            return join(strings)
        case CryptorKind.COLORS:
            return colorize_letters(strings, args)
        case CryptorKind.INDEXCRYPT:
            return indexcrypt.encrypt(strings, args)
        case CryptorKind.PERMUTE:
            return _permute(strings, args)
        case CryptorKind.ENIGMA:
            return enigma.encrypt(strings, args)
    raise ValueError(f"unsupported cryptor {cryptor.kind}")


def decrypt(strings: Iterable[str], steps: Iterable[str]) -> list[str]:
    """Apply each step's decryption in order and drop empty strings."""
    result = list(strings)
    for step in steps:
        result = _decrypt_step(result, read_parameters(step))
    return [s for s in result if s]


def encrypt(strings: Iterable[str], steps: Iterable[str]) -> list[str]:
    """Apply each step's encryption in order and drop empty strings."""
    result = list(strings)
    for step in steps:
        result = _encrypt_step(result, read_parameters(step))
    return [s for s in result if s]


def print_decrypt(strings: Iterable[str], steps: Iterable[str]) -> None:
    """Print the result of :func:`decrypt`, one string per line."""
    for s in decrypt(strings, steps):
        print(s)


def print_encrypt(strings: Iterable[str], steps: Iterable[str]) -> None:
    """Print the result of :func:`encrypt`, one string per line."""
    for s in encrypt(strings, steps):
        print(s)