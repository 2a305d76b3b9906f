"""Stepping through the parameters of each cipher during a brute force."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from unkr.colorize import colorize_letters
from unkr.cryptors import caesar, enigma, indexcrypt, permute, swap, transpose, vigenere
from unkr.cryptors.simple import atbash, cut, join, reverse
from unkr.mapper import cryptor_base_from_cryptor
from unkr.models import (
    BruteForceCryptor,
    BruteForceKind,
    BruteForceState,
    CLIPermuteArgs,
    Cryptor,
    CryptorKind,
    PermuteBruteForceState,
    VigenereBruteForceState,
)

Emit = Callable[[list[str], Sequence[str], list[Cryptor]], None]


def start_state(cryptor: BruteForceCryptor) -> BruteForceState:
    """Return the first parameters to try for ``cryptor``."""
    kind = cryptor.kind
    match kind:
        case BruteForceKind.VIGENERE:
            args = VigenereBruteForceState(brute_force_args=cryptor.args, args=vigenere.init())
        case BruteForceKind.CUT | BruteForceKind.TRANSPOSE:
            args = transpose.init()
        case BruteForceKind.CAESAR:
            args = caesar.init()
        case BruteForceKind.SWAP:
            args = swap.init()
        case BruteForceKind.PERMUTE:
            args = PermuteBruteForceState(brute_force_args=cryptor.args, args=permute.init())
        case BruteForceKind.ENIGMA:
            args = enigma.init()
        case BruteForceKind.REUSE:
            args = cryptor.args
        case _:
            args = None
    return BruteForceState(kind, args)


def increase_state(state: BruteForceState, strings: Sequence[str]) -> BruteForceState | None:
    """Return the parameters after ``state``, or None when they are exhausted."""
    kind, args = state.kind, state.args
    match kind:
        case BruteForceKind.VIGENERE:
            following = vigenere.next_args(args)
            if following is None:
                return None
            return BruteForceState(
                kind,
                VigenereBruteForceState(brute_force_args=args.brute_force_args, args=following),
            )
        case BruteForceKind.CUT | BruteForceKind.TRANSPOSE:
            following = transpose.next_args(strings, args)
        case BruteForceKind.CAESAR:
            following = caesar.next_args(args)
        case BruteForceKind.SWAP:
            following = swap.next_args(args, len(strings[0]))
        case BruteForceKind.PERMUTE:
            following = permute.next_args(args)
            if following is None:
                return None
            return BruteForceState(
                kind,
                PermuteBruteForceState(brute_force_args=args.brute_force_args, args=following),
            )
        case BruteForceKind.ENIGMA:
            following = enigma.next_args(args)
        case _:
            return None
    return None if following is None else BruteForceState(kind, following)


def get_cryptor(state: BruteForceState, previous_cryptors: Sequence[Cryptor]) -> Cryptor:
    """Return the cipher step ``state`` stands for.

    A reuse state stands for the first previous step of the named cipher.
    """
    kind, args = state.kind, state.args
    if kind is BruteForceKind.REUSE:
        for cryptor in previous_cryptors:
            if cryptor_base_from_cryptor(cryptor) == args:
                return cryptor
        raise ValueError(f"no previous {args.value} step to reuse")
    if isinstance(args, (VigenereBruteForceState, PermuteBruteForceState)):
        args = args.args
    return Cryptor(CryptorKind(kind.value), args)


def _decrypt_step(cryptor: Cryptor, strings: list[str]) -> list[str]:
    args = cryptor.args
    match cryptor.kind:
        case CryptorKind.VIGENERE:
            return vigenere.decrypt(strings, args)
        case CryptorKind.CUT:
            return cut(strings, args)
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
            if isinstance(args, CLIPermuteArgs):
                return permute.cli_decrypt(strings, args)
            return permute.decrypt(strings, args)
        case CryptorKind.ENIGMA:
            return enigma.decrypt(strings, args)
    raise ValueError(f"unsupported cryptor {cryptor.kind}")


def apply_decrypt(
    state: BruteForceState, strings: Sequence[str], previous_cryptors: Sequence[Cryptor]
) -> list[str]:
    """Decrypt ``strings`` with the step ``state`` stands for."""
    return _decrypt_step(get_cryptor(state, previous_cryptors), list(strings))


def loop_decrypt(
    acc: Sequence[Cryptor],
    to_use: Sequence[BruteForceCryptor],
    strings: Sequence[str],
    clues: Sequence[str],
    emit: Emit,
    intermediate_steps: bool,
) -> None:
    """Try every parameter of the first step in ``to_use``, recursing on the rest.

    Results are passed to ``emit`` as (strings, clues, steps) for the last
    step, or for every step when ``intermediate_steps`` is set.
    """
    if not to_use:
        return
    current, *rest = to_use
    state: BruteForceState | None = start_state(current)
    current_acc = [*acc, get_cryptor(state, acc)]
    last = not rest
    while state is not None:
        decrypted = apply_decrypt(state, strings, current_acc)
        if decrypted:
            if intermediate_steps or last:
                emit(decrypted, clues, list(current_acc))
            loop_decrypt(acc, rest, strings, clues, emit, intermediate_steps)
        state = increase_state(state, strings)