"""Reading and writing cipher steps as colon-separated text."""

from __future__ import annotations

import csv
import io
from collections import deque
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

from unkr.cryptors.rotors import EnigmaArgs, Reflector, Rotor
from unkr.models import (
    BruteForceCryptor,
    BruteForceKind,
    BruteForcePermuteArgs,
    BruteForceVigenereArgs,
    CLIPermuteArgs,
    Cryptor,
    CryptorBase,
    CryptorKind,
    NumberArgs,
    PermuteArgs,
    StringArgs,
    SwapArgs,
    VigenereArgs,
)

E = TypeVar("E", bound=Enum)

_U8_MAX = 255


class ParseError(ValueError):
    """Raised when a cipher step cannot be read."""


def _read_record(text: str, delimiter: str) -> list[str] | None:
    try:
        for row in csv.reader(io.StringIO(text), delimiter=delimiter):
            if row:
                return row
    except csv.Error as error:
        raise ParseError(f"cannot read {text!r}: {error}") from error
    return None


def _write_record(fields: Sequence[str], delimiter: str) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, delimiter=delimiter, lineterminator="\n").writerow(fields)
    return buffer.getvalue().rstrip("\n")


def _split_type(text: str) -> tuple[str, str]:
    name, _, rest = text.partition(":")
    return name, rest


class _Fields:
    """The colon-separated arguments of one step, consumed from the left."""

    def __init__(self, text: str, what: str) -> None:
        row = _read_record(text, ":")
        if row is None:
            raise ParseError(f"missing arguments for {what}")
        self._items = deque(row)
        self._what = what

    def take(self) -> str:
        if not self._items:
            raise ParseError(f"not enough arguments for {self._what}")
        return self._items.popleft()

    def rest(self) -> list[str]:
        items = list(self._items)
        self._items.clear()
        return items

    def finish(self) -> None:
        if self._items:
            extra = ":".join(self._items)
            raise ParseError(f"unexpected arguments for {self._what}: {extra}")


def _number(text: str, limit: int | None = None) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ParseError(f"expected a number, got {text!r}")
    value = int(text)
    if limit is not None and value > limit:
        raise ParseError(f"number {value} is larger than {limit}")
    return value


def _char(text: str) -> str:
    if len(text) != 1:
        raise ParseError(f"expected a single character, got {text!r}")
    return text


def _member(enum_type: type[E], text: str) -> E:
    try:
        return enum_type(text)
    except ValueError:
        raise ParseError(f"unknown {enum_type.__name__}: {text!r}") from None


def _with_fields(what: str, reader: Callable[[_Fields], object]) -> Callable[[str], object]:
    def read(rest: str) -> object:
        fields = _Fields(rest, what)
        value = reader(fields)
        fields.finish()
        return value

    return read


def _vigenere_args(fields: _Fields) -> VigenereArgs:
    return VigenereArgs(key=fields.take(), alphabet=fields.take())


def _number_args(fields: _Fields) -> NumberArgs:
    return NumberArgs(number=_number(fields.take()))


def _swap_args(fields: _Fields) -> SwapArgs:
    return SwapArgs(order=tuple(_number(item, _U8_MAX) for item in fields.rest()))


def _string_args(fields: _Fields) -> StringArgs:
    return StringArgs(letters=fields.take())


def _permute_args(fields: _Fields) -> CLIPermuteArgs:
    letters = [_char(item) for item in fields.rest()]
    if len(letters) % 2:
        raise ParseError("permutations must come in pairs")
    return CLIPermuteArgs(permutations=tuple(zip(letters[::2], letters[1::2])))


def _rotor_setting(fields: _Fields, first: str | None = None) -> tuple[Rotor, int]:
    rotor = _member(Rotor, fields.take() if first is None else first)
    return rotor, _number(fields.take(), _U8_MAX)


def _enigma_args(fields: _Fields) -> EnigmaArgs:
    reflector = _member(Reflector, fields.take())
    first = fields.take()
    l0_rotor = None if first == "" else _rotor_setting(fields, first)
    return EnigmaArgs(
        reflector=reflector,
        l0_rotor=l0_rotor,
        l_rotor=_rotor_setting(fields),
        m_rotor=_rotor_setting(fields),
        r_rotor=_rotor_setting(fields),
    )


def _bf_vigenere_args(fields: _Fields) -> BruteForceVigenereArgs:
    return BruteForceVigenereArgs(
        alphabet_depth=_number(fields.take()), key_depth=_number(fields.take())
    )


def _bf_permute_args(fields: _Fields) -> BruteForcePermuteArgs:
    return BruteForcePermuteArgs(max_permutations=_number(fields.take()))


_CLI_READERS: dict[str, tuple[CryptorKind, Callable[[str], object] | None]] = {
    "vigenere": (CryptorKind.VIGENERE, _with_fields("Vigenere", _vigenere_args)),
    "cut": (CryptorKind.CUT, _with_fields("Cut", _number_args)),
    "transpose": (CryptorKind.TRANSPOSE, _with_fields("Transpose", _number_args)),
    "reverse": (CryptorKind.REVERSE, None),
    "atbash": (CryptorKind.ATBASH, None),
    "swap": (CryptorKind.SWAP, _with_fields("Swap", _swap_args)),
    "join": (CryptorKind.JOIN, None),
    "colors": (CryptorKind.COLORS, _with_fields("Colors", _string_args)),
    "indexcrypt": (CryptorKind.INDEXCRYPT, _with_fields("IndexCrypt", _string_args)),
    "permute": (CryptorKind.PERMUTE, _with_fields("Permute", _permute_args)),
    "enigma": (CryptorKind.ENIGMA, _with_fields("Enigma", _enigma_args)),
}

_CRYPTOR_BASES: dict[str, CryptorBase] = {
    "vigenere": CryptorBase.VIGENERE,
    "cut": CryptorBase.CUT,
    "transpose": CryptorBase.TRANSPOSE,
    "reverse": CryptorBase.REVERSE,
    "atbash": CryptorBase.ATBASH,
    "swap": CryptorBase.SWAP,
    "join": CryptorBase.JOIN,
    "indexcrypt": CryptorBase.INDEXCRYPT,
    "permute": CryptorBase.PERMUTE,
    "enigma": CryptorBase.ENIGMA,
}


def read_cryptor_base(text: str) -> CryptorBase:
    """Read the name of a cipher, ignoring case."""
    try:
        return _CRYPTOR_BASES[text.lower()]
    except KeyError:
        raise ParseError(f"Cannot parse: {text}") from None


_BRUTE_FORCE_READERS: dict[str, tuple[BruteForceKind, Callable[[str], object] | None]] = {
    "vigenere": (BruteForceKind.VIGENERE, _with_fields("Vigenere", _bf_vigenere_args)),
    "cut": (BruteForceKind.CUT, None),
    "transpose": (BruteForceKind.TRANSPOSE, None),
    "reverse": (BruteForceKind.REVERSE, None),
    "atbash": (BruteForceKind.ATBASH, None),
    "swap": (BruteForceKind.SWAP, None),
    "join": (BruteForceKind.JOIN, None),
    "permute": (BruteForceKind.PERMUTE, _with_fields("Permute", _bf_permute_args)),
    "enigma": (BruteForceKind.ENIGMA, None),
    "reuse": (BruteForceKind.REUSE, read_cryptor_base),
}


def read_parameters(text: str) -> Cryptor:
    """Read a step such as ``vigenere:KEY:ALPHABET`` or ``reverse``."""
    name, rest = _split_type(text)
    try:
        kind, reader = _CLI_READERS[name.lower()]
    except KeyError:
        raise ParseError(f"Cannot parse: {text}") from None
    if reader is None:
        return Cryptor(kind)
    return Cryptor(kind, reader(rest))


def read_bruteforce_parameters(text: str) -> BruteForceCryptor:
    """Read a brute force step such as ``permute:2`` or ``reuse:enigma``."""
    name, rest = _split_type(text)
    try:
        kind, reader = _BRUTE_FORCE_READERS[name.lower()]
    except KeyError:
        raise ParseError(f"Cannot parse: {name}") from None
    if reader is None:
        return BruteForceCryptor(kind)
    return BruteForceCryptor(kind, reader(rest))


def _rotor_fields(setting: tuple[Rotor, int]) -> list[str]:
    rotor, position = setting
    return [rotor.value, str(position)]


def _enigma_fields(args: EnigmaArgs) -> list[str]:
    fields = [args.reflector.value]
    fields.extend([""] if args.l0_rotor is None else _rotor_fields(args.l0_rotor))
    for setting in (args.l_rotor, args.m_rotor, args.r_rotor):
        fields.extend(_rotor_fields(setting))
    return fields


def _cryptor_fields(args: object) -> list[str]:
    if args is None:
        return []
    if isinstance(args, VigenereArgs):
        return [args.key, args.alphabet]
    if isinstance(args, NumberArgs):
        return [str(args.number)]
    if isinstance(args, SwapArgs):
        return [str(index) for index in args.order]
    if isinstance(args, StringArgs):
        return [args.letters]
    if isinstance(args, CLIPermuteArgs):
        return [letter for pair in args.permutations for letter in pair]
    if isinstance(args, PermuteArgs):
        return [letter for pair in args.permutations.items() for letter in pair]
    if isinstance(args, EnigmaArgs):
        return _enigma_fields(args)
    raise TypeError(f"cannot format arguments of type {type(args).__name__}")


def _bruteforce_fields(args: object) -> list[str]:
    if args is None:
        return []
    if isinstance(args, BruteForceVigenereArgs):
        return [str(args.alphabet_depth), str(args.key_depth)]
    if isinstance(args, BruteForcePermuteArgs):
        return [str(args.max_permutations)]
    if isinstance(args, CryptorBase):
        return [args.value]
    raise TypeError(f"cannot format arguments of type {type(args).__name__}")


def format_enigma_args(args: EnigmaArgs) -> str:
    """Write enigma settings as ``B::I:0:II:0:III:0``; the empty field is a missing fourth rotor."""
    return _write_record(_enigma_fields(args), ":")


def format_cryptor(cryptor: Cryptor) -> str:
    """Write a step as its name followed by its arguments, colon separated."""
    return _write_record([cryptor.kind.value, *_cryptor_fields(cryptor.args)], ":")


def format_bruteforce_cryptor(cryptor: BruteForceCryptor) -> str:
    """Write a brute force step as its name followed by its arguments."""
    return _write_record([cryptor.kind.value, *_bruteforce_fields(cryptor.args)], ":")