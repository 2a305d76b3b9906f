"""Data types shared by the cryptors, the parser and the brute force engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from unkr.cryptors.rotors import EnigmaArgs


class CryptorKind(Enum):
    VIGENERE = "Vigenere"
    CUT = "Cut"
    CAESAR = "Caesar"
    TRANSPOSE = "Transpose"
    ATBASH = "AtBash"
    REVERSE = "Reverse"
    SWAP = "Swap"
    JOIN = "Join"
    COLORS = "Colors"
    INDEXCRYPT = "IndexCrypt"
    PERMUTE = "Permute"
    ENIGMA = "Enigma"


class CryptorBase(Enum):
    VIGENERE = "Vigenere"
    CUT = "Cut"
    CAESAR = "Caesar"
    TRANSPOSE = "Transpose"
    ATBASH = "AtBash"
    REVERSE = "Reverse"
    SWAP = "Swap"
    JOIN = "Join"
    INDEXCRYPT = "IndexCrypt"
    PERMUTE = "Permute"
    ENIGMA = "Enigma"


class BruteForceKind(Enum):
    VIGENERE = "Vigenere"
    CUT = "Cut"
    CAESAR = "Caesar"
    TRANSPOSE = "Transpose"
    ATBASH = "AtBash"
    REVERSE = "Reverse"
    SWAP = "Swap"
    JOIN = "Join"
    PERMUTE = "Permute"
    ENIGMA = "Enigma"
    REUSE = "Reuse"


class FuzzerRule(Enum):
    UNIQUE_LETTERS = "UniqueLetters"
    EVEN_COUNT = "EvenCount"
    SORTED_LETTERS_BY_PAIR = "SortedLettersByPair"


@dataclass(frozen=True)
class VigenereArgs:
    key: str
    alphabet: str


@dataclass(frozen=True)
class BruteForceVigenereArgs:
    alphabet_depth: int
    key_depth: int


@dataclass(frozen=True)
class SwapArgs:
    order: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", tuple(self.order))


@dataclass(frozen=True)
class PermuteArgs:
    """Letter swaps, kept sorted by letter, with their reverse mapping."""

    permutations: dict[str, str] = field(default_factory=dict)
    reversed_permutations: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "permutations", _sorted_dict(self.permutations))
        object.__setattr__(
            self, "reversed_permutations", _sorted_dict(self.reversed_permutations)
        )

    def __hash__(self) -> int:
        return hash(
            (
                tuple(self.permutations.items()),
                tuple(self.reversed_permutations.items()),
            )
        )


def _sorted_dict(mapping: Mapping[str, str]) -> dict[str, str]:
    return dict(sorted(mapping.items()))


@dataclass(frozen=True)
class CLIPermuteArgs:
    permutations: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "permutations", tuple((a, b) for a, b in self.permutations)
        )


@dataclass(frozen=True)
class BruteForcePermuteArgs:
    max_permutations: int


@dataclass(frozen=True)
class StringArgs:
    letters: str


@dataclass(frozen=True)
class NumberArgs:
    number: int


@dataclass(frozen=True)
class VigenereBruteForceState:
    brute_force_args: BruteForceVigenereArgs
    args: VigenereArgs


@dataclass(frozen=True)
class PermuteBruteForceState:
    brute_force_args: BruteForcePermuteArgs
    args: PermuteArgs


_NONE = type(None)


def _check_args(owner: str, kind: Enum, args: object, expected: tuple[type, ...]) -> None:
    if not isinstance(args, expected):
        names = ", ".join("no arguments" if t is _NONE else t.__name__ for t in expected)
        raise TypeError(
            f"{owner} {kind.value} takes {names}, not {type(args).__name__}"
        )


_CRYPTOR_ARGS: dict[CryptorKind, tuple[type, ...]] = {
    CryptorKind.VIGENERE: (VigenereArgs,),
    CryptorKind.CUT: (NumberArgs,),
    CryptorKind.CAESAR: (NumberArgs,),
    CryptorKind.TRANSPOSE: (NumberArgs,),
    CryptorKind.ATBASH: (_NONE,),
    CryptorKind.REVERSE: (_NONE,),
    CryptorKind.SWAP: (SwapArgs,),
    CryptorKind.JOIN: (_NONE,),
    CryptorKind.COLORS: (StringArgs,),
    CryptorKind.INDEXCRYPT: (StringArgs,),
    CryptorKind.PERMUTE: (PermuteArgs, CLIPermuteArgs),
    CryptorKind.ENIGMA: (EnigmaArgs,),
}

_BRUTE_FORCE_ARGS: dict[BruteForceKind, tuple[type, ...]] = {
    BruteForceKind.VIGENERE: (BruteForceVigenereArgs,),
    BruteForceKind.PERMUTE: (BruteForcePermuteArgs,),
    BruteForceKind.REUSE: (CryptorBase,),
}

_STATE_ARGS: dict[BruteForceKind, tuple[type, ...]] = {
    BruteForceKind.VIGENERE: (VigenereBruteForceState,),
    BruteForceKind.CUT: (NumberArgs,),
    BruteForceKind.CAESAR: (NumberArgs,),
    BruteForceKind.TRANSPOSE: (NumberArgs,),
    BruteForceKind.ATBASH: (_NONE,),
    BruteForceKind.REVERSE: (_NONE,),
    BruteForceKind.SWAP: (SwapArgs,),
    BruteForceKind.JOIN: (_NONE,),
    BruteForceKind.PERMUTE: (PermuteBruteForceState,),
    BruteForceKind.ENIGMA: (EnigmaArgs,),
    BruteForceKind.REUSE: (CryptorBase,),
}


@dataclass(frozen=True)
class Cryptor:
    """A fully parameterised cipher step."""

    kind: CryptorKind
    args: object = None

    def __post_init__(self) -> None:
        _check_args("cryptor", self.kind, self.args, _CRYPTOR_ARGS[self.kind])


@dataclass(frozen=True)
class BruteForceCryptor:
    """A cipher step whose parameters are to be enumerated."""

    kind: BruteForceKind
    args: object = None

    def __post_init__(self) -> None:
        expected = _BRUTE_FORCE_ARGS.get(self.kind, (_NONE,))
        _check_args("brute force cryptor", self.kind, self.args, expected)


@dataclass(frozen=True)
class BruteForceState:
    """The current position of an enumeration over one cipher's parameters."""

    kind: BruteForceKind
    args: object = None

    def __post_init__(self) -> None:
        _check_args("brute force state", self.kind, self.args, _STATE_ARGS[self.kind])


@dataclass(frozen=True)
class CacheArgs:
    path: str
    md5_string: str
    md5_clues: str


@dataclass(frozen=True)
class HitLine:
    args: tuple[Cryptor, ...]
    result: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class DoneLine:
    combinations: str
    args: str | None = None


@dataclass(frozen=True)
class PartialLine:
    cryptor: Cryptor
    tail: tuple[BruteForceCryptor, ...] = ()

    def __init__(self, cryptor: Cryptor, tail: Iterable[BruteForceCryptor] = ()) -> None:
        object.__setattr__(self, "cryptor", cryptor)
        object.__setattr__(self, "tail", tuple(tail))