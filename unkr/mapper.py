"""Conversions between cipher steps and their cache line forms."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence

from unkr.models import (
    BruteForceCryptor,
    BruteForcePermuteArgs,
    BruteForceVigenereArgs,
    CLIPermuteArgs,
    Cryptor,
    CryptorBase,
    CryptorKind,
    DoneLine,
    HitLine,
    PartialLine,
    PermuteArgs,
)
from unkr.parser import (
    ParseError,
    format_bruteforce_cryptor,
    format_cryptor,
    read_bruteforce_parameters,
    read_parameters,
)

_BASE_BY_KIND: dict[CryptorKind, CryptorBase] = {
    kind: CryptorBase(kind.value) for kind in CryptorKind if kind is not CryptorKind.COLORS
}
_BASE_BY_KIND[CryptorKind.COLORS] = CryptorBase.INDEXCRYPT


def cryptor_to_cli(cryptor: Cryptor) -> Cryptor:
    """Return ``cryptor`` with permutation maps turned into a list of pairs."""
    if isinstance(cryptor.args, PermuteArgs):
        pairs = tuple(cryptor.args.permutations.items())
        return Cryptor(cryptor.kind, CLIPermuteArgs(permutations=pairs))
    return cryptor


def cryptor_base_to_string(base: CryptorBase) -> str:
    """Return the name of a cipher."""
    return base.value


def cryptor_base_from_cryptor(cryptor: Cryptor) -> CryptorBase:
    """Return the cipher a step belongs to; colouring counts as IndexCrypt."""
    return _BASE_BY_KIND[cryptor.kind]


def hit_to_string(hit_line: HitLine) -> str:
    """Write a hit as the result, a semicolon, then the steps that produced it."""
    steps = ", ".join(format_cryptor(cryptor) for cryptor in hit_line.args)
    return f"{hit_line.result};[{steps}]"


def _describe(cryptor: BruteForceCryptor) -> tuple[str, str | None]:
    name = cryptor.kind.value
    args = cryptor.args
    if isinstance(args, BruteForceVigenereArgs):
        return name, f"{name}:{args.alphabet_depth}:{args.key_depth}"
    if isinstance(args, BruteForcePermuteArgs):
        return name, f"{name}:{args.max_permutations}"
    if isinstance(args, CryptorBase):
        return name, f"{name}:{cryptor_base_to_string(args)}"
    return name, None


def combinations_string(
    cryptors: Iterable[BruteForceCryptor],
) -> tuple[str, str | None]:
    """Return the step names and, when any step has some, their arguments."""
    described = [_describe(cryptor) for cryptor in cryptors]
    names = " ".join(name for name, _ in described)
    args = [arg for _, arg in described if arg is not None]
    return names, " ".join(args) if args else None


def to_done(combination: Iterable[BruteForceCryptor]) -> DoneLine:
    """Describe a finished combination of brute force steps."""
    combinations, args = combinations_string(combination)
    return DoneLine(combinations=combinations, args=args)


def to_partial(cryptor: Cryptor, tail: Iterable[BruteForceCryptor]) -> PartialLine:
    """Describe a first step whose remaining steps have all been tried."""
    return PartialLine(cryptor_to_cli(cryptor), tail)


def _write_record(fields: Sequence[str], delimiter: str) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, delimiter=delimiter, lineterminator="\n").writerow(fields)
    return buffer.getvalue()


def partial_to_string(partial_line: PartialLine) -> str:
    """Write a partial line as semicolon-separated steps."""
    fields = [
        format_cryptor(cryptor_to_cli(partial_line.cryptor)),
        *(format_bruteforce_cryptor(cryptor) for cryptor in partial_line.tail),
    ]
    return _write_record(fields, ";").strip()


def string_to_partial(line: str) -> list[PartialLine]:
    """Read the partial lines written by :func:`partial_to_string`; blank input gives none."""
    try:
        rows = [row for row in csv.reader(io.StringIO(line), delimiter=";") if row]
    except csv.Error as error:
        raise ParseError(f"cannot read {line!r}: {error}") from error
    return [
        PartialLine(
            read_parameters(row[0]),
            (read_bruteforce_parameters(field) for field in row[1:]),
        )
        for row in rows
    ]