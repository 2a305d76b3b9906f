import pytest

from unkr.brute_force import (
    brute_force_decrypt,
    brute_force_unique_combination,
    skip_combination,
)
from unkr.models import BruteForceCryptor, BruteForceKind, BruteForcePermuteArgs


def permute(n):
    return BruteForceCryptor(
        BruteForceKind.PERMUTE, BruteForcePermuteArgs(max_permutations=n)
    )


ATBASH = BruteForceCryptor(BruteForceKind.ATBASH)
REVERSE = BruteForceCryptor(BruteForceKind.REVERSE)
JOIN = BruteForceCryptor(BruteForceKind.JOIN)
CUT = BruteForceCryptor(BruteForceKind.CUT)
SWAP = BruteForceCryptor(BruteForceKind.SWAP)
CAESAR = BruteForceCryptor(BruteForceKind.CAESAR)


def test_skip_combination_works():
    assert skip_combination([permute(4), ATBASH]) is False


@pytest.mark.parametrize(
    "combination, expected",
    [
        ([JOIN, REVERSE], True),
        ([REVERSE, CUT], True),
        ([REVERSE, JOIN], True),
        ([ATBASH, ATBASH], True),
        ([REVERSE, REVERSE], True),
        ([permute(2), permute(2)], True),
        ([permute(2), permute(3)], False),
        ([REVERSE, JOIN, SWAP, REVERSE], True),
        ([CUT, JOIN, REVERSE], True),
        ([CAESAR, CAESAR], False),
        ([REVERSE, ATBASH, REVERSE], False),
        ([], False),
    ],
)
def test_skip_combination_rules(combination, expected):
    assert skip_combination(combination) is expected


def test_brute_force_decrypt_finds_reverse(tmp_path):
    results = brute_force_decrypt("TSETOLLEH", ["HELLO"], 2, ["reverse"], 1, str(tmp_path))
    assert results == {"[Reverse]"}


def test_brute_force_unique_combination(tmp_path):
    results = brute_force_unique_combination(
        "GHVGLOOVS", ["HELLO"], ["atbash", "reverse"], 2, str(tmp_path), False
    )
    assert results == {"[AtBash, Reverse]"}


def test_brute_force_decrypt_without_decryptors(tmp_path):
    with pytest.raises(ValueError):
        brute_force_decrypt("ABC", ["A"], 1, [], 1, str(tmp_path))