import pytest

from unkr.cryptors.rotors import EnigmaArgs, Reflector, Rotor
from unkr.models import (
    BruteForceCryptor,
    BruteForceKind,
    BruteForcePermuteArgs,
    BruteForceState,
    BruteForceVigenereArgs,
    CLIPermuteArgs,
    Cryptor,
    CryptorBase,
    CryptorKind,
    DoneLine,
    HitLine,
    NumberArgs,
    PartialLine,
    PermuteArgs,
    PermuteBruteForceState,
    SwapArgs,
    VigenereArgs,
)


def _enigma():
    return EnigmaArgs(
        reflector=Reflector.B,
        l_rotor=(Rotor.I, 0),
        m_rotor=(Rotor.II, 0),
        r_rotor=(Rotor.III, 0),
    )


def test_cryptor_rejects_wrong_argument_type():
    with pytest.raises(TypeError):
        Cryptor(CryptorKind.VIGENERE, NumberArgs(3))


def test_cryptor_rejects_missing_arguments():
    with pytest.raises(TypeError):
        Cryptor(CryptorKind.ENIGMA)


def test_cryptor_rejects_arguments_for_plain_kind():
    with pytest.raises(TypeError):
        Cryptor(CryptorKind.JOIN, NumberArgs(1))


def test_permute_cryptor_accepts_both_argument_forms():
    cli = Cryptor(CryptorKind.PERMUTE, CLIPermuteArgs([("A", "B")]))
    full = Cryptor(CryptorKind.PERMUTE, PermuteArgs({"A": "B"}, {"B": "A"}))
    assert cli.args.permutations == (("A", "B"),)
    assert full.args.reversed_permutations == {"B": "A"}


def test_permute_args_equal_and_hash_regardless_of_insertion_order():
    first = PermuteArgs({"C": "D", "A": "B"}, {"D": "C", "B": "A"})
    second = PermuteArgs({"A": "B", "C": "D"}, {"B": "A", "D": "C"})
    assert first == second
    assert hash(first) == hash(second)
    assert list(first.permutations) == sorted(first.permutations)


def test_permute_args_copies_input():
    source = {"A": "B"}
    args = PermuteArgs(source, {"B": "A"})
    source["C"] = "D"
    assert "C" not in args.permutations


def test_swap_args_normalises_order():
    assert SwapArgs([1, 2]) == SwapArgs((1, 2))
    assert hash(SwapArgs([1, 2])) == hash(SwapArgs((1, 2)))


def test_brute_force_cryptor_reuse_takes_base():
    reuse = BruteForceCryptor(BruteForceKind.REUSE, CryptorBase.PERMUTE)
    assert reuse.args is CryptorBase.PERMUTE
    with pytest.raises(TypeError):
        BruteForceCryptor(BruteForceKind.REUSE, "Permute")


def test_brute_force_cryptor_plain_kind_takes_nothing():
    assert BruteForceCryptor(BruteForceKind.JOIN) == BruteForceCryptor(
        BruteForceKind.JOIN, None
    )
    with pytest.raises(TypeError):
        BruteForceCryptor(BruteForceKind.CAESAR, NumberArgs(1))


def test_brute_force_state_checks_arguments():
    state = BruteForceState(
        BruteForceKind.PERMUTE,
        PermuteBruteForceState(BruteForcePermuteArgs(2), PermuteArgs()),
    )
    assert state.args.brute_force_args.max_permutations == 2
    assert BruteForceState(BruteForceKind.ENIGMA, _enigma()).args == _enigma()
    with pytest.raises(TypeError):
        BruteForceState(BruteForceKind.VIGENERE, BruteForceVigenereArgs(1, 1))


def test_partial_lines_usable_in_sets():
    tail = [
        BruteForceCryptor(BruteForceKind.CUT),
        BruteForceCryptor(BruteForceKind.VIGENERE, BruteForceVigenereArgs(3, 4)),
    ]
    line = PartialLine(Cryptor(CryptorKind.ENIGMA, _enigma()), tail)
    same = PartialLine(Cryptor(CryptorKind.ENIGMA, _enigma()), tuple(tail))
    cache = {line}
    assert same in cache
    assert PartialLine(Cryptor(CryptorKind.ENIGMA, _enigma())) not in cache


def test_done_lines_compare_by_value():
    cache = {DoneLine("Vigenere Join Permute", "Vigenere:3:3")}
    assert DoneLine("Vigenere Join Permute", "Vigenere:3:3") in cache
    assert DoneLine("Vigenere Join", "Vigenere:3:3") not in cache


def test_hit_line_args_become_tuple():
    cryptor = Cryptor(CryptorKind.VIGENERE, VigenereArgs("KEY", "KEY"))
    hit = HitLine([cryptor], "found")
    assert hit.args == (cryptor,)
    assert hash(hit) == hash(HitLine((cryptor,), "found"))