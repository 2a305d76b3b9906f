from unkr.cryptors.rotors import EnigmaArgs, Reflector, Rotor
from unkr.mapper import (
    combinations_string,
    cryptor_base_from_cryptor,
    cryptor_base_to_string,
    cryptor_to_cli,
    hit_to_string,
    partial_to_string,
    string_to_partial,
    to_done,
    to_partial,
)
from unkr.models import (
    BruteForceCryptor,
    BruteForceKind,
    BruteForcePermuteArgs,
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
    StringArgs,
)


def _enigma():
    return Cryptor(
        CryptorKind.ENIGMA,
        EnigmaArgs(
            reflector=Reflector.B,
            l_rotor=(Rotor.I, 1),
            m_rotor=(Rotor.II, 6),
            r_rotor=(Rotor.III, 24),
        ),
    )


def _tail():
    return [
        BruteForceCryptor(BruteForceKind.CUT),
        BruteForceCryptor(
            BruteForceKind.VIGENERE, BruteForceVigenereArgs(alphabet_depth=3, key_depth=4)
        ),
        BruteForceCryptor(BruteForceKind.PERMUTE, BruteForcePermuteArgs(max_permutations=3)),
        BruteForceCryptor(BruteForceKind.REUSE, CryptorBase.PERMUTE),
    ]


def test_to_done():
    combination = [
        BruteForceCryptor(
            BruteForceKind.VIGENERE, BruteForceVigenereArgs(alphabet_depth=4, key_depth=7)
        ),
        BruteForceCryptor(BruteForceKind.TRANSPOSE),
        BruteForceCryptor(BruteForceKind.CAESAR),
        BruteForceCryptor(BruteForceKind.REUSE, CryptorBase.PERMUTE),
    ]
    assert to_done(combination) == DoneLine(
        combinations="Vigenere Transpose Caesar Reuse",
        args="Vigenere:4:7 Reuse:Permute",
    )


def test_to_done_no_args():
    combination = [
        BruteForceCryptor(BruteForceKind.TRANSPOSE),
        BruteForceCryptor(BruteForceKind.CAESAR),
    ]
    assert to_done(combination) == DoneLine(combinations="Transpose Caesar", args=None)


def test_combinations_string_empty():
    assert combinations_string([]) == ("", None)


def test_to_partial_to_string():
    assert (
        partial_to_string(to_partial(_enigma(), _tail()))
        == "Enigma:B::I:1:II:6:III:24;Cut;Vigenere:3:4;Permute:3;Reuse:Permute"
    )


def test_string_to_partial():
    assert string_to_partial("Permute:A:B;Reverse;Enigma;Enigma;Reuse:Permute") == [
        PartialLine(
            Cryptor(CryptorKind.PERMUTE, CLIPermuteArgs(permutations=(("A", "B"),))),
            [
                BruteForceCryptor(BruteForceKind.REVERSE),
                BruteForceCryptor(BruteForceKind.ENIGMA),
                BruteForceCryptor(BruteForceKind.ENIGMA),
                BruteForceCryptor(BruteForceKind.REUSE, CryptorBase.PERMUTE),
            ],
        )
    ]


def test_partial_round_trip():
    partial = to_partial(_enigma(), _tail())
    assert string_to_partial(partial_to_string(partial)) == [partial]


def test_string_to_partial_blank():
    assert string_to_partial("") == []


def test_to_partial_converts_permutations():
    cryptor = Cryptor(
        CryptorKind.PERMUTE,
        PermuteArgs(permutations={"B": "A", "A": "C"}, reversed_permutations={}),
    )
    partial = to_partial(cryptor, [])
    assert partial.cryptor.args == CLIPermuteArgs(permutations=(("A", "C"), ("B", "A")))
    assert partial.tail == ()


def test_cryptor_to_cli_keeps_other_cryptors():
    cryptor = Cryptor(CryptorKind.CUT, NumberArgs(number=4))
    assert cryptor_to_cli(cryptor) == cryptor


def test_cryptor_base_from_cryptor():
    assert cryptor_base_from_cryptor(_enigma()) == CryptorBase.ENIGMA
    colors = Cryptor(CryptorKind.COLORS, StringArgs(letters="A"))
    assert cryptor_base_from_cryptor(colors) == CryptorBase.INDEXCRYPT
    assert cryptor_base_from_cryptor(Cryptor(CryptorKind.JOIN)) == CryptorBase.JOIN


def test_cryptor_base_to_string():
    assert cryptor_base_to_string(CryptorBase.TRANSPOSE) == "Transpose"
    assert cryptor_base_to_string(CryptorBase.ENIGMA) == "Enigma"


def test_hit_to_string():
    hit = HitLine(
        args=[Cryptor(CryptorKind.JOIN), Cryptor(CryptorKind.CUT, NumberArgs(number=2))],
        result="HELLO was found in XHELLOX",
    )
    assert hit_to_string(hit) == "HELLO was found in XHELLOX;[Join, Cut:2]"