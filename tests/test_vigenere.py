import pytest

from unkr.cryptors.vigenere import decrypt, encrypt, encrypt_from_key, init, next_args
from unkr.models import BruteForceVigenereArgs, VigenereArgs, VigenereBruteForceState


def test_encrypt_plain_alphabet():
    assert encrypt(
        ["ATTACKATDAWN", "ATTACKATDAWN"], VigenereArgs(key="LEMON", alphabet="")
    ) == ["LXFOPVEFRNHR", "LXFOPVEFRNHR"]


def test_encrypt_keyed_alphabet():
    assert encrypt(["HELLOTEST"], VigenereArgs(key="KEY", alphabet="KEY")) == [
        "HYNLPVETV"
    ]


def test_decrypt_keyed_alphabet():
    assert decrypt(["HYNLPVETV"], VigenereArgs(key="KEY", alphabet="KEY")) == [
        "HELLOTEST"
    ]


def test_round_trip():
    strs = ["ABCD", "EF", "GHIJ", "KLMNOP", "QRSTUVXYZ"]
    args = VigenereArgs(key="HELLO", alphabet="FIRST")
    assert decrypt(encrypt(strs, args), args) == strs


def test_encrypt_from_key_matches_encrypt():
    assert encrypt_from_key(["ATTACKATDAWN"], "LEMON", True, []) == ["LXFOPVEFRNHR"]


def test_non_letters_are_kept():
    args = VigenereArgs(key="LEMON", alphabet="")
    assert decrypt(encrypt(["AT TACK?"], args), args) == ["AT TACK?"]


def test_empty_key_raises():
    with pytest.raises(ValueError):
        encrypt(["ABC"], init())


def test_enumeration_ends():
    state = VigenereBruteForceState(
        brute_force_args=BruteForceVigenereArgs(alphabet_depth=1, key_depth=1),
        args=VigenereArgs(key="Y", alphabet="Z"),
    )
    first = next_args(state)
    assert first == VigenereArgs(key="Z", alphabet="Z")
    second = next_args(
        VigenereBruteForceState(brute_force_args=state.brute_force_args, args=first)
    )
    assert second is None