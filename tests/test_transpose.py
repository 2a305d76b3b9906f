from unkr.cryptors.transpose import decrypt, encrypt, init, next_args
from unkr.models import NumberArgs


def test_encrypt():
    assert encrypt(["ABCDEF"], NumberArgs(number=3)) == ["AD", "BE", "CF"]


def test_encrypt_uneven():
    assert encrypt(["ABCDEFGHIJKLMNO"], NumberArgs(number=4)) == [
        "AEIM",
        "BFJN",
        "CGKO",
        "DHL",
    ]


def test_encrypt_even():
    assert encrypt(["ABCDEFGHIJKLMNOP"], NumberArgs(number=4)) == [
        "AEIM",
        "BFJN",
        "CGKO",
        "DHLP",
    ]


def test_round_trip_joined():
    strs = ["ABCD", "EF", "GHIJ", "KLMNOP", "QRSTUVXYZ"]
    args = NumberArgs(number=4)
    assert "".join(decrypt(encrypt(strs, args), args)) == "".join(strs)


def test_decrypt_uneven():
    result = decrypt(["AEIM", "BFJN", "CGKO", "DHL"], NumberArgs(number=4))
    assert "".join(result) == "ABCDEFGHIJKLMNO"


def test_enumeration_bounded_by_length():
    strs = ["HELLO"]
    seen = []
    current = init()
    while current is not None:
        seen.append(current.number)
        current = next_args(strs, current)
    assert seen == [1, 2, 3, 4]