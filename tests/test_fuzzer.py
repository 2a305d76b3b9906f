import string

from unkr.fuzzer import (
    fuzz_from,
    fuzz_next,
    fuzz_next_bases,
    fuzz_next_r,
    fuzz_next_string_bases,
    fuzz_next_string_ruled,
    iter_fuzz,
    pair_length,
    sorted_letters_by_pair,
    unique_letters,
)


def test_fuzz_next_string_ruled():
    assert fuzz_next_string_ruled("KRYPTOR", 7, 27, False, False, False) == "KRYPTOS"
    assert fuzz_next_string_ruled("ZZZ", 3, 27, False, False, False) is None
    assert fuzz_next_string_ruled("ZZ", 3, 27, False, False, False) == "AAA"


def test_ordered():
    assert sorted_letters_by_pair([1, 2, 4, 5]) is True
    assert sorted_letters_by_pair([1, 2, 5, 4]) is False
    assert sorted_letters_by_pair([2, 1, 5, 4]) is False
    assert sorted_letters_by_pair([2, 1, 4, 5, 6, 3]) is False


def test_stop_at_end():
    assert fuzz_next_bases([1, 3, 26, 3, 26, 3, 26], [2, 4, 27, 4, 27, 4, 27]) is None


def test_fuzz_next_bases_carries():
    assert fuzz_next_bases([2, 3, 26], [27, 4, 27]) == [3, 1, 1]


def test_fuzz_next_string_bases():
    assert fuzz_next_string_bases("AADBCCM", [3, 9, 27, 9, 27, 9, 27]) == "AADBCCN"


def test_fuzz_next():
    assert fuzz_next([1, 0], 2, 4) == [1, 1]
    assert fuzz_next([3, 3], 2, 4) is None


def test_fuzz_next_r_with_all_constraints():
    assert fuzz_next_r([9, 10], 2, 27, True, True, True) == [9, 11]


def test_unique_letters():
    assert unique_letters([1, 2, 3]) is True
    assert unique_letters([1, 2, 1]) is False


def test_pair_length():
    assert pair_length([1, 2]) is True
    assert pair_length([1, 2, 3]) is False


def test_iter_fuzz_single_letters():
    assert list(iter_fuzz("", 1, 27, [])) == list(string.ascii_uppercase)


def test_iter_fuzz_even_count():
    assert list(iter_fuzz("", 2, 4, ["EvenCount"])) == [
        "AA", "AB", "AC", "BA", "BB", "BC", "CA", "CB", "CC",
    ]


def test_iter_fuzz_unique_letters():
    assert list(iter_fuzz("", 2, 4, ["UniqueLetters"])) == [
        "A", "B", "C", "AB", "AC", "BA", "BC", "CA", "CB",
    ]


def test_fuzz_from_prints(capsys):
    fuzz_from("", 1, 4, [])
    assert capsys.readouterr().out == "A\nB\nC\n"