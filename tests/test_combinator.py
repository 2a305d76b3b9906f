from unkr.combinator import combine_elements, print_combine_elements


def test_combine_three_by_three():
    expected = {
        (0,), (1,), (2,),
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2),
        (0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 1, 0), (0, 1, 1), (0, 1, 2),
        (0, 2, 0), (0, 2, 1), (0, 2, 2), (1, 0, 0), (1, 0, 1), (1, 0, 2),
        (1, 1, 0), (1, 1, 1), (1, 1, 2), (1, 2, 0), (1, 2, 1), (1, 2, 2),
        (2, 0, 0), (2, 0, 1), (2, 0, 2), (2, 1, 0), (2, 1, 1), (2, 1, 2),
        (2, 2, 0), (2, 2, 1), (2, 2, 2),
    }
    assert combine_elements(3, 3) == expected


def test_zero_picks_is_empty():
    assert combine_elements(3, 0) == set()


def test_indexes_in_range():
    result = combine_elements(4, 2)
    assert all(0 <= i < 4 for combo in result for i in combo)
    assert all(1 <= len(combo) <= 2 for combo in result)


def test_print_output(capsys):
    print_combine_elements(2, 1)
    assert capsys.readouterr().out == "[0]\n[1]\n"


def test_print_lists_every_combination(capsys):
    print_combine_elements(3, 2)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(combine_elements(3, 2))
    assert lines[-1] == "[2, 2]"