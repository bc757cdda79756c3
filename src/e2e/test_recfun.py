import pytest

from recfun import balance, count_change, pascal, pascal_row
from recfun.__main__ import main as recfun_main


@pytest.mark.parametrize("c,r,expected", [(0, 0, 1), (0, 2, 1), (1, 2, 2), (1, 3, 3), (2, 4, 6), (5, 10, 252)])
def test_pascal(c, r, expected):
    assert pascal(c, r) == expected


def test_pascal_row():
    assert pascal_row(4) == [1, 4, 6, 4, 1]


@pytest.mark.parametrize("c,r", [(-1, 2), (3, 2), (0, -1)])
def test_pascal_rejects_out_of_triangle(c, r):
    with pytest.raises(ValueError):
        pascal(c, r)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("(if (zero? x) max (/ 1 x))", True),
        ("I told him (that it's not (yet) done).\n(But he wasn't listening)", True),
        ("", True),
        (":-)", False),
        ("())(", False),
        ("((", False),
    ],
)
def test_balance(text, expected):
    assert balance(text) is expected
    assert balance(list(text)) is expected


def test_count_change():
    assert count_change(4, [1, 2]) == 3
    assert count_change(300, [5, 10, 20, 50, 100, 200, 500]) == 1022
    assert count_change(301, [5, 10, 20, 50, 100, 200, 500]) == 0
    assert count_change(300, [500, 5, 50, 100, 20, 200, 10]) == 1022


def test_count_change_edges():
    assert count_change(0, []) == 1
    assert count_change(5, []) == 0
    assert count_change(-1, [1]) == 0


def test_count_change_large_amount_does_not_recurse():
    assert count_change(1000, [1]) == 1
    assert count_change(5000, [1, 2]) == 2501


@pytest.mark.parametrize("coins", [[0, 5], [5, -1]])
def test_count_change_rejects_non_positive_coins(coins):
    with pytest.raises(ValueError):
        count_change(5, coins)


def test_main_prints_triangle(capsys):
    assert recfun_main(["--rows", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Pascal's Triangle", "1", "1 1", "1 2 1", "1 3 3 1"]


def test_main_default_prints_eleven_rows(capsys):
    recfun_main([])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 12
    assert out[-1] == "1 10 45 120 210 252 210 120 45 10 1"
