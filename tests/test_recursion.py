import pytest

from introcs.recursion import (
    beckett_main,
    beckett_moves,
    euclid_main,
    gcd,
    hanoi_main,
    hanoi_moves,
)


def test_gcd_documented_examples():
    assert gcd(1440, 408) == 24
    assert gcd(314159, 271828) == 1


@pytest.mark.parametrize("p", [0, 5, 97, 1440])
def test_gcd_with_zero(p):
    assert gcd(p, 0) == p


@pytest.mark.parametrize("p,q", [(1440, 408), (84, 36), (1000, 35), (17, 51)])
def test_gcd_divides_both(p, q):
    d = gcd(p, q)
    assert p % d == 0 and q % d == 0
    assert gcd(p // d, q // d) == 1


def test_gcd_symmetric():
    assert gcd(408, 1440) == gcd(1440, 408)


def test_euclid_main(capsys):
    assert euclid_main(["1440", "408"]) == 0
    assert capsys.readouterr().out == "24\n"


def test_euclid_main_usage(capsys):
    assert euclid_main(["1440"]) == 1
    assert capsys.readouterr().out.startswith("Usage:")


@pytest.mark.parametrize(
    "n,expected",
    [
        (1, "1 left\n"),
        (2, "1 right\n2 left\n1 right\n"),
        (3, "1 left\n2 right\n1 left\n3 left\n1 left\n2 right\n1 left\n"),
    ],
)
def test_hanoi_main_documented(capsys, n, expected):
    assert hanoi_main([str(n)]) == 0
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("n", range(0, 9))
def test_hanoi_move_count(n):
    assert len(list(hanoi_moves(n))) == 2**n - 1


def test_hanoi_largest_disk_moves_once():
    moves = list(hanoi_moves(6))
    assert [disk for disk, _ in moves].count(6) == 1
    assert moves[len(moves) // 2] == (6, True)


def test_hanoi_negative_raises():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))


@pytest.mark.parametrize(
    "n,expected",
    [
        (1, "enter 1\n"),
        (2, "enter 1\nenter 2\nexit  1\n"),
        (
            3,
            "enter 1\nenter 2\nexit  1\nenter 3\nenter 1\nexit  2\nexit  1\n",
        ),
    ],
)
def test_beckett_main_documented(capsys, n, expected):
    assert beckett_main([str(n)]) == 0
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("n", range(1, 8))
def test_beckett_leaves_only_last_actor_on_stage(n):
    on_stage = set()
    for actor, enter in beckett_moves(n):
        if enter:
            assert actor not in on_stage
            on_stage.add(actor)
        else:
            assert actor in on_stage
            on_stage.remove(actor)
    assert on_stage == {n}


def test_beckett_negative_raises():
    with pytest.raises(ValueError):
        list(beckett_moves(-2))


def test_hanoi_and_beckett_usage(capsys):
    assert hanoi_main([]) == 1
    assert beckett_main(["x"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert all(line.startswith("Usage:") for line in out)
    assert len(out) == 2