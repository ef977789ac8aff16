import pytest

from cfdrills.number_problems import (
    damaged_dragons,
    digit_xor,
    kth_element,
    lottery_bills,
    min_moves,
    polyhedron_faces,
)


@pytest.mark.parametrize(
    "shape, faces",
    [
        ("Tetrahedron", 4),
        ("Cube", 6),
        ("Octahedron", 8),
        ("Dodecahedron", 12),
        ("Icosahedron", 20),
    ],
)
def test_polyhedron_faces_single(shape, faces):
    assert polyhedron_faces([shape]) == faces


def test_polyhedron_faces_additive():
    first = ["Cube", "Tetrahedron"]
    second = ["Icosahedron", "Cube", "Octahedron"]
    assert polyhedron_faces(first + second) == polyhedron_faces(first) + polyhedron_faces(second)


def test_polyhedron_faces_ignores_unknown():
    assert polyhedron_faces(["Cube", "Sphere"]) == polyhedron_faces(["Cube"])


@pytest.mark.parametrize("denomination", [100, 20, 10, 5, 1])
def test_lottery_single_bill(denomination):
    assert lottery_bills(denomination) == 1


@pytest.mark.parametrize("hundreds", [1, 3, 10])
def test_lottery_hundreds(hundreds):
    assert lottery_bills(100 * hundreds) == hundreds


@pytest.mark.parametrize("amount", [0, 7, 43, 99])
def test_lottery_adding_hundred_adds_one_bill(amount):
    assert lottery_bills(amount + 100) == lottery_bills(amount) + 1


@pytest.mark.parametrize("d", [1, 12, 24])
def test_damaged_dragons_all_hit_with_one(d):
    assert damaged_dragons(1, 2, 3, 4, d) == d


def test_damaged_dragons_none_hit_when_divisors_exceed_d():
    assert damaged_dragons(50, 60, 70, 80, 40) == damaged_dragons(50, 60, 70, 80, 0)


def test_damaged_dragons_bounded_and_monotonic():
    counts = [damaged_dragons(2, 3, 4, 5, d) for d in range(1, 30)]
    assert counts == sorted(counts)
    assert all(count <= d for d, count in enumerate(counts, start=1))


def test_damaged_dragons_rejects_zero_divisor():
    with pytest.raises(ValueError):
        damaged_dragons(0, 1, 2, 3, 10)


@pytest.mark.parametrize("n", [1, 2, 7, 10])
def test_kth_element_is_permutation(n):
    values = [kth_element(n, k) for k in range(1, n + 1)]
    assert sorted(values) == list(range(1, n + 1))
    odd_count = (n + 1) // 2
    assert values[:odd_count] == list(range(1, n + 1, 2))
    assert values[odd_count:] == list(range(2, n + 1, 2))


def test_kth_element_large():
    n = 1_000_000_000_000
    assert kth_element(n, n) == n
    assert kth_element(n, 1) == 1


@pytest.mark.parametrize("k", [0, 11])
def test_kth_element_out_of_range(k):
    with pytest.raises(ValueError):
        kth_element(10, k)


@pytest.mark.parametrize("a, b", [(10, 4), (13, 9), (100, 13), (123, 456), (92, 46)])
def test_min_moves_reaches_multiple(a, b):
    moves = min_moves(a, b)
    assert 0 <= moves < b
    assert (a + moves) % b == 0


def test_min_moves_already_divisible():
    assert min_moves(92, 46) == min_moves(0, 46)


def test_min_moves_rejects_zero():
    with pytest.raises(ValueError):
        min_moves(5, 0)


def test_digit_xor_pinned():
    assert digit_xor(1010100, 100101) == 1110001


@pytest.mark.parametrize("a, b", [(10101, 1010), (1100, 11), (0, 111)])
def test_digit_xor_symmetric(a, b):
    assert digit_xor(a, b) == digit_xor(b, a)


@pytest.mark.parametrize("a", [0, 1, 1011, 110010])
def test_digit_xor_identity_and_self(a):
    assert digit_xor(a, 0) == a
    assert digit_xor(a, a) == digit_xor(0, 0)


def test_digit_xor_rejects_negative():
    with pytest.raises(ValueError):
        digit_xor(-1, 10)