"""Solutions to short arithmetic exercises."""

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}

_DENOMINATIONS = (100, 20, 10, 5, 1)


def polyhedron_faces(shapes) -> int:
    """Sum the faces of the named regular polyhedra; unknown names count for nothing."""
    return sum(_FACES.get(shape, 0) for shape in shapes)


def lottery_bills(amount: int) -> int:
    """Fewest bills of 1, 5, 10, 20 and 100 that make up ``amount``."""
    count = 0
    for denomination in _DENOMINATIONS:
        bills, amount = divmod(amount, denomination)
        count += bills
    return count


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons among the first ``d`` whose number is divisible by k, l, m or n."""
    divisors = (k, l, m, n)
    if any(divisor < 1 for divisor in divisors):
        raise ValueError("divisors must be positive")
    return sum(
        1 for dragon in range(1, d + 1) if any(dragon % divisor == 0 for divisor in divisors)
    )


def kth_element(n: int, k: int) -> int:
    """The k-th number when 1..n is listed as all odd numbers, then all even ones."""
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")
    odd_count = (n + 1) // 2
    if k <= odd_count:
        return 2 * k - 1
    return 2 * (k - odd_count)


def min_moves(a: int, b: int) -> int:
    """Fewest increments of ``a`` needed to make it divisible by ``b``."""
    if b <= 0:
        raise ValueError("b must be positive")
    return (b - a % b) % b


def digit_xor(a: int, b: int) -> int:
    """Combine two numbers digit by digit with XOR, read back as a decimal number."""
    if a < 0 or b < 0:
        raise ValueError("numbers must be non-negative")
    result = 0
    place = 1
    while a > 0 or b > 0:
        a, digit_a = divmod(a, 10)
        b, digit_b = divmod(b, 10)
        result += (digit_a ^ digit_b) * place
        place *= 10
    return result