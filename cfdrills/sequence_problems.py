"""Solutions to short exercises over sequences of numbers."""

from collections.abc import Iterable, Sequence

_HORSESHOE_COUNT = 4


def longest_non_decreasing(values: Sequence[int]) -> int:
    """Length of the longest contiguous non-decreasing run in ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = 1
    for previous, following in zip(values, values[1:]):
        current = current + 1 if previous <= following else 1
        best = max(best, current)
    return best


def min_tank_volume(destination: int, stations: Sequence[int]) -> int:
    """Smallest tank that lets a trip from 0 to ``destination`` and back succeed.

    ``stations`` are the positions of the refuelling stations in increasing
    order; past the last one the car has to reach ``destination`` and return.
    With no stations the result is 0.
    """
    if not stations:
        return 0
    points = [0, *stations]
    longest_gap = max(following - previous for previous, following in zip(points, points[1:]))
    return max(0, longest_gap, 2 * (destination - points[-1]))


def tram_capacity(stops: Sequence[tuple[int, int]]) -> int:
    """Least tram capacity for a route given as (exiting, entering) pairs per stop."""
    if len(stops) < 2:
        raise ValueError("a route needs at least two stops")
    first_exiting, first_entering = stops[0]
    # Both figures of the first stop count towards the passengers on board.
    on_board = first_exiting + first_entering
    capacity = on_board
    for exiting, entering in stops[1:]:
        on_board += entering - exiting
        capacity = max(capacity, on_board)
    return capacity


def general_moves(heights: Sequence[int]) -> int:
    """Fewest swaps of neighbours that put a tallest soldier first and a shortest last."""
    if not heights:
        raise ValueError("heights must not be empty")
    tallest = max(heights)
    shortest = min(heights)
    tallest_at = heights.index(tallest)
    shortest_at = len(heights) - 1 - heights[::-1].index(shortest)
    moves = tallest_at + (len(heights) - 1 - shortest_at)
    if tallest_at > shortest_at:
        moves -= 1
    return moves


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def can_sort_boxes(values: Sequence[int], k: int) -> bool:
    """Tell whether reversing sub-arrays of length at most ``k`` can sort ``values``."""
    if k >= 2:
        return True
    return list(values) == sorted(values)


def horseshoes_to_buy(colors: Iterable[int]) -> int:
    """How many horseshoes to buy so that all four have different colours."""
    owned = list(colors)
    if len(owned) != _HORSESHOE_COUNT:
        raise ValueError(f"expected {_HORSESHOE_COUNT} horseshoes, got {len(owned)}")
    return _HORSESHOE_COUNT - len(set(owned))


def can_pass_all_levels(n: int, first: Iterable[int], second: Iterable[int]) -> bool:
    """Tell whether two players together can pass every level from 1 to ``n``."""
    passable = set(first) | set(second)
    return all(level in passable for level in range(1, n + 1))


def check_sums(triples: Iterable[tuple[int, int, int]]) -> str:
    """Mark each (a, b, c) with '+' when a + b == c and '-' otherwise."""
    return "".join("+" if a + b == c else "-" for a, b, c in triples)