import logging
import math
from fractions import Fraction
from typing import Callable, Sequence

from shamir_recovery.common.errors import DuplicateXCoordinate, InsufficientPoints
from shamir_recovery.common.types import Point

logger = logging.getLogger(__name__)

SelectionPolicy = Callable[[Sequence[Point], int], Sequence[Point]]


def select_first_k(points: Sequence[Point], k: int) -> list[Point]:
    """
    Selects the first k points in the order given. Surplus points are ignored
    and never checked against the selected ones.
    """
    return list(points[:k])


def lagrange_basis_at_zero(j: int, xs: Sequence[int]) -> Fraction:
    """
    Evaluates the j-th Lagrange basis polynomial of the given x-coordinates at 0.

    Args:
        j (int): Index of the basis polynomial.
        xs (Sequence[int]): Pairwise distinct x-coordinates.

    Returns:
        Fraction: The exact value of L_j(0).
    """
    numerator, denominator = 1, 1
    for i, x_i in enumerate(xs):
        if i == j:
            continue
        numerator *= -x_i
        denominator *= xs[j] - x_i
    return Fraction(numerator, denominator)


def interpolate_at_zero(points: Sequence[Point]) -> Fraction:
    xs = [point.x for point in points]
    return sum(
        (point.y * lagrange_basis_at_zero(j, xs) for j, point in enumerate(points)),
        Fraction(0),
    )


def round_half_up(value: Fraction) -> int:
    """Rounds to the nearest integer, halves going towards positive infinity."""
    return math.floor(value + Fraction(1, 2))


def _check_distinct_x(points: Sequence[Point]):
    seen = set()
    for point in points:
        if point.x in seen:
            raise DuplicateXCoordinate(point.x)
        seen.add(point.x)


def recover(
    points: Sequence[Point], k: int, select: SelectionPolicy = select_first_k
) -> int:
    """
    Recovers the constant term of the polynomial through the given points.

    Args:
        points (Sequence[Point]): Decoded points, in input order.
        k (int): The threshold, i.e. how many points are interpolated.
        select (SelectionPolicy): Chooses which k points to use. Defaults to
            the first k in the order given.

    Returns:
        int: The interpolated value at x = 0, rounded to the nearest integer.

    Raises:
        InsufficientPoints: If fewer than k points are given.
        DuplicateXCoordinate: If two selected points share an x-coordinate.
    """
    if k < 1:
        raise ValueError(f"threshold must be at least 1, got {k}")
    if len(points) < k:
        raise InsufficientPoints(required=k, actual=len(points))

    selected = select(points, k)
    if len(selected) != k:
        raise ValueError(
            f"selection policy returned {len(selected)} points, expected {k}"
        )
    _check_distinct_x(selected)

    logger.debug(
        f"interpolating at x=0 using {k} of {len(points)} points: "
        f"{[point.x for point in selected]}"
    )
    return round_half_up(interpolate_at_zero(selected))
