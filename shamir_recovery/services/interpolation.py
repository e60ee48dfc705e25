from collections import Counter
from fractions import Fraction
from typing import Sequence

from shamir_recovery.models.point import Point
from shamir_recovery.services.errors import PrecisionLoss, SingularSystem, ThresholdNotMet


def lagrange_term(j: int, points: Sequence[Point]) -> Fraction:
    """y_j * prod(-x_m) / prod(x_j - x_m) over m != j."""
    xj, yj = points[j].x, points[j].y
    numerator = 1
    denominator = 1

    for m, point in enumerate(points):
        if m != j:
            numerator *= -point.x
            denominator *= xj - point.x

    return Fraction(yj * numerator, denominator)


def constant_term(points: Sequence[Point]) -> int:
    """
    Value at x = 0 of the polynomial through `points`, computed exactly.

    Terms are summed as rationals and the total must come out whole;
    a fractional result means the points do not lie on an integer
    polynomial and raises PrecisionLoss instead of rounding.
    """
    if not points:
        raise ThresholdNotMet(required=1, available=0)

    xs = [point.x for point in points]
    repeated = sorted(x for x, count in Counter(xs).items() if count > 1)
    if repeated:
        raise SingularSystem(repeated)

    secret = sum((lagrange_term(j, points) for j in range(len(points))), Fraction(0))

    if secret.denominator != 1:
        raise PrecisionLoss(xs, secret)
    return secret.numerator
