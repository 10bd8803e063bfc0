"""Knot-vector operations on B-spline curves."""

from __future__ import annotations

from numbers import Real
from typing import List, Sequence, Tuple, Union

Point = Union[float, Tuple[float, ...]]


def _combine(coeffs: Sequence[float], points: Sequence[Point]) -> Point:
    first = points[0]
    if isinstance(first, Real):
        return float(sum(c * x for c, x in zip(coeffs, points)))
    return tuple(
        float(sum(c * x for c, x in zip(coeffs, component)))
        for component in zip(*points)
    )


def unclamp_curve(
    n: int, p: int, U: Sequence[float], Pw: Sequence[Point]
) -> Tuple[List[float], List[Point]]:
    """Unclamp a clamped curve at both ends without changing its shape.

    ``U`` holds ``n + p + 2`` knots and ``Pw`` the ``n + 1`` (weighted) control
    points. Returns the new knot vector and control points; the inputs are
    left untouched.
    """
    if p < 1:
        raise ValueError("degree must be at least 1")
    if n < p:
        raise ValueError("need at least p + 1 control points")
    if len(U) != n + p + 2:
        raise ValueError(f"knot vector needs {n + p + 2} knots, got {len(U)}")
    if len(Pw) != n + 1:
        raise ValueError(f"need {n + 1} control points, got {len(Pw)}")

    knots = [float(x) for x in U]
    points = list(Pw)

    for i in range(p - 1):
        knots[p - i - 1] = knots[p - i] - (knots[n - i + 1] - knots[n - i])
        k = p - 1
        for j in range(i, -1, -1):
            alfa = (knots[p] - knots[k]) / (knots[p + j + 1] - knots[k])
            scale = 1.0 / (1.0 - alfa)
            points[j] = _combine([scale, -alfa * scale], [points[j], points[j + 1]])
            k -= 1
    knots[0] = knots[1] - (knots[n - p + 2] - knots[n - p + 1])

    for i in range(p - 1):
        knots[n + i + 2] = knots[n + i + 1] + (knots[p + i + 1] - knots[p + i])
        for j in range(i, -1, -1):
            alfa = (knots[n + 1] - knots[n - j]) / (knots[n - j + i + 2] - knots[n - j])
            scale = 1.0 / alfa
            points[n - j] = _combine(
                [scale, -(1.0 - alfa) * scale], [points[n - j], points[n - j - 1]]
            )
    knots[n + p + 1] = knots[n + p] + (knots[2 * p] - knots[2 * p - 1])

    return knots, points