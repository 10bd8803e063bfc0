"""Power-basis and Bezier evaluation: Horner, Bernstein and de Casteljau."""

from __future__ import annotations

from functools import reduce
from typing import List, Sequence


def _require_points(values: Sequence[float], what: str) -> None:
    if len(values) == 0:
        raise ValueError(f"{what} must not be empty")


def _require_grid(grid: Sequence[Sequence[float]], what: str) -> int:
    """Check that ``grid`` is a non-empty rectangular table; return the row length."""
    if len(grid) == 0:
        raise ValueError(f"{what} must not be empty")
    width = len(grid[0])
    if width == 0:
        raise ValueError(f"{what} rows must not be empty")
    if any(len(row) != width for row in grid):
        raise ValueError(f"{what} must be rectangular")
    return width


def horner1(a: Sequence[float], u0: float) -> float:
    """Evaluate the power-basis polynomial ``sum(a[i] * u0**i)`` by Horner's rule."""
    _require_points(a, "coefficients")
    return reduce(lambda c, coeff: c * u0 + coeff, reversed(a[:-1]), a[-1])


def bernstein(i: int, n: int, u: float) -> float:
    """Value of the Bernstein polynomial B(i, n) at ``u``."""
    if n < 0:
        raise ValueError("degree must be non-negative")
    if not 0 <= i <= n:
        raise ValueError(f"index {i} is outside 0..{n}")
    temp = [0.0] * (n + 1)
    temp[n - i] = 1.0
    u1 = 1.0 - u
    for k in range(1, n + 1):
        for j in range(n, k - 1, -1):
            temp[j] = u1 * temp[j] + u * temp[j - 1]
    return temp[n]


def all_bernstein(n: int, u: float) -> List[float]:
    """All Bernstein polynomials of degree ``n`` at ``u``, as a list of n + 1 values."""
    if n < 0:
        raise ValueError("degree must be non-negative")
    b = [0.0] * (n + 1)
    b[0] = 1.0
    u1 = 1.0 - u
    for j in range(1, n + 1):
        saved = 0.0
        for k in range(j):
            temp = b[k]
            b[k] = saved + u1 * temp
            saved = u * temp
        b[j] = saved
    return b


def point_on_bezier_curve(P: Sequence[float], u: float) -> float:
    """Point on the Bezier curve with control points ``P`` at ``u``, via Bernstein sums."""
    _require_points(P, "control points")
    weights = all_bernstein(len(P) - 1, u)
    return sum((b * p for b, p in zip(weights, P)), 0.0)


def de_casteljau1(P: Sequence[float], u: float) -> float:
    """Point on the Bezier curve with control points ``P`` at ``u``, via de Casteljau."""
    _require_points(P, "control points")
    q = list(P)
    while len(q) > 1:
        q = [(1.0 - u) * left + u * right for left, right in zip(q, q[1:])]
    return q[0]


def horner2(a: Sequence[Sequence[float]], u0: float, v0: float) -> float:
    """Evaluate a power-basis surface at ``(u0, v0)``.

    ``a[i][j]`` is the coefficient of ``u**i * v**j``.
    """
    _require_grid(a, "coefficients")
    return horner1([horner1(row, v0) for row in a], u0)


def de_casteljau2(P: Sequence[Sequence[float]], u0: float, v0: float) -> float:
    """Point on a Bezier surface at ``(u0, v0)``.

    ``P[j][i]`` is the control point with v-index ``j`` and u-index ``i``.
    The lower-degree direction is reduced first.
    """
    width = _require_grid(P, "control points")
    n = width - 1
    m = len(P) - 1
    if n <= m:
        return de_casteljau1([de_casteljau1(row, u0) for row in P], v0)
    return de_casteljau1([de_casteljau1(column, v0) for column in zip(*P)], u0)