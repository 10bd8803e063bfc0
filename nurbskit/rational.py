"""Rational (NURBS) curve and surface evaluation from homogeneous control points."""

from __future__ import annotations

from math import comb
from numbers import Real
from typing import List, Sequence, Tuple, Union

from nurbskit.curve import curve_point
from nurbskit.surface import surface_point

Point = Union[float, Tuple[float, ...]]


def _combine(coeffs: Sequence[float], points: Sequence[Point]) -> Point:
    first = points[0]
    if isinstance(first, Real):
        return float(sum(c * x for c, x in zip(coeffs, points)))
    return tuple(
        float(sum(c * x for c, x in zip(coeffs, component)))
        for component in zip(*points)
    )


def _project(point: Point) -> Tuple[float, ...]:
    """Divide a homogeneous point ``(w*x, ..., w)`` by its weight."""
    if isinstance(point, Real) or len(point) < 2:
        raise ValueError("homogeneous points need at least one coordinate and a weight")
    weight = point[-1]
    if weight == 0.0:
        raise ValueError("weight of the evaluated point is zero")
    return tuple(float(c) / weight for c in point[:-1])


def _check_homogeneous(points) -> None:
    for point in points:
        if isinstance(point, Real) or len(point) < 2:
            raise ValueError("homogeneous points need at least one coordinate and a weight")


def rat_curve_point(
    n: int, p: int, U: Sequence[float], Pw: Sequence[Tuple[float, ...]], u: float
) -> Tuple[float, ...]:
    """Point at ``u`` on the NURBS curve with homogeneous control points ``Pw[0..n]``.

    Each control point is ``(w*x, w*y, ..., w)``; the Cartesian point is returned.
    """
    _check_homogeneous(Pw)
    return _project(curve_point(n, p, U, Pw, u))


def rat_curve_derivs(
    Aders: Sequence[Point], wders: Sequence[float], d: int
) -> List[Point]:
    """Derivatives of orders 0..d of ``C = A / w`` from those of ``A`` and ``w``."""
    if d < 0:
        raise ValueError("derivative order must be non-negative")
    if len(Aders) < d + 1 or len(wders) < d + 1:
        raise ValueError(f"need derivatives of orders 0..{d} of A and w")
    if wders[0] == 0.0:
        raise ValueError("weight must not be zero")
    ck: List[Point] = []
    for k in range(d + 1):
        coeffs = [1.0] + [-comb(k, i) * wders[i] for i in range(1, k + 1)]
        points = [Aders[k]] + [ck[k - i] for i in range(1, k + 1)]
        ck.append(_combine([c / wders[0] for c in coeffs], points))
    return ck


def rat_surface_point(
    n: int,
    p: int,
    U: Sequence[float],
    m: int,
    q: int,
    V: Sequence[float],
    Pw: Sequence[Sequence[Tuple[float, ...]]],
    u: float,
    v: float,
) -> Tuple[float, ...]:
    """Point at ``(u, v)`` on the NURBS surface with homogeneous net ``Pw[0..n][0..m]``."""
    for row in Pw:
        _check_homogeneous(row)
    return _project(surface_point(n, p, U, m, q, V, Pw, u, v))