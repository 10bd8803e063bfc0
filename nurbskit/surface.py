"""B-spline surface evaluation: points and partial derivatives."""

from __future__ import annotations

from numbers import Real
from typing import List, Sequence, Tuple, Union

from nurbskit.basis import basis_funs, ders_basis_funs, find_span

Point = Union[float, Tuple[float, ...]]


def _combine(coeffs: Sequence[float], points: Sequence[Point]) -> Point:
    """Linear combination ``sum(c * P)`` of scalars or of equal-length coordinate tuples."""
    first = points[0]
    if isinstance(first, Real):
        return float(sum(c * x for c, x in zip(coeffs, points)))
    return tuple(
        float(sum(c * x for c, x in zip(coeffs, component)))
        for component in zip(*points)
    )


def _check_net(P: Sequence[Sequence[Point]], n: int, m: int) -> None:
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    if len(P) < n + 1:
        raise ValueError(f"need at least {n + 1} rows of control points, got {len(P)}")
    if any(len(row) < m + 1 for row in P[: n + 1]):
        raise ValueError(f"every row of control points needs at least {m + 1} entries")


def surface_point(
    n: int,
    p: int,
    U: Sequence[float],
    m: int,
    q: int,
    V: Sequence[float],
    P: Sequence[Sequence[Point]],
    u: float,
    v: float,
) -> Point:
    """Point at ``(u, v)`` on the B-spline surface with control net ``P[0..n][0..m]``.

    ``P[i][j]`` has u-index ``i`` and v-index ``j``; ``p`` and ``q`` are the degrees.
    """
    _check_net(P, n, m)
    uspan = find_span(n, p, u, U)
    Nu = basis_funs(uspan, u, p, U)
    vspan = find_span(m, q, v, V)
    Nv = basis_funs(vspan, v, q, V)
    uind = uspan - p
    columns = [
        _combine(Nu, [P[uind + k][vspan - q + l] for k in range(p + 1)])
        for l in range(q + 1)
    ]
    return _combine(Nv, columns)


def surface_derivs_alg1(
    n: int,
    p: int,
    U: Sequence[float],
    m: int,
    q: int,
    V: Sequence[float],
    P: Sequence[Sequence[Point]],
    u: float,
    v: float,
    d: int,
) -> List[List[Point]]:
    """Partial derivatives ``SKL[k][l]`` of the surface at ``(u, v)`` for ``k + l <= d``.

    The result is a (d + 1) x (d + 1) table; entries with ``k + l > d`` and
    derivatives of order above the degree in either direction are zero.
    """
    _check_net(P, n, m)
    if d < 0:
        raise ValueError("derivative order must be non-negative")
    du = min(d, p)
    dv = min(d, q)
    uspan = find_span(n, p, u, U)
    Nu = ders_basis_funs(uspan, u, p, du, U)
    vspan = find_span(m, q, v, V)
    Nv = ders_basis_funs(vspan, v, q, dv, V)

    zero = _combine([0.0], [P[0][0]])
    skl: List[List[Point]] = [[zero] * (d + 1) for _ in range(d + 1)]
    for k in range(du + 1):
        temp = [
            _combine(Nu[k], [P[uspan - p + r][vspan - q + s] for r in range(p + 1)])
            for s in range(q + 1)
        ]
        for l in range(min(d - k, dv) + 1):
            skl[k][l] = _combine(Nv[l], temp)
    return skl