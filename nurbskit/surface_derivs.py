"""Control points of B-spline surface derivatives and surface derivatives from them."""

from __future__ import annotations

from numbers import Real
from typing import List, Sequence, Tuple, Union

from nurbskit.basis import all_basis_funs, find_span
from nurbskit.curve import curve_deriv_cpts

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


def surface_deriv_cpts(
    n: int,
    p: int,
    U: Sequence[float],
    m: int,
    q: int,
    V: Sequence[float],
    P: Sequence[Sequence[Point]],
    d: int,
    r1: int,
    r2: int,
    s1: int,
    s2: int,
) -> List[List[List[List[Point]]]]:
    """Control points of the derivative surfaces for the sub-net ``P[r1..r2][s1..s2]``.

    The result ``PKL[k][l][i][j]`` is control point ``(i, j)`` of the surface
    differentiated ``k`` times in u and ``l`` times in v, for
    ``k <= min(d, p)`` and ``l <= min(d - k, q)``. Level ``(k, l)`` holds
    ``r2 - r1 - k + 1`` rows of ``s2 - s1 - l + 1`` points.
    """
    _check_net(P, n, m)
    if d < 0:
        raise ValueError("derivative order must be non-negative")
    if not 0 <= r1 <= r2 <= n:
        raise ValueError(f"u index range {r1}..{r2} is not within 0..{n}")
    if not 0 <= s1 <= s2 <= m:
        raise ValueError(f"v index range {s1}..{s2} is not within 0..{m}")

    du = min(d, p)
    dv = min(d, q)
    r = r2 - r1
    s = s2 - s1

    # Differentiate every column of the sub-net in the u-direction.
    column_derivs = [
        curve_deriv_cpts(n, p, U, [P[i][j] for i in range(n + 1)], du, r1, r2)
        for j in range(s1, s2 + 1)
    ]
    pkl: List[List[List[List[Point]]]] = []
    for k in range(du + 1):
        rows = [
            [column_derivs[j][k][i] for j in range(s + 1)]
            for i in range(r - k + 1)
        ]
        pkl.append([rows])

    # Differentiate each resulting row in the v-direction.
    v_knots = list(V[s1:])
    for k in range(du + 1):
        dd = min(d - k, dv)
        levels: List[List[List[Point]]] = [[] for _ in range(dd)]
        for row in pkl[k][0]:
            row_derivs = curve_deriv_cpts(s, q, v_knots, row, dd, 0, s)
            for l in range(1, dd + 1):
                levels[l - 1].append(row_derivs[l])
        pkl[k].extend(levels)
    return pkl


def surface_derivs_alg2(
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
    """Partial derivatives ``SKL[k][l]`` at ``(u, v)`` from derivative control points.

    The result is a (d + 1) x (d + 1) table; entries with ``k + l > d`` and
    derivatives of order above the degree in either direction are zero.
    """
    _check_net(P, n, m)
    if d < 0:
        raise ValueError("derivative order must be non-negative")
    du = min(d, p)
    dv = min(d, q)
    uspan = find_span(n, p, u, U)
    Nu = all_basis_funs(uspan, u, p, U)
    vspan = find_span(m, q, v, V)
    Nv = all_basis_funs(vspan, v, q, V)

    pkl = surface_deriv_cpts(n, p, U, m, q, V, P, d, uspan - p, uspan, vspan - q, vspan)

    zero = _combine([0.0], [P[0][0]])
    skl: List[List[Point]] = [[zero] * (d + 1) for _ in range(d + 1)]
    for k in range(du + 1):
        u_coeffs = [Nu[j][p - k] for j in range(p - k + 1)]
        for l in range(min(d - k, dv) + 1):
            level = pkl[k][l]
            partial = [
                _combine(u_coeffs, [level[j][i] for j in range(p - k + 1)])
                for i in range(q - l + 1)
            ]
            v_coeffs = [Nv[i][q - l] for i in range(q - l + 1)]
            skl[k][l] = _combine(v_coeffs, partial)
    return skl