"""B-spline curve evaluation: points, derivatives and derivative control points."""

from __future__ import annotations

from numbers import Real
from typing import List, Sequence, Tuple, Union

from nurbskit.basis import all_basis_funs, basis_funs, ders_basis_funs, find_span

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


def _zero_like(point: Point) -> Point:
    return _combine([0.0], [point])


def _check_control(P: Sequence[Point], n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")
    if len(P) < n + 1:
        raise ValueError(f"need at least {n + 1} control points, got {len(P)}")


def _check_order(d: int) -> None:
    if d < 0:
        raise ValueError("derivative order must be non-negative")


def curve_point(n: int, p: int, U: Sequence[float], P: Sequence[Point], u: float) -> Point:
    """Point at ``u`` on the B-spline curve of degree ``p`` with control points ``P[0..n]``."""
    _check_control(P, n)
    span = find_span(n, p, u, U)
    N = basis_funs(span, u, p, U)
    return _combine(N, P[span - p : span + 1])


def curve_derivs_alg1(
    n: int, p: int, U: Sequence[float], P: Sequence[Point], u: float, d: int
) -> List[Point]:
    """Curve derivatives of orders 0..d at ``u`` from basis-function derivatives.

    Derivatives of order above ``p`` are zero.
    """
    _check_control(P, n)
    _check_order(d)
    du = min(d, p)
    span = find_span(n, p, u, U)
    nders = ders_basis_funs(span, u, p, du, U)
    local = P[span - p : span + 1]
    derivs = [_combine(nders[k], local) for k in range(du + 1)]
    zero = _zero_like(P[0])
    derivs.extend(zero for _ in range(du + 1, d + 1))
    return derivs


def curve_deriv_cpts(
    n: int,
    p: int,
    U: Sequence[float],
    P: Sequence[Point],
    d: int,
    r1: int,
    r2: int,
) -> List[List[Point]]:
    """Control points of the derivative curves of orders 0..d for ``P[r1..r2]``.

    Row ``k`` of the result holds the ``r2 - r1 - k + 1`` control points of the
    k-th derivative curve; rows of order above ``p`` hold zeros.
    """
    _check_control(P, n)
    _check_order(d)
    if not 0 <= r1 <= r2 <= n:
        raise ValueError(f"index range {r1}..{r2} is not within 0..{n}")
    r = r2 - r1
    pk: List[List[Point]] = [list(P[r1 : r2 + 1])]
    zero = _zero_like(P[0])
    for k in range(1, d + 1):
        count = max(r - k + 1, 0)
        if k > p:
            pk.append([zero] * count)
            continue
        tmp = p - k + 1
        previous = pk[k - 1]
        row = []
        for i in range(count):
            factor = tmp / (U[r1 + i + p + 1] - U[r1 + i + k])
            row.append(_combine([factor, -factor], [previous[i + 1], previous[i]]))
        pk.append(row)
    return pk


def curve_derivs_alg2(
    n: int, p: int, U: Sequence[float], P: Sequence[Point], u: float, d: int
) -> List[Point]:
    """Curve derivatives of orders 0..d at ``u`` from derivative control points.

    Derivatives of order above ``p`` are zero.
    """
    _check_control(P, n)
    _check_order(d)
    du = min(d, p)
    span = find_span(n, p, u, U)
    N = all_basis_funs(span, u, p, U)
    pk = curve_deriv_cpts(n, p, U, P, du, span - p, span)
    derivs = []
    for k in range(du + 1):
        coeffs = [N[j][p - k] for j in range(p - k + 1)]
        derivs.append(_combine(coeffs, pk[k][: p - k + 1]))
    zero = _zero_like(P[0])
    derivs.extend(zero for _ in range(du + 1, d + 1))
    return derivs