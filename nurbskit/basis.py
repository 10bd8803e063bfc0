"""B-spline basis functions: knot spans, basis values and their derivatives."""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence


def _check_knots(U: Sequence[float], needed: int) -> None:
    if len(U) < needed:
        raise ValueError(f"knot vector needs at least {needed} knots, got {len(U)}")


def _check_degree(p: int) -> None:
    if p < 0:
        raise ValueError("degree must be non-negative")


def find_span(n: int, p: int, u: float, U: Sequence[float]) -> int:
    """Index of the knot span ``[U[span], U[span + 1])`` that holds ``u``.

    ``n`` is the number of control points minus one and ``p`` the degree.
    At the end of the parameter range, ``u == U[n + 1]``, the span is ``n``.
    """
    _check_degree(p)
    _check_knots(U, n + 2)
    if u == U[n + 1]:
        return n
    if u < U[p] or u > U[n + 1]:
        raise ValueError(f"parameter {u} lies outside [{U[p]}, {U[n + 1]}]")
    return bisect_right(U, u, p, n + 1) - 1


def basis_funs(i: int, u: float, p: int, U: Sequence[float]) -> List[float]:
    """The p + 1 nonvanishing basis functions N[i-p..i, p] at ``u`` in span ``i``."""
    _check_degree(p)
    _check_knots(U, i + p + 1)
    N = [0.0] * (p + 1)
    left = [0.0] * (p + 1)
    right = [0.0] * (p + 1)
    N[0] = 1.0
    for j in range(1, p + 1):
        left[j] = u - U[i + 1 - j]
        right[j] = U[i + j] - u
        saved = 0.0
        for r in range(j):
            temp = N[r] / (right[r + 1] + left[j - r])
            N[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        N[j] = saved
    return N


def all_basis_funs(span: int, u: float, p: int, U: Sequence[float]) -> List[List[float]]:
    """Nonvanishing basis functions of every degree 0..p at ``u``.

    The result ``N`` is indexed ``N[j][k]``: the value of ``N[span - k + j, k]``
    for ``j <= k``, and 0.0 above the diagonal.
    """
    _check_degree(p)
    table = [[0.0] * (p + 1) for _ in range(p + 1)]
    for degree in range(p + 1):
        for j, value in enumerate(basis_funs(span, u, degree, U)):
            table[j][degree] = value
    return table


def ders_basis_funs(i: int, u: float, p: int, n: int, U: Sequence[float]) -> List[List[float]]:
    """Nonvanishing basis functions and their derivatives up to order ``n``.

    The result ``ders[k][j]`` is the k-th derivative of ``N[i - p + j, p]`` at ``u``.
    Derivatives of order above ``p`` are zero.
    """
    _check_degree(p)
    if n < 0:
        raise ValueError("derivative order must be non-negative")
    _check_knots(U, i + p + 1)

    ndu = [[0.0] * (p + 1) for _ in range(p + 1)]
    left = [0.0] * (p + 1)
    right = [0.0] * (p + 1)
    ndu[0][0] = 1.0
    for j in range(1, p + 1):
        left[j] = u - U[i + 1 - j]
        right[j] = U[i + j] - u
        saved = 0.0
        for r in range(j):
            ndu[j][r] = right[r + 1] + left[j - r]
            temp = ndu[r][j - 1] / ndu[j][r]
            ndu[r][j] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        ndu[j][j] = saved

    ders = [[0.0] * (p + 1) for _ in range(n + 1)]
    ders[0] = [ndu[j][p] for j in range(p + 1)]

    du = min(n, p)
    a = [[0.0] * (p + 1) for _ in range(2)]
    for r in range(p + 1):
        s1, s2 = 0, 1
        a[0][0] = 1.0
        for k in range(1, du + 1):
            d = 0.0
            rk = r - k
            pk = p - k
            if r >= k:
                a[s2][0] = a[s1][0] / ndu[pk + 1][rk]
                d = a[s2][0] * ndu[rk][pk]
            j1 = 1 if rk >= -1 else -rk
            j2 = k - 1 if r - 1 <= pk else p - r
            for j in range(j1, j2 + 1):
                a[s2][j] = (a[s1][j] - a[s1][j - 1]) / ndu[pk + 1][rk + j]
                d += a[s2][j] * ndu[rk + j][pk]
            if r <= pk:
                a[s2][k] = -a[s1][k - 1] / ndu[pk + 1][r]
                d += a[s2][k] * ndu[r][pk]
            ders[k][r] = d
            s1, s2 = s2, s1

    factor = p
    for k in range(1, du + 1):
        ders[k] = [value * factor for value in ders[k]]
        factor *= p - k
    return ders


def one_basis_fun(p: int, m: int, U: Sequence[float], i: int, u: float) -> float:
    """The single basis function ``N[i, p]`` at ``u``; ``m`` is the last knot index."""
    _check_degree(p)
    _check_knots(U, m + 1)
    if (i == 0 and u == U[0]) or (i == m - p - 1 and u == U[m]):
        return 1.0
    if u < U[i] or u >= U[i + p + 1]:
        return 0.0

    N = [1.0 if U[i + j] <= u < U[i + j + 1] else 0.0 for j in range(p + 1)]
    for k in range(1, p + 1):
        saved = 0.0 if N[0] == 0.0 else ((u - U[i]) * N[0]) / (U[i + k] - U[i])
        for j in range(p - k + 1):
            u_left = U[i + j + 1]
            u_right = U[i + j + k + 1]
            if N[j + 1] == 0.0:
                N[j] = saved
                saved = 0.0
            else:
                temp = N[j + 1] / (u_right - u_left)
                N[j] = saved + (u_right - u) * temp
                saved = (u - u_left) * temp
    return N[0]


def ders_one_basis_fun(
    p: int, m: int, U: Sequence[float], i: int, u: float, n: int
) -> List[float]:
    """Derivatives of orders 0..n of the single basis function ``N[i, p]`` at ``u``."""
    _check_degree(p)
    if n < 0:
        raise ValueError("derivative order must be non-negative")
    _check_knots(U, m + 1)

    ders = [0.0] * (n + 1)
    if u < U[i] or u >= U[i + p + 1]:
        return ders

    N = [[0.0] * (p + 1) for _ in range(p + 1)]
    for j in range(p + 1):
        N[j][0] = 1.0 if U[i + j] <= u < U[i + j + 1] else 0.0
    for k in range(1, p + 1):
        if N[0][k - 1] == 0.0:
            saved = 0.0
        else:
            saved = ((u - U[i]) * N[0][k - 1]) / (U[i + k] - U[i])
        for j in range(p - k + 1):
            u_left = U[i + j + 1]
            u_right = U[i + j + k + 1]
            if N[j + 1][k - 1] == 0.0:
                N[j][k] = saved
                saved = 0.0
            else:
                temp = N[j + 1][k - 1] / (u_right - u_left)
                N[j][k] = saved + (u_right - u) * temp
                saved = (u - u_left) * temp

    ders[0] = N[0][p]
    for k in range(1, min(n, p) + 1):
        nd = [N[j][p - k] for j in range(k + 1)]
        for jj in range(1, k + 1):
            degree = p - k + jj
            saved = 0.0 if nd[0] == 0.0 else nd[0] / (U[i + degree] - U[i])
            for j in range(k - jj + 1):
                u_left = U[i + j + 1]
                u_right = U[i + j + degree + 1]
                if nd[j + 1] == 0.0:
                    nd[j] = degree * saved
                    saved = 0.0
                else:
                    temp = nd[j + 1] / (u_right - u_left)
                    nd[j] = degree * (saved - temp)
                    saved = temp
        ders[k] = nd[0]
    return ders