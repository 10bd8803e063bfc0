import pytest
from hypothesis import given, strategies as st

from nurbskit.basis import (
    all_basis_funs,
    basis_funs,
    ders_basis_funs,
    ders_one_basis_fun,
    find_span,
    one_basis_fun,
)

# Knot vector with an interior double knot; p = 2, n = 7, m = 10.
U = [0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0, 4.0, 5.0, 5.0, 5.0]
P = 2
N_CTRL = len(U) - P - 2
M = len(U) - 1

params = st.floats(min_value=0.0, max_value=5.0, allow_nan=False)


def test_find_span_source_example():
    knots = [0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0]
    assert find_span(3, 2, 0.4, knots) == 2


def test_find_span_end_of_range():
    assert find_span(N_CTRL, P, 5.0, U) == N_CTRL


def test_find_span_start_of_range():
    assert find_span(N_CTRL, P, 0.0, U) == P


@given(params)
def test_find_span_contains_parameter(u):
    span = find_span(N_CTRL, P, u, U)
    assert P <= span <= N_CTRL
    if u < U[N_CTRL + 1]:
        assert U[span] <= u < U[span + 1]


def test_find_span_out_of_range():
    with pytest.raises(ValueError):
        find_span(N_CTRL, P, 5.5, U)
    with pytest.raises(ValueError):
        find_span(N_CTRL, P, -0.1, U)


def test_basis_funs_worked_example():
    span = find_span(N_CTRL, P, 2.5, U)
    assert span == 4
    assert basis_funs(span, 2.5, P, U) == pytest.approx([0.125, 0.75, 0.125])


@given(params)
def test_basis_funs_partition_of_unity(u):
    span = find_span(N_CTRL, P, u, U)
    values = basis_funs(span, u, P, U)
    assert len(values) == P + 1
    assert sum(values) == pytest.approx(1.0)
    assert all(v >= -1e-12 for v in values)


def test_basis_funs_degree_zero():
    assert basis_funs(3, 1.5, 0, U) == [1.0]


@given(params)
def test_all_basis_funs_columns(u):
    span = find_span(N_CTRL, P, u, U)
    table = all_basis_funs(span, u, P, U)
    for degree in range(P + 1):
        column = [table[j][degree] for j in range(P + 1)]
        assert sum(column) == pytest.approx(1.0)
        assert column[: degree + 1] == pytest.approx(basis_funs(span, u, degree, U))
        assert all(v == 0.0 for v in column[degree + 1 :])


@given(params)
def test_ders_basis_funs_zeroth_row_and_sums(u):
    span = find_span(N_CTRL, P, u, U)
    ders = ders_basis_funs(span, u, P, 2, U)
    assert ders[0] == pytest.approx(basis_funs(span, u, P, U))
    for row in ders[1:]:
        assert sum(row) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("u", [0.3, 1.4, 2.5, 3.7, 4.2])
def test_ders_basis_funs_matches_finite_difference(u):
    h = 1e-6
    span = find_span(N_CTRL, P, u, U)
    ders = ders_basis_funs(span, u, P, 1, U)
    plus = basis_funs(span, u + h, P, U)
    minus = basis_funs(span, u - h, P, U)
    numeric = [(a - b) / (2 * h) for a, b in zip(plus, minus)]
    assert ders[1] == pytest.approx(numeric, abs=1e-5)


def test_ders_basis_funs_higher_orders_vanish():
    span = find_span(N_CTRL, P, 2.5, U)
    ders = ders_basis_funs(span, 2.5, P, P + 2, U)
    assert len(ders) == P + 3
    assert ders[P + 1] == [0.0] * (P + 1)
    assert ders[P + 2] == [0.0] * (P + 1)


def test_ders_basis_funs_negative_order():
    with pytest.raises(ValueError):
        ders_basis_funs(4, 2.5, P, -1, U)


@given(params)
def test_one_basis_fun_agrees_with_basis_funs(u):
    span = find_span(N_CTRL, P, u, U)
    values = basis_funs(span, u, P, U)
    for j, expected in enumerate(values):
        assert one_basis_fun(P, M, U, span - P + j, u) == pytest.approx(expected)


def test_one_basis_fun_outside_support():
    assert one_basis_fun(P, M, U, 0, 2.5) == 0.0
    assert one_basis_fun(P, M, U, 6, 1.0) == 0.0


def test_one_basis_fun_end_special_cases():
    knots = [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    assert one_basis_fun(2, 5, knots, 0, 0.0) == 1.0
    assert one_basis_fun(2, 5, knots, 2, 1.0) == 1.0


@pytest.mark.parametrize("u", [0.3, 1.4, 2.5, 3.7, 4.2])
def test_ders_one_basis_fun_agrees_with_ders_basis_funs(u):
    span = find_span(N_CTRL, P, u, U)
    table = ders_basis_funs(span, u, P, P, U)
    for j in range(P + 1):
        single = ders_one_basis_fun(P, M, U, span - P + j, u, P)
        assert single == pytest.approx([table[k][j] for k in range(P + 1)], abs=1e-9)


def test_ders_one_basis_fun_outside_support_is_zero():
    assert ders_one_basis_fun(P, M, U, 0, 3.0, 2) == [0.0, 0.0, 0.0]


def test_ders_one_basis_fun_higher_orders_vanish():
    result = ders_one_basis_fun(P, M, U, 3, 2.5, P + 1)
    assert result[P + 1] == 0.0
    assert result[0] == pytest.approx(one_basis_fun(P, M, U, 3, 2.5))