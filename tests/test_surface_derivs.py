import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from nurbskit.curve import curve_deriv_cpts
from nurbskit.surface import surface_derivs_alg1, surface_point
from nurbskit.surface_derivs import surface_deriv_cpts, surface_derivs_alg2

U = [0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0]
V = [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]
N, P_DEG, M, Q_DEG = 3, 2, 2, 2
NET = [
    [1.0, 2.0, 0.5],
    [3.0, -1.0, 4.0],
    [0.0, 2.5, 1.5],
    [2.0, 1.0, -3.0],
]
NET3 = [
    [(float(i), float(j), float((i + 1) * (j - 1))) for j in range(M + 1)]
    for i in range(N + 1)
]


def _assert_tables_close(a, b):
    assert len(a) == len(b)
    for row_a, row_b in zip(a, b):
        assert len(row_a) == len(row_b)
        for x, y in zip(row_a, row_b):
            assert x == pytest.approx(y, abs=1e-9)


def test_level_zero_is_sub_net():
    pkl = surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET, 2, 1, 3, 0, 2)
    assert pkl[0][0] == [row[0:3] for row in NET[1:4]]


def test_u_level_matches_column_curves():
    pkl = surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET, 2, 0, 2, 0, 2)
    for j in range(3):
        column = [NET[i][j] for i in range(N + 1)]
        expected = curve_deriv_cpts(N, P_DEG, U, column, 2, 0, 2)
        for k in range(3):
            assert [row[j] for row in pkl[k][0]] == pytest.approx(expected[k])


def test_level_shapes():
    pkl = surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET, 2, 0, 2, 0, 2)
    assert len(pkl) == 3
    for k, levels in enumerate(pkl):
        assert len(levels) == 2 - k + 1
        for l, level in enumerate(levels):
            assert len(level) == 3 - k
            assert all(len(row) == 3 - l for row in level)


@pytest.mark.parametrize("d", [0, 1, 2, 3])
@pytest.mark.parametrize("u,v", [(0.3, 0.6), (0.5, 0.0), (0.8, 1.0), (0.0, 0.25)])
def test_alg2_agrees_with_alg1(u, v, d):
    a = surface_derivs_alg2(N, P_DEG, U, M, Q_DEG, V, NET, u, v, d)
    b = surface_derivs_alg1(N, P_DEG, U, M, Q_DEG, V, NET, u, v, d)
    _assert_tables_close(a, b)


def test_alg2_agrees_with_alg1_for_tuples():
    a = surface_derivs_alg2(N, P_DEG, U, M, Q_DEG, V, NET3, 0.7, 0.4, 2)
    b = surface_derivs_alg1(N, P_DEG, U, M, Q_DEG, V, NET3, 0.7, 0.4, 2)
    for row_a, row_b in zip(a, b):
        for x, y in zip(row_a, row_b):
            assert x == pytest.approx(y, abs=1e-9)


@settings(max_examples=40)
@given(st.floats(0.0, 1.0), st.floats(0.0, 1.0))
def test_zeroth_derivative_is_surface_point(u, v):
    skl = surface_derivs_alg2(N, P_DEG, U, M, Q_DEG, V, NET, u, v, 1)
    assert skl[0][0] == pytest.approx(
        surface_point(N, P_DEG, U, M, Q_DEG, V, NET, u, v), abs=1e-9
    )


def test_orders_beyond_total_are_zero():
    skl = surface_derivs_alg2(N, P_DEG, U, M, Q_DEG, V, NET, 0.3, 0.6, 3)
    assert skl[3][0] == 0.0
    assert skl[2][2] == 0.0
    assert skl[1][3] == 0.0


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        surface_derivs_alg2(N, P_DEG, U, M, Q_DEG, V, NET, 0.3, 0.6, -1)


def test_bad_index_range_rejected():
    with pytest.raises(ValueError):
        surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET, 1, 0, 2, 1, 3)
    with pytest.raises(ValueError):
        surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET, 1, 2, 1, 0, 2)


def test_short_net_rejected():
    with pytest.raises(ValueError):
        surface_deriv_cpts(N, P_DEG, U, M, Q_DEG, V, NET[:2], 1, 0, 1, 0, 2)