"""Tests for the Pearson coefficient and the matrix builder."""

import math

import pytest

from logics.correlation import build_matrix, pearson
from logics.models import Series

nan = float("nan")


def test_perfect_linear_relationships():
    assert pearson([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)
    assert pearson([1, 2, 3], [6, 4, 2]) == pytest.approx(-1.0)


def test_sales_visitors_coefficient():
    r = pearson([100, 200, 300], [10, 20, 40])
    assert r == pytest.approx(0.98198, abs=1e-5)


def test_self_correlation_is_one():
    a = [3.0, 1.5, 8.25, nan, 4.0]
    assert pearson(a, a) == 1.0


def test_symmetry():
    a = [1.0, 5.0, nan, 2.0, 9.0, 4.0]
    b = [2.0, 3.0, 7.0, nan, 8.0, 1.0]
    assert pearson(a, b) == pearson(b, a)


def test_zero_variance_reports_zero():
    assert pearson([5, 5, 5], [1, 2, 3]) == 0.0
    assert pearson([1, 2, 3], [5, 5, 5]) == 0.0
    assert pearson([0.1, 0.1, 0.1], [1, 7, 3]) == 0.0


def test_pairs_limited_to_shorter_sequence():
    assert pearson([1, 2, 3], [1, 2]) == pytest.approx(1.0)
    assert pearson([1, 2, 100], [1, 2]) == pytest.approx(1.0)


def test_non_finite_positions_are_skipped():
    assert pearson([1, 2, float("inf"), 3], [1, 2, 5, 3]) == pytest.approx(1.0)
    assert pearson([1, nan, 2, 3], [1, 50, 2, 3]) == pytest.approx(1.0)


def test_fewer_than_two_pairs_is_undefined():
    assert pearson([1, nan, 3], [nan, 2, nan]) is None
    assert pearson([1, 2], [5]) is None
    assert pearson([], []) is None


def test_build_matrix_invariants():
    series = [
        Series("A", [1, 2, 3, 4, 5]),
        Series("B", [2, 1, 4, 3, 6]),
        Series("C", [5, 3, nan, 1, 0]),
        Series("D", [7, 7, 7, 7, 7]),
    ]
    matrix = build_matrix(series)
    assert matrix.variables == ["A", "B", "C", "D"]
    n = matrix.size
    for i in range(n):
        assert matrix.grid[i][i] == 1
        for j in range(n):
            assert matrix.grid[i][j] == matrix.grid[j][i]
            assert -1.0 <= matrix.grid[i][j] <= 1.0
    assert matrix.coefficient("A", "D") == 0.0


def test_undefined_pairs_become_zero():
    series = [
        Series("A", [1, 2, nan, nan]),
        Series("B", [nan, nan, 3, 4]),
        Series("C", [1, 2, 3, 4]),
    ]
    matrix = build_matrix(series)
    assert matrix.coefficient("A", "B") == 0.0
    assert matrix.coefficient("A", "C") == pytest.approx(1.0)


def test_identical_series_correlate_to_one():
    values = [3, 9, 4, 1, 7]
    matrix = build_matrix([Series("x", values), Series("y", list(values))])
    assert abs(matrix.grid[0][1] - 1) < 1e-9


def test_progress_callback_reports_each_row():
    calls = []
    series = [Series(name, [1, 2, 3]) for name in "abc"]
    build_matrix(series, progress_callback=lambda done, total, label: calls.append((done, total, label)))
    assert calls == [(1, 3, "a"), (2, 3, "b"), (3, 3, "c")]


def test_parallel_build_matches_sequential():
    series = [Series(f"s{i}", [(i * k) % 7 + k for k in range(12)]) for i in range(6)]
    sequential = build_matrix(series, parallel=False)
    parallel = build_matrix(series, parallel=True)
    assert parallel.grid == sequential.grid
    assert not any(math.isnan(v) for row in parallel.grid for v in row)
