import numpy as np
import pytest

from numerik.jacobian import (
    absolute_error,
    analytic_jacobian,
    error_table,
    example_function,
    jacobian_central,
    jacobian_forward,
    main,
    optimal_step_index,
    relative_error,
)

X = np.array([2.1, 0.5, 3.0])


def test_forward_approaches_analytic():
    approx = jacobian_forward(example_function, X, 1e-6)
    assert np.allclose(approx, analytic_jacobian(X), atol=1e-3)


def test_central_approaches_analytic():
    approx = jacobian_central(example_function, X, 1e-4)
    assert np.allclose(approx, analytic_jacobian(X), atol=1e-6)


def test_central_beats_forward():
    reference = analytic_jacobian(X)
    fd = jacobian_forward(example_function, X, 1e-3)
    cd = jacobian_central(example_function, X, 1e-3)
    assert absolute_error(reference, cd) < absolute_error(reference, fd)


def test_linear_function_is_exact():
    a = np.array([[1.0, 2.0, 0.0], [0.0, -1.0, 4.0]])
    approx = jacobian_forward(lambda v: a @ v, np.zeros(3), 0.5)
    assert approx.shape == (2, 3)
    assert np.allclose(approx, a)


def test_errors_of_identical_matrices():
    m = analytic_jacobian(X)
    assert absolute_error(m, m) == 0
    assert relative_error(m, m) == 0


def test_relative_error_scales_absolute():
    a = analytic_jacobian(X)
    b = a + 0.25
    assert relative_error(a, b) == pytest.approx(absolute_error(a, b) / np.linalg.norm(b))


def test_optimal_step_index_picks_first_minimum():
    assert optimal_step_index([3.0, 1.0, 2.0, 1.0]) == 1


def test_optimal_step_index_defaults_to_zero():
    assert optimal_step_index([1e12, 1e13]) == 0


def test_error_table_rows():
    rows = error_table(X)
    assert [row[0] for row in rows] == [10.0 ** -k for k in range(1, 13)]
    assert all(value >= 0 for row in rows for value in row[1:])
    assert rows[1][2] < rows[1][1]


def test_main_prints_table(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "h Wert" in out
    assert "Für h optimal" in out