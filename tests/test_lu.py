import numpy as np
import pytest

from numerik.lu import EXAMPLE_MATRIX, lr_decomposition, main


def test_product_reproduces_example_matrix():
    lower, upper = lr_decomposition(EXAMPLE_MATRIX)
    assert np.allclose(lower @ upper, EXAMPLE_MATRIX)


def test_triangular_structure():
    lower, upper = lr_decomposition(EXAMPLE_MATRIX)
    assert np.allclose(np.tril(lower), lower)
    assert np.allclose(np.diag(lower), np.ones(3))
    assert np.allclose(np.triu(upper), upper)


def test_first_row_of_r_is_first_row_of_a():
    _, upper = lr_decomposition(EXAMPLE_MATRIX)
    assert np.array_equal(upper[0], EXAMPLE_MATRIX[0])


def test_larger_diagonally_dominant_matrix():
    rng = np.random.default_rng(7)
    a = rng.uniform(-1, 1, size=(5, 5)) + 10 * np.eye(5)
    lower, upper = lr_decomposition(a)
    assert np.allclose(lower @ upper, a)


def test_input_is_not_modified():
    a = EXAMPLE_MATRIX.copy()
    lr_decomposition(a)
    assert np.array_equal(a, EXAMPLE_MATRIX)


def test_zero_pivot_raises():
    with pytest.raises(ValueError):
        lr_decomposition([[0.0, 1.0], [1.0, 0.0]])


def test_non_square_raises():
    with pytest.raises(ValueError):
        lr_decomposition([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_main_prints_check_matrix(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Matrix L:" in out and "Matrix R:" in out
    probe_lines = out.split("Matrix A_Probe:\n")[1].strip().splitlines()
    probe = np.array([[float(v) for v in line.split()] for line in probe_lines])
    assert np.allclose(probe, EXAMPLE_MATRIX)