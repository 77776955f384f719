import math

import pytest

from numerik.basics import fahrenheit_to_celsius, matrix_vector, mnf, quadratic_roots


def _residual(a, b, c, x):
    return a * x * x + b * x + c


def test_fahrenheit_fixed_points():
    assert fahrenheit_to_celsius(32) == 0
    assert fahrenheit_to_celsius(212) == pytest.approx(100)


def test_fahrenheit_is_increasing():
    assert fahrenheit_to_celsius(50) < fahrenheit_to_celsius(51)


def test_two_roots_satisfy_equation():
    roots = quadratic_roots(1, -3, 2)
    assert len(roots) == 2
    for r in roots:
        assert _residual(1, -3, 2, r) == pytest.approx(0, abs=1e-12)
    assert roots[0] > roots[1]


def test_double_root():
    roots = quadratic_roots(1, 2, 1)
    assert len(roots) == 1
    assert _residual(1, 2, 1, roots[0]) == pytest.approx(0, abs=1e-12)


def test_no_real_roots():
    assert quadratic_roots(1, 0, 1) == ()


def test_mnf_matches_quadratic_roots_for_positive_discriminant():
    assert mnf(2, 5, -3) == quadratic_roots(2, 5, -3)


@pytest.mark.parametrize("a,b,c", [(1, 2, 1), (1, 0, 1), (3, 1, 4)])
def test_mnf_none_without_two_roots(a, b, c):
    assert mnf(a, b, c) is None


def test_mnf_roots_sum_and_product():
    x1, x2 = mnf(1, -5, 6)
    assert x1 + x2 == pytest.approx(5)
    assert x1 * x2 == pytest.approx(6)


def test_matrix_vector_identity():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_vector(identity, [4.5, -2, 7]) == [4.5, -2, 7]


def test_matrix_vector_linearity():
    m = [[1.5, 2, -1], [0, 3, 4]]
    x = [1, 2, 3]
    y = [-2, 0.5, 1]
    combined = matrix_vector(m, [p + q for p, q in zip(x, y)])
    separate = [p + q for p, q in zip(matrix_vector(m, x), matrix_vector(m, y))]
    assert all(math.isclose(p, q) for p, q in zip(combined, separate))
    assert len(combined) == 2


def test_matrix_vector_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_vector([[1, 2, 3]], [1, 2])