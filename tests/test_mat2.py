import pytest

from unison2d.mat2 import (
    mat2_add,
    mat2_create,
    mat2_det,
    mat2_frobenius_norm_sq,
    mat2_identity,
    mat2_inv,
    mat2_inv_transpose,
    mat2_mul,
    mat2_mul_vec,
    mat2_scale,
    mat2_sub,
    mat2_trace,
    mat2_transpose,
)

EPS = 1e-6


def assert_mat_close(actual, expected):
    assert list(actual) == pytest.approx(list(expected), abs=EPS)


def test_identity():
    assert_mat_close(mat2_identity(), [1.0, 0.0, 0.0, 1.0])


def test_create_is_column_major():
    assert mat2_create(1.0, 2.0, 3.0, 4.0) == (1.0, 2.0, 3.0, 4.0)


def test_det():
    assert mat2_det([1.0, 0.0, 0.0, 1.0]) == pytest.approx(1.0, abs=EPS)
    assert mat2_det([2.0, 0.0, 0.0, 3.0]) == pytest.approx(6.0, abs=EPS)


def test_inv():
    a = [3.0, 1.0, 2.0, 4.0]
    assert_mat_close(mat2_mul(a, mat2_inv(a)), mat2_identity())


def test_inv_singular_returns_identity():
    assert mat2_inv([1.0, 2.0, 2.0, 4.0]) == mat2_identity()
    assert mat2_inv_transpose([0.0, 0.0, 0.0, 0.0]) == mat2_identity()


def test_mul_identity():
    a = [1.0, 2.0, 3.0, 4.0]
    i = mat2_identity()
    assert_mat_close(mat2_mul(i, a), a)
    assert_mat_close(mat2_mul(a, i), a)


def test_transpose():
    a = [1.0, 2.0, 3.0, 4.0]
    at = mat2_transpose(a)
    assert_mat_close(at, [1.0, 3.0, 2.0, 4.0])
    assert_mat_close(mat2_transpose(at), a)


def test_inv_transpose():
    a = [3.0, 1.0, 2.0, 4.0]
    assert_mat_close(mat2_inv_transpose(a), mat2_transpose(mat2_inv(a)))


def test_add_sub():
    a = [1.0, 2.0, 3.0, 4.0]
    b = [5.0, 6.0, 7.0, 8.0]
    assert_mat_close(mat2_add(a, b), [6.0, 8.0, 10.0, 12.0])
    assert_mat_close(mat2_sub(a, b), [-4.0, -4.0, -4.0, -4.0])


def test_scale():
    assert_mat_close(mat2_scale([1.0, 2.0, 3.0, 4.0], 2.0), [2.0, 4.0, 6.0, 8.0])


def test_trace():
    assert mat2_trace(mat2_identity()) == pytest.approx(2.0, abs=EPS)
    assert mat2_trace([3.0, 1.0, 2.0, 5.0]) == pytest.approx(8.0, abs=EPS)


def test_frobenius_norm_sq():
    assert mat2_frobenius_norm_sq(mat2_identity()) == pytest.approx(2.0, abs=EPS)
    assert mat2_frobenius_norm_sq([1.0, 2.0, 3.0, 4.0]) == pytest.approx(30.0, abs=EPS)


def test_mul_vec():
    result = mat2_mul_vec([1.0, 2.0, 3.0, 4.0], [1.0, 1.0])
    assert result[0] == pytest.approx(4.0, abs=EPS)
    assert result[1] == pytest.approx(6.0, abs=EPS)