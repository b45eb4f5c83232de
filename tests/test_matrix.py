import pytest

from cnge.matrix import Matrix, det
from cnge.vector import Vector


def test_from_rows_stores_column_major():
    m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
    assert m.values == [1, 3, 2, 4]


def test_column_and_entry_access():
    m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
    assert m.column(1) == Vector(2, 4)
    assert m[0] == Vector(1, 3)
    assert m[1, 0] == 2
    assert m[0, 1] == 3


def test_column_out_of_range():
    with pytest.raises(IndexError):
        Matrix.identity(2).column(5)


def test_from_rows_short_list_pads_with_zero():
    m = Matrix.from_rows(2, 2, [7])
    assert m[0, 0] == 7
    assert m[1, 0] == 0 and m[0, 1] == 0 and m[1, 1] == 0


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(0, 2)


def test_wrong_value_count():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1, 2, 3])


def test_identity_str():
    assert str(Matrix.identity(2)) == "[1, 0]\n[0, 1]\n"


def test_identity_is_neutral():
    m = Matrix.from_rows(3, 3, [2, 5, 7, 0, 3, 1, 6, 8, 4])
    assert Matrix.identity(3) * m == m
    assert m * Matrix.identity(3) == m


def test_identity_times_vector():
    v = Vector(3, -1, 2)
    assert Matrix.identity(3) * v == v


def test_non_square_product_shape():
    a = Matrix.from_rows(3, 2, [1, 2, 3, 4, 5, 6])
    b = Matrix.from_rows(2, 3, [1, 0, 0, 1, 1, 1])
    product = a * b
    assert (product.columns, product.rows) == (2, 2)
    assert product[0, 0] == a[0, 0] * b[0, 0] + a[1, 0] * b[0, 1] + a[2, 0] * b[0, 2]


def test_product_shape_mismatch():
    a = Matrix(3, 2)
    with pytest.raises(ValueError):
        a * Matrix(3, 2)


def test_vector_size_mismatch():
    with pytest.raises(ValueError):
        Matrix.identity(3) * Vector(1, 2)


def test_add_sub_round_trip():
    a = Matrix.from_rows(2, 3, [1, 2, 3, 4, 5, 6])
    b = Matrix.from_rows(2, 3, [6, 5, 4, 3, 2, 1])
    assert (a + b) - b == a


def test_in_place_add_and_sub():
    a = Matrix.from_rows(2, 2, [1, 2, 3, 4])
    original = Matrix(2, 2, a.values)
    same = a
    a += Matrix.identity(2)
    assert a is same
    assert a[0, 0] == original[0, 0] + 1
    a -= Matrix.identity(2)
    assert a == original


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(3, 3)


def test_set_identity_requires_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).set_identity()


def test_set_identity_in_place():
    m = Matrix.from_rows(2, 2, [9, 9, 9, 9])
    assert m.set_identity() is m
    assert m == Matrix.identity(2)


def test_det_identity():
    assert det(Matrix.identity(4)) == 1


def test_det_triangular_is_diagonal_product():
    m = Matrix.from_rows(3, 3, [2, 5, 7, 0, 3, 1, 0, 0, 4])
    assert det(m) == m[0, 0] * m[1, 1] * m[2, 2]


def test_det_is_multiplicative():
    a = Matrix.from_rows(3, 3, [2, 5, 7, 1, 3, 1, 6, 8, 4])
    b = Matrix.from_rows(3, 3, [1, 0, 2, 3, 1, 0, 4, 2, 5])
    assert det(a * b) == det(a) * det(b)


def test_det_row_swap_negates():
    a = Matrix.from_rows(3, 3, [2, 5, 7, 1, 3, 1, 6, 8, 4])
    swapped = Matrix.from_rows(3, 3, [1, 3, 1, 2, 5, 7, 6, 8, 4])
    assert det(swapped) == -det(a)


def test_det_requires_square():
    with pytest.raises(ValueError):
        det(Matrix(2, 3))