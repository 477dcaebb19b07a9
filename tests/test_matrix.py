import pytest

from lemkis.matrix import (
    Matrix,
    column_widths,
    eye,
    identity,
    to_string,
    transpose,
)


def test_shape():
    m = Matrix(3, 4, 0)
    assert m.number_of_rows() == 3
    assert m.number_of_columns() == 4
    assert m.shape() == (3, 4)


def test_access_operator():
    m = Matrix(3, 4, 0)
    m[0, 0] = 1
    m[1, 2] = 3
    assert m == [1, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0]
    assert m.row(0) == [1, 0, 0, 0]
    assert m.diagonal() == [1, 0, 0]
    assert m.column(2) == [0, 3, 0]
    assert m[1, 4, 2] == [0, 0, 0, 0]


def test_numeric_operators():
    m = Matrix(3, 4, 0)
    m += 1
    assert m == Matrix(3, 4, 1)
    m1 = Matrix(3, 4, 1)
    m1[0, 0] = 2
    m += m1
    expected = Matrix(3, 4, 2)
    expected[0, 0] = 3
    assert m == expected


def test_transpose():
    m = Matrix(3, 4, 0)
    m[0, 0] = 1
    m[1, 2] = 3
    expected = Matrix(4, 3, 0)
    expected[0, 0] = 1
    expected[2, 1] = 3
    assert transpose(m) == expected


def test_identity():
    assert identity(3) == [1, 0, 0, 0, 1, 0, 0, 0, 1]


def test_eye():
    assert eye(1, 2, 3) == [1, 0, 0, 0, 2, 0, 0, 0, 3]


def test_eye_from_sequence():
    assert eye([2, 3, 4]) == eye(2, 3, 4)


def test_eye_without_entries_raises():
    with pytest.raises(ValueError):
        eye()


def test_equality_with_ranges_of_different_length():
    assert Matrix(1, 2, 1) == [1, 1]
    assert not (Matrix(1, 1, 1) == [1, 2])


def test_equality_requires_same_shape():
    assert not (Matrix(2, 3, 0) == Matrix(3, 2, 0))


def test_set_row_and_column():
    m = Matrix(2, 3, 0)
    m.set_row(1, [4, 5, 6])
    m.set_column(0, 9)
    assert m == [9, 0, 0, 9, 5, 6]


def test_set_row_wrong_length_raises():
    m = Matrix(2, 3, 0)
    with pytest.raises(ValueError):
        m.set_row(0, [1, 2])


def test_index_out_of_range_raises():
    m = Matrix(2, 2, 0)
    with pytest.raises(IndexError):
        m[0, 2]
    with pytest.raises(IndexError):
        m.row(2)


def test_shape_mismatch_raises():
    m = Matrix(2, 2, 0)
    with pytest.raises(ValueError):
        m += Matrix(2, 3, 0)


def test_add_does_not_modify_operands():
    m1 = Matrix(2, 2, 1)
    m2 = Matrix(2, 2, 2)
    result = m1 + m2
    assert result == Matrix(2, 2, 3)
    assert m1 == Matrix(2, 2, 1)
    assert (m1 + 1) == Matrix(2, 2, 2)


def test_sub_mul_div():
    m = Matrix(2, 2, 7)
    m -= 1
    m *= 2
    assert m == Matrix(2, 2, 12)
    m /= 5
    assert m == Matrix(2, 2, 2)
    negative = Matrix(1, 1, -7)
    negative /= 2
    assert negative == [-3]


def test_transpose_twice_is_identity_operation():
    m = Matrix(2, 3, 0)
    m.set_row(0, [1, 2, 3])
    m.set_row(1, [4, 5, 6])
    assert transpose(transpose(m)) == m
    assert transpose(m).row(0) == m.column(0)


def test_column_widths():
    m = Matrix(2, 2, 0)
    m[1, 0] = 123
    assert column_widths(m) == [3, 1]


def test_to_string_without_padding():
    m = Matrix(2, 2, 0)
    m.set_row(0, [1, 2])
    m.set_row(1, [3, 4])
    assert to_string(m, ",", ";", 0) == "1,2;3,4"
    assert format(m, ",;0") == "1,2;3,4"


def test_str_pads_and_centres():
    m = Matrix(2, 2, 0)
    m.set_row(0, [1, 2])
    m.set_row(1, [3, 4])
    assert str(m) == "\n 1 , 2 \n 3 , 4 "