import pytest

from parquette.arrays import Array, ArrayKind, Value


NESTED = [
    Array(ArrayKind.INT64, [0, 1]),
    None,
    Array(ArrayKind.INT64, [2, None, 3]),
    Array(ArrayKind.INT64, [4, 5, 6]),
    Array(ArrayKind.INT64, []),
    Array(ArrayKind.INT64, [7, 8, 9]),
    None,
    Array(ArrayKind.INT64, [10]),
]

STRINGS = [b"Hello", None, b"aa", b"", None, b"abc", None, None, b"def", b"aaa"]
BOOLS = [True, None, False, False, None, True, None, None, True, True]
VALIDITY = [False, True, True, True, True, True, True, True, True, True]


@pytest.mark.parametrize(
    "kind, values",
    [
        (ArrayKind.INT32, [4, 5, 6, 7, 2, 3, 0, 1]),
        (ArrayKind.INT64, [0, 1, None, 3, None, 5, 6, 7, None, 9]),
        (ArrayKind.FLOAT64, [0.0, 10.1, 0.0, 10.1]),
        (ArrayKind.BOOLEAN, BOOLS),
        (ArrayKind.BINARY, STRINGS),
        (ArrayKind.INT96, [(1, 2, 3), None]),
    ],
)
def test_len_matches_values(kind, values):
    array = Array(kind, values)
    assert len(array) == len(values)
    assert array.is_empty() is False


def test_empty_array():
    array = Array(ArrayKind.UINT32, [])
    assert len(array) == 0
    assert array.is_empty() is True


def test_list_array_len_counts_outer_items():
    array = Array(ArrayKind.LIST, NESTED)
    assert len(array) == len(NESTED)
    assert array.values[4].is_empty() is True
    assert array.values[1] is None


def test_struct_len_is_first_child_len():
    children = [Array(ArrayKind.BINARY, STRINGS), Array(ArrayKind.BOOLEAN, BOOLS)]
    array = Array(ArrayKind.STRUCT, children, VALIDITY)
    assert len(array) == len(STRINGS)
    assert array.validity == VALIDITY


def test_struct_without_children_has_no_length():
    array = Array(ArrayKind.STRUCT, [], [])
    assert array.values == []
    assert array.validity == []
    with pytest.raises(ValueError):
        array.is_empty()


def test_struct_requires_validity():
    with pytest.raises(ValueError):
        Array(ArrayKind.STRUCT, [Array(ArrayKind.INT32, [1])])


def test_struct_children_must_be_arrays():
    with pytest.raises(TypeError):
        Array(ArrayKind.STRUCT, [[1, 2]], [True, True])


def test_non_struct_rejects_validity():
    with pytest.raises(ValueError):
        Array(ArrayKind.INT32, [1], [True])


def test_list_items_must_be_arrays():
    with pytest.raises(TypeError):
        Array(ArrayKind.LIST, [[1, 2]])


def test_array_equality():
    assert Array(ArrayKind.LIST, NESTED) == Array(ArrayKind.LIST, list(NESTED))
    assert Array(ArrayKind.INT32, [1, 2]) != Array(ArrayKind.INT64, [1, 2])
    assert Array(ArrayKind.INT32, [1, None]) != Array(ArrayKind.INT32, [1, 2])


def test_struct_equality_depends_on_validity():
    children = [Array(ArrayKind.BOOLEAN, BOOLS)]
    left = Array(ArrayKind.STRUCT, children, VALIDITY)
    right = Array(ArrayKind.STRUCT, children, [True] * len(VALIDITY))
    assert left != right
    assert left == Array(ArrayKind.STRUCT, list(children), list(VALIDITY))


def test_values_are_copied():
    source = [1, 2, 3]
    array = Array(ArrayKind.INT32, source)
    source.append(4)
    assert len(array) == 3


def test_value_equality():
    assert Value(ArrayKind.INT64, 9) == Value(ArrayKind.INT64, 9)
    assert Value(ArrayKind.BINARY, b"def") != Value(ArrayKind.BINARY, b"")
    assert Value(ArrayKind.INT32, 0) != Value(ArrayKind.INT64, 0)
    assert Value(ArrayKind.BOOLEAN).value is None


def test_value_list_holds_array():
    inner = Array(ArrayKind.INT64, [10])
    assert Value(ArrayKind.LIST, inner).value == inner
    with pytest.raises(TypeError):
        Value(ArrayKind.LIST, [10])


def test_value_cannot_be_struct():
    with pytest.raises(ValueError):
        Value(ArrayKind.STRUCT, None)