import pytest

from algokit.vector import Vector


def test_resize_set_get_sequence():
    vector = Vector()
    vector.resize(5)
    assert len(vector) == 5

    for i in range(len(vector)):
        vector[i] = i
    for i in range(len(vector)):
        assert vector[i] == i

    vector.resize(10)
    assert len(vector) == 10
    assert list(vector)[:5] == [0, 1, 2, 3, 4]

    vector.resize(3)
    assert len(vector) == 3
    assert list(vector) == [0, 1, 2]


def test_new_vector_is_empty():
    vector = Vector()
    assert len(vector) == 0
    assert vector.capacity == 0


def test_capacity_doubles():
    vector = Vector()
    vector.resize(5)
    assert vector.capacity == 8
    vector.resize(9)
    assert vector.capacity == 16


def test_shrink_keeps_capacity_and_clears_tail():
    vector = Vector()
    vector.resize(4)
    for i in range(4):
        vector[i] = i + 100
    vector.resize(1)
    assert vector.capacity == 4
    vector.resize(4)
    assert list(vector) == [100, None, None, None]


def test_many_resizes_grow_geometrically():
    vector = Vector()
    for i in range(100_000):
        vector.resize(i)
    assert len(vector) == 99_999
    assert vector.capacity == 131_072


def test_reserve_does_not_change_length():
    vector = Vector()
    vector.reserve(20)
    assert len(vector) == 0
    assert vector.capacity == 32


def test_index_out_of_range():
    vector = Vector()
    vector.resize(2)
    vector[0] = 10
    vector[1] = 20
    with pytest.raises(IndexError):
        vector[2]
    with pytest.raises(IndexError):
        vector[5] = 1
    assert len(vector) == 2
    assert list(vector) == [10, 20]


def test_negative_resize_rejected():
    with pytest.raises(ValueError):
        Vector().resize(-1)