import pytest

from containerkit.vector import Vector


def test_basic_constructor():
    vec = Vector()
    assert len(vec) == 0
    assert vec.empty()
    assert vec.capacity() == 0


def test_size_constructor():
    vec = Vector.filled(5, 0.0)
    assert len(vec) == 5
    assert list(vec) == [0.0] * 5
    assert vec.capacity() == 5


def test_filled_negative_size():
    with pytest.raises(ValueError):
        Vector.filled(-1)


def test_initializer_list_constructor():
    vec = Vector(["a", "b", "c"])
    assert len(vec) == 3
    assert vec[0] == "a"
    assert vec[1] == "b"
    assert vec[2] == "c"


def test_copy_constructor():
    origin = Vector([1, 2, 3, 4])
    vec = origin.copy()
    assert list(vec) == list(origin)
    vec[0] = 100
    assert origin[0] == 1
    assert vec.capacity() == origin.capacity()


def test_copy_assignment():
    origin = Vector([1, 2, 3, 4])
    vec = Vector.filled(15, 0)
    vec.assign(origin)
    assert len(vec) == 4
    assert len(origin) == 4
    assert list(vec) == list(origin)
    assert vec.capacity() == 15


def test_initializer_list_assignment():
    vec = Vector.filled(10, 0)
    vec.assign([1, 2, 3, 4])
    assert len(vec) == 4
    assert list(vec) == [1, 2, 3, 4]


def test_at_normal():
    vec = Vector([1, 2, 3])
    assert [vec.at(i) for i in range(len(vec))] == [1, 2, 3]


def test_at_out_of_range():
    with pytest.raises(IndexError):
        Vector().at(0)
    with pytest.raises(IndexError):
        Vector([1, 2, 3]).at(3)


def test_index_operator():
    vec = Vector(["a", "b", "c", "d"])
    assert [vec[i] for i in range(4)] == ["a", "b", "c", "d"]


def test_front():
    assert Vector([ord("a"), ord("b"), ord("c"), ord("d")]).front() == ord("a")
    assert Vector([2e22]).front() == pytest.approx(2e22)
    assert Vector.filled(5).front() is None


def test_back():
    assert Vector([ord("a"), ord("b"), ord("c"), ord("d")]).back() == ord("d")
    assert Vector([2e22]).back() == pytest.approx(2e22)
    assert Vector.filled(5).back() is None


def test_front_back_empty():
    with pytest.raises(IndexError):
        Vector().front()
    with pytest.raises(IndexError):
        Vector().back()


def test_iterator():
    vec = Vector([0, 2, 4, 6, 8, 10])
    assert list(vec) == [0, 2, 4, 6, 8, 10]


def test_reserve():
    vec = Vector()
    vec.reserve(15)
    assert vec.capacity() == 15
    vec.reserve(200)
    assert vec.capacity() == 200
    vec.reserve(100)
    assert vec.capacity() == 200
    assert len(vec) == 0


def test_shrink_to_fit():
    vec = Vector.filled(25, 0)
    vec.reserve(1000)
    vec.shrink_to_fit()
    assert vec.capacity() == len(vec)
    vec.reserve(100000)
    vec.shrink_to_fit()
    assert vec.capacity() == len(vec)
    vec.reserve(22)
    vec.shrink_to_fit()
    assert vec.capacity() == len(vec) == 25


def test_clear():
    vec = Vector()
    vec.clear()
    assert len(vec) == 0
    vec2 = Vector(["a", "b", "c"])
    vec2.clear()
    assert len(vec2) == 0
    assert vec2.capacity() == 3


def test_insert():
    vec = Vector(["a"])
    pos = vec.insert(0, "b")
    assert vec[pos] == "b"
    pos = vec.insert(1, "c")
    assert vec[pos] == "c"
    assert list(vec) == ["b", "c", "a"]
    vec.insert(0, "d")
    vec.insert(2, "e")
    assert list(vec) == ["d", "b", "e", "c", "a"]


def test_insert_end():
    vec = Vector(["a"])
    pos = vec.insert(len(vec), "b")
    assert vec[pos] == "b"
    pos = vec.insert(len(vec), "c")
    assert vec[pos] == "c"
    assert list(vec) == ["a", "b", "c"]


def test_insert_empty():
    vec = Vector()
    pos = vec.insert(0, 11)
    assert vec[pos] == 11
    assert list(vec) == [11]
    vec2 = Vector()
    pos2 = vec2.insert(len(vec2), 2.33)
    assert vec2[pos2] == pytest.approx(2.33)
    assert len(vec2) == 1


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        Vector([1]).insert(5, 2)


def test_erase():
    vec = Vector([1, 2, 3, 4, 5])
    vec.erase(2)
    assert list(vec) == [1, 2, 4, 5]
    vec.erase(len(vec) - 1)
    assert list(vec) == [1, 2, 4]
    vec.erase(0)
    assert list(vec) == [2, 4]


def test_erase_out_of_range():
    with pytest.raises(IndexError):
        Vector([1]).erase(1)


def test_push_back():
    vec = Vector()
    for i in range(100):
        vec.push_back(i)
    assert len(vec) == 100
    vec.shrink_to_fit()
    for i in range(100, 1000):
        vec.push_back(i)
    assert len(vec) == 1000
    assert list(vec) == list(range(1000))
    assert vec.capacity() >= len(vec)


def test_first_push_back_uses_initial_capacity():
    vec = Vector()
    vec.push_back(1)
    assert vec.capacity() == 8


def test_pop_back():
    vec = Vector()
    for i in range(2000):
        vec.push_back(i)
    for _ in range(500):
        vec.pop_back()
    assert len(vec) == 1500
    assert [vec.at(i) for i in range(1500)] == list(range(1500))
    for _ in range(1500):
        vec.pop_back()
    assert len(vec) == 0
    with pytest.raises(IndexError):
        vec.pop_back()


def test_swap():
    vec = Vector([1, 2, 3, 4])
    other = Vector([5, 6, 7, 8, 9, 10])
    other.reserve(20)
    vec.swap(other)
    assert list(vec) == [5, 6, 7, 8, 9, 10]
    assert list(other) == [1, 2, 3, 4]
    assert vec.capacity() == 20
    assert other.capacity() == 4


def test_self_swap():
    vec = Vector([1, 2, 3, 4])
    vec.swap(vec)
    assert list(vec) == [1, 2, 3, 4]


def test_insert_many_once():
    vec = Vector([1, 2, 3])
    pos = vec.insert_many(1, 4)
    assert vec[pos] == 4
    assert list(vec) == [1, 4, 2, 3]


def test_insert_many_multiple():
    vec = Vector(["a", "b", "c"])
    pos = vec.insert_many(2, "d", "e", "f")
    assert vec[pos] == "d"
    assert list(vec) == ["a", "b", "d", "e", "f", "c"]
    pos = vec.insert_many(0, "a", "b", "o", "b", "a")
    assert vec[pos] == "a"
    assert list(vec) == ["a", "b", "o", "b", "a", "a", "b", "d", "e", "f", "c"]


def test_insert_many_nothing():
    vec = Vector([1.1, 2.2, 3.3])
    pos = vec.insert_many(0)
    assert vec[pos] == pytest.approx(1.1)
    assert list(vec) == [1.1, 2.2, 3.3]


def test_insert_many_to_empty():
    vec = Vector()
    pos = vec.insert_many(0, 1, 2, 3)
    assert vec[pos] == 1
    assert list(vec) == [1, 2, 3]


def test_insert_many_to_end():
    vec = Vector(["a", "b", "o"])
    pos = vec.insert_many(len(vec), "b", "u", "s")
    assert vec[pos] == "b"
    assert list(vec) == ["a", "b", "o", "b", "u", "s"]


def test_insert_many_back_once():
    vec = Vector([0, 2, 4, 6])
    vec.insert_many_back(8)
    assert list(vec) == [0, 2, 4, 6, 8]


def test_insert_many_back_multiple():
    vec = Vector([0, 1, 4, 9])
    vec.insert_many_back(16, 25, 36)
    assert list(vec) == [0, 1, 4, 9, 16, 25, 36]


def test_insert_many_back_nothing():
    vec = Vector(["c", "o", "o", "l"])
    vec.insert_many_back()
    assert list(vec) == ["c", "o", "o", "l"]


def test_insert_many_back_empty():
    vec = Vector()
    vec.insert_many_back("c", "o", "o", "l")
    assert list(vec) == ["c", "o", "o", "l"]


def test_equality():
    assert Vector([1, 2]) == Vector([1, 2])
    assert not (Vector([1, 2]) == Vector([2, 1]))