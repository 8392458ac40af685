import pytest

from dsakit.hash_map import HashMap


@pytest.fixture
def example_map():
    m = HashMap(10)
    for key, value in [(1, 10), (2, 20), (3, 30), (4, 40), (5, 50)]:
        m.insert(key, value)
    return m


def test_example_get(example_map):
    assert example_map.get(1) == 10


def test_example_remove_then_get(example_map):
    example_map.remove(2)
    example_map.remove(4)
    assert example_map.get(3) == 30
    assert example_map.get(5) == 50


def test_get_removed_key_raises(example_map):
    example_map.remove(4)
    with pytest.raises(KeyError, match="Key not found!"):
        example_map.get(4)


def test_remove_missing_key_raises(example_map):
    with pytest.raises(KeyError, match="Key not found!"):
        example_map.remove(99)


def test_colliding_keys_are_kept_apart():
    m = HashMap(10)
    m.insert(1, "one")
    m.insert(11, "eleven")
    m.insert(21, "twenty-one")
    assert m.hash(1) == m.hash(11) == m.hash(21)
    assert m.get(11) == "eleven"
    m.remove(11)
    assert m.get(1) == "one"
    assert m.get(21) == "twenty-one"
    with pytest.raises(KeyError):
        m.get(11)


def test_duplicate_key_returns_first_inserted():
    m = HashMap(4)
    m.insert(7, "first")
    m.insert(7, "second")
    assert m.get(7) == "first"
    m.remove(7)
    assert m.get(7) == "second"


@pytest.mark.parametrize("key", [0, 3, 9, 10, 57, 1000])
def test_hash_is_bucket_index(key):
    m = HashMap(10)
    assert 0 <= m.hash(key) < 10
    assert m.hash(key) == m.hash(key + 10)


@pytest.mark.parametrize("capacity", [0, -5])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        HashMap(capacity)