import bisect

import pytest

from dsakit.search import lower_bound, upper_bound

VEC = [1, 3, 3, 4, 4, 5]


def test_lower_bound_source_case():
    assert VEC[lower_bound(VEC, 3)] == 3


def test_upper_bound_source_case():
    assert VEC[upper_bound(VEC, 3)] == 4


@pytest.mark.parametrize("value", [0, 1, 2, 3, 4, 5, 6])
def test_bounds_match_bisect(value):
    assert lower_bound(VEC, value) == bisect.bisect_left(VEC, value)
    assert upper_bound(VEC, value) == bisect.bisect_right(VEC, value)


@pytest.mark.parametrize("value", [0, 1, 3, 4, 5, 6])
def test_bound_invariants(value):
    lo = lower_bound(VEC, value)
    hi = upper_bound(VEC, value)
    assert lo <= hi
    assert all(x < value for x in VEC[:lo])
    assert all(x >= value for x in VEC[lo:])
    assert all(x <= value for x in VEC[:hi])
    assert all(x > value for x in VEC[hi:])
    assert hi - lo == VEC.count(value)


def test_empty_sequence():
    assert lower_bound([], 3) == 0
    assert upper_bound([], 3) == 0


def test_value_beyond_end():
    assert lower_bound(VEC, 100) == len(VEC)
    assert upper_bound(VEC, 100) == len(VEC)