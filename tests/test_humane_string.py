from __future__ import annotations

import bisect

import pytest

from humanesort.string import HumaneString


def test_sort_wrapped_strings():
    strings = ["11", "2", "a", "1"]
    humans = sorted(HumaneString(s) for s in strings)
    assert [h.data for h in humans] == ["1", "2", "11", "a"]


def test_equality_is_raw_string_equality():
    assert HumaneString("abc") == HumaneString("abc")
    assert HumaneString("007") != HumaneString("7")
    assert len({HumaneString("x1"), HumaneString("x1"), HumaneString("x01")}) == 2


def test_order_ties_between_unequal_strings():
    a, b = HumaneString("007"), HumaneString("7")
    assert not a < b and not b < a
    assert not a > b and not b > a
    assert a <= b and b <= a
    assert a >= b and b >= a


def test_rich_comparisons_follow_humane_order():
    a, b = HumaneString("file2"), HumaneString("file10")
    assert a < b and a <= b
    assert b > a and b >= a
    assert max(a, b) is b


def test_usable_with_bisect():
    items = [HumaneString(s) for s in ("v1", "v2", "v10", "v20")]
    bisect.insort(items, HumaneString("v9"))
    assert [str(h) for h in items] == ["v1", "v2", "v9", "v10", "v20"]


def test_str_repr_and_readonly_data():
    h = HumaneString("page 3")
    assert str(h) == "page 3"
    assert repr(h) == "HumaneString('page 3')"
    with pytest.raises(AttributeError):
        h.data = "other"


def test_other_types_are_not_comparable():
    h = HumaneString("a")
    assert h != "a"
    with pytest.raises(TypeError):
        h < "b"
    with pytest.raises(TypeError):
        HumaneString(5)
