"""Unit tests for stuff.utils.sequences."""

from stuff.utils.sequences import pop_value


def test_pop_value_removes_last_occurrence_only():
    """Only the last matching element is removed."""
    items = [1, 2, 1, 3]
    pop_value(items, 1)
    assert items == [1, 2, 3]


def test_pop_value_mutates_in_place():
    """The caller's list object is modified and nothing is returned."""
    items = ["a", "b"]
    alias = items
    assert pop_value(items, "b") is None
    assert alias == ["a"]


def test_pop_value_missing_value_is_noop():
    """Lists without the value are left untouched."""
    items = [1, 2, 3]
    pop_value(items, 4)
    assert items == [1, 2, 3]


def test_pop_value_empty_list():
    """An empty list stays empty."""
    items: list[int] = []
    pop_value(items, 1)
    assert not items


def test_pop_value_uses_strict_equality():
    """Booleans and strings do not match numbers, even if they compare equal."""
    items = [1, True, "1"]
    pop_value(items, 1)
    assert items == [True, "1"]

    items = [1, True, "1"]
    pop_value(items, True)
    assert items == [1, "1"]


def test_pop_value_matches_equal_objects():
    """Distinct but equal objects of the same type match."""
    items = [{"a": 1}, {"b": 2}, {"a": 1}]
    pop_value(items, {"a": 1})
    assert items == [{"a": 1}, {"b": 2}]


def test_pop_value_matches_any_nan():
    """A NaN value finds the last NaN element, even a distinct NaN object."""
    items = [float("nan"), 1.0, float("nan"), 2.0]
    pop_value(items, float("nan"))
    assert len(items) == 3
    assert items[1:] == [1.0, 2.0]
    assert items[0] != items[0]  # NaN


def test_pop_value_int_and_float_are_one_number_type():
    """Numbers compare by value across int and float."""
    items = [1.0, 2]
    pop_value(items, 1)
    assert items == [2]

    items = [3, 2.0, 3.0]
    pop_value(items, 2)
    assert items == [3, 3.0]
