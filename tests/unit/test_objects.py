from __future__ import annotations

import pytest

from oneliners.domain.objects import clear_null, invert_object, is_objects_equal, obj_sort


class TestIsObjectsEqual:
    def test_all_equal(self) -> None:
        assert is_objects_equal({"a": 1}, {"a": 1}, {"a": 1}) is True

    def test_one_differs(self) -> None:
        assert is_objects_equal({"a": 1}, {"a": 1}, {"a": 2}) is False

    def test_key_order_matters(self) -> None:
        assert is_objects_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}) is False

    def test_zero_or_one(self) -> None:
        assert is_objects_equal() is True
        assert is_objects_equal({"a": 1}) is True

    def test_unserializable_values_use_str(self) -> None:
        assert is_objects_equal({"s": {1}}, {"s": {1}}) is True


class TestInvertObject:
    def test_inverts(self) -> None:
        assert invert_object({"a": 1, "b": 2}) == {1: "a", 2: "b"}

    def test_repeated_values_last_wins(self) -> None:
        assert invert_object({"a": 1, "b": 1}) == {1: "b"}

    def test_unhashable_value_raises(self) -> None:
        with pytest.raises(TypeError):
            invert_object({"a": [1]})


class TestClearNull:
    def test_removes_none(self) -> None:
        assert clear_null({"a": 1, "b": None, "c": 0, "d": "", "e": False}) == {
            "a": 1,
            "c": 0,
            "d": "",
            "e": False,
        }

    def test_does_not_mutate(self) -> None:
        source = {"a": None}
        clear_null(source)
        assert source == {"a": None}

    @pytest.mark.parametrize(
        "obj",
        [{}, {"a": None}, {"a": 1, "b": None, "c": [None]}, {"x": {"y": None}}],
    )
    def test_idempotent(self, obj: dict) -> None:
        once = clear_null(obj)
        assert clear_null(once) == once


class TestObjSort:
    def test_sorts_keys(self) -> None:
        result = obj_sort({"b": 2, "c": 3, "a": 1})
        assert list(result) == ["a", "b", "c"]
        assert result == {"a": 1, "b": 2, "c": 3}

    @pytest.mark.parametrize(
        "obj",
        [{}, {"z": 1, "a": 2, "m": 3}, {"B": 1, "a": 2, "A": 3}, {"10": 1, "9": 2, "1": 3}],
    )
    def test_idempotent_and_ascending(self, obj: dict) -> None:
        once = obj_sort(obj)
        twice = obj_sort(once)
        assert list(twice) == list(once)
        keys = list(once)
        assert all(a < b for a, b in zip(keys, keys[1:], strict=False))
