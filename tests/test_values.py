"""Tests for deeplinks.matching.values — ValueBag and typed accessors."""

import pytest

from deeplinks.errors import MissingValue, ValueKindError
from deeplinks.matching.extractor import extract
from deeplinks.matching.values import TypedValues, ValueBag
from deeplinks.templates.kinds import ValueKind
from deeplinks.templates.parts import QueryParameter
from deeplinks.templates.template import Template


class TestTypedValues:
    def test_mapping_protocol(self) -> None:
        v = TypedValues({"id": 42, "name": "bob"})
        assert v["id"] == 42
        assert "name" in v
        assert "missing" not in v
        assert len(v) == 2
        assert set(v) == {"id", "name"}

    def test_equals_plain_dict(self) -> None:
        assert TypedValues({"id": 42}) == {"id": 42}

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            TypedValues()["missing"]

    def test_immutable(self) -> None:
        source = {"id": 1}
        v = TypedValues(source)
        source["id"] = 2
        assert v["id"] == 1
        with pytest.raises(TypeError):
            v["id"] = 3  # type: ignore[index]

    def test_kind(self) -> None:
        v = TypedValues({"a": 1, "b": 1.5, "c": True, "d": "x"})
        assert v.kind("a") is ValueKind.INT
        assert v.kind("b") is ValueKind.DOUBLE
        assert v.kind("c") is ValueKind.BOOL
        assert v.kind("d") is ValueKind.STRING

    def test_typed_getters(self) -> None:
        v = TypedValues({"a": 1, "b": 1.5, "c": False, "d": "x"})
        assert v.get_int("a") == 1
        assert v.get_double("b") == 1.5
        assert v.get_bool("c") is False
        assert v.get_str("d") == "x"

    def test_getter_default(self) -> None:
        v = TypedValues()
        assert v.get_int("a") is None
        assert v.get_int("a", 7) == 7

    def test_getter_kind_mismatch(self) -> None:
        v = TypedValues({"id": "42"}, group="path")
        with pytest.raises(ValueKindError, match="path value 'id' is string, expected int"):
            v.get_int("id")

    def test_bool_is_not_an_int(self) -> None:
        with pytest.raises(ValueKindError):
            TypedValues({"flag": True}).get_int("flag")

    def test_require(self) -> None:
        v = TypedValues({"id": 42}, group="path")
        assert v.require("id", "int") == 42
        with pytest.raises(MissingValue, match="No path value named 'other'"):
            v.require("other", ValueKind.INT)

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValueKindError, match="unsupported type"):
            TypedValues({"x": [1]}).kind("x")  # type: ignore[dict-item]

    def test_hash_ignores_insertion_order(self) -> None:
        assert hash(TypedValues({"a": 1, "b": "x"})) == hash(TypedValues({"b": "x", "a": 1}))


class TestValueBag:
    def test_defaults(self) -> None:
        bag = ValueBag()
        assert bag.path == {}
        assert bag.query == {}
        assert bag.fragment is None

    def test_of(self) -> None:
        bag = ValueBag.of({"id": 1}, {"tab": "x"}, "top")
        assert bag.path == {"id": 1}
        assert bag.query == {"tab": "x"}
        assert bag.fragment == "top"

    def test_equality(self) -> None:
        assert ValueBag.of({"id": 1}) == ValueBag.of({"id": 1})
        assert ValueBag.of({"id": 1}) != ValueBag.of({"id": 2})

    def test_frozen(self) -> None:
        bag = ValueBag()
        with pytest.raises(AttributeError):
            bag.fragment = "x"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(ValueBag.of({"id": 1})) == hash(ValueBag.of({"id": 1}))

    def test_usable_in_a_set(self) -> None:
        bags = {ValueBag.of({"id": 1}, {"tab": "x"}), ValueBag.of({"id": 1}, {"tab": "x"}), ValueBag.of({"id": 2})}
        assert len(bags) == 2

    def test_usable_as_cache_key(self) -> None:
        cache = {ValueBag.of({"id": 1}, fragment="top"): "profile"}
        assert cache[ValueBag.of({"id": 1}, fragment="top")] == "profile"
        assert ValueBag.of({"id": 1}) not in cache

    def test_extracted_bag_hashes_like_built_bag(self) -> None:
        t = Template.empty().term("users").int("id").with_query_parameters([QueryParameter.optional_string("tab")])
        bag = extract(t, "myapp://users/42?tab=posts")

        assert bag is not None
        assert hash(bag) == hash(ValueBag.of({"id": 42}, {"tab": "posts"}))
