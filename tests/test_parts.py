"""Tests for deeplinks.templates.parts — path parts and query parameters."""

import pytest

from deeplinks.errors import ConfigurationError
from deeplinks.templates.kinds import ValueKind
from deeplinks.templates.parts import (
    Capture,
    Literal,
    QueryParameter,
    parameter_key,
    unique_parameters,
)


class TestPathParts:
    def test_literal(self) -> None:
        assert Literal("users").symbol == "users"
        assert str(Literal("users")) == "users"

    def test_literal_rejects_empty_symbol(self) -> None:
        with pytest.raises(ConfigurationError, match="non-empty string"):
            Literal("")

    def test_literal_rejects_non_string(self) -> None:
        with pytest.raises(ConfigurationError):
            Literal(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("symbol", ["a/b", "/users", "users/"])
    def test_literal_rejects_slash(self, symbol: str) -> None:
        with pytest.raises(ConfigurationError, match="more than one path segment"):
            Literal(symbol)

    def test_literal_allows_decoded_text(self) -> None:
        # Segments are compared after percent-decoding
        assert Literal("my docs").symbol == "my docs"

    def test_capture_defaults_to_string(self) -> None:
        assert Capture("slug").kind is ValueKind.STRING

    def test_capture_kind_coerced(self) -> None:
        assert Capture("id", "int").kind is ValueKind.INT  # type: ignore[arg-type]

    def test_capture_display(self) -> None:
        assert str(Capture("id", ValueKind.INT)) == "{id:int}"

    def test_capture_rejects_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown value kind"):
            Capture("id", "uuid")  # type: ignore[arg-type]

    def test_capture_rejects_empty_name(self) -> None:
        with pytest.raises(ConfigurationError):
            Capture("")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Literal("a").symbol = "b"  # type: ignore[misc]


class TestQueryParameter:
    def test_shortcuts(self) -> None:
        assert QueryParameter.required_int("page") == QueryParameter("page", ValueKind.INT, True)
        assert QueryParameter.optional_string("tab") == QueryParameter("tab", ValueKind.STRING, False)
        assert QueryParameter.required_bool("x").kind is ValueKind.BOOL
        assert QueryParameter.optional_double("x").required is False

    def test_generic_constructors(self) -> None:
        assert QueryParameter.required_param("q", "string").required is True
        assert QueryParameter.optional_param("q", ValueKind.INT).kind is ValueKind.INT

    def test_display(self) -> None:
        assert str(QueryParameter.required_int("page")) == "page:int"
        assert str(QueryParameter.optional_string("tab")) == "tab?:string"

    def test_key_is_name(self) -> None:
        assert parameter_key(QueryParameter.required_int("a")) == "a"
        assert parameter_key(QueryParameter.optional_string("a")) == "a"


class TestUniqueParameters:
    def test_collects(self) -> None:
        params = unique_parameters([QueryParameter.required_int("a"), QueryParameter.optional_string("b")])
        assert {p.name for p in params} == {"a", "b"}
        assert isinstance(params, frozenset)

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate query parameter name 'a'"):
            unique_parameters([QueryParameter.required_int("a"), QueryParameter.optional_string("a")])

    def test_exact_duplicates_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            unique_parameters([QueryParameter.required_int("a"), QueryParameter.required_int("a")])

    def test_non_parameter_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Expected QueryParameter"):
            unique_parameters(["a"])  # type: ignore[list-item]
