"""Path parts and query parameters — the building blocks of a Template."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from deeplinks.errors import ConfigurationError
from deeplinks.templates.kinds import ValueKind


def _check_name(name: str, what: str) -> None:
    if not isinstance(name, str) or not name:
        msg = f"{what} name must be a non-empty string, got {name!r}"
        raise ConfigurationError(msg)


def _coerce_kind(kind: ValueKind | str) -> ValueKind:
    try:
        return ValueKind(kind)
    except ValueError:
        known = ", ".join(k.value for k in ValueKind)
        msg = f"Unknown value kind {kind!r}. Expected one of: {known}"
        raise ConfigurationError(msg) from None


@dataclass(frozen=True, slots=True)
class Literal:
    """A path segment that must equal *symbol* exactly (after decoding)."""

    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or not self.symbol:
            msg = f"Literal symbol must be a non-empty string, got {self.symbol!r}"
            raise ConfigurationError(msg)
        # One literal matches one segment; build_url would emit a "/" verbatim
        if "/" in self.symbol:
            msg = f"Literal symbol {self.symbol!r} spans more than one path segment"
            raise ConfigurationError(msg)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Capture:
    """A path segment parsed as *kind* and stored under *name*.

    Rendered as ``{name:kind}`` for display, the same notation web routers
    use for typed route parameters.
    """

    name: str
    kind: ValueKind = ValueKind.STRING

    def __post_init__(self) -> None:
        _check_name(self.name, "Capture")
        object.__setattr__(self, "kind", _coerce_kind(self.kind))

    def __str__(self) -> str:
        return f"{{{self.name}:{self.kind}}}"


PathPart: TypeAlias = Literal | Capture


@dataclass(frozen=True, slots=True)
class QueryParameter:
    """A named, typed key expected in a URL's query string.

    Within one Template a parameter is identified by its name alone (see
    ``parameter_key``); the kind and required flag do not take part.
    """

    name: str
    kind: ValueKind = ValueKind.STRING
    required: bool = True

    def __post_init__(self) -> None:
        _check_name(self.name, "Query parameter")
        object.__setattr__(self, "kind", _coerce_kind(self.kind))

    @classmethod
    def required_param(cls, name: str, kind: ValueKind | str) -> QueryParameter:
        return cls(name, kind, required=True)

    @classmethod
    def optional_param(cls, name: str, kind: ValueKind | str) -> QueryParameter:
        return cls(name, kind, required=False)

    # Shortcuts, one per kind
    @classmethod
    def required_int(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.INT, required=True)

    @classmethod
    def optional_int(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.INT, required=False)

    @classmethod
    def required_double(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.DOUBLE, required=True)

    @classmethod
    def optional_double(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.DOUBLE, required=False)

    @classmethod
    def required_bool(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.BOOL, required=True)

    @classmethod
    def optional_bool(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.BOOL, required=False)

    @classmethod
    def required_string(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.STRING, required=True)

    @classmethod
    def optional_string(cls, name: str) -> QueryParameter:
        return cls(name, ValueKind.STRING, required=False)

    def __str__(self) -> str:
        marker = "" if self.required else "?"
        return f"{self.name}{marker}:{self.kind}"


def parameter_key(parameter: QueryParameter) -> str:
    """Identity of a query parameter within a Template: its name."""
    return parameter.name


def unique_parameters(parameters: Iterable[QueryParameter]) -> frozenset[QueryParameter]:
    """Collect *parameters* into a set keyed by ``parameter_key``.

    Raises ``ConfigurationError`` when two parameters share a name, rather
    than letting one of them silently win.
    """
    seen: dict[str, QueryParameter] = {}
    for parameter in parameters:
        if not isinstance(parameter, QueryParameter):
            msg = f"Expected QueryParameter, got {type(parameter).__name__}"
            raise ConfigurationError(msg)
        key = parameter_key(parameter)
        existing = seen.get(key)
        if existing is not None:
            msg = (
                f"Duplicate query parameter name {key!r}: "
                f"{existing} conflicts with {parameter}"
            )
            raise ConfigurationError(msg)
        seen[key] = parameter
    return frozenset(seen.values())
