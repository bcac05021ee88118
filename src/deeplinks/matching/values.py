"""ValueBag — the typed result of matching a URL against a template.

Implements ``Mapping[str, Value]`` for each of the path and query groups,
with kind-checked accessors for factories that need a specific type.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from deeplinks.errors import MissingValue, ValueKindError
from deeplinks.templates.kinds import Value, ValueKind, kind_of


class TypedValues(Mapping[str, Value]):
    """Immutable name -> typed value mapping.

    ``get_int`` and friends return *default* when the name is absent and
    raise ``ValueKindError`` when it holds a different kind, so a factory
    never receives a ``str`` where it expected an ``int``.
    """

    __slots__ = ("_data", "_group")

    def __init__(self, data: Mapping[str, Value] | None = None, group: str = "values") -> None:
        self._data: dict[str, Value] = dict(data or {})
        self._group = group

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TypedValues({self._data!r})"

    # Mapping sets __hash__ to None. Values are immutable scalars and equality
    # compares items only, so hashing the items keeps equal mappings equal.
    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def kind(self, key: str) -> ValueKind:
        """Return the kind of the value stored under *key*."""
        if key not in self._data:
            raise MissingValue(f"No {self._group} value named {key!r}")
        kind = kind_of(self._data[key])
        if kind is None:
            msg = f"{self._group} value {key!r} has unsupported type {type(self._data[key]).__name__}"
            raise ValueKindError(msg)
        return kind

    def require(self, key: str, kind: ValueKind | str) -> Value:
        """Return the value under *key*, which must be present and of *kind*.

        Raises ``MissingValue`` if absent, ``ValueKindError`` on a kind mismatch.
        """
        expected = ValueKind(kind)
        actual = self.kind(key)
        if actual is not expected:
            msg = f"{self._group} value {key!r} is {actual}, expected {expected}"
            raise ValueKindError(msg)
        return self._data[key]

    def _get(self, key: str, kind: ValueKind, default: Any) -> Any:
        if key not in self._data:
            return default
        return self.require(key, kind)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return the ``int`` under *key*, or *default* if missing."""
        return self._get(key, ValueKind.INT, default)

    def get_double(self, key: str, default: float | None = None) -> float | None:
        """Return the ``float`` under *key*, or *default* if missing."""
        return self._get(key, ValueKind.DOUBLE, default)

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return the ``bool`` under *key*, or *default* if missing."""
        return self._get(key, ValueKind.BOOL, default)

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Return the ``str`` under *key*, or *default* if missing."""
        return self._get(key, ValueKind.STRING, default)


@dataclass(frozen=True, slots=True)
class ValueBag:
    """Values extracted from one URL.

    ``path`` holds one entry per capture in the template.  ``query`` holds
    every required parameter plus the optional ones the URL supplied.
    ``fragment`` is the text after ``#`` verbatim (never decoded), or
    ``None`` when the URL has no fragment.

    Bags are hashable, so factories may cache on them or dedupe them in a set.
    """

    path: TypedValues = field(default_factory=lambda: TypedValues(group="path"))
    query: TypedValues = field(default_factory=lambda: TypedValues(group="query"))
    fragment: str | None = None

    @classmethod
    def of(
        cls,
        path: Mapping[str, Value] | None = None,
        query: Mapping[str, Value] | None = None,
        fragment: str | None = None,
    ) -> "ValueBag":
        """Build a bag from plain mappings."""
        return cls(
            path=TypedValues(path, group="path"),
            query=TypedValues(query, group="query"),
            fragment=fragment,
        )
