"""Template — an immutable, incrementally built description of a URL's shape.

Usage::

    template = (
        Template.empty()
        .term("users")
        .int("id")
        .with_query_parameters({QueryParameter.optional_string("tab")})
    )
    template.build_url("myapp", {"id": 42}, {"tab": "profile"})
    # -> "myapp://users/42?tab=profile"

Every builder method returns a new Template; nothing is mutated, so one
base template can be extended in several directions and shared freely.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from deeplinks.errors import (
    BuildError,
    ConfigurationError,
    InvalidBuiltURL,
    MissingPathValue,
    MissingRequiredQueryValue,
)
from deeplinks.templates.kinds import ValueKind, format_value
from deeplinks.templates.parts import (
    Capture,
    Literal,
    PathPart,
    QueryParameter,
    unique_parameters,
)

logger = logging.getLogger("deeplinks.templates")

# RFC 3986: scheme, and the characters allowed anywhere in a URI
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_URL_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True, slots=True)
class Template:
    """Ordered path parts plus an unordered set of query parameters.

    Two templates with the same parts and parameters are equal and
    interchangeable.
    """

    parts: tuple[PathPart, ...] = ()
    parameters: frozenset[QueryParameter] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Extracted path values are keyed by capture name
        seen: set[str] = set()
        for part in self.parts:
            if isinstance(part, Capture):
                if part.name in seen:
                    msg = f"Duplicate capture name {part.name!r} in template path"
                    raise ConfigurationError(msg)
                seen.add(part.name)

    @classmethod
    def empty(cls) -> Template:
        """A template with no path parts and no query parameters."""
        return cls()

    # -- Builder -----------------------------------------------------------

    def _appending(self, part: PathPart) -> Template:
        """Raises ``ConfigurationError`` if *part* reuses a capture name."""
        return Template(parts=(*self.parts, part), parameters=self.parameters)

    def term(self, symbol: str) -> Template:
        """A matching URL has exactly *symbol* at this position."""
        return self._appending(Literal(symbol))

    def string(self, name: str) -> Template:
        """A matching URL has any segment here, stored as ``str`` under *name*."""
        return self._appending(Capture(name, ValueKind.STRING))

    def int(self, name: str) -> Template:
        """A matching URL has an integer here, stored under *name*."""
        return self._appending(Capture(name, ValueKind.INT))

    def double(self, name: str) -> Template:
        """A matching URL has a floating-point number here, stored under *name*."""
        return self._appending(Capture(name, ValueKind.DOUBLE))

    def bool(self, name: str) -> Template:
        """A matching URL has ``true`` or ``false`` here, stored under *name*."""
        return self._appending(Capture(name, ValueKind.BOOL))

    def with_query_parameters(self, parameters: Iterable[QueryParameter]) -> Template:
        """Replace the query parameter set wholesale (not merged).

        Raises ``ConfigurationError`` if two parameters share a name.
        """
        return Template(parts=self.parts, parameters=unique_parameters(parameters))

    # -- Introspection -----------------------------------------------------

    @property
    def captures(self) -> tuple[Capture, ...]:
        return tuple(p for p in self.parts if isinstance(p, Capture))

    @property
    def required_parameters(self) -> frozenset[QueryParameter]:
        return frozenset(p for p in self.parameters if p.required)

    @property
    def optional_parameters(self) -> frozenset[QueryParameter]:
        return self.parameters - self.required_parameters

    @property
    def pattern(self) -> str:
        """Human-readable form, e.g. ``users/{id:int}?tab?:string``."""
        path = "/".join(str(p) for p in self.parts)
        if not self.parameters:
            return path
        query = "&".join(str(p) for p in sorted(self.parameters, key=lambda p: p.name))
        return f"{path}?{query}"

    def __str__(self) -> str:
        return self.pattern

    # -- Building ----------------------------------------------------------

    def build_url(
        self,
        scheme: str,
        path_values: Mapping[str, Any] | None = None,
        query_values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> str:
        """Materialize a concrete URL from this template.

        Literal parts are emitted verbatim and captures are looked up in
        *path_values*.  Query pairs are appended in the iteration order of
        *query_values* (a mapping, or a sequence of ``(name, value)`` pairs).

        Values are **not** escaped.  A value containing ``/``, ``&``, ``=``,
        spaces or non-ASCII text produces a wrong or unparseable URL; callers
        must supply URL-safe values.

        Raises ``MissingPathValue`` when a capture has no value,
        ``MissingRequiredQueryValue`` when a required parameter is absent,
        and ``InvalidBuiltURL`` when the result does not parse as a URL.
        """
        path_values = path_values or {}
        pairs = _query_pairs(query_values)
        try:
            path = self._build_path(path_values)
            self._check_required(pairs)
            url = f"{scheme}://{path}"
            if pairs:
                url += "?" + "&".join(f"{k}={format_value(v)}" for k, v in pairs)
            _check_url(url, scheme)
        except BuildError as exc:
            logger.debug("Cannot build URL from %s: %s", self.pattern, exc)
            raise
        return url

    def _build_path(self, path_values: Mapping[str, Any]) -> str:
        segments: list[str] = []
        for part in self.parts:
            if isinstance(part, Literal):
                segments.append(part.symbol)
                continue
            if part.name not in path_values:
                raise MissingPathValue(part.name)
            segments.append(format_value(path_values[part.name]))
        return "/".join(segments)

    def _check_required(self, pairs: list[tuple[str, Any]]) -> None:
        supplied = {name for name, _ in pairs}
        for parameter in sorted(self.required_parameters, key=lambda p: p.name):
            if parameter.name not in supplied:
                raise MissingRequiredQueryValue(parameter.name)


def _query_pairs(
    query_values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None,
) -> list[tuple[str, Any]]:
    if query_values is None:
        return []
    if isinstance(query_values, Mapping):
        return list(query_values.items())
    return [(name, value) for name, value in query_values]


def _check_url(url: str, scheme: str) -> None:
    if _SCHEME.fullmatch(scheme) is None:
        raise InvalidBuiltURL(url, f"invalid scheme {scheme!r}")
    if _URL_CHARS.fullmatch(url) is None:
        raise InvalidBuiltURL(url, "contains characters that must be escaped")
    if _MALFORMED_ESCAPE.search(url):
        raise InvalidBuiltURL(url, "malformed percent escape")
    try:
        urlsplit(url)
    except ValueError as exc:
        raise InvalidBuiltURL(url, str(exc)) from exc
