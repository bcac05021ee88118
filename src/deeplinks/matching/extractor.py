"""Value extraction — match one URL against one template.

Extraction has two independent steps that must both succeed:

**Path.**  The URL host (when present) followed by its non-empty path
segments, each percent-decoded, is paired positionally with the template's
parts.  The counts must be equal; literals must match exactly; typed
captures must parse strictly as their kind.

**Query.**  A template that declares no parameters only matches a URL with
no query component at all — a bare ``?`` counts as present.  Otherwise the
query is split on ``&`` and ``=``, malformed pairs are dropped, required
parameters must be present and well-typed, and optional parameters are kept
only when present and well-typed.

A failed match is an ordinary outcome, not an error: ``extract`` returns
``None`` and ``Extractor.diagnose`` reports the ``MismatchReason``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from deeplinks.config import MatchConfig
from deeplinks.matching.values import TypedValues, ValueBag
from deeplinks.templates.kinds import Value, ValueKind, try_parse
from deeplinks.templates.parts import Literal
from deeplinks.templates.template import Template
from deeplinks.url import ParsedURL, percent_decode

logger = logging.getLogger("deeplinks.matching")


class MismatchReason(StrEnum):
    """Why a URL did not match a template."""

    INVALID_URL = "invalid_url"
    PATH_ARITY = "path_arity_mismatch"
    PATH_TYPE = "path_type_mismatch"
    LITERAL = "literal_mismatch"
    MISSING_REQUIRED_QUERY = "missing_required_query_parameter"
    QUERY_TYPE = "query_parameter_type_mismatch"
    UNEXPECTED_QUERY = "unexpected_query_string"


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """The outcome of matching one URL against one template.

    The result is falsy when the match failed, so you can write::

        result = extractor.diagnose(template, url)
        if not result:
            print(result.reason, result.detail)
    """

    values: ValueBag | None = None
    reason: MismatchReason | None = None
    detail: str = ""

    @property
    def matched(self) -> bool:
        return self.values is not None

    def __bool__(self) -> bool:
        return self.matched

    def __str__(self) -> str:
        if self.matched:
            return "ok"
        return f"{self.reason}: {self.detail}" if self.detail else str(self.reason)


class _Mismatch(Exception):  # noqa: N818
    def __init__(self, reason: MismatchReason, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail


def parse_query(query: str) -> dict[str, str]:
    """Split a raw query string into a flat name -> raw value map.

    Only pieces that split on ``=`` into exactly two parts are kept, so
    ``"a=1&bad&c=3&d=x=y"`` gives ``{"a": "1", "c": "3"}``.  When a name
    repeats, the last occurrence wins.  Values are not decoded here.
    """
    pairs: dict[str, str] = {}
    for piece in query.split("&"):
        fields = piece.split("=")
        if len(fields) == 2:
            pairs[fields[0]] = fields[1]
    return pairs


class Extractor:
    """Matches URLs against templates under one ``MatchConfig``.

    Stateless apart from the frozen config; safe to share across threads.
    """

    __slots__ = ("config",)

    def __init__(self, config: MatchConfig | None = None) -> None:
        self.config = config or MatchConfig()

    def extract(self, template: Template, url: str | ParsedURL) -> ValueBag | None:
        """Return the values *url* carries for *template*, or ``None``."""
        return self.diagnose(template, url).values

    def diagnose(self, template: Template, url: str | ParsedURL) -> ExtractionResult:
        """Match *url* against *template*, reporting why it failed if it did."""
        if isinstance(url, str):
            try:
                url = ParsedURL.parse(url)
            except ValueError as exc:
                return ExtractionResult(reason=MismatchReason.INVALID_URL, detail=str(exc))

        try:
            path = self._extract_path(template, url)
            query = self._extract_query(template, url)
        except _Mismatch as miss:
            logger.debug("%s does not match %s (%s: %s)", url, template, miss.reason, miss.detail)
            return ExtractionResult(reason=miss.reason, detail=miss.detail)

        values = ValueBag(
            path=TypedValues(path, group="path"),
            query=TypedValues(query, group="query"),
            fragment=url.fragment,
        )
        return ExtractionResult(values=values)

    # -- Path --------------------------------------------------------------

    def _extract_path(self, template: Template, url: ParsedURL) -> dict[str, Value]:
        components = url.path_components()
        if len(components) != len(template.parts):
            msg = f"URL has {len(components)} segments, template has {len(template.parts)} parts"
            raise _Mismatch(MismatchReason.PATH_ARITY, msg)

        values: dict[str, Value] = {}
        for part, component in zip(template.parts, components, strict=True):
            if isinstance(part, Literal):
                if component != part.symbol:
                    msg = f"expected {part.symbol!r}, got {component!r}"
                    raise _Mismatch(MismatchReason.LITERAL, msg)
                continue

            value = try_parse(component, part.kind, int_bits=self.config.int_bits)
            if value is None:
                msg = f"segment {component!r} is not a valid {part.kind} for {part.name!r}"
                raise _Mismatch(MismatchReason.PATH_TYPE, msg)
            values[part.name] = value
        return values

    # -- Query -------------------------------------------------------------

    def _extract_query(self, template: Template, url: ParsedURL) -> dict[str, Value]:
        if not template.parameters:
            if url.query is not None and self.config.strict_query:
                msg = f"template declares no query parameters, URL has {url.query!r}"
                raise _Mismatch(MismatchReason.UNEXPECTED_QUERY, msg)
            return {}

        required = template.required_parameters
        if url.query is None:
            if required:
                names = ", ".join(sorted(p.name for p in required))
                raise _Mismatch(MismatchReason.MISSING_REQUIRED_QUERY, f"URL has no query; requires {names}")
            return {}

        raw = parse_query(url.query)
        values: dict[str, Value] = {}

        for parameter in sorted(required, key=lambda p: p.name):
            if parameter.name not in raw:
                msg = f"missing required parameter {parameter.name!r}"
                raise _Mismatch(MismatchReason.MISSING_REQUIRED_QUERY, msg)
            value = self._query_value(raw[parameter.name], parameter.kind)
            if value is None:
                msg = f"{parameter.name}={raw[parameter.name]!r} is not a valid {parameter.kind}"
                raise _Mismatch(MismatchReason.QUERY_TYPE, msg)
            values[parameter.name] = value

        for parameter in template.optional_parameters:
            if parameter.name in raw:
                value = self._query_value(raw[parameter.name], parameter.kind)
                if value is not None:
                    values[parameter.name] = value
        return values

    def _query_value(self, raw: str, kind: ValueKind) -> Value | None:
        if kind is ValueKind.STRING:
            return percent_decode(raw) if self.config.decode_query_strings else raw
        return try_parse(raw, kind, int_bits=self.config.int_bits)


_default_extractor = Extractor()


def extract(template: Template, url: str | ParsedURL) -> ValueBag | None:
    """Match *url* against *template* with the default configuration."""
    return _default_extractor.extract(template, url)
