"""Parsed URL view used by the extractor.

``urllib.parse.urlsplit`` reports an absent query and an empty query the
same way (``""``).  Template matching needs the difference — a bare ``?``
still counts as a query string — so ``ParsedURL`` keeps ``None`` for
components that are not present at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(value: str) -> str:
    """Decode ``%XX`` escapes strictly.

    Returns ``""`` when *value* holds a malformed escape or the decoded
    bytes are not valid UTF-8, instead of passing the raw text through.
    """
    if "%" not in value:
        return value
    if _MALFORMED_ESCAPE.search(value):
        return ""
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return ""


def _host_of(netloc: str) -> str | None:
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        # IPv6 literal, keep the brackets' contents only
        end = host.find("]")
        host = host[1:end] if end != -1 else host[1:]
    else:
        host = host.partition(":")[0]
    return host or None


@dataclass(frozen=True, slots=True)
class ParsedURL:
    """The four URL components template matching looks at.

    ``host`` and ``path`` segments are raw (not yet percent-decoded);
    ``query`` and ``fragment`` are the raw text after ``?`` and ``#``, or
    ``None`` when the URL has no such component.
    """

    raw: str
    host: str | None
    segments: tuple[str, ...]
    query: str | None
    fragment: str | None

    @classmethod
    def parse(cls, url: str) -> ParsedURL:
        """Split *url* into host, path segments, query and fragment.

        Raises ``ValueError`` if ``urlsplit`` rejects the string (for
        example an unbalanced IPv6 bracket).
        """
        parts = urlsplit(url)
        rest, hash_mark, fragment = url.partition("#")
        query_mark = "?" in rest
        segments = tuple(s for s in parts.path.split("/") if s)
        return cls(
            raw=url,
            host=_host_of(parts.netloc),
            segments=segments,
            query=parts.query if query_mark else None,
            fragment=fragment if hash_mark else None,
        )

    def path_components(self) -> list[str]:
        """Host (when present) followed by the path segments, all decoded."""
        components = [self.host] if self.host is not None else []
        components.extend(self.segments)
        return [percent_decode(c) for c in components]

    def __str__(self) -> str:
        return self.raw
