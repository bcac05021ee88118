"""``deeplinks build`` — build a URL from a registered template.

Command-line values arrive as text; each is parsed according to the kind
its capture or query parameter declares, so ``--path id=42`` supplies an
``int`` for an ``int`` capture.  Names the template does not declare are
passed through as strings.
"""

import argparse
import sys

from deeplinks.cli._resolve import resolve_or_exit
from deeplinks.errors import BuildError
from deeplinks.templates.kinds import Value, ValueKind, parse_value


def _split_assignments(items: list[str], option: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for item in items:
        name, sep, value = item.partition("=")
        if not sep or not name:
            print(f"Error: {option} expects NAME=VALUE, got {item!r}", file=sys.stderr)
            raise SystemExit(2)
        pairs.append((name, value))
    return pairs


def _typed(pairs: list[tuple[str, str]], kinds: dict[str, ValueKind]) -> list[tuple[str, Value]]:
    typed: list[tuple[str, Value]] = []
    for name, text in pairs:
        kind = kinds.get(name, ValueKind.STRING)
        try:
            typed.append((name, parse_value(text, kind)))
        except ValueError as exc:
            print(f"Error: {name}: {exc}", file=sys.stderr)
            raise SystemExit(2) from exc
    return typed


def run_build(args: argparse.Namespace) -> None:
    """Build and print a URL; exit 1 if the template cannot be built."""
    recognizer = resolve_or_exit(args)
    registrations = recognizer.registrations
    if not 0 <= args.index < len(registrations):
        print(
            f"Error: no registration at index {args.index} ({len(registrations)} registered)",
            file=sys.stderr,
        )
        raise SystemExit(1)

    template = registrations[args.index].template
    path_kinds = {c.name: c.kind for c in template.captures}
    query_kinds = {p.name: p.kind for p in template.parameters}

    path_values = dict(_typed(_split_assignments(args.path, "--path"), path_kinds))
    query_values = _typed(_split_assignments(args.query, "--query"), query_kinds)

    try:
        url = template.build_url(args.scheme, path_values, query_values)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(url)
