"""``deeplinks match`` and ``deeplinks explain``."""

import argparse
import sys

from deeplinks.cli._resolve import resolve_or_exit


def run_match(args: argparse.Namespace) -> None:
    """Print the object the first matching registration builds.

    Exits with code 1 when no template matches.
    """
    recognizer = resolve_or_exit(args)
    result = recognizer.match(args.url)
    if result is None:
        print(f"No template matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)
    print(repr(result))


def run_explain(args: argparse.Namespace) -> None:
    """Print one line per registration: OK, or why it did not match.

    The first OK line is the registration ``match`` would use.
    """
    recognizer = resolve_or_exit(args)
    outcomes = recognizer.explain(args.url)
    if not outcomes:
        print("No templates registered.")
        return

    winner = next((i for i, (_, result) in enumerate(outcomes) if result), None)
    for index, (registration, result) in enumerate(outcomes):
        marker = "*" if index == winner else " "
        status = "OK" if result else str(result)
        print(f"{marker} [{index}] {registration.template}  {status}")
