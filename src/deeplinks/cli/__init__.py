"""Deeplinks CLI — inspect recognizers and build URLs from the shell.

Entry point registered as ``deeplinks`` in ``pyproject.toml``::

    [project.scripts]
    deeplinks = "deeplinks.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``deeplinks`` command."""
    parser = argparse.ArgumentParser(
        prog="deeplinks",
        description="Deeplinks — match URLs against templates and build URLs from them.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- deeplinks match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a URL and print the result")
    match_parser.add_argument("recognizer", help="Import string (e.g. myapp.links:recognizer)")
    match_parser.add_argument("url", help="URL to match")

    # -- deeplinks explain ------------------------------------------------
    explain_parser = subparsers.add_parser(
        "explain", help="Show why each registered template does or does not match"
    )
    explain_parser.add_argument("recognizer", help="Import string (e.g. myapp.links:recognizer)")
    explain_parser.add_argument("url", help="URL to explain")

    # -- deeplinks templates ----------------------------------------------
    templates_parser = subparsers.add_parser("templates", help="List registered templates")
    templates_parser.add_argument("recognizer", help="Import string (e.g. myapp.links:recognizer)")

    # -- deeplinks build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a URL from a registered template")
    build_parser.add_argument("recognizer", help="Import string (e.g. myapp.links:recognizer)")
    build_parser.add_argument("index", type=int, help="Registration index (see `deeplinks templates`)")
    build_parser.add_argument("scheme", help="URL scheme, e.g. myapp or https")
    build_parser.add_argument(
        "--path",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Value for a path capture (repeatable)",
    )
    build_parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Value for a query parameter (repeatable, order is kept)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from deeplinks.cli._match import run_match

        run_match(args)
    elif args.command == "explain":
        from deeplinks.cli._match import run_explain

        run_explain(args)
    elif args.command == "templates":
        from deeplinks.cli._templates import run_templates

        run_templates(args)
    elif args.command == "build":
        from deeplinks.cli._build import run_build

        run_build(args)
