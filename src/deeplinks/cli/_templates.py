"""``deeplinks templates`` — list registered templates.

Prints a table of INDEX, PATTERN, and factory name in registration order,
which is also the order ``match`` tries them in.
"""

import argparse

from deeplinks.cli._resolve import resolve_or_exit


def run_templates(args: argparse.Namespace) -> None:
    """List registrations for a recognizer."""
    recognizer = resolve_or_exit(args)
    registrations = recognizer.registrations
    if not registrations:
        print("No templates registered.")
        return

    rows = [(str(i), r.template.pattern or "(empty)", r.factory_name) for i, r in enumerate(registrations)]

    max_index = max(max(len(r[0]) for r in rows), 5)  # "INDEX" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_index}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("INDEX", "PATTERN", "FACTORY"))
    sep_len = max_index + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
