"""Recognizer import resolution — turns ``"module:attribute"`` into a Recognizer.

Shared by every ``deeplinks`` subcommand.  The attribute does not have to
be a Recognizer already; an application usually declares its links in
whichever shape is handiest:

    recognizer = Recognizer([...])           # used as-is
    recognizer = UserLink                    # a DeepLink class
    recognizer = [UserLink, (settings, make_settings)]
    recognizer = Registration(template, factory)
    def recognizer(): return [UserLink]      # zero-argument factory

Every shape except the factory is normalized by ``as_recognizer``; a
factory is called once and its result normalized the same way.
"""

import argparse
import importlib
import sys
from typing import Any

from deeplinks.errors import ConfigurationError
from deeplinks.link import is_deep_link_type
from deeplinks.matching.recognizer import Recognizer, Registration
from deeplinks.templates.template import Template

_ACCEPTED = "a Recognizer, a DeepLink class, a Registration, or a list of registrations"


def _is_pair(obj: object) -> bool:
    return isinstance(obj, tuple) and len(obj) == 2 and isinstance(obj[0], Template)


def as_recognizer(obj: Any, source: str = "object") -> Recognizer:
    """Normalize *obj* to a Recognizer without calling it.

    Raises:
        TypeError: If *obj* is none of the accepted shapes, or a list holds
            an entry the Recognizer cannot register.
    """
    if isinstance(obj, Recognizer):
        return obj

    if isinstance(obj, Registration) or is_deep_link_type(obj) or _is_pair(obj):
        entries: list[Any] = [obj]
    elif isinstance(obj, (list, tuple)):
        entries = list(obj)
    else:
        msg = f"{source} resolved to {type(obj).__name__}; expected {_ACCEPTED}"
        raise TypeError(msg)

    try:
        return Recognizer(entries)
    except ConfigurationError as exc:
        msg = f"{source} holds an entry that cannot be registered. {exc}"
        raise TypeError(msg) from exc


def resolve_recognizer(import_string: str) -> Recognizer:
    """Resolve an import string to a Recognizer instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"recognizer"`` (e.g. ``"myapp.links"``
    resolves to ``myapp.links.recognizer``).

    A callable that is neither a Recognizer nor a DeepLink class is treated
    as a zero-argument factory: it is called once and whatever it returns
    goes through ``as_recognizer``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object cannot be turned into a Recognizer,
            or the factory raised.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "recognizer"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Recognizer) and not is_deep_link_type(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    return as_recognizer(obj, repr(import_string))


def resolve_or_exit(args: argparse.Namespace) -> Recognizer:
    """Resolve ``args.recognizer``, printing the error and exiting 1 on failure."""
    try:
        return resolve_recognizer(args.recognizer)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
