"""Recognizer — first-match-wins lookup over an ordered list of templates.

Registrations are declared at startup and frozen into a tuple; the order
is significant.  The first template whose extraction succeeds wins, even if
a later one would also match and even if the factory then rejects the
values.  There is no backtracking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from deeplinks.config import MatchConfig
from deeplinks.errors import ConfigurationError, NoTemplateMatched
from deeplinks.link import is_deep_link_type
from deeplinks.matching.extractor import ExtractionResult, Extractor
from deeplinks.matching.values import ValueBag
from deeplinks.templates.template import Template
from deeplinks.url import ParsedURL

logger = logging.getLogger("deeplinks.matching")

Factory = Callable[[ValueBag], Any]


@dataclass(frozen=True, slots=True)
class Registration:
    """A template and the factory that turns its values into an object."""

    template: Template
    factory: Factory

    @property
    def factory_name(self) -> str:
        name = getattr(self.factory, "__qualname__", None)
        return name or repr(self.factory)


RegistrationLike = Registration | tuple[Template, Factory] | type


def _as_registration(item: RegistrationLike) -> Registration:
    if isinstance(item, Registration):
        return item
    if is_deep_link_type(item):
        return Registration(template=item.template, factory=item.from_values)  # type: ignore[union-attr]
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], Template):
        template, factory = item
        if callable(factory):
            return Registration(template=template, factory=factory)
    msg = (
        f"Cannot register {item!r}: expected a Registration, a (Template, factory) "
        "pair, or a DeepLink class"
    )
    raise ConfigurationError(msg)


class Recognizer:
    """Finds the first registered template matching a URL.

    Usage::

        recognizer = Recognizer([
            (Template.empty().term("users").int("id"), UserLink.from_values),
            SettingsLink,  # a DeepLink class
        ])
        link = recognizer.match("myapp://users/42")
    """

    __slots__ = ("_extractor", "_registrations")

    def __init__(
        self,
        registrations: Iterable[RegistrationLike] = (),
        config: MatchConfig | None = None,
    ) -> None:
        self._registrations = tuple(_as_registration(r) for r in registrations)
        self._extractor = Extractor(config)

    @classmethod
    def from_links(cls, *link_types: type, config: MatchConfig | None = None) -> Recognizer:
        """Build a recognizer from DeepLink classes, in the given order."""
        return cls(link_types, config=config)

    @property
    def registrations(self) -> tuple[Registration, ...]:
        return self._registrations

    @property
    def config(self) -> MatchConfig:
        return self._extractor.config

    def __len__(self) -> int:
        return len(self._registrations)

    def match(self, url: str | ParsedURL) -> Any | None:
        """Return the object built by the first matching registration.

        Returns ``None`` when no template matches.  Exceptions raised by the
        factory propagate unchanged.
        """
        found = self._first_match(url)
        if found is None:
            return None
        registration, values = found
        return registration.factory(values)

    def resolve(self, url: str | ParsedURL) -> Any:
        """Like ``match``, but raises ``NoTemplateMatched`` instead of returning ``None``."""
        found = self._first_match(url)
        if found is None:
            raise NoTemplateMatched(str(url))
        registration, values = found
        return registration.factory(values)

    def explain(self, url: str | ParsedURL) -> list[tuple[Registration, ExtractionResult]]:
        """Match *url* against every registration and report each outcome.

        Unlike ``match`` this does not stop at the first success and never
        calls a factory.
        """
        if isinstance(url, str):
            url = _parse_once(url)
        return [(r, self._extractor.diagnose(r.template, url)) for r in self._registrations]

    def _first_match(self, url: str | ParsedURL) -> tuple[Registration, ValueBag] | None:
        if isinstance(url, str):
            url = _parse_once(url)
        for index, registration in enumerate(self._registrations):
            values = self._extractor.extract(registration.template, url)
            if values is not None:
                logger.debug(
                    "%s matched registration %d (%s) -> %s",
                    url,
                    index,
                    registration.template,
                    registration.factory_name,
                )
                return registration, values
        logger.debug("%s matched none of %d registrations", url, len(self._registrations))
        return None


def _parse_once(url: str) -> str | ParsedURL:
    # Leave unparseable strings as-is; the extractor reports INVALID_URL for them.
    try:
        return ParsedURL.parse(url)
    except ValueError:
        return url
