"""Deeplinks exception hierarchy.

Shared across Template, Extractor, Recognizer and the CLI so every module
raises and catches the same types.

A URL that fails to match a template is not an error: ``extract`` and
``Recognizer.match`` return ``None``.  Exceptions are reserved for invalid
template definitions, URL building, and the explicit ``Recognizer.resolve``.
"""

from dataclasses import dataclass


class DeepLinkError(Exception):
    """Base for all deeplinks-specific errors."""


class ConfigurationError(DeepLinkError):
    """Raised when a template definition is invalid.

    Typically raised at startup while templates are being declared,
    e.g. two query parameters sharing one name.
    """


@dataclass(frozen=True, slots=True)
class BuildError(DeepLinkError):
    """A URL could not be built from a template.

    No partial URL is ever returned alongside this error.
    """

    detail: str = ""

    def __str__(self) -> str:
        return self.detail or type(self).__name__


class MissingPathValue(BuildError):
    """A path capture had no entry in the supplied path values."""

    def __init__(self, name: str) -> None:
        super().__init__(detail=f"No value supplied for path capture {name!r}")


class MissingRequiredQueryValue(BuildError):
    """A required query parameter had no entry in the supplied query values."""

    def __init__(self, name: str) -> None:
        super().__init__(detail=f"No value supplied for required query parameter {name!r}")


class InvalidBuiltURL(BuildError):
    """The assembled string does not parse as a URL.

    Values are never escaped during building, so a value containing
    spaces or other characters that are illegal in a URL ends up here.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        detail = f"Built string {url!r} is not a valid URL"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail=detail)


class NoTemplateMatched(DeepLinkError):  # noqa: N818
    """``Recognizer.resolve`` exhausted every registration without a match."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No template matches {url!r}")


class MissingValue(DeepLinkError, KeyError):
    """A ValueBag accessor asked for a name the bag does not hold."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ValueKindError(DeepLinkError, TypeError):
    """A ValueBag entry holds a different kind than the accessor expected."""
