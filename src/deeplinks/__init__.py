"""Deeplinks — match URLs against declarative templates and extract typed values.

Templates describe a URL's path (literal terms and typed captures) and its
query parameters.  A Recognizer tries templates in order and hands the
first match's values to a factory.  Templates also build URLs.

Basic usage::

    from deeplinks import QueryParameter, Recognizer, Template

    profile = (
        Template.empty()
        .term("users")
        .int("id")
        .with_query_parameters({QueryParameter.optional_string("tab")})
    )

    recognizer = Recognizer([(profile, lambda values: ("profile", values.path["id"]))])
    recognizer.match("myapp://users/42?tab=posts")  # -> ("profile", 42)

    profile.build_url("myapp", {"id": 7})  # -> "myapp://users/7"
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "Capture",
    "ConfigurationError",
    "DeepLink",
    "DeepLinkError",
    "ExtractionResult",
    "Extractor",
    "InvalidBuiltURL",
    "Literal",
    "MatchConfig",
    "MismatchReason",
    "MissingPathValue",
    "MissingRequiredQueryValue",
    "MissingValue",
    "NoTemplateMatched",
    "ParsedURL",
    "QueryParameter",
    "Recognizer",
    "Registration",
    "Template",
    "ValueBag",
    "ValueKind",
    "ValueKindError",
    "extract",
]

_ERRORS = frozenset(
    {
        "BuildError",
        "ConfigurationError",
        "DeepLinkError",
        "InvalidBuiltURL",
        "MissingPathValue",
        "MissingRequiredQueryValue",
        "MissingValue",
        "NoTemplateMatched",
        "ValueKindError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import deeplinks`` fast while providing a clean top-level API.
    """
    if name == "Template":
        from deeplinks.templates.template import Template

        return Template

    if name in ("Capture", "Literal", "QueryParameter"):
        from deeplinks.templates import parts

        return getattr(parts, name)

    if name == "ValueKind":
        from deeplinks.templates.kinds import ValueKind

        return ValueKind

    if name == "ValueBag":
        from deeplinks.matching.values import ValueBag

        return ValueBag

    if name in ("ExtractionResult", "Extractor", "MismatchReason", "extract"):
        from deeplinks.matching import extractor

        return getattr(extractor, name)

    if name in ("Recognizer", "Registration"):
        from deeplinks.matching import recognizer

        return getattr(recognizer, name)

    if name == "DeepLink":
        from deeplinks.link import DeepLink

        return DeepLink

    if name == "MatchConfig":
        from deeplinks.config import MatchConfig

        return MatchConfig

    if name == "ParsedURL":
        from deeplinks.url import ParsedURL

        return ParsedURL

    if name in _ERRORS:
        from deeplinks import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
