"""Matching configuration.

MatchConfig is a frozen dataclass — immutable after creation, safe to share
between recognizers and threads, no string-key dict lookups.
"""

from dataclasses import dataclass

from deeplinks.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Knobs for value extraction. Immutable after creation.

    The defaults give the strict behavior described in the README. Override
    what you need::

        config = MatchConfig(strict_query=False)
    """

    # A template with no declared query parameters rejects any URL that has
    # a query component, even a bare "?".
    strict_query: bool = True

    # Percent-decode string-kind query values (path segments are always decoded)
    decode_query_strings: bool = True

    # Width of the signed integer range accepted for int captures
    int_bits: int = 64

    def __post_init__(self) -> None:
        if self.int_bits < 2:
            msg = f"int_bits must be at least 2, got {self.int_bits}"
            raise ConfigurationError(msg)
