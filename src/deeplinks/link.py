"""DeepLink protocol — a typed object that owns its template.

A structural protocol so application types can be handed straight to a
Recognizer without wrapping them in Registrations::

    @dataclass(frozen=True)
    class UserLink:
        template: ClassVar[Template] = Template.empty().term("users").int("id")

        user_id: int

        @classmethod
        def from_values(cls, values: ValueBag) -> "UserLink":
            return cls(user_id=values.path.require("id", "int"))

    recognizer = Recognizer([UserLink])
"""

from typing import Any, ClassVar, Protocol, runtime_checkable

from deeplinks.matching.values import ValueBag
from deeplinks.templates.template import Template


@runtime_checkable
class DeepLink(Protocol):
    """Matched and extracted from a URL.

    ``template`` describes how to match the URL; ``from_values`` builds an
    instance from the extracted values.
    """

    template: ClassVar[Template]

    @classmethod
    def from_values(cls, values: ValueBag) -> Any: ...


def is_deep_link_type(obj: object) -> bool:
    """Return True if *obj* is a class that implements ``DeepLink``."""
    return (
        isinstance(obj, type)
        and isinstance(getattr(obj, "template", None), Template)
        and callable(getattr(obj, "from_values", None))
    )
