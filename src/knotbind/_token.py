from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Generic, TypeVar

from ._errors import NotRegisteredError


if TYPE_CHECKING:
    from ._registry import Registry, StoreItem

T = TypeVar("T")
# Parameters accepted by the factory registered for the token
P = TypeVar("P")


class Token(Generic[T, P]):
    """Explicit identifier for a dependency.

    Use a token when the class alone cannot tell two dependencies apart, or when
    there is no class at all::

        PRIMARY_DB = Token[Database, None]("primary db")
        injector.register(lambda inj, _: Database(PRIMARY_URL), Database, PRIMARY_DB)

    The type parameters only serve static checkers. Tokens compare by identity;
    the description is used for messages only.
    """

    __slots__ = ("_desc",)

    def __init__(self, description: str) -> None:
        self._desc = description

    @property
    def description(self) -> str:
        return self._desc

    def find(self, registry: Registry) -> StoreItem:
        item = registry.get(self)
        if item is None:
            msg = f"Token {self._desc} is not registered"
            raise NotRegisteredError(msg, self)
        return item

    def __str__(self) -> str:
        return self._desc

    def __repr__(self) -> str:
        return f"Token({self._desc!r})"


def describe(identifier: object) -> str:
    """Name of an identifier as shown in error messages and logs."""
    if isinstance(identifier, Token):
        return str(identifier)
    if inspect.isclass(identifier):
        return identifier.__name__
    return repr(identifier)
