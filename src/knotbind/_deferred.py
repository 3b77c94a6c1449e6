from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._errors import InstanceNotFoundError
from ._token import describe


if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._container import Resolver

# Values a deferred reference cannot stand in for
_SCALARS = (int, float, complex, str, bytes)


class Deferred:
    """Stand-in for a singleton that is still being constructed.

    Handed out when a factory (directly or through other factories) asks for the
    singleton whose factory is currently running. Every attribute read, write and
    delete resolves the identifier again and forwards to the real instance, so
    the reference becomes usable once construction has finished. Using it from
    inside the other party's constructor fails, since the target does not exist
    yet at that point.
    """

    __slots__ = ("__identifier", "__injector")

    def __init__(self, injector: Resolver, identifier: object) -> None:
        object.__setattr__(self, "_Deferred__injector", injector)
        object.__setattr__(self, "_Deferred__identifier", identifier)

    def __getattr__(self, name: str) -> object:
        return getattr(_target(self), name)

    def __setattr__(self, name: str, value: object) -> None:
        setattr(_target(self), name, value)

    def __delattr__(self, name: str) -> None:
        delattr(_target(self), name)

    # Special methods are looked up on the type, never through __getattr__
    def __str__(self) -> str:
        return str(_target(self))

    def __bool__(self) -> bool:
        return bool(_target(self))

    def __eq__(self, other: object) -> bool:
        return _target(self) == other

    def __hash__(self) -> int:
        return hash(_target(self))

    def __len__(self) -> int:
        return len(_target(self))

    def __iter__(self) -> Iterator[Any]:
        return iter(_target(self))

    def __contains__(self, item: object) -> bool:
        return item in _target(self)

    def __getitem__(self, key: Any) -> Any:
        return _target(self)[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        _target(self)[key] = value

    def __delitem__(self, key: Any) -> None:
        del _target(self)[key]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return _target(self)(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<Deferred {describe(self.__identifier)}>"


def _target(ref: Deferred) -> object:
    injector = object.__getattribute__(ref, "_Deferred__injector")
    identifier = object.__getattribute__(ref, "_Deferred__identifier")

    target = injector.resolve(identifier)
    if target is None or isinstance(target, (Deferred, *_SCALARS)):
        msg = f"Instance of {describe(identifier)} not found"
        raise InstanceNotFoundError(msg, identifier)
    return target
