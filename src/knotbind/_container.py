from __future__ import annotations

import logging
import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    TypeVar,
    overload,
)

from ._deferred import Deferred
from ._errors import NotRegisteredError
from ._registry import Registry, StoreItem
from ._token import Token, describe


logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")

if TYPE_CHECKING:
    from collections.abc import Callable

    Identifier = type[T] | Token[T, Any]
    # Factories receive the resolver and the caller supplied params
    ServiceFactory = Callable[["Resolver", P], T]


class Resolver(Protocol):
    """What a factory receives as its first argument."""

    def resolve(self, identifier: Any, *, singleton: bool = ..., params: Any = ...) -> Any: ...


class Injector:
    """Minimal DI container.

    - register a factory under a class and optionally a token
    - resolve singletons (default) or fresh transient instances
    - mutually dependent singletons get a deferred reference to each other.

    Example:
      injector.register(lambda inj, _: Repo(inj.resolve(Database)), Repo)
      injector.register(lambda inj, params: Logger(params["name"]), Logger, LOGGER)
      repo = injector.resolve(Repo)
      log = injector.resolve(LOGGER, params={"name": "app"})

    """

    def __init__(self) -> None:
        self._registry = Registry()
        self._lock = threading.RLock()

    def register(
        self,
        factory: ServiceFactory[T, P],
        key: type[T],
        token: Token[T, P] | None = None,
    ) -> None:
        """Register `factory` under `key` and, when given, under `token` too.

        Both identifiers share one store item, so they resolve to the same
        singleton. Registering `key` again replaces the entry for `key` only;
        a token bound by the earlier call still refers to the earlier item.
        """
        if key is None:
            msg = "A key must be provided."
            raise ValueError(msg)

        item = StoreItem(factory=factory)
        with self._lock:
            if token is not None:
                self._registry.set(token, item)
            self._registry.set(key, item)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Registered %s%s",
                describe(key),
                f" (token {describe(token)})" if token is not None else "",
            )

    @overload
    def resolve(self, identifier: Token[T, P], *, singleton: bool = ..., params: P | None = ...) -> T: ...

    @overload
    def resolve(self, identifier: type[T], *, singleton: bool = ..., params: Any = ...) -> T: ...

    def resolve(self, identifier: Identifier[T], *, singleton: bool = True, params: Any = None) -> Any:
        """Resolve the identifier to an instance.

        - `singleton=False`: always call the factory; cached state is untouched.
        - first singleton request: call the factory once and cache the result.
        - singleton requested again while its factory is still running (a
          cycle): return a `Deferred` that forwards to the instance later.
        `params` is passed as is to the factory when it is called.
        """
        with self._lock:
            item = self._find(identifier)

            if not singleton:
                return item.factory(self, params)

            if item.initialized:
                if item.instance is not None:
                    return item.instance

                logger.debug("Cycle on %s, handing out a deferred reference", describe(identifier))
                return Deferred(self, identifier)

            # Flag first so re-entrant calls from the factory see a cycle
            item.initialized = True
            logger.debug("Constructing singleton %s", describe(identifier))
            item.instance = item.factory(self, params)
            return item.instance

    def _find(self, identifier: object) -> StoreItem:
        if isinstance(identifier, Token):
            return identifier.find(self._registry)

        item = self._registry.get(identifier)
        if item is None:
            msg = f"{describe(identifier)} is not registered"
            raise NotRegisteredError(msg, identifier)
        return item
