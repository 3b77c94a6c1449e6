"""Minimal dependency injection library.

This package provides a small dependency injection container for Python that maps
classes or explicit tokens to factories and resolves instances on demand, either
as singletons or as fresh transient instances. Singletons that depend on each
other are wired through deferred references instead of recursing forever.

Exports:
- `Injector`: the container; `register` factories, `resolve` instances.
- `Token`: identity-compared key for dependencies a class alone cannot name.
- `Deferred`: stand-in returned for a singleton still under construction.
- `Registry` / `StoreItem`: the identity-keyed storage behind the injector.
- `Resolver`: protocol of the object passed to factories.
- `ResolutionError`, `NotRegisteredError`, `InstanceNotFoundError`: failures.
"""

from ._container import Injector, Resolver
from ._deferred import Deferred
from ._errors import InstanceNotFoundError, NotRegisteredError, ResolutionError
from ._registry import Registry, StoreItem
from ._token import Token


__all__ = [
    "Deferred",
    "Injector",
    "InstanceNotFoundError",
    "NotRegisteredError",
    "Registry",
    "ResolutionError",
    "Resolver",
    "StoreItem",
    "Token",
]
