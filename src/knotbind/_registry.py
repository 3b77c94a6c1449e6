from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(eq=False)
class StoreItem:
    factory: Callable[[Any, Any], object]
    initialized: bool = False  # set before the singleton factory runs
    instance: object | None = None  # cached singleton


class Registry:
    """Identifier -> StoreItem mapping keyed by object identity.

    Classes and tokens are never compared with ``==``: two tokens with the same
    description are two different keys. The identifier is kept alongside its
    item so that its ``id()`` cannot be reused while the entry exists.
    """

    def __init__(self) -> None:
        self._items: dict[int, tuple[object, StoreItem]] = {}

    def set(self, identifier: object, item: StoreItem) -> None:
        self._items[id(identifier)] = (identifier, item)

    def get(self, identifier: object) -> StoreItem | None:
        entry = self._items.get(id(identifier))
        if entry is None:
            return None
        return entry[1]

    def __contains__(self, identifier: object) -> bool:
        return id(identifier) in self._items

    def __len__(self) -> int:
        return len(self._items)
