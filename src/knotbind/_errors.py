from __future__ import annotations


class ResolutionError(RuntimeError):
    def __init__(self, msg: str, identifier: object = None) -> None:
        super().__init__(msg)
        self.identifier = identifier


class NotRegisteredError(ResolutionError, LookupError):
    """Raised when an identifier has no registration."""


class InstanceNotFoundError(ResolutionError):
    """Raised when a deferred reference is used before its target exists."""
