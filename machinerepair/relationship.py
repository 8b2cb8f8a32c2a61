"""Lazily resolved references between entities."""

from __future__ import annotations

import copy
from typing import Any, Callable, Optional

Initializer = Callable[[Optional[Any]], Any]


class InitializerIsEmpty(RuntimeError):
    """Raised when a relationship holds neither a value nor an initializer."""


def _simple_initializer(value: Any) -> Initializer:
    def initialize(current: Any) -> Any:
        return current if current is not None else copy.copy(value)

    return initialize


class Relationship:
    """A reference to an object that may be loaded on first access.

    The initializer receives the currently cached object (or None) and returns
    the object to use; the result is cached for later calls.
    """

    def __init__(
        self,
        initializer: Initializer | None = None,
        value: Any = None,
    ) -> None:
        self._value = value
        if initializer is None and value is not None:
            initializer = _simple_initializer(value)
        self._initializer = initializer

    def get(self) -> Any:
        """Return the referenced object, resolving it if needed."""
        if self._initializer is None:
            if self._value is not None:
                return self._value
            raise InitializerIsEmpty("initializer was not set")
        self._value = self._initializer(self._value)
        return self._value

    def set(self, initializer: Initializer) -> None:
        """Replace the initializer used to resolve the object."""
        self._initializer = initializer

    def is_empty(self) -> bool:
        """Return True when there is neither a cached object nor an initializer."""
        return self._value is None and self._initializer is None

    def __bool__(self) -> bool:
        return not self.is_empty()