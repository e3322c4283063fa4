"""Abstract dictionary interfaces and the errors they raise."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Visitor = Callable[[K, V], bool]

KEY_NOT_FOUND_MESSAGE = "La clave no pertenece al diccionario"
ITERATOR_EXHAUSTED_MESSAGE = "El iterador termino de iterar"


class KeyNotFoundError(KeyError):
    """Raised when a key is looked up or deleted but is not stored."""

    def __init__(self, key: object = None) -> None:
        super().__init__(KEY_NOT_FOUND_MESSAGE)
        self.key = key

    def __str__(self) -> str:
        return KEY_NOT_FOUND_MESSAGE


class IteratorExhaustedError(Exception):
    """Raised when an exhausted iterator is read or advanced."""

    def __init__(self, message: str = ITERATOR_EXHAUSTED_MESSAGE) -> None:
        super().__init__(message)


class DictionaryIterator(ABC, Generic[K, V]):
    """External iterator over the (key, value) pairs of a dictionary.

    Besides the explicit ``has_next``/``current``/``advance`` protocol it
    supports the Python iterator protocol, yielding ``(key, value)`` tuples.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Return whether the iterator is positioned on an element."""

    @abstractmethod
    def current(self) -> tuple[K, V]:
        """Return the current (key, value) pair.

        Raises IteratorExhaustedError when there is no current element.
        """

    @abstractmethod
    def advance(self) -> None:
        """Move to the next element.

        Raises IteratorExhaustedError when there is no current element.
        """

    def __iter__(self) -> DictionaryIterator[K, V]:
        return self

    def __next__(self) -> tuple[K, V]:
        if not self.has_next():
            raise StopIteration
        item = self.current()
        self.advance()
        return item


class Dictionary(ABC, Generic[K, V]):
    """A key-value store with internal and external iteration."""

    @abstractmethod
    def save(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def contains(self, key: K) -> bool:
        """Return whether ``key`` is stored."""

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value stored under ``key`` or raise KeyNotFoundError."""

    @abstractmethod
    def delete(self, key: K) -> V:
        """Remove ``key`` and return its value, or raise KeyNotFoundError."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored keys."""

    @abstractmethod
    def iterate(self, visit: Visitor) -> None:
        """Call ``visit(key, value)`` for each element until it returns false."""

    @abstractmethod
    def iterator(self) -> DictionaryIterator[K, V]:
        """Return an external iterator over the stored elements."""

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Iterate over (key, value) pairs."""
        return self.iterator()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.save(key, value)

    def __delitem__(self, key: K) -> None:
        self.delete(key)


class OrderedDictionary(Dictionary[K, V]):
    """A dictionary whose keys are kept in order, with range iteration.

    A bound of ``None`` leaves that side of the range open. Both bounds are
    inclusive.
    """

    @abstractmethod
    def iterate_range(
        self, start: Optional[K], end: Optional[K], visit: Visitor
    ) -> None:
        """Call ``visit`` in key order for keys within ``[start, end]``."""

    @abstractmethod
    def range_iterator(
        self, start: Optional[K], end: Optional[K]
    ) -> DictionaryIterator[K, V]:
        """Return an external iterator over keys within ``[start, end]``."""