"""Unordered dictionary backed by a closed-addressing (linear probing) hash table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from diccionario.base import (
    Dictionary,
    DictionaryIterator,
    IteratorExhaustedError,
    KeyNotFoundError,
    Visitor,
)

KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1

GROW_LOAD = 0.70
SHRINK_LOAD = 0.20
INITIAL_SIZE = 13
RESIZE_FACTOR = 2


def fnv1_64(data: bytes) -> int:
    """Return the 64-bit FNV-1 hash of ``data``."""
    value = _FNV64_OFFSET
    for byte in bytes(data):
        value = (value * _FNV64_PRIME) & _MASK64
        value ^= byte
    return value


class _State(Enum):
    EMPTY = 0
    OCCUPIED = 1
    DELETED = 2


_NO_KEY = object()


@dataclass
class _Cell:
    key: Any = _NO_KEY
    value: Any = None
    state: _State = _State.EMPTY

    def holds(self, key: object) -> bool:
        return self.state is _State.OCCUPIED and self.key == key


def _probe(key: object, table: list[_Cell]) -> int:
    """Return the slot holding ``key`` or the first empty slot on its probe path."""
    size = len(table)
    pos = fnv1_64(str(key).encode("utf-8")) % size
    while table[pos].state is not _State.EMPTY and table[pos].key != key:
        pos = (pos + 1) % size
    return pos


class _HashIterator(DictionaryIterator[KeyT, ValueT]):
    """External iterator over the occupied cells of a table."""

    def __init__(self, table: list[_Cell]) -> None:
        self._table = table
        self._pos = self._skip_to_occupied(0)

    def _skip_to_occupied(self, pos: int) -> int:
        while pos < len(self._table) and self._table[pos].state is not _State.OCCUPIED:
            pos += 1
        return pos

    def _cell(self) -> _Cell:
        if not self.has_next():
            raise IteratorExhaustedError()
        return self._table[self._pos]

    def has_next(self) -> bool:
        return self._pos < len(self._table)

    def current(self) -> tuple[KeyT, ValueT]:
        cell = self._cell()
        return cell.key, cell.value

    def advance(self) -> None:
        self._cell()
        self._pos = self._skip_to_occupied(self._pos + 1)


class HashTable(Dictionary[KeyT, ValueT], Generic[KeyT, ValueT]):
    """Dictionary using open addressing with linear probing and tombstones.

    Keys are hashed with FNV-1 over their string form. The table doubles when
    the load (live plus deleted cells) exceeds 0.70 and halves when it drops
    below 0.20, never shrinking below the initial size of 13.
    """

    def __init__(self) -> None:
        self._table: list[_Cell] = [_Cell() for _ in range(INITIAL_SIZE)]
        self._count = 0
        self._deleted = 0

    def _load(self) -> float:
        return (self._count + self._deleted) / len(self._table)

    def _resize(self, new_size: int) -> None:
        new_table = [_Cell() for _ in range(new_size)]
        for cell in self._table:
            if cell.state is _State.OCCUPIED:
                new_table[_probe(cell.key, new_table)] = cell
        self._table = new_table
        self._deleted = 0

    def _slot(self, key: object) -> _Cell:
        return self._table[_probe(key, self._table)]

    def _lookup(self, key: object) -> Optional[_Cell]:
        cell = self._slot(key)
        return cell if cell.holds(key) else None

    def _require(self, key: object) -> _Cell:
        cell = self._lookup(key)
        if cell is None:
            raise KeyNotFoundError(key)
        return cell

    def save(self, key: KeyT, value: ValueT) -> None:
        if self._load() > GROW_LOAD:
            self._resize(len(self._table) * RESIZE_FACTOR)
        cell = self._slot(key)
        cell.value = value
        if not cell.holds(key):
            cell.key = key
            cell.state = _State.OCCUPIED
            self._count += 1

    def contains(self, key: KeyT) -> bool:
        return self._lookup(key) is not None

    def get(self, key: KeyT) -> ValueT:
        return self._require(key).value

    def delete(self, key: KeyT) -> ValueT:
        cell = self._require(key)
        self._count -= 1
        self._deleted += 1
        cell.state = _State.DELETED
        removed = cell.value
        if self._load() < SHRINK_LOAD and len(self._table) > INITIAL_SIZE:
            self._resize(len(self._table) // RESIZE_FACTOR)
        return removed

    def __len__(self) -> int:
        return self._count

    def iterate(self, visit: Visitor) -> None:
        for cell in self._table:
            if cell.state is _State.OCCUPIED and not visit(cell.key, cell.value):
                break

    def iterator(self) -> DictionaryIterator[KeyT, ValueT]:
        return _HashIterator(self._table)