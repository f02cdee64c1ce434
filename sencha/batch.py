"""Batches of registered references and of owned, densely packed values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from sencha.services import Service

T = TypeVar("T")


class LifetimeOwner(ABC):
    """Something that tracks resources identified by a token."""

    @abstractmethod
    def attach(self, token: Any) -> None:
        """Start tracking the resource identified by ``token``."""

    @abstractmethod
    def detach(self, token: Any) -> None:
        """Stop tracking the resource identified by ``token``."""


class RefBatch(LifetimeOwner, Service, Generic[T]):
    """Ordered set of references to objects owned elsewhere.

    Membership is by identity. Adding is idempotent and removal uses
    swap-and-pop, so the order of the remaining items may change.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._index: dict[int, int] = {}
        self._dirty = False

    # -- LifetimeOwner -----------------------------------------------------

    def attach(self, token: T) -> None:
        self.add(token)

    def detach(self, token: T) -> None:
        self.remove(token)

    # -- Membership --------------------------------------------------------

    def add(self, item: T) -> None:
        """Add ``item`` unless it is already present."""
        if item is None:
            raise ValueError("cannot add None to a RefBatch")
        if id(item) in self._index:
            return
        self._index[id(item)] = len(self._items)
        self._items.append(item)
        self._dirty = True

    def remove(self, item: T) -> None:
        """Remove ``item``; does nothing if it is not present."""
        position = self._index.pop(id(item), None)
        if position is None:
            return
        last = self._items.pop()
        if position < len(self._items):
            self._items[position] = last
            self._index[id(last)] = position
        self._dirty = True

    # -- Queries -----------------------------------------------------------

    def items(self) -> tuple[T, ...]:
        """Return the current items in batch order."""
        return tuple(self._items)

    def contains(self, item: T) -> bool:
        return id(item) in self._index

    def __contains__(self, item: object) -> bool:
        return id(item) in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def is_empty(self) -> bool:
        return not self._items

    # -- Dirty tracking ----------------------------------------------------

    def mark_dirty(self) -> None:
        self._dirty = True

    def check_and_clear_dirty(self) -> bool:
        """Return whether the batch was dirty, and clear the flag."""
        was_dirty = self._dirty
        self._dirty = False
        return was_dirty

    def sort_if_dirty(self, key: Callable[[T], Any]) -> None:
        """Sort the items by ``key`` if the batch changed since the last sort."""
        if not self._dirty:
            return
        self._items.sort(key=key)
        self._index = {id(item): position for position, item in enumerate(self._items)}
        self._dirty = False

    # -- Housekeeping ------------------------------------------------------

    def clear(self) -> None:
        self._items.clear()
        self._index.clear()
        self._dirty = False


@dataclass(frozen=True)
class DataBatchKey:
    """Stable identifier of an item in a DataBatch; 0 means no item."""

    value: int = 0

    def __bool__(self) -> bool:
        return self.value != 0


class DataBatch(LifetimeOwner, Service, Generic[T]):
    """Owns densely packed values of one type, addressed by stable keys.

    Removal swaps the last item into the freed slot, so keys stay valid
    while positions do not.
    """

    def __init__(self, item_type: Callable[..., T]) -> None:
        self._item_type = item_type
        self._items: list[T] = []
        self._index_to_key: list[int] = []
        self._key_to_index: dict[int, int] = {}
        self._next_key = 1
        self._dirty = False

    def emplace(self, *args: Any, **kwargs: Any) -> DataBatchKey:
        """Construct a new item from the arguments and return its key."""
        item = self._item_type(*args, **kwargs)
        key = DataBatchKey(self._next_key)
        self._next_key += 1
        self._key_to_index[key.value] = len(self._items)
        self._items.append(item)
        self._index_to_key.append(key.value)
        self._dirty = True
        return key

    def try_get(self, key: DataBatchKey) -> T | None:
        """Return the item for ``key``, or None if it has been removed."""
        position = self._key_to_index.get(key.value)
        return None if position is None else self._items[position]

    def remove(self, key: DataBatchKey) -> None:
        """Remove the item for ``key``; does nothing if it is absent."""
        self.detach(key)

    # -- LifetimeOwner -----------------------------------------------------

    def attach(self, token: DataBatchKey) -> None:
        """Items are added by ``emplace``; attaching does nothing."""

    def detach(self, token: DataBatchKey) -> None:
        position = self._key_to_index.pop(token.value, None)
        if position is None:
            return
        last_item = self._items.pop()
        last_key = self._index_to_key.pop()
        if position < len(self._items):
            self._items[position] = last_item
            self._index_to_key[position] = last_key
            self._key_to_index[last_key] = position
        self._dirty = True

    # -- Queries -----------------------------------------------------------

    def items(self) -> list[T]:
        """Return the items in storage order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def is_empty(self) -> bool:
        return not self._items

    # -- Dirty tracking ----------------------------------------------------

    def mark_dirty(self) -> None:
        self._dirty = True

    def check_and_clear_dirty(self) -> bool:
        """Return whether the batch was dirty, and clear the flag."""
        was_dirty = self._dirty
        self._dirty = False
        return was_dirty

    def sort_if_dirty(self, key: Callable[[T], Any]) -> None:
        """Sort the items by ``key`` if dirty, keeping every key valid."""
        if not self._dirty:
            return
        order = sorted(range(len(self._items)), key=lambda i: key(self._items[i]))
        self._items = [self._items[i] for i in order]
        self._index_to_key = [self._index_to_key[i] for i in order]
        self._key_to_index = {k: position for position, k in enumerate(self._index_to_key)}
        self._dirty = False

    # -- Housekeeping ------------------------------------------------------

    def clear(self) -> None:
        self._items.clear()
        self._index_to_key.clear()
        self._key_to_index.clear()
        self._dirty = False