from __future__ import annotations
import typing
from ..types import *
from ..errors import ItemNotFoundError, MultipleItemsFoundError
from .. import config

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _AccessOperations(Generic[T]):
    """
    element lookups in two families: the safe family hands back None or a caller
    default, the `_or_fail` family raises ItemNotFoundError instead.
    """

    def first(self: 'Collection[T]') -> Optional[T]:
        return self.first_or(None)

    def first_or(self: 'Collection[T]', default: T) -> T:
        data = self._get_data()
        return data[0] if data else default

    def first_or_fail(self: 'Collection[T]') -> T:
        data = self._get_data()
        if not data: raise ItemNotFoundError()
        return data[0]

    def first_where(self: 'Collection[T]', predicate: Predicate[T]) -> Tuple[Optional[T], bool]:
        """first matching element as (item, found)"""
        for item in self._get_data():
            if predicate(item): return item, True
        return None, False

    def first_where_or_fail(self: 'Collection[T]', predicate: Predicate[T]) -> T:
        item, found = self.first_where(predicate)
        if not found: raise ItemNotFoundError("no element satisfies the condition")
        return item

    def last(self: 'Collection[T]') -> Optional[T]:
        return self.last_or(None)

    def last_or(self: 'Collection[T]', default: T) -> T:
        data = self._get_data()
        return data[-1] if data else default

    def last_or_fail(self: 'Collection[T]') -> T:
        data = self._get_data()
        if not data: raise ItemNotFoundError()
        return data[-1]

    def last_where(self: 'Collection[T]', predicate: Predicate[T]) -> Tuple[Optional[T], bool]:
        for item in reversed(self._get_data()):
            if predicate(item): return item, True
        return None, False

    def get(self: 'Collection[T]', index: int) -> Optional[T]:
        """element at index, None when out of range. negative indices are out of range."""
        return self.get_or(index, None)

    def get_or(self: 'Collection[T]', index: int, default: T) -> T:
        data = self._get_data()
        if 0 <= index < len(data):
            return data[index]
        return default

    def get_or_fail(self: 'Collection[T]', index: int) -> T:
        data = self._get_data()
        if not 0 <= index < len(data):
            raise ItemNotFoundError(f"index {index} out of range")
        return data[index]

    def random(self: 'Collection[T]', random_state: Optional[int] = None) -> Optional[T]:
        """one element picked at random, None when empty"""
        data = self._get_data()
        if not data: return None
        return config.rng(random_state).choice(data)

    def random_or_fail(self: 'Collection[T]', random_state: Optional[int] = None) -> T:
        if self.is_empty(): raise ItemNotFoundError()
        return self.random(random_state)

    def random_n(self: 'Collection[T]', n: int, random_state: Optional[int] = None) -> 'Collection[T]':
        """
        n distinct positions picked without replacement.
        asking for at least as many as there are gives a shuffled copy of everything.
        """
        from ..collection import Collection
        data = self._get_data()
        if n <= 0 or not data:
            return Collection()
        if n >= len(data):
            return self.shuffle(random_state)
        return Collection(config.rng(random_state).sample(data, n))

    def sole(self: 'Collection[T]') -> T:
        """the only element; raises unless there is exactly one"""
        data = self._get_data()
        if len(data) == 0: raise ItemNotFoundError()
        if len(data) > 1: raise MultipleItemsFoundError()
        return data[0]

    def sole_where(self: 'Collection[T]', predicate: Predicate[T]) -> T:
        return self.filter(predicate).sole()

    def search(self: 'Collection[T]', predicate: Predicate[T]) -> int:
        """index of the first match, or -1"""
        for index, item in enumerate(self._get_data()):
            if predicate(item): return index
        return -1

    def contains(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        return any(predicate(x) for x in self._get_data())

    def some(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        return self.contains(predicate)

    def every(self: 'Collection[T]', predicate: Predicate[T]) -> bool:
        return all(predicate(x) for x in self._get_data())
