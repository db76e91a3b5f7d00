from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _Membership:
    """
    equality lookup over a sequence. hashable values go through a set,
    the rest (dicts, lists) fall back to a linear scan.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._hashed = set()
        self._scanned = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._scanned.append(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return item in self._scanned


class SetAccessor(Generic[T]):
    """
    equality-based set operations. unlike unique(key_fn) on the collection itself,
    these compare the elements directly. results keep the receiver's order.
    """

    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def diff(self, other: Iterable[T]) -> 'Collection[T]':
        """elements of this sequence that do not appear in other"""
        from ..collection import Collection
        excluded = _Membership(other)
        return Collection([x for x in self._collection._get_data() if x not in excluded])

    def intersect(self, other: Iterable[T]) -> 'Collection[T]':
        """elements of this sequence that also appear in other"""
        from ..collection import Collection
        included = _Membership(other)
        return Collection([x for x in self._collection._get_data() if x in included])

    def duplicates(self) -> 'Collection[T]':
        """each repeated value once, in the order its second occurrence appears"""
        from ..collection import Collection
        seen, reported = _Membership(), _Membership()
        result = []
        for item in self._collection._get_data():
            if item in seen and item not in reported:
                reported.add(item)
                result.append(item)
            seen.add(item)
        return Collection(result)

    def unique(self) -> 'Collection[T]':
        """distinct elements, order of first appearance"""
        from ..collection import Collection
        seen = _Membership()
        result = []
        for item in self._collection._get_data():
            if item not in seen:
                seen.add(item)
                result.append(item)
        return Collection(result)

    def contains(self, item: T) -> bool:
        return self.index_of(item) != -1

    def index_of(self, item: T) -> int:
        """position of the first equal element, or -1"""
        for index, candidate in enumerate(self._collection._get_data()):
            if candidate == item: return index
        return -1

    def last_index_of(self, item: T) -> int:
        data = self._collection._get_data()
        for index in range(len(data) - 1, -1, -1):
            if data[index] == item: return index
        return -1
