from __future__ import annotations
import typing
from ..types import *
from ..errors import ItemNotFoundError

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _MutationOperations(Generic[T]):
    """
    in-place operations. these change the receiver and return it (or what they removed),
    unlike the rest of the api which always builds a new collection.
    invalid indices are ignored rather than raised.
    """

    def push(self: 'Collection[T]', *items: T) -> 'Collection[T]':
        self._items.extend(items)
        return self

    def prepend(self: 'Collection[T]', *items: T) -> 'Collection[T]':
        self._items[:0] = items
        return self

    def pop(self: 'Collection[T]') -> Optional[T]:
        """remove and return the last element, None when empty"""
        return self._items.pop() if self._items else None

    def pop_or_fail(self: 'Collection[T]') -> T:
        if not self._items: raise ItemNotFoundError()
        return self._items.pop()

    def shift(self: 'Collection[T]') -> Optional[T]:
        """remove and return the first element, None when empty"""
        return self._items.pop(0) if self._items else None

    def shift_or_fail(self: 'Collection[T]') -> T:
        if not self._items: raise ItemNotFoundError()
        return self._items.pop(0)

    def put(self: 'Collection[T]', index: int, value: T) -> 'Collection[T]':
        if 0 <= index < len(self._items):
            self._items[index] = value
        return self

    def forget(self: 'Collection[T]', *indices: int) -> 'Collection[T]':
        """remove the given positions, all measured against the collection as it was before the call"""
        # highest index first so earlier removals never shift later ones
        for index in sorted(set(indices), reverse=True):
            if 0 <= index < len(self._items):
                del self._items[index]
        return self

    def pull(self: 'Collection[T]', index: int) -> Optional[T]:
        """remove and return the element at index, None when out of range"""
        if not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def transform(self: 'Collection[T]', selector: Callable[[T], T]) -> 'Collection[T]':
        """replace every element with selector(item), in place"""
        for index, item in enumerate(self._items):
            self._items[index] = selector(item)
        return self

    def _splice_bounds(self: 'Collection[T]', offset: int, length: Optional[int]) -> Tuple[int, int]:
        size = len(self._items)
        if offset < 0:
            offset = max(0, size + offset)
        offset = min(offset, size)
        remaining = size - offset
        count = remaining if length is None else max(0, min(length, remaining))
        return offset, offset + count

    def splice(self: 'Collection[T]', offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """cut a sub-range out of this collection and return it as a new collection"""
        from ..collection import Collection
        start, end = self._splice_bounds(offset, length)
        removed = self._items[start:end]
        del self._items[start:end]
        return Collection(removed)

    def splice_replace(self: 'Collection[T]', offset: int, length: int,
                       replacement: Iterable[T]) -> 'Collection[T]':
        """like splice, but the replacement items are inserted where the cut was made"""
        from ..collection import Collection
        start, end = self._splice_bounds(offset, length)
        removed = self._items[start:end]
        self._items[start:end] = list(replacement)
        return Collection(removed)

    def each(self: 'Collection[T]', action: Callable[[T], Any]) -> 'Collection[T]':
        """
        performs the specified action on each element for side-effects.
        returns the original collection to allow chaining.
        """
        for item in self._items:
            action(item)
        return self

    def each_until(self: 'Collection[T]', action: Callable[[T], bool]) -> 'Collection[T]':
        """like each, but stops as soon as action returns False"""
        for item in self._items:
            if action(item) is False:
                break
        return self

    def tap(self: 'Collection[T]', action: Callable[['Collection[T]'], Any]) -> 'Collection[T]':
        action(self)
        return self
