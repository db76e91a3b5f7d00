from __future__ import annotations
import typing
from functools import cmp_to_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection, OrderedCollection


def _apply_sort_keys(data: Iterable[T], sort_keys: List[SortKey[T]]) -> List[T]:
    """
    stable multi-key sort. python's sort is stable, so sorting from the last key
    to the first leaves earlier keys in charge and later keys as tie-breakers.
    """
    result = list(data)
    for sort_key in reversed(sort_keys):
        result.sort(key=sort_key.key_fn, reverse=sort_key.descending)
    return result


class _SortingOperations(Generic[T]):
    """every sort returns a new collection; equal keys keep their input order."""

    def sort(self: 'Collection[T]') -> 'Collection[T]':
        """ascending by natural ordering"""
        from ..collection import Collection
        return Collection(sorted(self._get_data()))

    def sort_desc(self: 'Collection[T]') -> 'Collection[T]':
        from ..collection import Collection
        return Collection(sorted(self._get_data(), reverse=True))

    def sort_func(self: 'Collection[T]', comparer: Comparer[T]) -> 'Collection[T]':
        """sort with a three-way comparer returning <0, 0 or >0"""
        from ..collection import Collection
        return Collection(sorted(self._get_data(), key=cmp_to_key(comparer)))

    def sort_stable_func(self: 'Collection[T]', comparer: Comparer[T]) -> 'Collection[T]':
        # sorted() is already stable, this spelling exists for callers that want to say so
        return self.sort_func(comparer)

    def sort_by(self: 'Collection[T]', key_selector: KeySelector[T, K]) -> 'OrderedCollection[T]':
        """stable sort by a key, ascending. chain then_by for tie-breakers."""
        from ..collection import OrderedCollection
        return OrderedCollection(self._get_data(), [SortKey(key_selector)])

    def sort_by_desc(self: 'Collection[T]', key_selector: KeySelector[T, K]) -> 'OrderedCollection[T]':
        from ..collection import OrderedCollection
        return OrderedCollection(self._get_data(), [SortKey(key_selector, descending=True)])

    def sort_by_keys(self: 'Collection[T]', sort_keys: Iterable[SortKey[T]]) -> 'OrderedCollection[T]':
        """
        lexicographic sort over several keys with per-key direction.
        example: .sort_by_keys([SortKey(lambda p: p['dept']), SortKey(lambda p: p['age'], descending=True)])
        """
        from ..collection import OrderedCollection
        return OrderedCollection(self._get_data(), list(sort_keys))
