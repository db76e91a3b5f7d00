from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection
    from ..map_collection import MapCollection


class GroupingAccessor(Generic[T]):
    """
    turns a sequence into a key-value collection. keys always come out in the
    order they were first seen in the source.
    """

    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> 'MapCollection[K, Collection[T]]':
        """bucket items per key; each bucket keeps the items' relative order"""
        from ..collection import Collection
        from ..map_collection import MapCollection
        groups: Dict[K, Collection[T]] = {}
        for item in self._collection._get_data():
            key = key_selector(item)
            if key not in groups:
                groups[key] = Collection()
            groups[key].push(item)
        return MapCollection(groups)

    def key_by(self, key_selector: KeySelector[T, K]) -> 'MapCollection[K, T]':
        """index items by key; a later item replaces an earlier one but the key keeps its first position"""
        from ..map_collection import MapCollection
        result: Dict[K, T] = {}
        for item in self._collection._get_data():
            result[key_selector(item)] = item
        return MapCollection(result)

    def count_by(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'MapCollection[K, int]':
        """occurrences per derived key (the item itself when no selector is given)"""
        from ..map_collection import MapCollection
        key_fn = key_selector or (lambda item: item)
        counts: Dict[K, int] = {}
        for item in self._collection._get_data():
            key = key_fn(item)
            counts[key] = counts.get(key, 0) + 1
        return MapCollection(counts)

    def map_with_keys(self, pair_selector: Callable[[T], Tuple[K, V]]) -> 'MapCollection[K, V]':
        """build a map from (key, value) pairs; the last value for a key wins"""
        from ..map_collection import MapCollection
        result: Dict[K, V] = {}
        for item in self._collection._get_data():
            key, value = pair_selector(item)
            result[key] = value
        return MapCollection(result)

    def map_to_dictionary(self, pair_selector: Callable[[T], Tuple[K, V]]) -> 'MapCollection[K, List[V]]':
        """like map_with_keys, but every value for a key is kept in a list"""
        from ..map_collection import MapCollection
        result: Dict[K, List[V]] = {}
        for item in self._collection._get_data():
            key, value = pair_selector(item)
            result.setdefault(key, []).append(value)
        return MapCollection(result)

    def map_to_groups(self, pair_selector: Callable[[T], Tuple[K, V]]) -> 'MapCollection[K, List[V]]':
        return self.map_to_dictionary(pair_selector)

    def pluck_map(self, value_selector: Selector[T, V], key_selector: KeySelector[T, K]) -> 'MapCollection[K, V]':
        """map of key_selector(item) -> value_selector(item)"""
        return self.map_with_keys(lambda item: (key_selector(item), value_selector(item)))

    def flip(self) -> 'MapCollection[T, int]':
        """map each item to its position; a repeated item ends up at its last index"""
        from ..map_collection import MapCollection
        result: Dict[T, int] = {}
        for index, item in enumerate(self._collection._get_data()):
            result[item] = index
        return MapCollection(result)
