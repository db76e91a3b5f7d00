from __future__ import annotations

import logging
import typing
import pandas as pd
from .types import *
from .errors import ItemNotFoundError
from .extensions.terminal import dumps

if typing.TYPE_CHECKING:
    from .collection import Collection

logger = logging.getLogger(__name__)

_JSON_KEY_TYPES = (str, int, float, bool, type(None))


class MapCollection(Generic[K, V]):
    """
    an insertion-ordered key-value collection.

    backed by a plain dict, which keeps keys in insertion order, so the key order and
    the key set can never drift apart. put() appends new keys at the end and leaves an
    updated key where it was; forget()/pull() remove the key and its slot together.
    transformations return new collections that keep the surviving keys in order.
    """

    def __init__(self, items: Optional[Dict[K, V]] = None, keys: Optional[Iterable[K]] = None):
        source = dict(items) if items is not None else {}
        if keys is None:
            self._items: Dict[K, V] = source
        else:
            # explicit order first, then anything the order list left out
            ordered = {key: source[key] for key in keys if key in source}
            ordered.update((key, value) for key, value in source.items() if key not in ordered)
            self._items = ordered

    # --- lookups ---

    def all(self) -> Dict[K, V]:
        return dict(self._items)

    def keys(self) -> 'Collection[K]':
        from .collection import Collection
        return Collection(self._items.keys())

    def values(self) -> 'Collection[V]':
        from .collection import Collection
        return Collection(self._items.values())

    def get(self, key: K) -> Optional[V]:
        return self._items.get(key)

    def get_or(self, key: K, default: V) -> V:
        return self._items.get(key, default)

    def get_or_fail(self, key: K) -> V:
        if key not in self._items:
            raise ItemNotFoundError(f"key {key!r} not found")
        return self._items[key]

    def has(self, *keys: K) -> bool:
        """true when every key is present"""
        return all(key in self._items for key in keys)

    def has_any(self, *keys: K) -> bool:
        return any(key in self._items for key in keys)

    def first(self) -> Optional[V]:
        return next(iter(self._items.values()), None)

    def last(self) -> Optional[V]:
        return next(reversed(self._items.values()), None)

    def first_key(self) -> Optional[K]:
        return next(iter(self._items), None)

    def last_key(self) -> Optional[K]:
        return next(reversed(self._items), None)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def contains(self, predicate: Callable[[V, K], bool]) -> bool:
        return any(predicate(value, key) for key, value in self._items.items())

    def every(self, predicate: Callable[[V, K], bool]) -> bool:
        return all(predicate(value, key) for key, value in self._items.items())

    # --- in-place ---

    def put(self, key: K, value: V) -> 'MapCollection[K, V]':
        self._items[key] = value
        return self

    def forget(self, *keys: K) -> 'MapCollection[K, V]':
        for key in keys:
            self._items.pop(key, None)
        return self

    def pull(self, key: K) -> Optional[V]:
        """remove a key and return its value, None when absent"""
        return self._items.pop(key, None)

    def get_or_put(self, key: K, default: V) -> V:
        """existing value, or store default under key and return it"""
        return self._items.setdefault(key, default)

    def each(self, action: Callable[[K, V], Any]) -> 'MapCollection[K, V]':
        for key, value in list(self._items.items()):
            action(key, value)
        return self

    def each_until(self, action: Callable[[K, V], bool]) -> 'MapCollection[K, V]':
        """like each, but stops as soon as action returns False"""
        for key, value in list(self._items.items()):
            if action(key, value) is False:
                break
        return self

    def tap(self, action: Callable[['MapCollection[K, V]'], Any]) -> 'MapCollection[K, V]':
        action(self)
        return self

    def when(self, condition: bool,
             operation: Callable[['MapCollection[K, V]'], 'MapCollection[K, V]']) -> 'MapCollection[K, V]':
        return operation(self) if condition else self

    # --- transformations ---

    def map_values(self, selector: Callable[[V, K], U]) -> 'MapCollection[K, U]':
        return MapCollection({key: selector(value, key) for key, value in self._items.items()})

    def filter(self, predicate: Callable[[V, K], bool]) -> 'MapCollection[K, V]':
        return MapCollection({key: value for key, value in self._items.items() if predicate(value, key)})

    def reject(self, predicate: Callable[[V, K], bool]) -> 'MapCollection[K, V]':
        return self.filter(lambda value, key: not predicate(value, key))

    def only(self, *keys: K) -> 'MapCollection[K, V]':
        """the listed keys that exist, in this collection's order"""
        wanted = set(keys)
        return self.filter(lambda _, key: key in wanted)

    def except_(self, *keys: K) -> 'MapCollection[K, V]':
        excluded = set(keys)
        return self.filter(lambda _, key: key not in excluded)

    def merge(self, *others: 'MapCollection[K, V]') -> 'MapCollection[K, V]':
        """later collections override shared keys in place; their new keys are appended"""
        result = dict(self._items)
        for other in others:
            result.update(other._items)
        return MapCollection(result)

    def union(self, other: 'MapCollection[K, V]') -> 'MapCollection[K, V]':
        """like merge, but values already here win; only new keys are taken from other"""
        result = dict(self._items)
        for key, value in other._items.items():
            result.setdefault(key, value)
        return MapCollection(result)

    def diff_keys(self, other: 'MapCollection[K, V]') -> 'MapCollection[K, V]':
        return self.filter(lambda _, key: key not in other._items)

    def intersect_by_keys(self, other: 'MapCollection[K, V]') -> 'MapCollection[K, V]':
        return self.filter(lambda _, key: key in other._items)

    def reduce(self, accumulator: Callable[[U, V, K], U], initial: U) -> U:
        result = initial
        for key, value in self._items.items():
            result = accumulator(result, value, key)
        return result

    def sort_keys(self) -> 'MapCollection[K, V]':
        """same entries, keys in ascending order; keys must be mutually comparable"""
        return MapCollection(self._items, keys=sorted(self._items))

    def sort_keys_desc(self) -> 'MapCollection[K, V]':
        return MapCollection(self._items, keys=sorted(self._items, reverse=True))

    def flip(self) -> 'MapCollection[V, K]':
        """swap keys and values; when values repeat, the later key wins"""
        result: Dict[V, K] = {}
        for key, value in self._items.items():
            result[value] = key
        return MapCollection(result)

    def clone(self) -> 'MapCollection[K, V]':
        return MapCollection(self._items)

    # --- conversion ---

    def to_pairs(self) -> 'Collection[KeyValue]':
        from .collection import Collection
        return Collection(KeyValue(key, value) for key, value in self._items.items())

    def to_native(self) -> Dict[Any, Any]:
        """plain dict with nested collections unwrapped; keys json cannot hold become str"""
        return {
            (key if isinstance(key, _JSON_KEY_TYPES) else str(key)):
                (value.to_native() if hasattr(value, 'to_native') else value)
            for key, value in self._items.items()
        }

    def to_json(self) -> str:
        """json object in key order"""
        return dumps(self.to_native())

    def to_pandas(self) -> pd.Series:
        """series indexed by key, in key order"""
        return pd.Series(list(self._items.values()), index=list(self._items.keys()), dtype=object)

    def dump(self) -> 'MapCollection[K, V]':
        logger.info(f"MapCollection({len(self._items)}): {self.to_json()}")
        return self

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Any) -> bool:
        return key in self._items

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"MapCollection({self._items!r})"
