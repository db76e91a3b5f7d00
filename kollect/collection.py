from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.access import _AccessOperations
from .extensions.mutation import _MutationOperations
from .extensions.sorting import _SortingOperations, _apply_sort_keys

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor, dumps

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ICollection(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base collection implementation ---

class _BaseCollection(ICollection[T]):
    def __init__(self, items: Optional[Iterable[T]] = None):
        """init with any iterable; the items are copied so the caller's list is never shared"""
        self._items: List[T] = list(items) if items is not None else []

    def _get_data(self) -> List[T]:
        return self._items

    def all(self) -> List[T]:
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def contains_one_item(self) -> bool:
        return len(self._items) == 1

    def to_native(self) -> List[Any]:
        """plain python form, with nested collections unwrapped"""
        return [item.to_native() if hasattr(item, 'to_native') else item for item in self._items]

    def to_json(self) -> str:
        return dumps(self.to_native())

    def dump(self) -> 'Collection[T]':
        """log the json form at info level and keep chaining"""
        logger.info(f"{type(self).__name__}({len(self._items)}): {self.to_json()}")
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

# --- main collection class ---

class Collection(
    _BaseCollection[T],
    _CoreOperations[T],
    _AccessOperations[T],
    _MutationOperations[T],
    _SortingOperations[T]
):
    """a fluent, eager wrapper over an ordered list of items."""
    def __init__(self, items: Optional[Iterable[T]] = None):
        super().__init__(items)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered collection class ---

class OrderedCollection(Collection[T]):
    """the result of a key sort, allowing for subsequent tie-breaking orderings."""

    def __init__(self, items: Iterable[T], sort_keys: List[SortKey[T]]):
        super().__init__(_apply_sort_keys(items, sort_keys))
        self._sort_keys = sort_keys

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedCollection[T]':
        """secondary sort ascending"""
        # items tied on every key are already in input order, so re-sorting the current items is enough
        return OrderedCollection(self._items, self._sort_keys + [SortKey(key_selector)])

    def then_by_desc(self, key_selector: KeySelector[T, K]) -> 'OrderedCollection[T]':
        """secondary sort descending"""
        return OrderedCollection(self._items, self._sort_keys + [SortKey(key_selector, descending=True)])
