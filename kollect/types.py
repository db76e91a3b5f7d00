from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Number = Union[int, float]


class KeyValue(NamedTuple):
    """a single entry of a map collection, in key order"""
    key: Any
    value: Any


class SortKey(Generic[T]):
    """one level of a multi-key sort: a key selector and its direction"""

    def __init__(self, key_fn: Callable[[T], Any], descending: bool = False):
        if not callable(key_fn):
            from .errors import InvalidArgumentError
            raise InvalidArgumentError(f"sort key must be callable, got {type(key_fn).__name__}")
        self.key_fn = key_fn
        self.descending = descending

    def __repr__(self) -> str:
        direction = "desc" if self.descending else "asc"
        return f"SortKey({getattr(self.key_fn, '__name__', 'key_fn')}, {direction})"
