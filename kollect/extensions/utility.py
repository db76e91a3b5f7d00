from __future__ import annotations
import typing
from itertools import product
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection
    from ..map_collection import MapCollection


class UtilityAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def zip(self, *others: Iterable[T]) -> 'Collection[List[T]]':
        """rows of aligned elements, cut to the shortest input"""
        from ..collection import Collection
        return Collection([list(row) for row in zip(self._collection._get_data(), *others)])

    def cross_join(self, *others: Iterable[T]) -> 'Collection[List[T]]':
        """cartesian product of this sequence with every other, as lists"""
        from ..collection import Collection
        return Collection([list(row) for row in product(self._collection._get_data(), *others)])

    def combine(self, values: Iterable[V]) -> 'MapCollection[T, V]':
        """
        use this collection as keys and values as the values, pairwise.
        stops at the shorter side; a repeated key keeps its first position and last value.
        """
        from ..map_collection import MapCollection
        result: Dict[T, V] = {}
        for key, value in zip(self._collection._get_data(), values):
            result[key] = value
        return MapCollection(result)

    def collapse(self) -> 'Collection[Any]':
        """flatten one level of nested collections or lists"""
        from ..collection import Collection
        result = []
        for item in self._collection._get_data():
            if isinstance(item, (Collection, list, tuple)):
                result.extend(item)
            else:
                result.append(item)
        return Collection(result)

    def flatten(self, depth: int = 1) -> 'Collection[Any]':
        """flatten nested sequences to a specified depth"""
        from ..collection import Collection

        def flatten_recursive(items, current_depth):
            result = []
            for item in items:
                if current_depth > 0 and isinstance(item, (Collection, list, tuple)):
                    result.extend(flatten_recursive(item, current_depth - 1))
                else:
                    result.append(item)
            return result

        return Collection(flatten_recursive(self._collection._get_data(), depth))

    def implode(self, separator: str, to_str: Callable[[T], str] = str) -> str:
        """join every element's string form with separator"""
        return separator.join(to_str(item) for item in self._collection._get_data())

    def join(self, glue: str, final_glue: str = '', to_str: Callable[[T], str] = str) -> str:
        """
        like implode, but final_glue (when given) goes between the last two elements.
        example: C(['a', 'b', 'c']).util.join(', ', ' and ') -> 'a, b and c'
        """
        data = self._collection._get_data()
        if not data: return ''
        if len(data) == 1: return to_str(data[0])
        if not final_glue: return self.implode(glue, to_str)
        head = glue.join(to_str(item) for item in data[:-1])
        return head + final_glue + to_str(data[-1])
