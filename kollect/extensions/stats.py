from __future__ import annotations
import typing
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class StatsAccessor(Generic[T]):
    """
    numeric aggregation. an empty collection never raises here: sums, averages and
    medians come back as 0 and min/max style lookups come back as None.
    """

    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def _get_values(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        data = self._collection._get_data()
        values = [selector(x) for x in data] if selector else data
        if values and not all(isinstance(x, (int, float)) for x in values):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return values

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum. all-int input is summed exactly, without numpy's fixed-width ints."""
        values = self._get_values(selector)
        if not values: return 0
        if all(isinstance(x, int) for x in values):
            return sum(values)
        result = np.sum(values)
        return result.item() if hasattr(result, 'item') else result

    def sum_by(self, selector: Selector[T, Number]) -> Number:
        return self.sum(selector)

    def avg(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """arithmetic mean; 0 for an empty sequence"""
        values = self._get_values(selector)
        if not values: return 0.0
        if all(isinstance(x, int) for x in values):
            return sum(values) / len(values)
        return float(np.mean(values))

    def avg_by(self, selector: Selector[T, Number]) -> float:
        return self.avg(selector)

    def median(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """middle value of a sorted copy; the two central values are averaged for even counts"""
        values = self._get_values(selector)
        if not values: return 0.0
        return float(np.median(values))

    def mode(self, selector: Optional[Selector[T, K]] = None) -> List[K]:
        """every value tied for the highest frequency, in first-seen order"""
        data = self._collection._get_data()
        values = [selector(x) for x in data] if selector else data
        counts: Dict[K, int] = {}
        for value in values:
            counts[value] = counts.get(value, 0) + 1
        if not counts: return []
        top = max(counts.values())
        return [value for value, count in counts.items() if count == top]

    def min(self) -> Optional[T]:
        """find minimum, None when empty"""
        data = self._collection._get_data()
        return min(data) if data else None

    def max(self) -> Optional[T]:
        """find maximum, None when empty"""
        data = self._collection._get_data()
        return max(data) if data else None

    def min_by(self, key_selector: KeySelector[T, K]) -> Optional[T]:
        """item with the smallest key; the first one wins a tie"""
        data = self._collection._get_data()
        return min(data, key=key_selector) if data else None

    def max_by(self, key_selector: KeySelector[T, K]) -> Optional[T]:
        data = self._collection._get_data()
        return max(data, key=key_selector) if data else None
