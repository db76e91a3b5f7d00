import typing
from .types import *
from .errors import InvalidArgumentError

if typing.TYPE_CHECKING:
    from .collection import Collection
    from .map_collection import MapCollection

def collect(data: Optional[Iterable[T]] = None) -> 'Collection[T]':
    """create collection from iterable"""
    from .collection import Collection
    return Collection(data)

def make(*items: T) -> 'Collection[T]':
    """create collection from arguments"""
    from .collection import Collection
    return Collection(items)

def from_range(start: int, end: int) -> 'Collection[int]':
    """inclusive integer range; counts down when start is greater than end"""
    from .collection import Collection
    if start > end:
        return Collection(range(start, end - 1, -1))
    return Collection(range(start, end + 1))

def times(count: int, generator_func: Callable[[int], T]) -> 'Collection[T]':
    """call generator_func with 1..count and collect the results"""
    from .collection import Collection
    return Collection([generator_func(i) for i in range(1, count + 1)])

def empty() -> 'Collection[Any]':
    """create empty collection"""
    from .collection import Collection
    return Collection()

def collect_map(data: Optional[Dict[K, V]] = None) -> 'MapCollection[K, V]':
    """create map collection; keys keep the mapping's own order"""
    from .map_collection import MapCollection
    return MapCollection(data)

def map_ordered(data: Dict[K, V], keys: Iterable[K]) -> 'MapCollection[K, V]':
    """create map collection with an explicit key order"""
    from .map_collection import MapCollection
    return MapCollection(data, keys=keys)

def from_pairs(pairs: Iterable[Union[KeyValue, Tuple[K, V]]]) -> 'MapCollection[K, V]':
    """create map collection from (key, value) pairs, e.g. the output of to_pairs()"""
    from .map_collection import MapCollection
    result = {}
    for pair in pairs:
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise InvalidArgumentError(f"expected a (key, value) pair, got {pair!r}")
        key, value = pair
        result[key] = value
    return MapCollection(result)

def combine(keys: Iterable[K], values: Iterable[V]) -> 'MapCollection[K, V]':
    """pair keys with values position by position, stopping at the shorter side"""
    return collect(keys).util.combine(values)

# --- aliases ---
C = collect
