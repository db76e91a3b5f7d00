from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *
from .. import config

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _CoreOperations(Generic[T]):
    """copy-on-transform operations. every method here leaves the receiver untouched."""

    def map(self: 'Collection[T]', selector: Selector[T, U]) -> 'Collection[U]':
        """project each element to a new form, index for index"""
        from ..collection import Collection
        return Collection([selector(x) for x in self._get_data()])

    def map_with_index(self: 'Collection[T]', selector: Callable[[T, int], U]) -> 'Collection[U]':
        """project each element to a new form, using the element's index"""
        from ..collection import Collection
        return Collection([selector(item, index) for index, item in enumerate(self._get_data())])

    def pluck(self: 'Collection[T]', selector: Selector[T, U]) -> 'Collection[U]':
        """extract one value from each element"""
        return self.map(selector)

    def flat_map(self: 'Collection[T]', selector: Selector[T, Iterable[U]]) -> 'Collection[U]':
        """project and flatten one level"""
        from ..collection import Collection
        return Collection([item for x in self._get_data() for item in selector(x)])

    def filter(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """keep matching elements, preserving relative order"""
        from ..collection import Collection
        return Collection([x for x in self._get_data() if predicate(x)])

    def reject(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """drop matching elements"""
        return self.filter(lambda x: not predicate(x))

    def where_type(self: 'Collection[T]', type_filter: Type[U]) -> 'Collection[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.filter(lambda item: isinstance(item, type_filter))

    def reduce(self: 'Collection[T]', accumulator: Accumulator[U, T], initial: U) -> U:
        """fold the sequence from the front, starting from initial"""
        result = initial
        for item in self._get_data():
            result = accumulator(result, item)
        return result

    def slice(self: 'Collection[T]', offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """
        sub-range starting at offset. a negative offset counts from the end,
        an offset past the end gives an empty collection and length is clamped.
        """
        from ..collection import Collection
        data = self._get_data()
        if offset < 0:
            offset = max(0, len(data) + offset)
        if offset >= len(data):
            return Collection()
        end = len(data) if length is None else min(offset + max(length, 0), len(data))
        return Collection(data[offset:end])

    def take(self: 'Collection[T]', count: int) -> 'Collection[T]':
        """first count elements, or the last |count| when negative"""
        if count < 0:
            return self.slice(count)
        return self.slice(0, count)

    def skip(self: 'Collection[T]', count: int) -> 'Collection[T]':
        return self.slice(count)

    def take_while(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """take elements while predicate is true"""
        from ..collection import Collection
        return Collection(takewhile(predicate, self._get_data()))

    def take_until(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """take elements until predicate first holds"""
        from ..collection import Collection
        return Collection(takewhile(lambda x: not predicate(x), self._get_data()))

    def skip_while(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        """skip the leading run where predicate holds, keep the rest"""
        from ..collection import Collection
        # dropwhile never re-checks once the leading run ends
        return Collection(dropwhile(predicate, self._get_data()))

    def skip_until(self: 'Collection[T]', predicate: Predicate[T]) -> 'Collection[T]':
        from ..collection import Collection
        return Collection(dropwhile(lambda x: not predicate(x), self._get_data()))

    def nth(self: 'Collection[T]', step: int, offset: int = 0) -> 'Collection[T]':
        """every step-th element starting at offset"""
        from ..collection import Collection
        if step <= 0:
            return Collection()
        return Collection(self._get_data()[max(offset, 0)::step])

    def for_page(self: 'Collection[T]', page: int, per_page: int) -> 'Collection[T]':
        """1-based page of per_page elements"""
        page = max(page, 1)
        return self.slice((page - 1) * per_page, per_page)

    def pad(self: 'Collection[T]', size: int, value: T) -> 'Collection[T]':
        """pad to |size| elements, on the right for positive size and on the left for negative"""
        from ..collection import Collection
        data = self._get_data()
        missing = abs(size) - len(data)
        if missing <= 0:
            return Collection(data)
        if size > 0:
            return Collection(data + [value] * missing)
        return Collection([value] * missing + data)

    def chunk(self: 'Collection[T]', size: int) -> 'Collection[Collection[T]]':
        """split into chunks of specified size; the last one may be shorter"""
        from ..collection import Collection
        return Collection(self.chunk_into(size))

    def chunk_into(self: 'Collection[T]', size: int) -> List['Collection[T]']:
        """same as chunk, handed back as a plain list"""
        from ..collection import Collection
        if size <= 0:
            return []
        data = self._get_data()
        return [Collection(data[i:i + size]) for i in range(0, len(data), size)]

    def split(self: 'Collection[T]', number_of_groups: int) -> 'Collection[Collection[T]]':
        """
        distributes items into number_of_groups groups whose sizes differ by at most one.
        the remainder goes to the earliest groups; groups that would be empty are dropped.
        """
        from ..collection import Collection
        data = self._get_data()
        if not data or number_of_groups <= 0:
            return Collection()

        group_size, remainder = divmod(len(data), number_of_groups)
        groups, start = [], 0
        for i in range(number_of_groups):
            size = group_size + (1 if i < remainder else 0)
            if size > 0:
                groups.append(Collection(data[start:start + size]))
                start += size
        return Collection(groups)

    def sliding(self: 'Collection[T]', size: int, step: int = 1) -> 'Collection[Collection[T]]':
        """full windows of size elements, advancing by step; partial trailing windows are dropped"""
        from ..collection import Collection
        data = self._get_data()
        step = step if step > 0 else 1
        if size <= 0 or not data:
            return Collection()
        return Collection([Collection(data[i:i + size]) for i in range(0, len(data) - size + 1, step)])

    def partition(self: 'Collection[T]', predicate: Predicate[T]) -> Tuple['Collection[T]', 'Collection[T]']:
        """partition elements based on predicate"""
        from ..collection import Collection
        true_items, false_items = [], []
        for item in self._get_data():
            (true_items if predicate(item) else false_items).append(item)
        return Collection(true_items), Collection(false_items)

    def unique(self: 'Collection[T]', key_selector: Optional[Callable[[T], str]] = None) -> 'Collection[T]':
        """first occurrence per derived key, in original order. keys default to str(item)."""
        from ..collection import Collection
        key_fn = key_selector or str
        seen = set()
        return Collection([item for item in self._get_data() if (key := key_fn(item)) not in seen and not seen.add(key)])

    def reverse(self: 'Collection[T]') -> 'Collection[T]':
        """inverts the order of the elements in a sequence"""
        from ..collection import Collection
        return Collection(reversed(self._get_data()))

    def shuffle(self: 'Collection[T]', random_state: Optional[int] = None) -> 'Collection[T]':
        """shuffled copy; pass random_state (or configure random_seed) for a repeatable order"""
        from ..collection import Collection
        result = list(self._get_data())
        config.rng(random_state).shuffle(result)
        return Collection(result)

    def values(self: 'Collection[T]') -> 'Collection[T]':
        """fresh collection over the same items"""
        return self.clone()

    def clone(self: 'Collection[T]') -> 'Collection[T]':
        from ..collection import Collection
        return Collection(self._get_data())

    def merge(self: 'Collection[T]', *others: Iterable[T]) -> 'Collection[T]':
        """concatenate this collection with every other, in argument order"""
        from ..collection import Collection
        return Collection(chain(self._get_data(), *others))

    def concat(self: 'Collection[T]', items: Iterable[T]) -> 'Collection[T]':
        return self.merge(items)

    def replace(self: 'Collection[T]', items: Iterable[T]) -> 'Collection[T]':
        """overwrite leading positions with items; extra replacement items are ignored"""
        from ..collection import Collection
        result = list(self._get_data())
        for index, item in zip(range(len(result)), items):
            result[index] = item
        return Collection(result)

    # --- conditional chaining ---

    def when(self: 'Collection[T]', condition: bool,
             operation: Callable[['Collection[T]'], 'Collection[T]']) -> 'Collection[T]':
        """apply operation only when condition is true"""
        return operation(self) if condition else self

    def unless(self: 'Collection[T]', condition: bool,
               operation: Callable[['Collection[T]'], 'Collection[T]']) -> 'Collection[T]':
        return self.when(not condition, operation)

    def when_empty(self: 'Collection[T]', operation: Callable[['Collection[T]'], 'Collection[T]']) -> 'Collection[T]':
        return self.when(self.is_empty(), operation)

    def when_not_empty(self: 'Collection[T]', operation: Callable[['Collection[T]'], 'Collection[T]']) -> 'Collection[T]':
        return self.when(self.is_not_empty(), operation)

    def pipe(self: 'Collection[T]', func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the collection into an external function and returns whatever it returns.
        example: .pipe(render_table, title='totals')
        """
        return func(self, *args, **kwargs)
