"""
dot-notation access to nested dicts.

a path such as "db.primary.host" names one key per level. only dicts are walked;
reaching anything else before the last segment means "not found". there is no
escape for a literal dot inside a key, except that get looks for the whole
path as a top-level key first.
"""
from __future__ import annotations

from itertools import product
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from . import config


def _segments(path: str) -> List[str]:
    return path.split('.')


class Arr:
    """nested-dict helpers with dot notation support."""

    @staticmethod
    def get(data: Dict[str, Any], key: str, default: Any = None) -> Any:
        """value at key, or default as soon as a segment is missing or a level is not a dict"""
        if key == '':
            return data
        if key in data:
            return data[key]
        if '.' not in key:
            return default

        current: Any = data
        for segment in _segments(key):
            if not isinstance(current, dict) or segment not in current:
                return default
            current = current[segment]
        return current

    @staticmethod
    def set(data: Dict[str, Any], key: str, value: Any) -> Dict[str, Any]:
        """
        assign value at key, creating intermediate dicts on the way.
        a non-dict value sitting where a level is needed gets replaced by an empty dict.
        mutates and returns data; an empty key leaves data as it is.
        """
        if key == '':
            return data
        *parents, last = _segments(key)
        current = data
        for segment in parents:
            if not isinstance(current.get(segment), dict):
                current[segment] = {}
            current = current[segment]
        current[last] = value
        return data

    @staticmethod
    def has(data: Dict[str, Any], *keys: str) -> bool:
        """true when every key resolves to a non-None value"""
        return all(Arr.get(data, key) is not None for key in keys)

    @staticmethod
    def has_any(data: Dict[str, Any], *keys: str) -> bool:
        return any(Arr.get(data, key) is not None for key in keys)

    @staticmethod
    def forget(data: Dict[str, Any], *keys: str) -> Dict[str, Any]:
        """
        remove each key; paths that do not resolve are skipped silently.
        a dotted key is always walked, so a literal top-level 'a.b' is left alone.
        """
        for key in keys:
            if '.' not in key:
                data.pop(key, None)
                continue
            *parents, last = _segments(key)
            current: Any = data
            for segment in parents:
                current = current.get(segment) if isinstance(current, dict) else None
            if isinstance(current, dict):
                current.pop(last, None)
        return data

    @staticmethod
    def dot(data: Dict[str, Any], prepend: str = '') -> Dict[str, Any]:
        """flatten nested dicts into one level of dotted keys. empty dicts stay as leaf values."""
        results: Dict[str, Any] = {}

        def _dot_recursive(obj: Dict[str, Any], prefix: str) -> None:
            for key, value in obj.items():
                full_key = f"{prefix}.{key}" if prefix else str(key)
                if isinstance(value, dict) and value:
                    _dot_recursive(value, full_key)
                else:
                    results[full_key] = value

        _dot_recursive(data, prepend)
        return results

    @staticmethod
    def undot(data: Dict[str, Any]) -> Dict[str, Any]:
        """expand dotted keys back into nested dicts, one set() per key in order"""
        result: Dict[str, Any] = {}
        for key, value in data.items():
            Arr.set(result, key, value)
        return result

    @staticmethod
    def only(data: Dict[str, Any], *keys: str) -> Dict[str, Any]:
        """top-level keys that exist, in the order requested"""
        return {key: data[key] for key in keys if key in data}

    @staticmethod
    def except_(data: Dict[str, Any], *keys: str) -> Dict[str, Any]:
        excluded = set(keys)
        return {key: value for key, value in data.items() if key not in excluded}

    @staticmethod
    def add(data: Dict[str, Any], key: str, value: Any) -> Dict[str, Any]:
        """set key only when it does not resolve to a value yet"""
        if Arr.get(data, key) is None:
            Arr.set(data, key, value)
        return data

    @staticmethod
    def pull(data: Dict[str, Any], key: str, default: Any = None) -> Any:
        """get then forget"""
        value = Arr.get(data, key, default)
        Arr.forget(data, key)
        return value

    @staticmethod
    def exists(data: Dict[str, Any], key: str) -> bool:
        """top-level membership only, no dot traversal"""
        return key in data

    @staticmethod
    def accessible(value: Any) -> bool:
        return isinstance(value, (dict, list))

    @staticmethod
    def is_assoc(value: Any) -> bool:
        return isinstance(value, dict)

    @staticmethod
    def is_list(value: Any) -> bool:
        return isinstance(value, list)

    @staticmethod
    def wrap(value: Any) -> List[Any]:
        """wrap the given value in a list if it's not already one"""
        if value is None:
            return []
        return value if isinstance(value, list) else [value]

    @staticmethod
    def first(items: List[Any], predicate: Optional[Callable[[Any], bool]] = None, default: Any = None) -> Any:
        if predicate is None:
            return items[0] if items else default
        return next((item for item in items if predicate(item)), default)

    @staticmethod
    def last(items: List[Any], predicate: Optional[Callable[[Any], bool]] = None, default: Any = None) -> Any:
        if predicate is None:
            return items[-1] if items else default
        return next((item for item in reversed(items) if predicate(item)), default)

    @staticmethod
    def where(items: List[Any], predicate: Callable[[Any, int], bool]) -> List[Any]:
        """filter with predicate(item, index)"""
        return [item for index, item in enumerate(items) if predicate(item, index)]

    @staticmethod
    def where_not_null(items: List[Any]) -> List[Any]:
        return [item for item in items if item is not None]

    @staticmethod
    def shuffle(items: List[Any], random_state: Optional[int] = None) -> List[Any]:
        result = list(items)
        config.rng(random_state).shuffle(result)
        return result

    @staticmethod
    def random(items: List[Any], n: Optional[int] = None, random_state: Optional[int] = None) -> Any:
        """one random item (None when empty), or a list of n distinct ones when n is given"""
        from .collection import Collection
        source = Collection(items)
        if n is None:
            return source.random(random_state)
        return source.random_n(n, random_state).all()

    @staticmethod
    def divide(data: Dict[str, Any]) -> Tuple[List[str], List[Any]]:
        """split into (keys, values)"""
        return list(data.keys()), list(data.values())

    @staticmethod
    def query(data: Dict[str, Any]) -> str:
        """url-encoded query string"""
        return urlencode(data)

    @staticmethod
    def collapse(items: List[List[Any]]) -> List[Any]:
        """collapse a list of lists into a single list"""
        return [item for sub in items for item in sub]

    @staticmethod
    def prepend(items: List[Any], value: Any) -> List[Any]:
        return [value, *items]

    @staticmethod
    def cross_join(*arrays: List[Any]) -> List[List[Any]]:
        """every combination picking one item from each list"""
        if not arrays:
            return []
        return [list(row) for row in product(*arrays)]
