from typing import Any, Callable, List, Optional, Sequence, TypeVar

from .arr import Arr

T = TypeVar('T')
U = TypeVar('U')


def data_get(target: Any, key: str, default: Any = None) -> Any:
    """dot-path lookup on any value; only dicts can be walked, everything else yields default"""
    if target is None:
        return default
    if key == '':
        return target
    if isinstance(target, dict):
        return Arr.get(target, key, default)
    return default


def data_set(target: Any, key: str, value: Any) -> Any:
    """dot-path assignment on dicts; any other target comes back untouched"""
    if isinstance(target, dict):
        return Arr.set(target, key, value)
    return target


def data_forget(target: Any, *keys: str) -> Any:
    if isinstance(target, dict):
        return Arr.forget(target, *keys)
    return target


def head(items: Sequence[T]) -> Optional[T]:
    return items[0] if items else None


def tail(items: Sequence[T]) -> List[T]:
    """everything but the first item"""
    return list(items[1:])


def init(items: Sequence[T]) -> List[T]:
    """everything but the last item"""
    return list(items[:-1])


def last_item(items: Sequence[T]) -> Optional[T]:
    return items[-1] if items else None


def blank(value: Any) -> bool:
    """
    true for None, the empty string and empty containers. whitespace is content.
    numbers and booleans are never blank, so 0 and False count as filled.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, (bool, int, float)):
        return False
    if hasattr(value, '__len__'):
        return len(value) == 0
    return False


def filled(value: Any) -> bool:
    return not blank(value)


def transform(value: Any, callback: Callable[[Any], U], default: Any = None) -> Any:
    """callback(value) when value is filled, else default"""
    return callback(value) if filled(value) else default
