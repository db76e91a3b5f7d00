from __future__ import annotations
import json
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import config

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _json_default(value: Any) -> Any:
    """serialize nested collections as their plain form, anything else by str()"""
    from ..collection import Collection
    from ..map_collection import MapCollection
    if isinstance(value, (Collection, MapCollection)):
        return value.to_native()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


def dumps(value: Any) -> str:
    """json text for diagnostics, honouring the configured indent and key sorting"""
    settings = config.get_config()
    return json.dumps(value, default=_json_default, indent=settings.json_indent,
                      sort_keys=settings.json_sort_keys)


class TerminalAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """convert to list (a copy, so the collection cannot be changed through it)"""
        return list(self._collection._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._collection._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._collection._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._collection._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._collection._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._collection._get_data())

    def json(self) -> str:
        return dumps(self._collection.to_native())
