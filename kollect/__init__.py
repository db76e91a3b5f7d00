"""
'    __ __      ____          __
'   / //_/___  / / /__  _____/ /_
'  / ,< / __ \/ / / _ \/ ___/ __/
' / /| / /_/ / / /  __/ /__/ /_
'/_/ |_\____/_/_/\___/\___/\__/
"""

# expose the main classes
from .collection import Collection, OrderedCollection
from .map_collection import MapCollection
from .arr import Arr

# expose the factory functions
from .factories import (
    collect,
    make,
    from_range,
    times,
    empty,
    collect_map,
    map_ordered,
    from_pairs,
    combine,
    C
)

# expose helpers, errors and config
from .helpers import data_get, data_set, data_forget, head, tail, init, last_item, blank, filled, transform
from .errors import CollectionError, ItemNotFoundError, MultipleItemsFoundError, InvalidArgumentError
from .types import SortKey, KeyValue
from .config import CollectionConfig, configure, get_config, reset_config

# define what `import *` does
__all__ = [
    "Collection",
    "OrderedCollection",
    "MapCollection",
    "Arr",
    "collect",
    "make",
    "from_range",
    "times",
    "empty",
    "collect_map",
    "map_ordered",
    "from_pairs",
    "combine",
    "C",
    "data_get",
    "data_set",
    "data_forget",
    "head",
    "tail",
    "init",
    "last_item",
    "blank",
    "filled",
    "transform",
    "CollectionError",
    "ItemNotFoundError",
    "MultipleItemsFoundError",
    "InvalidArgumentError",
    "SortKey",
    "KeyValue",
    "CollectionConfig",
    "configure",
    "get_config",
    "reset_config"
]
