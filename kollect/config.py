import logging
import random
from dataclasses import dataclass, asdict, fields, replace
from typing import Optional

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionConfig:
    """library-wide knobs for serialization and randomness"""
    json_indent: Optional[int] = None
    json_sort_keys: bool = False
    random_seed: Optional[int] = None


_active = CollectionConfig()


def get_config() -> CollectionConfig:
    return _active


def configure(**changes) -> CollectionConfig:
    """replace selected fields of the active config and return the new one"""
    global _active
    known = {f.name for f in fields(CollectionConfig)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise InvalidArgumentError(f"unknown config option(s): {', '.join(unknown)}")
    _active = replace(_active, **changes)
    logger.debug(f"kollect config: {asdict(_active)}")
    return _active


def reset_config() -> CollectionConfig:
    global _active
    _active = CollectionConfig()
    return _active


def rng(random_state: Optional[int] = None) -> random.Random:
    """
    random source for shuffle/random operations.
    an explicit random_state wins over the configured seed; with neither, system entropy is used.
    """
    seed = random_state if random_state is not None else _active.random_seed
    return random.Random(seed)
