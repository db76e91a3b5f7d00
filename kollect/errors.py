"""
failure types raised by the `..._or_fail` and `sole` families.

non-fail accessors never raise these; they hand back None or the caller's default.
"""
from typing import Optional


class CollectionError(Exception):
    """base class for every failure raised by kollect"""
    default_message = "collection error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ItemNotFoundError(CollectionError, LookupError):
    """the requested element, key or match does not exist"""
    default_message = "item not found"


class MultipleItemsFoundError(CollectionError, LookupError):
    """exactly one match was required but more than one was found"""
    default_message = "multiple items found"


class InvalidArgumentError(CollectionError, ValueError):
    """malformed caller input"""
    default_message = "invalid argument"
