# exceptions.py - errors raised by the tree and the searcher

from __future__ import annotations
from typing import Any


class BkTreeError(Exception):
    """Base class for everything the index raises on purpose."""


class InvalidArgumentError(BkTreeError, ValueError):
    """
    Caller supplied a bad argument: a None element/query/metric/tree,
    or a negative search radius. Raised before any traversal starts.
    """


class IllegalMetricError(BkTreeError):
    """
    The metric returned a negative distance for a pair it was asked about.
    Keeps both elements and the offending value around for diagnosis.
    """

    def __init__(self, first: Any, second: Any, distance: int, what: str = "elements"):
        self.first = first
        self.second = second
        self.distance = distance
        super().__init__(
            f"negative distance ({distance}) defined between {what} `{first}` and `{second}`"
        )
