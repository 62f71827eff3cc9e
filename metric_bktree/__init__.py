"""
metric_bktree

BK-tree (Burkhard-Keller tree) index over any metric space.
Insert elements into a MutableBkTree, then run range queries with a BkTreeSearcher:

    tree = MutableBkTree(levenshtein)
    tree.insert_all(["book", "books", "nook"])
    BkTreeSearcher(tree).search("hook", 1)
"""

from .core import (
    BkTreeError,
    BkTreeSearcher,
    IllegalMetricError,
    InvalidArgumentError,
    Match,
    MutableBkTree,
    Node,
)

__all__ = [
    "BkTreeError",
    "BkTreeSearcher",
    "IllegalMetricError",
    "InvalidArgumentError",
    "Match",
    "MutableBkTree",
    "Node",
]

__version__ = "0.1.0"
