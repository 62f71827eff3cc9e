"""
metric_bktree.core

The index itself:
 - MutableBkTree / Node: the tree and its insertion algorithm
 - BkTreeSearcher / Match: triangle-inequality pruned range search
 - protocols: the Metric / tree interfaces the searcher depends on
 - metrics + registry: ready-made distance functions, looked up by name
"""

from .bktree import MutableBkTree, Node
from .exceptions import BkTreeError, IllegalMetricError, InvalidArgumentError
from .protocols import BkTreeProtocol, Metric, NodeProtocol
from .searcher import BkTreeSearcher, Match

__all__ = [
    "MutableBkTree",
    "Node",
    "BkTreeSearcher",
    "Match",
    "BkTreeError",
    "IllegalMetricError",
    "InvalidArgumentError",
    "BkTreeProtocol",
    "Metric",
    "NodeProtocol",
]
