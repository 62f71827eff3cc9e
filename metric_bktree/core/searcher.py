# searcher.py
# Range search over a BK-tree.
# Breadth-first walk from the root with a FIFO queue. For each node at distance d from
# the query, only children whose edge key k satisfies |d - k| <= max_distance can hold
# a match (triangle inequality), so every other subtree is skipped.

from __future__ import annotations

import numbers
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Generic, List, Set, TypeVar

from metric_bktree.core.exceptions import IllegalMetricError, InvalidArgumentError
from metric_bktree.core.protocols import BkTreeProtocol, NodeProtocol

E = TypeVar("E")


@dataclass(frozen=True)
class Match(Generic[E]):
    """An indexed element and its distance from the search query."""

    match: E
    distance: int

    def __post_init__(self) -> None:
        if self.match is None:
            raise InvalidArgumentError("match must not be None")
        if self.distance < 0:
            raise InvalidArgumentError("distance must be non-negative")


class BkTreeSearcher(Generic[E]):
    """
    Read-only searcher bound to one tree.
    Several searchers may share a tree as long as nobody inserts into it meanwhile.
    """

    def __init__(self, tree: BkTreeProtocol[E]):
        if tree is None:
            raise InvalidArgumentError("tree must not be None")
        self._tree = tree

    def get_tree(self) -> BkTreeProtocol[E]:
        return self._tree

    def search(self, query: E, max_distance: int) -> Set[Match[E]]:
        """
        Return every indexed element within `max_distance` of `query`, with its distance.
        Result is an unordered set; an empty tree gives an empty set.
        """
        if query is None:
            raise InvalidArgumentError("query must not be None")
        if isinstance(max_distance, bool) or not isinstance(max_distance, numbers.Integral):
            raise InvalidArgumentError("max_distance must be an int")
        if max_distance < 0:
            raise InvalidArgumentError("max_distance must be non-negative")

        matches: Set[Match[E]] = set()
        root = self._tree.get_root()
        if root is None:
            return matches

        metric = self._tree.get_metric()
        queue: Deque[NodeProtocol[E]] = deque([root])
        while queue:
            node = queue.popleft()
            element = node.get_element()

            d = metric(element, query)
            if d < 0:
                raise IllegalMetricError(element, query, d, what="element and query")

            if d <= max_distance:
                matches.add(Match(element, d))

            low = max(d - max_distance, 0)
            high = d + max_distance
            queue.extend(_children_in_window(node, low, high))

        return matches

    def search_sorted(self, query: E, max_distance: int) -> List[Match[E]]:
        """Same as search(), ordered by distance then element repr (for display)."""
        found = self.search(query, max_distance)
        return sorted(found, key=lambda m: (m.distance, repr(m.match)))

    def nearest(self, query: E, max_distance: int) -> Set[Match[E]]:
        """Matches at the smallest distance found within `max_distance` (ties kept)."""
        found = self.search(query, max_distance)
        if not found:
            return set()
        best = min(m.distance for m in found)
        return {m for m in found if m.distance == best}


def _children_in_window(node: Any, low: int, high: int) -> List[Any]:
    """
    Children of `node` keyed in [low, high].
    Probes each key of the window, unless the node can hand out its (distance, child)
    pairs and has fewer of them than the window is wide (large radii / sparse keys).
    """
    listing = getattr(node, "child_items", None)
    if callable(listing):
        items = listing()
        if len(items) < high - low + 1:
            return [child for k, child in items if low <= k <= high]

    out = []
    for k in range(low, high + 1):
        child = node.get_child(k)
        if child is not None:
            out.append(child)
    return out
