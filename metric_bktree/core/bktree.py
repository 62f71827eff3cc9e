# bktree.py
# Mutable BK-tree over any metric space.
# Each node holds one element and at most one child per integer distance.
# Insert walks down from the root following distance(node, element) until it finds a free
# slot, so the shape depends only on the metric and the insertion order.
# Every traversal here uses an explicit loop/queue (no recursion): degenerate metrics
# can produce trees thousands of levels deep.

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any, Callable, Dict, Generic, ItemsView, Iterator, List, Optional, Tuple, TypeVar

from metric_bktree.core.exceptions import IllegalMetricError, InvalidArgumentError

E = TypeVar("E")


class Node(Generic[E]):
    """A single tree node: element + children keyed by distance from this element."""

    __slots__ = ("_element", "_children")

    def __init__(self, element: E):
        if element is None:
            raise InvalidArgumentError("node element must not be None")
        self._element = element
        self._children: Dict[int, Node[E]] = {}

    @property
    def element(self) -> E:
        return self._element

    def get_element(self) -> E:
        return self._element

    def get_child(self, distance: int) -> Optional["Node[E]"]:
        return self._children.get(distance)

    def children(self) -> Dict[int, "Node[E]"]:
        """Snapshot of distance -> child, ordered by distance. Mutating it does not touch the tree."""
        return {d: self._children[d] for d in sorted(self._children)}

    def child_items(self) -> ItemsView[int, "Node[E]"]:
        """Live, unordered (distance, child) view. Cheap; used by the searcher."""
        return self._children.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return _same_structure(self, other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Node(element={self._element!r}, children={sorted(self._children)})"


def _same_structure(a: Optional[Node], b: Optional[Node]) -> bool:
    """Deep structural comparison of two subtrees, using a stack instead of recursion."""
    stack: List[Tuple[Optional[Node], Optional[Node]]] = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        if x is None or y is None:
            return False
        if x._element != y._element:
            return False
        if x._children.keys() != y._children.keys():
            return False
        for d, child in x._children.items():
            stack.append((child, y._children[d]))
    return True


class MutableBkTree(Generic[E]):
    """
    BK-tree supporting incremental insertion.

    Not safe for concurrent use while inserting. Once no more inserts happen, any number
    of BkTreeSearcher instances can read it at the same time.
    """

    def __init__(self, metric: Callable[[E, E], int]):
        if metric is None or not callable(metric):
            raise InvalidArgumentError("metric must be a callable distance(a, b) -> int")
        self._metric = metric
        self._root: Optional[Node[E]] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, element: E) -> None:
        """Add `element` unless an equal element sits on its insertion path."""
        if element is None:
            raise InvalidArgumentError("element must not be None")

        if self._root is None:
            self._root = Node(element)
            self._size = 1
            return

        node = self._root
        while node.element != element:
            d = self._distance(node.element, element)
            child = node._children.get(d)
            if child is None:
                node._children[d] = Node(element)
                self._size += 1
                return
            node = child

    add = insert

    def insert_all(self, *elements: Any) -> None:
        """
        Insert elements one by one, in order.

        Accepts either a single iterable (`tree.insert_all(words)`) or the elements as
        positional arguments (`tree.insert_all("a", "b")`). Strings are never unpacked.
        Use insert() for a single element that is itself iterable (e.g. a tuple).
        """
        if len(elements) == 1:
            only = elements[0]
            if only is None:
                raise InvalidArgumentError("elements must not be None")
            if isinstance(only, Iterable) and not isinstance(only, (str, bytes)):
                elements = only  # type: ignore[assignment]
        for element in elements:
            self.insert(element)

    def _distance(self, x: E, y: E) -> int:
        d = self._metric(x, y)
        if d < 0:
            raise IllegalMetricError(x, y, d)
        return d

    # read-only introspection ---------------------------------------------------------
    def get_metric(self) -> Callable[[E, E], int]:
        return self._metric

    def get_root(self) -> Optional[Node[E]]:
        return self._root

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[E]:
        """Yield elements breadth-first, children in increasing distance order."""
        if self._root is None:
            return
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node.element
            for d in sorted(node._children):
                queue.append(node._children[d])

    def __contains__(self, element: object) -> bool:
        """
        True if an equal element is indexed.
        Follows the single path insert() would take, so only O(depth) metric calls.
        """
        if element is None:
            return False
        node = self._root
        while node is not None:
            if node.element == element:
                return True
            node = node._children.get(self._distance(node.element, element))  # type: ignore[arg-type]
        return False

    # equality/printing -------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableBkTree):
            return NotImplemented
        return self._metric == other._metric and _same_structure(self._root, other._root)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        name = getattr(self._metric, "__name__", repr(self._metric))
        return f"MutableBkTree(metric={name}, size={self._size})"
