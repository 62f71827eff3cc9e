# metric_bktree/core/protocols.py
"""
Protocol interfaces for the pieces the tree and the searcher talk to.

The searcher only needs a read-only view of a tree (metric + root + per-node child
lookup), so it depends on these Protocols instead of MutableBkTree directly. Any
structure exposing the same methods (a frozen tree, a tree loaded from disk) can be
searched.
"""

from __future__ import annotations

from typing import Optional, TypeVar
from typing_extensions import Protocol, runtime_checkable

E = TypeVar("E")
E_contra = TypeVar("E_contra", contravariant=True)


@runtime_checkable
class Metric(Protocol[E_contra]):
    """
    Distance function over elements.

    Expected to be non-negative, symmetric and to satisfy the triangle inequality.
    Only non-negativity is checked (by the tree and the searcher, where they call it);
    breaking the other two silently makes searches miss matches.
    """

    def __call__(self, a: E_contra, b: E_contra) -> int:
        ...


@runtime_checkable
class NodeProtocol(Protocol[E]):
    """A node of a BK-tree: one element plus at most one child per distance."""

    def get_element(self) -> E:
        ...

    def get_child(self, distance: int) -> Optional["NodeProtocol[E]"]:
        """Return the child stored at `distance`, or None."""
        ...


@runtime_checkable
class BkTreeProtocol(Protocol[E]):
    """Read-only view of a BK-tree used by BkTreeSearcher."""

    def get_metric(self) -> Metric:
        ...

    def get_root(self) -> Optional[NodeProtocol[E]]:
        """Return the root node, or None for an empty tree."""
        ...
