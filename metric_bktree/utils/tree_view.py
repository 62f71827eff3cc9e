# tree_view.py - pretty-print a BK-tree with rich (diagnostics only)

from __future__ import annotations

from collections import deque
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from metric_bktree.core.bktree import MutableBkTree


def _label(element, distance: Optional[int]) -> Text:
    text = Text()
    if distance is not None:
        text.append(f"d={distance} ", style="dim cyan")
    text.append(repr(element), style="bold")
    return text


def build_rich_tree(tree: MutableBkTree, title: str = "BK-tree") -> Tree:
    """
    Build a rich Tree mirroring the BK-tree: one branch per node, labelled with the
    edge distance from its parent. Built breadth-first, so deep trees are fine here
    (rich itself may still struggle to print very deep ones).
    """
    view = Tree(Text(f"{title} ({tree.size()} elements)", style="magenta"))
    root = tree.get_root()
    if root is None:
        view.add(Text("(empty)", style="dim"))
        return view

    queue = deque([(root, None, view)])
    while queue:
        node, distance, parent_branch = queue.popleft()
        branch = parent_branch.add(_label(node.get_element(), distance))
        for d, child in node.children().items():
            queue.append((child, d, branch))
    return view


def render_tree(tree: MutableBkTree, console: Console = None, title: str = "BK-tree") -> None:
    (console or Console()).print(build_rich_tree(tree, title=title))
