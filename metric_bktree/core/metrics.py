# metrics.py
# Ready-made distance functions to plug into MutableBkTree.
# All of them return non-negative ints and are symmetric; levenshtein, hamming,
# manhattan and length_difference also satisfy the triangle inequality.

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Tuple

import numpy as np


def length_difference(a: Sequence[Any], b: Sequence[Any]) -> int:
    """|len(a) - len(b)|. Coarse, but a proper (pseudo)metric and handy in tests."""
    return abs(len(a) - len(b))


def levenshtein_with_cutoff(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Edit distance, giving up once it is certain to exceed max_dist.
    With a cutoff, results up to max_dist are exact; anything larger only means "too far".
    """
    if a == b:
        return 0
    short, long_ = (a, b) if len(a) <= len(b) else (b, a)
    if max_dist is not None and len(long_) - len(short) > max_dist:
        return max_dist + 1

    # single DP row, updated in place; `diag` carries the previous row's [j - 1]
    row = list(range(len(short) + 1))
    for i, lc in enumerate(long_, 1):
        diag, row[0] = row[0], i
        for j, sc in enumerate(short, 1):
            substitute = diag + (lc != sc)
            diag = row[j]
            row[j] = min(row[j] + 1, row[j - 1] + 1, substitute)
        if max_dist is not None and min(row) > max_dist:
            return max_dist + 1
    return row[-1]


def levenshtein(a: str, b: str) -> int:
    """Exact edit distance (insert/delete/substitute, cost 1 each)."""
    return levenshtein_with_cutoff(a, b)


def hamming(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Number of positions that differ. Only defined for equal-length sequences."""
    if len(a) != len(b):
        raise ValueError(f"hamming distance needs equal lengths, got {len(a)} and {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


def as_vector(v: Sequence[int]) -> Tuple[int, ...]:
    """
    Turn a list or numpy array into a tuple of ints.
    Tree elements must compare with == to a single bool and be hashable (search results
    are sets), so vectors go into the tree as tuples.
    """
    return tuple(int(x) for x in np.asarray(v, dtype=np.int64).ravel())


def manhattan(a: Sequence[int], b: Sequence[int]) -> int:
    """
    L1 distance between two integer vectors.
    Accepts any array-like, but only tuples can be tree elements; see as_vector().
    """
    va = np.asarray(a, dtype=np.int64)
    vb = np.asarray(b, dtype=np.int64)
    if va.shape != vb.shape:
        raise ValueError(f"manhattan distance needs equal shapes, got {va.shape} and {vb.shape}")
    return int(np.abs(va - vb).sum())


def string_metric(fn: Callable[[str, str], int]) -> Callable[[Any, Any], int]:
    """
    Wrap a string distance so it accepts any element, comparing their str() forms.
    e.g. MutableBkTree(string_metric(levenshtein)) can index ints or Paths.
    """

    def _metric(a: Any, b: Any) -> int:
        return fn(str(a), str(b))

    _metric.__name__ = f"string_metric({getattr(fn, '__name__', 'metric')})"
    _metric.__wrapped__ = fn  # type: ignore[attr-defined]
    return _metric
