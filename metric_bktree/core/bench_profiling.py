# bench_profiling.py
"""
Simple profiling harness: BK-tree range search vs. a brute-force scan.

Usage:
    python -m metric_bktree.core.bench_profiling --words 5000 --queries 200 --radius 1
"""

import argparse
import random
import string
import time
from typing import Callable, Dict, List

import numpy as np

from metric_bktree.core.bktree import MutableBkTree
from metric_bktree.core.metrics import levenshtein
from metric_bktree.core.searcher import BkTreeSearcher
from metric_bktree.utils.logger_utils import Log


def random_words(n: int, rng: random.Random, min_len: int = 3, max_len: int = 8) -> List[str]:
    alphabet = string.ascii_lowercase[:10]  # small alphabet -> plenty of near neighbours
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len)))
        for _ in range(n)
    ]


def brute_force(words: List[str], metric: Callable[[str, str], int], query: str, radius: int):
    out = set()
    for w in words:
        d = metric(w, query)
        if d <= radius:
            out.add((w, d))
    return out


def summarize(times_ms: List[float]) -> Dict[str, float]:
    arr = np.asarray(times_ms, dtype=float)
    return {
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "p99": float(np.percentile(arr, 99)),
    }


def profile(n_words: int = 2000, n_queries: int = 100, radius: int = 1, seed: int = 7, log: Log = None):
    """Time both strategies on the same queries and check they agree."""
    log = log or Log(echo=True)
    rng = random.Random(seed)
    words = random_words(n_words, rng)
    queries = random_words(n_queries, rng)

    tree = MutableBkTree(levenshtein)
    with log.time_block(f"build ({n_words} words)"):
        tree.insert_all(words)
    searcher = BkTreeSearcher(tree)
    distinct = sorted(set(words))

    tree_ms, brute_ms = [], []
    for q in queries:
        t0 = time.perf_counter()
        found = {(m.match, m.distance) for m in searcher.search(q, radius)}
        tree_ms.append((time.perf_counter() - t0) * 1000.0)

        t0 = time.perf_counter()
        expected = brute_force(distinct, levenshtein, q, radius)
        brute_ms.append((time.perf_counter() - t0) * 1000.0)

        if found != expected:
            raise AssertionError(f"bk-tree and brute force disagree for {q!r}")

    stats = {"bktree": summarize(tree_ms), "brute": summarize(brute_ms)}
    for name, s in stats.items():
        for key, val in s.items():
            log.metric(f"{name} {key}", round(val, 3), "ms")
    return stats


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=2000)
    parser.add_argument("--queries", type=int, default=100)
    parser.add_argument("--radius", type=int, default=1)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()
    profile(args.words, args.queries, args.radius, args.seed)


if __name__ == "__main__":
    main()
