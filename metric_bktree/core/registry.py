"""
registry.py
Name -> metric lookup, so configuration files and the CLI can pick a distance
function by name ("levenshtein", "length", ...).
"""

from __future__ import annotations
from typing import Callable, Dict, List

from metric_bktree.core.metrics import hamming, length_difference, levenshtein, manhattan

MetricFn = Callable[..., int]


class MetricRegistry:
    """
    Registry of named distance functions.
    Names are case-insensitive; registering an existing name replaces it.
    """

    def __init__(self):
        # metric name -> callable(a, b) -> int
        self.metrics: Dict[str, MetricFn] = {}

    def register(self, name: str, fn: MetricFn) -> None:
        if not name:
            raise ValueError("metric name must be non-empty")
        if not callable(fn):
            raise TypeError(f"metric {name!r} is not callable")
        self.metrics[name.lower()] = fn

    def get(self, name: str) -> MetricFn:
        """Return the metric registered as `name`; KeyError lists the known names."""
        try:
            return self.metrics[name.lower()]
        except KeyError:
            raise KeyError(f"unknown metric {name!r} (known: {', '.join(self.names())})") from None

    def names(self) -> List[str]:
        return sorted(self.metrics)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.metrics


default_registry = MetricRegistry()
default_registry.register("length", length_difference)
default_registry.register("levenshtein", levenshtein)
default_registry.register("hamming", hamming)
default_registry.register("manhattan", manhattan)
