"""
cli.py - command line front end for the BK-tree index
Features:
- Build a tree from a file (one element per line) with any registered metric
- Range search with a color-coded result table
- Tree view for eyeballing the structure
- Uses Rich for tables and formatting
"""

import argparse
import os
import sys
from typing import Any, List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from metric_bktree.core.bktree import MutableBkTree
from metric_bktree.core.exceptions import BkTreeError
from metric_bktree.core.metrics import as_vector
from metric_bktree.core.registry import default_registry
from metric_bktree.core.searcher import BkTreeSearcher
from metric_bktree.utils.config_manager import Config
from metric_bktree.utils.logger_utils import Log
from metric_bktree.utils.tree_view import render_tree

# initialise console for rich output
console = Console()


def _parse_element(line: str, metric_name: str) -> Any:
    """Vectors for manhattan are written as comma separated ints: `1,2,3`."""
    if metric_name == "manhattan":
        return as_vector([int(part) for part in line.split(",")])
    return line


def load_elements(path: str, metric_name: str) -> List[Any]:
    """Read one element per line, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [_parse_element(line.strip(), metric_name) for line in f if line.strip()]


def build_tree(path: str, metric_name: str, log: Log) -> MutableBkTree:
    metric = default_registry.get(metric_name)
    tree = MutableBkTree(metric)
    with log.time_block(f"build {os.path.basename(path)}"):
        tree.insert_all(load_elements(path, metric_name))
    log.info(f"indexed {tree.size()} elements from {path} using {metric_name}")
    return tree


# SUBCOMMANDS -----------------------------------------------------------
def _cmd_search(args, cfg: Config, log: Log) -> int:
    metric_name = (args.metric or cfg["metric"]).lower()
    max_distance = cfg["max_distance"] if args.max_distance is None else args.max_distance
    tree = build_tree(args.words, metric_name, log)
    query = _parse_element(args.query, metric_name)

    searcher = BkTreeSearcher(tree)
    with log.time_block(f"search {args.query!r} d<={max_distance}"):
        matches = searcher.search_sorted(query, max_distance)
    log.info(f"{len(matches)} matches for {args.query!r}")

    table = Table(title=escape(f"Matches for {args.query!r} (d <= {max_distance})"), box=box.SIMPLE)
    table.add_column("element", style="bold")
    table.add_column("distance", justify="right")
    for m in matches:
        color = "green" if m.distance == 0 else "yellow"
        table.add_row(escape(str(m.match)), f"[{color}]{m.distance}[/{color}]")
    console.print(table)
    if not matches:
        console.print("[dim]no matches[/dim]")

    if args.tree or cfg["show_tree"]:
        render_tree(tree, console)
    return 0


def _cmd_show(args, cfg: Config, log: Log) -> int:
    metric_name = (args.metric or cfg["metric"]).lower()
    tree = build_tree(args.words, metric_name, log)
    render_tree(tree, console, title=f"BK-tree [{metric_name}]")
    return 0


def _cmd_metrics(args, cfg: Config, log: Log) -> int:
    for name in default_registry.names():
        marker = " [cyan](default)[/cyan]" if name == cfg["metric"] else ""
        console.print(f"{name}{marker}")
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="metric-bktree", description="BK-tree range search over a word list")
    parser.add_argument("--config", default=None, help="JSON config file (created with defaults if missing)")
    parser.add_argument("--log-file", default=None, help="where to append log lines")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="find elements within a distance of QUERY")
    p.add_argument("words", help="file with one element per line")
    p.add_argument("query")
    p.add_argument("-d", "--max-distance", type=int, default=None)
    p.add_argument("-m", "--metric", default=None, help="metric name (see `metrics`)")
    p.add_argument("--tree", action="store_true", help="also print the tree")
    p.set_defaults(func=_cmd_search)

    p = sub.add_parser("show", help="print the tree built from a file")
    p.add_argument("words")
    p.add_argument("-m", "--metric", default=None)
    p.set_defaults(func=_cmd_show)

    p = sub.add_parser("metrics", help="list available metrics")
    p.set_defaults(func=_cmd_metrics)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    try:
        cfg = Config(args.config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    log = Log(args.log_file or cfg["log_path"] or None, echo=bool(cfg["echo_logs"]))

    try:
        return args.func(args, cfg, log)
    except (BkTreeError, KeyError, ValueError, OSError) as e:
        log.error(f"{args.command} failed: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
