# tests/test_searcher.py
# range search: fixed scenarios, argument checks, brute-force equivalence

import random

import pytest

from metric_bktree.core.bktree import MutableBkTree
from metric_bktree.core.exceptions import IllegalMetricError, InvalidArgumentError
from metric_bktree.core.metrics import length_difference, levenshtein, manhattan
from metric_bktree.core.searcher import BkTreeSearcher, Match

WORDS = ["book", "books", "nook", "nooks", "b", "boo", "bo", "bookies"]


def negative_one(a, b):
    return -1


@pytest.fixture
def searcher():
    tree = MutableBkTree(length_difference)
    tree.insert_all(WORDS)
    return BkTreeSearcher(tree)


def matches(*pairs):
    return {Match(e, d) for e, d in pairs}


def test_hook_radius_0(searcher):
    assert searcher.search("hook", 0) == matches(("book", 0), ("nook", 0))


def test_hook_radius_1(searcher):
    assert searcher.search("hook", 1) == matches(
        ("book", 0), ("nook", 0), ("books", 1), ("nooks", 1), ("boo", 1)
    )


def test_hook_radius_3(searcher):
    assert searcher.search("hook", 3) == matches(
        ("book", 0), ("books", 1), ("nook", 0), ("nooks", 1),
        ("b", 3), ("boo", 1), ("bo", 2), ("bookies", 3),
    )


@pytest.mark.parametrize(
    "radius,expected",
    [
        (0, []),
        (1, [("b", 1)]),
        (2, [("b", 1), ("bo", 2)]),
        (4, [("b", 1), ("bo", 2), ("boo", 3), ("book", 4), ("nook", 4)]),
        (6, [("b", 1), ("bo", 2), ("boo", 3), ("book", 4), ("nook", 4), ("books", 5), ("nooks", 5)]),
        (8, [("b", 1), ("bo", 2), ("boo", 3), ("book", 4), ("nook", 4), ("books", 5), ("nooks", 5), ("bookies", 7)]),
    ],
)
def test_empty_string_query(searcher, radius, expected):
    assert searcher.search("", radius) == matches(*expected)


def test_self_match_radius_0(searcher):
    assert searcher.search("b", 0) == matches(("b", 0))
    single = MutableBkTree(levenshtein)
    single.insert("x")
    assert BkTreeSearcher(single).search("x", 0) == matches(("x", 0))


def test_empty_tree_returns_empty_set():
    s = BkTreeSearcher(MutableBkTree(levenshtein))
    assert s.search("anything", 0) == set()
    assert s.search("anything", 10) == set()


@pytest.mark.parametrize("bad", [-1, -10, 1.5, True, "1"])
def test_bad_radius_rejected(searcher, bad):
    with pytest.raises(InvalidArgumentError):
        searcher.search("book", bad)


def test_negative_radius_rejected_on_empty_tree():
    with pytest.raises(InvalidArgumentError):
        BkTreeSearcher(MutableBkTree(levenshtein)).search("book", -1)


def test_none_arguments_rejected(searcher):
    with pytest.raises(InvalidArgumentError):
        BkTreeSearcher(None)
    with pytest.raises(InvalidArgumentError):
        searcher.search(None, 1)


def test_negative_metric_aborts_search():
    tree = MutableBkTree(negative_one)
    tree.insert(object())
    with pytest.raises(IllegalMetricError) as exc:
        BkTreeSearcher(tree).search(object(), 0)
    assert exc.value.distance == -1
    assert "element and query" in str(exc.value)


def test_search_sorted_and_nearest(searcher):
    ordered = searcher.search_sorted("hook", 1)
    assert [(m.match, m.distance) for m in ordered] == [
        ("book", 0), ("nook", 0), ("boo", 1), ("books", 1), ("nooks", 1)
    ]
    assert searcher.nearest("hook", 3) == matches(("book", 0), ("nook", 0))
    assert searcher.nearest("bookiess", 1) == matches(("bookies", 1))
    assert searcher.nearest("", 0) == set()


def test_get_tree(searcher):
    assert searcher.get_tree().size() == len(WORDS)


def test_match_validation():
    with pytest.raises(InvalidArgumentError):
        Match(None, 0)
    with pytest.raises(InvalidArgumentError):
        Match("a", -1)
    assert Match("a", 1) == Match("a", 1)
    assert len({Match("a", 1), Match("a", 1), Match("a", 2)}) == 2


def brute_force(elements, metric, query, radius):
    out = set()
    for e in set(elements):
        d = metric(e, query)
        if d <= radius:
            out.add(Match(e, d))
    return out


def test_matches_brute_force_for_every_order():
    rng = random.Random(1234)
    words = ["".join(rng.choice("abcd") for _ in range(rng.randint(0, 6))) for _ in range(150)]
    queries = ["", "a", "abc", "dddd", "abcdab", "bbbbbbbb"]
    for _ in range(4):
        rng.shuffle(words)
        tree = MutableBkTree(levenshtein)
        tree.insert_all(words)
        assert tree.size() == len(set(words))
        s = BkTreeSearcher(tree)
        for q in queries:
            for radius in (0, 1, 2, 3):
                assert s.search(q, radius) == brute_force(words, levenshtein, q, radius)


def test_vectors_match_brute_force():
    rng = random.Random(99)
    points = [(rng.randint(0, 20), rng.randint(0, 20)) for _ in range(200)]
    tree = MutableBkTree(manhattan)
    tree.insert_all(points)
    s = BkTreeSearcher(tree)
    for q in [(0, 0), (10, 10), (20, 3)]:
        for radius in (0, 2, 5, 40):
            assert s.search(q, radius) == brute_force(points, manhattan, q, radius)


class _PlainNode:
    """Minimal node exposing only the protocol methods (no children listing)."""

    def __init__(self, element, children=None):
        self.element = element
        self.kids = children or {}

    def get_element(self):
        return self.element

    def get_child(self, distance):
        return self.kids.get(distance)


class _PlainTree:
    def __init__(self, root):
        self.root = root

    def get_metric(self):
        return length_difference

    def get_root(self):
        return self.root


def test_searcher_works_against_protocol_only_tree():
    root = _PlainNode("book", {1: _PlainNode("books"), 3: _PlainNode("b", {6: _PlainNode("bookies")})})
    s = BkTreeSearcher(_PlainTree(root))
    assert s.search("hook", 1) == matches(("book", 0), ("books", 1))
    assert s.search("", 1) == matches(("b", 1))


def test_large_radius_with_sparse_children(searcher):
    # window far wider than the number of children
    assert searcher.search("hook", 10_000) == brute_force(WORDS, length_difference, "hook", 10_000)


def picky_length(a, b):
    """Length difference, except the pair ("xx", "q") gets -1."""
    if {a, b} == {"xx", "q"}:
        return -1
    return abs(len(a) - len(b))


def test_negative_metric_below_root_aborts_search():
    tree = MutableBkTree(picky_length)
    tree.insert_all("aaaa", "aa", "xx")
    # "xx" sits two levels down: aaaa -(2)-> aa -(0)-> xx
    assert tree.get_root().get_child(2).get_child(0).get_element() == "xx"
    s = BkTreeSearcher(tree)
    # "aa" would match, but the whole search fails once "xx" is reached
    with pytest.raises(IllegalMetricError) as exc:
        s.search("q", 1)
    assert exc.value.first == "xx" and exc.value.second == "q"
    # a radius whose windows never reach "xx" still works
    assert s.search("q", 0) == set()


def test_child_items_is_a_live_view():
    tree = MutableBkTree(length_difference)
    tree.insert("book")
    items = tree.get_root().child_items()
    assert len(items) == 0
    tree.insert("bo")
    assert dict(items) == {2: tree.get_root().get_child(2)}
