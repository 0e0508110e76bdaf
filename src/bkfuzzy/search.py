from __future__ import annotations
from typing import Iterable, Iterator, List, Optional

from .bktree import BkNode, BkTree
from .distance import edit_distance_bounded
from .models import QueryStats

# Pruned search over the tree.
#
# For a node at distance d from the target, a word w in the subtree keyed k
# has edit_distance(node, w) == k, so by the triangle inequality
#     |k - d| <= edit_distance(w, target)
# and only keys inside [d - threshold, d + threshold] can hold a match.

def search(tree: BkTree, target: str, threshold: int,
           stats: Optional[QueryStats] = None) -> Iterator[str]:
    """
    Lazily yield every word within `threshold` of `target`.
    Order is tree pre-order (children by ascending key); not sorted by
    distance and not deduplicated: a word stored twice is yielded twice.
    """
    corpus = tree.corpus
    dist = tree.distance
    stack: List[BkNode] = [tree.root]
    while stack:
        node = stack.pop()
        if stats is not None:
            stats.visited += 1
        word = corpus[node.index]
        d = dist(word, target)
        if d <= threshold:
            yield word
        if not node.children:
            continue
        lo, hi = d - threshold, d + threshold
        # push in descending key order so the smallest key is visited first
        for k in sorted(node.children, reverse=True):
            if lo <= k <= hi:
                stack.append(node.children[k])

def brute_force(words: Iterable[str], target: str, threshold: int,
                stats: Optional[QueryStats] = None) -> Iterator[str]:
    """Baseline: compare target against every entry, in storage order."""
    for word in words:
        if stats is not None:
            stats.visited += 1
        if edit_distance_bounded(word, target, threshold) <= threshold:
            yield word
