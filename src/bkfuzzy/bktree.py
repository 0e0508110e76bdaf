# bkfuzzy/bktree.py
# BK-tree over a Corpus (see Burkhard & Keller, 1973).
# Every child hangs off its parent under the key edit_distance(parent, child),
# which is what lets search() skip whole subtrees via the triangle inequality.
from __future__ import annotations
import logging
from typing import Callable, Dict, Iterator, List, Tuple

from .distance import edit_distance
from .errors import EmptyCorpusError
from .models import Corpus

log = logging.getLogger(__name__)


class BkNode:
    __slots__ = ("index", "children")

    def __init__(self, index: int) -> None:
        self.index = index                          # position in the backing Corpus
        self.children: Dict[int, BkNode] = {}       # distance -> child

    def sorted_children(self) -> List[Tuple[int, "BkNode"]]:
        return sorted(self.children.items())


class BkTree:
    """
    Metric tree over a Corpus.

    Build once (single writer), then query from any number of readers.
    There is no delete/update; the tree is frozen after build().
    """

    def __init__(self, corpus: Corpus,
                 distance: Callable[[str, str], int] = edit_distance) -> None:
        if len(corpus) == 0:
            raise EmptyCorpusError(corpus.source)
        self.corpus = corpus
        self.distance = distance
        self.root = BkNode(0)
        self._size = 1

    @classmethod
    def build(cls, corpus: Corpus) -> "BkTree":
        """Root is the first entry; the rest go in Corpus order."""
        tree = cls(corpus)
        for i in range(1, len(corpus)):
            tree.insert(i)
        log.debug("BkTree built: size=%d", tree._size)
        return tree

    def word(self, node: BkNode) -> str:
        return self.corpus[node.index]

    # insertion ----------------------------------------------------------------
    def insert(self, index: int) -> None:
        """Place corpus[index] below the root, following distance-keyed edges."""
        word = self.corpus[index]
        node = self.root
        while True:
            d = self.distance(self.corpus[node.index], word)
            child = node.children.get(d)
            if child is None:
                node.children[d] = BkNode(index)
                self._size += 1
                return
            node = child

    # diagnostics --------------------------------------------------------------
    def depth(self) -> int:
        """Longest root-to-leaf path; a lone root has depth 1."""
        best = 0
        stack: List[Tuple[BkNode, int]] = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            if level > best:
                best = level
            for child in node.children.values():
                stack.append((child, level + 1))
        return best

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        """
        Yield (parent_word, child_word, distance) in pre-order:
        all edges of a node (ascending distance), then each child's subtree.
        """
        stack: List[BkNode] = [self.root]
        while stack:
            node = stack.pop()
            kids = node.sorted_children()
            parent = self.word(node)
            for d, child in kids:
                yield parent, self.word(child), d
            for _, child in reversed(kids):
                stack.append(child)

