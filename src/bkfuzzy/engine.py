# bkfuzzy/engine.py
from __future__ import annotations

import logging
import os
import time
from typing import Iterable, Optional

from . import config as CFG
from .bktree import BkTree
from .errors import EmptyCorpusError
from .export import render_dot
from .loader import load_corpus
from .models import Corpus, QueryResult, QueryStats
from .search import brute_force, search

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (loader.load_corpus),
      - BK-tree construction (bktree.BkTree),
      - pruned and brute-force search (search.search / search.brute_force),
      - DOT export and build/query diagnostics.

    Public API (used by CLI/Flask/GUI):
      * build(wordfile | words=...): load -> index
      * query(target, threshold, strategy): matches + visited count
      * dump_dot():  Graphviz text of the built tree
      * stats():     size / depth / build time
      * shutdown():  drop the index and corpus
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.corpus: Optional[Corpus] = None
        self.tree: Optional[BkTree] = None
        self.build_ms: float = 0.0
        self._depth: Optional[int] = None

    # /* ~~~ Load a vocabulary and build the index over it ~~~ */
    def build(
        self,
        wordfile: Optional[str] = None,
        *,
        words: Optional[Iterable[str]] = None,   # in-memory vocabulary instead of a file
        index: bool = True,                      # False: brute-force only, skip the tree
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        if (wordfile is None) == (words is None):
            raise ValueError("build(): pass exactly one of wordfile or words=")

        if words is not None:
            corpus = Corpus.from_words(words, source="<memory>")
        else:
            log.info("Loading corpus from %s", wordfile)
            corpus = load_corpus(wordfile)

        tree: Optional[BkTree] = None
        t0 = time.perf_counter()
        if index:
            tree = BkTree.build(corpus)    # raises EmptyCorpusError on zero words
        elif len(corpus) == 0:
            raise EmptyCorpusError(corpus.source)
        self.build_ms = (time.perf_counter() - t0) * 1000.0

        self.corpus = corpus
        self.tree = tree
        self._depth = None
        if tree is not None:
            log.info("Index construction took %dms", self.build_ms)
            log.info("Index depth: %d (size: %d)", self.depth(), len(corpus))

    # ------------- query -------------

    def query(self, target: str, threshold: int = CFG.DEFAULT_MAX_DISTANCE,
              strategy: str = CFG.STRATEGY_INDEX) -> QueryResult:
        """Run one lookup and collect its matches in visitation order."""
        if self.corpus is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        if strategy not in CFG.STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}; expected one of {CFG.STRATEGIES}")

        stats = QueryStats()
        t0 = time.perf_counter()
        if strategy == CFG.STRATEGY_INDEX:
            if self.tree is None:
                raise RuntimeError("Engine was built without an index; use strategy='brute'")
            matches = list(search(self.tree, target, threshold, stats))
        else:
            matches = list(brute_force(self.corpus, target, threshold, stats))
        elapsed = (time.perf_counter() - t0) * 1000.0

        if strategy == CFG.STRATEGY_INDEX:
            log.info("Indexed query took %dms", elapsed)
            log.info("Queried %d (%d%%)", stats.visited, stats.percent_of(len(self.corpus)))
        else:
            log.info("Brute force query took %dms", elapsed)

        return QueryResult(
            query=target,
            threshold=threshold,
            strategy=strategy,
            matches=matches,
            visited=stats.visited,
            elapsed_ms=elapsed,
        )

    def dump_dot(self) -> str:
        if self.tree is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return render_dot(self.tree)

    def depth(self) -> int:
        if self.tree is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        # frozen after build, so the walk only happens once
        if self._depth is None:
            self._depth = self.tree.depth()
        return self._depth

    def stats(self) -> dict:
        if self.corpus is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return {
            "size": len(self.corpus),
            "depth": self.depth() if self.tree is not None else 0,
            "build_ms": round(self.build_ms, 3),
            "source": self.corpus.source,
        }

    @property
    def ready(self) -> bool:
        return self.corpus is not None

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.tree = None
        self.corpus = None
        self._depth = None
        log.info("Engine shutdown complete")
