"""
bkfuzzy: typo-tolerant lookup over a fixed word list.

Builds a BK-tree over a vocabulary so that "every word within N edits of X"
only touches a fraction of the list instead of all of it.

Main entry points:
    edit_distance(a, b), edit_distance_bounded(a, b, bound)
    load_corpus(path) -> Corpus
    BkTree.build(corpus); search(tree, word, n); brute_force(corpus, word, n)
    Engine: build() once, then query() as many times as needed

Example:
    from bkfuzzy import Engine

    eng = Engine()
    eng.build(words=["kitten", "sitting", "bitten", "mitten"])
    eng.query("kitten", 2).matches   # ['kitten', 'bitten', 'mitten'] in tree order
"""

# src/bkfuzzy/__init__.py
from .bktree import BkTree
from .distance import edit_distance, edit_distance_bounded
from .engine import Engine
from .errors import BkFuzzyError, CorpusLoadError, EmptyCorpusError
from .loader import corpus_from_text, load_corpus
from .models import Corpus, QueryResult, QueryStats
from .search import brute_force, search

__version__ = "1.0.0"
__all__ = [
    "BkTree", "Engine", "Corpus", "QueryResult", "QueryStats",
    "edit_distance", "edit_distance_bounded",
    "load_corpus", "corpus_from_text", "search", "brute_force",
    "BkFuzzyError", "CorpusLoadError", "EmptyCorpusError",
]
