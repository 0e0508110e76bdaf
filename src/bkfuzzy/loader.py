from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List

from .config import verbose_enabled
from .errors import CorpusLoadError, EmptyCorpusError
from .models import Corpus

log = logging.getLogger(__name__)

# Progress line every N tokens (BKFUZZY_VERBOSE=1, set by --verbose)
PROGRESS_EVERY_WORDS = 100_000

def _iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Split on any run of whitespace; newlines separate tokens like spaces do."""
    for line in lines:
        yield from line.split()

def corpus_from_text(text: str, source: str = "<text>") -> Corpus:
    """Tokenize an in-memory vocabulary (tests, web uploads)."""
    words = list(_iter_tokens(text.splitlines()))
    if not words:
        raise EmptyCorpusError(source)
    return Corpus.from_words(words, source=source)

def load_corpus(path: str) -> Corpus:
    """
    Read a word file into a Corpus.
    Token order is preserved: it decides the BK-tree shape.

    Raises CorpusLoadError if the file cannot be read and
    EmptyCorpusError if it holds no tokens.
    """
    path = os.fspath(path)
    words: List[str] = []
    verbose = verbose_enabled()
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for tok in _iter_tokens(f):
                words.append(tok)
                if verbose and len(words) % PROGRESS_EVERY_WORDS == 0:
                    log.info("[loaded] words=%s", f"{len(words):,}")
    except OSError as exc:
        raise CorpusLoadError(path, exc.strerror or str(exc)) from exc

    if not words:
        raise EmptyCorpusError(path)
    log.info("Loaded %d words from %s", len(words), path)
    return Corpus.from_words(words, source=path)
