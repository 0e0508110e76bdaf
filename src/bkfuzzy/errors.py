# bkfuzzy/errors.py
from __future__ import annotations


class BkFuzzyError(Exception):
    """Base class for failures that stop a build before any query runs."""


class CorpusLoadError(BkFuzzyError):
    """The vocabulary resource could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read word file {path!r}: {reason}")
        self.path = path
        self.reason = reason


class EmptyCorpusError(BkFuzzyError, ValueError):
    """A corpus with zero words; there is nothing to use as the tree root."""

    def __init__(self, source: str = "") -> None:
        where = f" ({source})" if source else ""
        super().__init__(f"corpus is empty{where}; cannot build an index")
        self.source = source
