from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

@dataclass(frozen=True)
class Corpus:
    """
    Ordered, immutable vocabulary. Tree nodes refer to entries by position,
    so the tuple must never change once a BkTree has been built over it.
    """
    words: Tuple[str, ...]
    source: str = ""          # path (or label) the words were read from

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "") -> "Corpus":
        return cls(words=tuple(words), source=source)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, i: int) -> str:
        return self.words[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

@dataclass
class QueryStats:
    visited: int = 0          # nodes (or corpus entries) visited; one comparison each

    def percent_of(self, total: int) -> int:
        # integer percentage, same rounding as the diagnostics line
        return 100 * self.visited // total if total else 0

@dataclass(frozen=True)
class QueryResult:
    query: str
    threshold: int
    strategy: str             # "index" | "brute"
    matches: List[str] = field(default_factory=list)   # visitation order, duplicates kept
    visited: int = 0
    elapsed_ms: float = 0.0

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "threshold": self.threshold,
            "mode": self.strategy,
            "matches": list(self.matches),
            "visited": self.visited,
        }
