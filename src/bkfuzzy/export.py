from __future__ import annotations
from typing import Iterator

from .bktree import BkTree

def _quote(word: str) -> str:
    """DOT double-quoted ID: escape backslashes and quotes."""
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'

def iter_dot_lines(tree: BkTree, name: str = "G") -> Iterator[str]:
    """
    Graphviz description of the tree, one line per parent -> child edge,
    each edge labelled with its distance key.
    """
    yield f"digraph {name} {{"
    for parent, child, d in tree.edges():
        yield f'  {_quote(parent)} -> {_quote(child)} [label="{d}"];'
    yield "}"

def render_dot(tree: BkTree, name: str = "G") -> str:
    return "\n".join(iter_dot_lines(tree, name)) + "\n"
