from __future__ import annotations
import argparse, json, sys
from typing import List, Optional, Tuple

from . import config as CFG
from .config import RunConfig
from .engine import Engine
from .errors import BkFuzzyError

USAGE = "%(prog)s [-w wordfile] [--dot] [-b] [--repl] [--json] [--verbose] [n] query"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bkfuzzy",
        usage=USAGE,
        description="Find every word within n edits of a query (BK-tree or brute force)",
    )
    p.add_argument("terms", nargs="*", metavar="arg",
                   help=f"optional max edit distance (default {CFG.DEFAULT_MAX_DISTANCE}) and the query word")
    p.add_argument("-b", "--brute-force", action="store_true", help="Linear scan instead of the index")
    p.add_argument("--dot", "-dot", action="store_true", help="Print the built tree as a Graphviz digraph")
    p.add_argument("-w", "--wordfile", default=None,
                   help=f"Vocabulary file (default ${CFG.WORDFILE_ENV} or {CFG.DEFAULT_WORDFILE})")
    p.add_argument("--repl", action="store_true", help="Interactive loop after the build")
    p.add_argument("--json", action="store_true", help="Emit one JSON object per query")
    p.add_argument("--verbose", action="store_true", help="Log build/query diagnostics to stderr")
    return p

def _split_terms(p: argparse.ArgumentParser, terms: List[str]) -> Tuple[int, Optional[str]]:
    """[n] query -> (n, query); n defaults to DEFAULT_MAX_DISTANCE."""
    if len(terms) > 2:
        p.error("too many positional arguments")
    if len(terms) == 2:
        return _parse_distance(p, terms[0]), terms[1]
    if len(terms) == 1:
        return CFG.DEFAULT_MAX_DISTANCE, terms[0]
    return CFG.DEFAULT_MAX_DISTANCE, None

def _parse_distance(p: argparse.ArgumentParser, raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        p.error(f"max distance must be an integer, got {raw!r}")
    if n < 0:
        p.error("max distance must be >= 0")
    return n

def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    """Validate argv into an immutable RunConfig (exits with usage on error)."""
    p = build_parser()
    args = p.parse_args(argv)

    n, query = _split_terms(p, args.terms)
    if query is None and not (args.dot or args.repl):
        p.error("a query is required (or use --dot / --repl)")
    if args.dot and args.brute_force:
        p.error("--dot needs the index; it cannot be combined with -b")

    return RunConfig(
        wordfile=args.wordfile or CFG.default_wordfile(),
        query=query,
        max_distance=n,
        strategy=CFG.STRATEGY_BRUTE if args.brute_force else CFG.STRATEGY_INDEX,
        dump_dot=args.dot,
        repl=args.repl,
        json=args.json,
        verbose=args.verbose,
    )

def _emit(eng: Engine, cfg: RunConfig, query: str, n: int) -> None:
    res = eng.query(query, n, strategy=cfg.strategy)
    if cfg.json:
        print(json.dumps(res.to_dict(), ensure_ascii=False))
    else:
        for w in res.matches:
            print(w)

def _repl(eng: Engine, cfg: RunConfig) -> None:
    # "word" or "n word"; empty line (or EOF) leaves
    while True:
        try:
            line = input("> " if sys.stdin.isatty() else "").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            break
        parts = line.split()
        if len(parts) == 2 and parts[0].isdecimal():
            _emit(eng, cfg, parts[1], int(parts[0]))
        elif len(parts) == 1:
            _emit(eng, cfg, parts[0], cfg.max_distance)
        else:
            print("(expected: [n] word)", file=sys.stderr)

def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_config(argv)

    eng = Engine()
    try:
        try:
            eng.build(cfg.wordfile, index=cfg.strategy == CFG.STRATEGY_INDEX, verbose=cfg.verbose)
        except BkFuzzyError as exc:
            print(f"bkfuzzy: {exc}", file=sys.stderr)
            return 1

        if cfg.dump_dot:
            sys.stdout.write(eng.dump_dot())
            return 0

        if cfg.query is not None:
            _emit(eng, cfg, cfg.query, cfg.max_distance)
        if cfg.repl:
            _repl(eng, cfg)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
