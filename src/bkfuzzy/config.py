from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

# /* ~~~ query defaults ~~~ */
DEFAULT_MAX_DISTANCE: int = 2

# Vocabulary resource (override with BKFUZZY_WORDFILE or -w/--wordfile)
WORDFILE_ENV = "BKFUZZY_WORDFILE"
DEFAULT_WORDFILE: str = "/usr/share/dict/words"

# Set to "1" by --verbose; enables build/query diagnostics in the log
VERBOSE_ENV = "BKFUZZY_VERBOSE"

# Strategies accepted by Engine.query()
STRATEGY_INDEX = "index"
STRATEGY_BRUTE = "brute"
STRATEGIES = (STRATEGY_INDEX, STRATEGY_BRUTE)

# /* ~~~ web UI caps: large thresholds degrade pruning to a full scan ~~~ */
MAX_WEB_DISTANCE: int = 5
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = 8000


def default_wordfile() -> str:
    return os.environ.get(WORDFILE_ENV) or DEFAULT_WORDFILE


def verbose_enabled() -> bool:
    return os.environ.get(VERBOSE_ENV) == "1"


@dataclass(frozen=True)
class RunConfig:
    """
    Fully validated invocation parameters, produced once by argument parsing.
    The core never looks at argv or the environment itself.
    """
    wordfile: str
    query: Optional[str]
    max_distance: int = DEFAULT_MAX_DISTANCE
    strategy: str = STRATEGY_INDEX
    dump_dot: bool = False
    repl: bool = False
    json: bool = False
    verbose: bool = False
