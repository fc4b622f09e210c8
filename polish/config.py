from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_SEARCH_DIRS = [Path('.')]
_DEFAULT_RECURSION_LIMIT = 10_000

SOURCE_SUFFIX = '.pn'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_search_roots() -> List[Path]:
    return paths_from_env('POLISH_PATH', _DEFAULT_SEARCH_DIRS)


def get_recursion_limit() -> int:
    raw = os.environ.get('POLISH_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def find_source(name: str | Path) -> Path:
    """Resolve a source name against the search roots.

    Absolute paths and paths that exist relative to the working directory are
    returned unchanged; otherwise each root is tried, with and without the
    .pn suffix. If nothing matches the original path is returned so that
    opening it reports the error.
    """
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    for root in get_search_roots():
        for candidate in (root / path, root / path.with_suffix(SOURCE_SUFFIX)):
            if candidate.is_file():
                return candidate
    return path
