# src/hppgen/core/ignore.py
import logging
from pathlib import Path
from typing import List, Optional

import pathspec

logger = logging.getLogger(__name__)

def load_ignore_spec(ignore_file: Optional[Path], extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Loads rules from an ignore file (if it exists) and creates a PathSpec object.
    Extra patterns (e.g. from --exclude) are appended after the file's rules,
    so a later negation in either source still wins.
    """
    lines: List[str] = []

    if ignore_file is not None and ignore_file.exists():
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        logger.debug("Loaded %d ignore rule(s) from %s", len(lines), ignore_file)

    if extra_patterns:
        lines.extend(extra_patterns)

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)

def is_ignored(name: str, spec: Optional[pathspec.PathSpec], rel_path: Optional[str] = None) -> bool:
    """
    Matches the bare file name and, when given, the path relative to the
    working directory, so both `legacy.cpp` and `src/legacy.cpp` or `includes/` apply.
    """
    if spec is None:
        return False
    if spec.match_file(name):
        return True
    return rel_path is not None and spec.match_file(rel_path)
