# src/hppgen/core/amalgamate.py
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

import pathspec

from hppgen.config import DEFAULT_VERSION_MACRO
from hppgen.core.includes import (
    UnresolvedIncludeError,
    find_unresolved_references,
    strip_compile_once,
    strip_local_includes,
)
from hppgen.core.scanner import discover
from hppgen.models import FileSet, LocalIncludeReference, Preamble

logger = logging.getLogger(__name__)

def collect_unresolved(file_set: FileSet) -> List[Tuple[str, LocalIncludeReference]]:
    """Quoted includes that do not name an interface file, paired with the file they occur in."""
    unresolved = []
    for source in file_set:
        for ref in find_unresolved_references(source.content, file_set.interface_names):
            unresolved.append((source.name, ref))
    return unresolved

def amalgamate(file_set: FileSet, preamble: Preamble) -> str:
    """
    Builds the single-header text: every file with its local includes stripped,
    interface group first, compile-once directives removed from the body and
    re-added once by the preamble.
    """
    known_names = file_set.interface_names
    body = "".join(strip_local_includes(source.content, known_names) for source in file_set)
    return preamble.render() + strip_compile_once(body)

def _output_mode(output_path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new file."""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

def write_output(output_path: Path, text: str) -> None:
    """
    Writes text to output_path through a temporary sibling file and a rename,
    so the target is either fully replaced or left untouched.
    """
    output_path = Path(output_path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp_name, _output_mode(output_path))
        os.replace(tmp_name, output_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

def run(
    interface_dir: Path,
    implementation_dir: Path,
    output_path: Path,
    version: str,
    license: str,
    *,
    version_macro: str = DEFAULT_VERSION_MACRO,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    strict: bool = False,
) -> FileSet:
    """
    Discovers, amalgamates and writes the single header.
    Returns the FileSet that went into the output.
    """
    file_set = discover(interface_dir, implementation_dir, ignore_spec)

    unresolved = collect_unresolved(file_set)
    for source_name, ref in unresolved:
        logger.warning("%s: %s does not name an amalgamated header, leaving it in place", source_name, ref.text)
    if strict and unresolved:
        raise UnresolvedIncludeError(unresolved)

    text = amalgamate(file_set, Preamble(license=license, version=version, version_macro=version_macro))
    write_output(output_path, text)
    logger.debug("Wrote %d characters to %s", len(text), output_path)
    return file_set
