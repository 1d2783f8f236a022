# src/hppgen/core/scanner.py
import logging
import os
from pathlib import Path
from typing import Iterator, Optional

import pathspec

from hppgen.config import IMPLEMENTATION_EXTENSION, INTERFACE_EXTENSION
from hppgen.core.ignore import is_ignored
from hppgen.models import FileSet, SourceFile

logger = logging.getLogger(__name__)

def read_source(path: Path) -> str:
    """Reads a UTF-8 file exactly as stored; CRLF and lone CR are not translated."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()

def _relative_to_cwd(path: Path) -> str:
    try:
        return path.resolve().relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return path.as_posix()

class GroupScanner:
    """Lists one directory (non-recursive) and reads the files of one group."""

    def __init__(self, directory: Path, extension: str, ignore_spec: Optional[pathspec.PathSpec] = None):
        self.directory = Path(directory)
        self.extension = extension
        self.ignore_spec = ignore_spec

    def scan(self) -> Iterator[SourceFile]:
        """
        Yields a SourceFile for every matching entry, in os.listdir order.
        Listing and read errors propagate: a partial file set is never returned.
        """
        for name in os.listdir(self.directory):
            if not name.endswith(self.extension):
                continue

            file_path = self.directory / name
            if not file_path.is_file():
                logger.debug("Skipping non-file entry %s", file_path)
                continue

            if is_ignored(name, self.ignore_spec, rel_path=_relative_to_cwd(file_path)):
                logger.debug("Ignoring %s (matched exclusion rules)", file_path)
                continue

            yield SourceFile(
                path=file_path,
                name=name,
                content=read_source(file_path),
            )

def discover(
    interface_dir: Path,
    implementation_dir: Path,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    interface_extension: str = INTERFACE_EXTENSION,
    implementation_extension: str = IMPLEMENTATION_EXTENSION,
) -> FileSet:
    interface = tuple(GroupScanner(interface_dir, interface_extension, ignore_spec).scan())
    implementation = tuple(GroupScanner(implementation_dir, implementation_extension, ignore_spec).scan())
    logger.debug(
        "Discovered %d interface file(s) in %s and %d implementation file(s) in %s",
        len(interface), interface_dir, len(implementation), implementation_dir,
    )
    return FileSet(interface=interface, implementation=implementation)
