# src/hppgen/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterator, Tuple

from hppgen.config import COMPILE_ONCE_DIRECTIVE, DEFAULT_VERSION_MACRO

@dataclass(frozen=True)
class SourceFile:
    """Immutable data class holding one discovered file."""
    path: Path
    name: str
    content: str

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())

@dataclass(frozen=True)
class FileSet:
    """
    The two ordered file groups of one run.
    Iteration yields every interface file, then every implementation file.
    """
    interface: Tuple[SourceFile, ...] = ()
    implementation: Tuple[SourceFile, ...] = ()
    interface_names: FrozenSet[str] = field(init=False)

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ for the derived field
        object.__setattr__(self, "interface_names", frozenset(f.name for f in self.interface))

    def __iter__(self) -> Iterator[SourceFile]:
        yield from self.interface
        yield from self.implementation

    def __len__(self) -> int:
        return len(self.interface) + len(self.implementation)

@dataclass(frozen=True)
class LocalIncludeReference:
    """A quoted include directive found in a file's content."""
    text: str
    name: str
    start: int
    end: int

@dataclass(frozen=True)
class Preamble:
    license: str
    version: str
    version_macro: str = DEFAULT_VERSION_MACRO

    def render(self) -> str:
        return (
            f"{self.license}\n\n"
            f"{COMPILE_ONCE_DIRECTIVE}\n"
            f'#define {self.version_macro} "{self.version}"\n'
        )
