# src/hppgen/core/includes.py
"""
Textual scanning of quoted include directives.

This is a plain regex scan, not a preprocessor: directives inside comments or
string literals are matched as well. Everything that needs to know which
directives are local goes through find_local_references.
"""
import logging
import re
from typing import AbstractSet, List, Sequence

from hppgen.config import COMPILE_ONCE_DIRECTIVE
from hppgen.models import LocalIncludeReference

logger = logging.getLogger(__name__)

# `#include "name"` on a single line; angle-bracket includes never match
INCLUDE_PATTERN = re.compile(r'#include[ \t]*"([^"\r\n]*)"')

class UnresolvedIncludeError(ValueError):
    """Raised in strict mode when a quoted include names no amalgamated file."""

    def __init__(self, references: Sequence[tuple]):
        self.references = list(references)
        details = ", ".join(f"{source}: {ref.text}" for source, ref in self.references)
        super().__init__(f"Unresolved local include(s): {details}")

def _scan(content: str) -> List[LocalIncludeReference]:
    return [
        LocalIncludeReference(text=m.group(0), name=m.group(1), start=m.start(), end=m.end())
        for m in INCLUDE_PATTERN.finditer(content)
    ]

def find_local_references(content: str, known_names: AbstractSet[str]) -> List[LocalIncludeReference]:
    """Returns the quoted includes whose target is one of known_names, in content order."""
    return [ref for ref in _scan(content) if ref.name in known_names]

def find_unresolved_references(content: str, known_names: AbstractSet[str]) -> List[LocalIncludeReference]:
    """Returns the quoted includes that will be left in place."""
    return [ref for ref in _scan(content) if ref.name not in known_names]

def strip_local_includes(content: str, known_names: AbstractSet[str]) -> str:
    """
    Removes every local include directive, exactly the matched text.
    Surrounding whitespace and newlines are left as they are.
    """
    references = find_local_references(content, known_names)
    if not references:
        return content

    parts = []
    cursor = 0
    for ref in references:
        logger.debug("Stripping %s", ref.text)
        parts.append(content[cursor:ref.start])
        cursor = ref.end
    parts.append(content[cursor:])
    return "".join(parts)

def strip_compile_once(content: str) -> str:
    return content.replace(COMPILE_ONCE_DIRECTIVE, "")
