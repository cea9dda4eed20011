"""
Markup parser registry.
"""

from bookforge.parsers.registry import (
    ASCIIDOC,
    FILE_EXTENSIONS,
    MARKDOWN,
    Parser,
    ParserRegistry,
    default_registry,
    get_by_ext,
)

__all__ = [
    "ASCIIDOC",
    "FILE_EXTENSIONS",
    "MARKDOWN",
    "Parser",
    "ParserRegistry",
    "default_registry",
    "get_by_ext",
]
