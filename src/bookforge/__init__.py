"""
bookforge - glossary model and parsable file resolution for book builds.

This package provides:

- An immutable, ordered Glossary of entries keyed by normalized names
- Resolution of logical document names to the backing markup file,
  trying supported extensions in priority order
- Structure file lookup and glossary loading on top of both
"""

__version__ = "0.1.0"

# Configuration
from bookforge.config import Settings, configure, get_settings

# Core
from bookforge.core.exceptions import BookforgeError, FileNotParsableError, ProbeError
from bookforge.core.interfaces import Book, ContentFS

# Models
from bookforge.models import File, FileStat, Glossary, GlossaryEntry, name_to_id

# Parsers
from bookforge.parsers import FILE_EXTENSIONS, Parser, ParserRegistry, default_registry

# Resolution
from bookforge.parse import (
    ParsableFileResolver,
    find_parsable_file,
    lookup_structure_file,
    parse_glossary,
)

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    # Core
    "Book",
    "BookforgeError",
    "ContentFS",
    "FileNotParsableError",
    "ProbeError",
    # Models
    "File",
    "FileStat",
    "Glossary",
    "GlossaryEntry",
    "name_to_id",
    # Parsers
    "FILE_EXTENSIONS",
    "Parser",
    "ParserRegistry",
    "default_registry",
    # Resolution
    "ParsableFileResolver",
    "find_parsable_file",
    "lookup_structure_file",
    "parse_glossary",
]
