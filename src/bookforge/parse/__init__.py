"""
Resolution of logical document names and loading of structure files.
"""

from bookforge.parse.find_parsable_file import (
    ParsableFileResolver,
    find_parsable_file,
    split_logical_name,
)
from bookforge.parse.parse_glossary import lookup_structure_file, parse_glossary

__all__ = [
    "ParsableFileResolver",
    "find_parsable_file",
    "lookup_structure_file",
    "parse_glossary",
    "split_logical_name",
]
