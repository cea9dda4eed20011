"""
Value models for bookforge. All models are immutable.
"""

from bookforge.models.file import File, FileStat
from bookforge.models.glossary import Glossary
from bookforge.models.glossary_entry import GlossaryEntry, name_to_id

__all__ = [
    "File",
    "FileStat",
    "Glossary",
    "GlossaryEntry",
    "name_to_id",
]
