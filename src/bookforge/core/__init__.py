"""
Core contracts, errors and logging for bookforge.
"""

from bookforge.core.exceptions import BookforgeError, FileNotParsableError, ProbeError
from bookforge.core.interfaces import Book, ContentFS

__all__ = [
    # Contracts
    "Book",
    "ContentFS",
    # Errors
    "BookforgeError",
    "FileNotParsableError",
    "ProbeError",
]
