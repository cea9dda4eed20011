"""
File references on a book's content filesystem.
"""

import posixpath
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bookforge.parsers.registry import Parser, ParserRegistry, default_registry


class FileStat(BaseModel):
    """Status metadata reported by the content filesystem."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path relative to the content root")
    size: int = Field(default=0, ge=0, description="Size in bytes")
    mtime: datetime = Field(..., description="Last modification time")


class File(BaseModel):
    """Reference to a file in a book, with the parser that reads it.

    The default instance is the empty reference (no path).
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(default="", description="Path relative to the content root")
    mtime: Optional[datetime] = Field(default=None)
    parser: Optional[Parser] = Field(default=None, description="Parser bound from the extension")

    def get_path(self) -> str:
        return self.path

    def get_mtime(self) -> Optional[datetime]:
        return self.mtime

    def get_parser(self) -> Optional[Parser]:
        return self.parser

    def exists(self) -> bool:
        """Whether this reference points at a file."""
        return bool(self.path)

    def get_extension(self) -> str:
        """Lowercased extension including the dot, or "" when there is none."""
        _, ext = posixpath.splitext(self.path)
        return ext.lower()

    def is_parsable(self) -> bool:
        return self.parser is not None

    @classmethod
    def create_with_path(cls, path: str, registry: Optional[ParserRegistry] = None) -> "File":
        """Create a file reference without status information."""
        registry = default_registry if registry is None else registry
        return cls(path=path, parser=registry.get_for_file(path))

    @classmethod
    def create_from_stat(
        cls,
        path: str,
        stat: FileStat,
        registry: Optional[ParserRegistry] = None,
    ) -> "File":
        """Create a file reference from filesystem status."""
        registry = default_registry if registry is None else registry
        return cls(path=path, mtime=stat.mtime, parser=registry.get_for_file(path))
