"""
Contracts for the collaborators bookforge consumes.

The build pipeline provides the content filesystem and the book. Code in
this package only relies on the methods below, so any object with the same
methods can be passed in.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Optional, Union

from bookforge.models.file import FileStat


class ContentFS(ABC):
    """Read-only view of a book's content files."""

    @abstractmethod
    async def find_file(self, dirname: str, filename: str) -> Optional[str]:
        """Return the path of `filename` inside `dirname`, or None if absent.

        Overlay and case-folding rules are up to the implementation.
        """
        pass

    @abstractmethod
    async def stat_file(self, path: str) -> FileStat:
        """Fetch status metadata for an existing file."""
        pass

    @abstractmethod
    async def read_as_string(self, path: str, encoding: str = "utf-8") -> str:
        """Read a file's content as text."""
        pass


class Book(ABC):
    """A book being built."""

    @abstractmethod
    def get_content_fs(self) -> ContentFS:
        """Get the filesystem holding the book's content."""
        pass

    @abstractmethod
    def is_content_file_ignored(self, path: str) -> Union[bool, Awaitable[bool]]:
        """Whether a content file is excluded from the build."""
        pass
