"""
Shared fixtures for bookforge tests.
"""

import asyncio
import posixpath
from datetime import datetime, timezone
from typing import Optional

import pytest

from bookforge.config import Settings
from bookforge.core.interfaces import Book, ContentFS
from bookforge.models.file import FileStat


class InMemoryContentFS(ContentFS):
    """Content filesystem backed by a dict of path -> text.

    Records every find_file call and can delay or fail individual lookups.
    """

    def __init__(
        self,
        files: dict[str, str],
        case_insensitive: bool = False,
        delays: Optional[dict[str, float]] = None,
        failures: Optional[dict[str, Exception]] = None,
        stat_failures: Optional[dict[str, Exception]] = None,
    ):
        self.files = dict(files)
        self.case_insensitive = case_insensitive
        self.delays = delays or {}
        self.failures = failures or {}
        self.stat_failures = stat_failures or {}
        self.find_calls: list[str] = []
        self.stat_calls: list[str] = []

    async def find_file(self, dirname: str, filename: str) -> Optional[str]:
        path = posixpath.normpath(posixpath.join(dirname, filename))
        self.find_calls.append(path)

        await asyncio.sleep(self.delays.get(path, 0))
        if path in self.failures:
            raise self.failures[path]

        if path in self.files:
            return path
        if self.case_insensitive:
            for existing in self.files:
                if existing.lower() == path.lower():
                    return existing
        return None

    async def stat_file(self, path: str) -> FileStat:
        self.stat_calls.append(path)
        if path in self.stat_failures:
            raise self.stat_failures[path]
        if path not in self.files:
            raise FileNotFoundError(path)
        return FileStat(
            path=path,
            size=len(self.files[path].encode("utf-8")),
            mtime=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    async def read_as_string(self, path: str, encoding: str = "utf-8") -> str:
        return self.files[path]


class FakeBook(Book):
    """Book with a fixed set of ignored paths."""

    def __init__(self, fs: ContentFS, ignored: Optional[set[str]] = None):
        self.fs = fs
        self.ignored = ignored or set()

    def get_content_fs(self) -> ContentFS:
        return self.fs

    def is_content_file_ignored(self, path: str) -> bool:
        return path in self.ignored


@pytest.fixture
def make_book():
    """Factory for a FakeBook over an in-memory filesystem."""

    def _make(files: dict[str, str], ignored: Optional[set[str]] = None, **fs_options) -> FakeBook:
        return FakeBook(InMemoryContentFS(files, **fs_options), ignored=ignored)

    return _make


@pytest.fixture
def settings():
    """Default settings isolated from the environment."""
    return Settings(_env_file=None)
