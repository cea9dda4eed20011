"""
Find the file backing a logical document name.

A name such as "GLOSSARY" or "docs/intro.md" is resolved by trying every
extension the parser registry supports, in priority order, and keeping the
first file that exists and is not ignored by the book.
"""

import inspect
import posixpath
from typing import Any, Optional, Sequence

from bookforge.config import get_settings
from bookforge.core.exceptions import ProbeError
from bookforge.core.logging import get_logger
from bookforge.models.file import File, FileStat
from bookforge.parsers.registry import ParserRegistry, default_registry

logger = get_logger(__name__)


def split_logical_name(filename: str) -> tuple[str, str]:
    """
    Split a logical file name into its directory and extensionless base name.

    Args:
        filename: POSIX-style path, with or without an extension

    Returns:
        Tuple of (basedir, basename); basedir is "." for a bare name
    """
    basedir, name = posixpath.split(filename)
    basename, _ = posixpath.splitext(name)
    return basedir or ".", basename


class ParsableFileResolver:
    """Resolves logical document names to parsable files of a book."""

    def __init__(
        self,
        registry: Optional[ParserRegistry] = None,
        extensions: Optional[Sequence[str]] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize resolver.

        Args:
            registry: Parser registry used for the extension list and for
                binding parsers to found files. Defaults to the built-in one.
            extensions: Explicit candidate extensions, overriding the
                registry's priority list.
            strict: Raise ProbeError on collaborator failures instead of
                skipping the candidate. Defaults to the resolver settings.
        """
        self.registry = default_registry if registry is None else registry
        self.extensions = tuple(extensions) if extensions is not None else self.registry.file_extensions
        self.strict = get_settings().resolver.strict if strict is None else strict

    async def resolve(self, book: Any, filename: str) -> Optional[tuple[File, FileStat]]:
        """
        Find the first existing, non-ignored file for a logical name.

        Candidates are probed one after another so that an earlier extension
        always wins, whatever the latency of each probe.

        Args:
            book: Object with get_content_fs() and is_content_file_ignored()
            filename: Logical file name; its extension is discarded

        Returns:
            Tuple of (File, FileStat) or None if no candidate matched

        Raises:
            ProbeError: In strict mode, when a probe fails.
        """
        fs = book.get_content_fs()
        basedir, basename = split_logical_name(filename)

        for ext in self.extensions:
            candidate = basename + ext
            try:
                found = await self._probe(book, fs, basedir, candidate)
            except Exception as e:
                if self.strict:
                    raise ProbeError(
                        f"Probe failed for {candidate} in {basedir}: {e}",
                        filename=filename,
                        candidate=candidate,
                    ) from e
                logger.warning(
                    f"Skipping {candidate} after probe error: {e}",
                    extra={"logical_name": filename, "candidate": candidate, "error_type": type(e).__name__},
                )
                continue

            if found is not None:
                logger.debug(
                    f"Resolved {filename} to {found[0].path}",
                    extra={"logical_name": filename, "candidate": candidate},
                )
                return found

        logger.debug(f"No parsable file found for {filename}", extra={"logical_name": filename})
        return None

    async def _probe(
        self, book: Any, fs: Any, basedir: str, candidate: str
    ) -> Optional[tuple[File, FileStat]]:
        path = await fs.find_file(basedir, candidate)
        if not path:
            return None

        ignored = book.is_content_file_ignored(path)
        if inspect.isawaitable(ignored):
            ignored = await ignored
        if ignored:
            logger.debug(f"Ignoring {path}", extra={"candidate": candidate})
            return None

        stat = await fs.stat_file(path)
        return File.create_from_stat(path, stat, self.registry), stat


async def find_parsable_file(
    book: Any,
    filename: str,
    *,
    registry: Optional[ParserRegistry] = None,
    strict: Optional[bool] = None,
) -> Optional[tuple[File, FileStat]]:
    """
    Find a parsable file (Markdown or AsciiDoc by default) in a book.

    Args:
        book: Object with get_content_fs() and is_content_file_ignored()
        filename: Logical file name; its extension is discarded
        registry: Parser registry to take extensions from
        strict: Raise ProbeError on collaborator failures

    Returns:
        Tuple of (File, FileStat) or None
    """
    resolver = ParsableFileResolver(registry=registry, strict=strict)
    return await resolver.resolve(book, filename)
