"""
Locate a book's structure files and load its glossary.
"""

from typing import Any, Optional

from bookforge.config import Settings, get_settings
from bookforge.core.exceptions import FileNotParsableError
from bookforge.core.logging import get_logger, log_operation
from bookforge.models.file import File, FileStat
from bookforge.models.glossary import Glossary
from bookforge.parse.find_parsable_file import ParsableFileResolver

logger = get_logger(__name__)


async def lookup_structure_file(
    book: Any,
    kind: str,
    *,
    settings: Optional[Settings] = None,
    resolver: Optional[ParsableFileResolver] = None,
) -> Optional[tuple[File, FileStat]]:
    """
    Find the file for a structure document (readme, summary, glossary, langs).

    The file name comes from the structure settings; any supported markup
    extension is accepted in place of the configured one.

    Raises:
        ValueError: If the kind is not a structure document.
    """
    settings = settings or get_settings()
    filename = settings.structure.filename_for(kind)
    resolver = resolver or ParsableFileResolver(strict=settings.resolver.strict)
    return await resolver.resolve(book, filename)


async def parse_glossary(
    book: Any,
    *,
    settings: Optional[Settings] = None,
    resolver: Optional[ParsableFileResolver] = None,
) -> Optional[Glossary]:
    """
    Load the glossary of a book.

    Args:
        book: Object with get_content_fs() and is_content_file_ignored()
        settings: Settings to read the glossary file name from
        resolver: Resolver to locate the file with

    Returns:
        Glossary bound to its file, or None if the book has no glossary

    Raises:
        FileNotParsableError: If no parser can read the glossary file.
    """
    found = await lookup_structure_file(book, "glossary", settings=settings, resolver=resolver)
    if found is None:
        logger.debug("No glossary file found")
        return None

    file, _ = found
    with log_operation(logger, f"parse_glossary:{file.path}"):
        parser = file.get_parser()
        if parser is None or not parser.supports_glossary:
            raise FileNotParsableError(f"Cannot read glossary from {file.path}", filename=file.path)

        content = await book.get_content_fs().read_as_string(file.path)
        entries = parser.parse_glossary(content)
        glossary = Glossary.create_from_entries(entries, file=file)

    logger.info(f"Loaded {len(glossary)} glossary entries from {file.path}")
    return glossary
