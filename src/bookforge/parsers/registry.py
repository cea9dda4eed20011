"""
Registry of markup parsers and the file extensions they handle.

The order of parsers, and of extensions within a parser, is the priority
order used when resolving a logical document name to a file.
"""

import posixpath
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

GlossaryParser = Callable[[str], Iterable[Mapping[str, Any]]]


class Parser(BaseModel):
    """A markup parser binding.

    The parsing functions themselves are supplied by the build pipeline;
    the registry only knows which extensions a parser claims.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Parser name")
    extensions: tuple[str, ...] = Field(..., min_length=1, description="Extensions in priority order")
    glossary_parser: Optional[GlossaryParser] = Field(
        default=None, description="Turns glossary file content into entry records"
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v: Any) -> tuple[str, ...]:
        """Lowercase extensions and make sure they start with a dot."""
        if isinstance(v, str):
            v = [v]
        result = []
        for ext in v:
            ext = str(ext).lower()
            if not ext.startswith("."):
                ext = f".{ext}"
            result.append(ext)
        return tuple(result)

    @property
    def supports_glossary(self) -> bool:
        return self.glossary_parser is not None

    def parse_glossary(self, content: str) -> list[Mapping[str, Any]]:
        """Read glossary entry records from file content.

        Raises:
            FileNotParsableError: If this parser cannot read glossaries.
        """
        # Import here to avoid circular imports
        from bookforge.core.exceptions import FileNotParsableError

        if self.glossary_parser is None:
            raise FileNotParsableError(f"Parser {self.name} cannot read glossaries", operation="parse_glossary")
        return list(self.glossary_parser(content))


class ParserRegistry:
    """Ordered, immutable collection of parsers."""

    def __init__(self, parsers: Sequence[Parser]):
        self._parsers: tuple[Parser, ...] = tuple(parsers)

    @property
    def parsers(self) -> tuple[Parser, ...]:
        return self._parsers

    @property
    def file_extensions(self) -> tuple[str, ...]:
        """All supported extensions, in priority order."""
        return tuple(ext for parser in self._parsers for ext in parser.extensions)

    def get_by_ext(self, ext: str) -> Optional[Parser]:
        """
        Find the parser for an extension.

        Args:
            ext: Extension, with or without the leading dot (case-insensitive)

        Returns:
            Parser or None if no parser handles the extension
        """
        ext = ext.lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        for parser in self._parsers:
            if ext in parser.extensions:
                return parser
        return None

    def get_for_file(self, path: str) -> Optional[Parser]:
        """Find the parser for a file path based on its extension."""
        _, ext = posixpath.splitext(path)
        if not ext:
            return None
        return self.get_by_ext(ext)

    def with_parser(self, parser: Parser) -> "ParserRegistry":
        """
        Return a new registry including a parser.

        A parser with the same name is replaced in place; otherwise the new
        parser is added with the highest priority.
        """
        names = [p.name for p in self._parsers]
        if parser.name in names:
            parsers = list(self._parsers)
            parsers[names.index(parser.name)] = parser
            return ParserRegistry(parsers)
        return ParserRegistry((parser, *self._parsers))

    def __len__(self) -> int:
        return len(self._parsers)

    def __repr__(self) -> str:
        return f"ParserRegistry({[p.name for p in self._parsers]!r})"


MARKDOWN = Parser(name="markdown", extensions=(".md", ".markdown", ".mdown"))
ASCIIDOC = Parser(name="asciidoc", extensions=(".adoc", ".asciidoc"))

default_registry = ParserRegistry([MARKDOWN, ASCIIDOC])

FILE_EXTENSIONS = default_registry.file_extensions


def get_by_ext(ext: str) -> Optional[Parser]:
    """Find a parser for an extension in the default registry."""
    return default_registry.get_by_ext(ext)
