"""
Unit tests for the parser registry and file references.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from bookforge.core.exceptions import FileNotParsableError
from bookforge.models.file import File, FileStat
from bookforge.parsers import registry as parsers
from bookforge.parsers.registry import ASCIIDOC, MARKDOWN, Parser, ParserRegistry


class TestParser:
    """Tests for Parser."""

    def test_extensions_normalized(self):
        parser = Parser(name="rst", extensions=["RST", ".Rest"])
        assert parser.extensions == (".rst", ".rest")

    def test_requires_extensions(self):
        with pytest.raises(ValidationError):
            Parser(name="empty", extensions=())

    def test_glossary_support(self):
        assert not MARKDOWN.supports_glossary
        with pytest.raises(FileNotParsableError) as exc_info:
            MARKDOWN.parse_glossary("")
        assert exc_info.value.operation == "parse_glossary"

        parser = Parser(name="md", extensions=(".md",), glossary_parser=lambda text: [{"name": text}])
        assert parser.supports_glossary
        assert parser.parse_glossary("API") == [{"name": "API"}]


class TestParserRegistry:
    """Tests for ParserRegistry."""

    def test_default_extension_priority(self):
        assert parsers.FILE_EXTENSIONS == (".md", ".markdown", ".mdown", ".adoc", ".asciidoc")

    @pytest.mark.parametrize(
        "ext, expected",
        [
            (".md", MARKDOWN),
            (".MD", MARKDOWN),
            ("markdown", MARKDOWN),
            (".asciidoc", ASCIIDOC),
            (".txt", None),
            ("", None),
        ],
    )
    def test_get_by_ext(self, ext, expected):
        assert parsers.get_by_ext(ext) == expected

    def test_get_for_file(self):
        registry = ParserRegistry([MARKDOWN, ASCIIDOC])
        assert registry.get_for_file("docs/GLOSSARY.adoc") == ASCIIDOC
        assert registry.get_for_file("README") is None

    def test_with_parser_prepends_new(self):
        rst = Parser(name="rst", extensions=(".rst",))
        registry = ParserRegistry([MARKDOWN]).with_parser(rst)

        assert registry.file_extensions[0] == ".rst"
        assert len(registry) == 2

    def test_with_parser_replaces_same_name(self):
        markdown = Parser(name="markdown", extensions=(".md",))
        original = ParserRegistry([MARKDOWN, ASCIIDOC])
        registry = original.with_parser(markdown)

        assert registry.parsers == (markdown, ASCIIDOC)
        assert original.parsers == (MARKDOWN, ASCIIDOC)


class TestFile:
    """Tests for File references."""

    def test_empty_reference(self):
        file = File()
        assert not file.exists()
        assert file.get_extension() == ""
        assert not file.is_parsable()

    def test_create_with_path(self):
        file = File.create_with_path("docs/Intro.MD")
        assert file.exists()
        assert file.get_path() == "docs/Intro.MD"
        assert file.get_extension() == ".md"
        assert file.get_parser() == MARKDOWN
        assert file.get_mtime() is None

    def test_create_from_stat(self):
        mtime = datetime(2024, 5, 1, tzinfo=timezone.utc)
        stat = FileStat(path="GLOSSARY.adoc", size=12, mtime=mtime)

        file = File.create_from_stat("GLOSSARY.adoc", stat)

        assert file.get_mtime() == mtime
        assert file.get_parser() == ASCIIDOC

    def test_unknown_extension_not_parsable(self):
        assert not File.create_with_path("notes.txt").is_parsable()

    def test_empty_registry_binds_no_parser(self):
        empty = ParserRegistry([])
        stat = FileStat(path="a.md", mtime=datetime(2024, 5, 1, tzinfo=timezone.utc))

        assert File.create_with_path("a.md", empty).get_parser() is None
        assert File.create_from_stat("a.md", stat, empty).get_parser() is None

    def test_is_immutable(self):
        file = File.create_with_path("a.md")
        with pytest.raises(ValidationError):
            file.path = "b.md"
