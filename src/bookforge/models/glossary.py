"""
Glossary of a book: ordered entries tied to the file they were read from.

A Glossary is never modified in place. Every update returns a new Glossary
and leaves the receiver untouched, so values can be shared freely.
"""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bookforge.models.file import File
from bookforge.models.glossary_entry import GlossaryEntry, name_to_id

EntryLike = Union[GlossaryEntry, Mapping[str, Any]]


class Glossary(BaseModel):
    """Ordered mapping of entry id to GlossaryEntry, plus its source file."""

    model_config = ConfigDict(frozen=True)

    # Frozen, but holds a dict: not hashable
    __hash__ = None  # type: ignore[assignment]

    file: File = Field(default_factory=File)
    entries: dict[str, GlossaryEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_entry_ids(self) -> "Glossary":
        """Every key must be the id of its entry."""
        for key, entry in self.entries.items():
            if key != entry.id:
                raise ValueError(f"Entry {entry.name!r} stored under {key!r}, expected {entry.id!r}")
        return self

    def get_file(self) -> File:
        return self.file

    def get_entries(self) -> Mapping[str, GlossaryEntry]:
        """Read-only view of the entries in order."""
        return MappingProxyType(self.entries)

    def get_entry(self, name: str) -> Optional[GlossaryEntry]:
        """
        Return an entry by its name.

        Args:
            name: Entry name in any casing

        Returns:
            GlossaryEntry or None if the glossary has no such entry
        """
        return self.entries.get(name_to_id(name))

    def set_file(self, file: File) -> "Glossary":
        """Return a copy of this glossary linked to another file."""
        return self.model_copy(update={"file": file})

    def add_entry(self, entry: GlossaryEntry) -> "Glossary":
        """
        Add or replace an entry.

        A replaced entry keeps its position; a new entry goes last.

        Args:
            entry: Entry to store under its id

        Returns:
            New Glossary including the entry
        """
        entries = dict(self.entries)
        entries[entry.id] = entry
        return self.model_copy(update={"entries": entries})

    def add_entry_by_name(self, name: str, description: str) -> "Glossary":
        """Add or replace an entry given its name and description."""
        return self.add_entry(GlossaryEntry(name=name, description=description))

    def export_to_dict(self) -> dict[str, dict[str, str]]:
        """Export entries, in order, as plain dictionaries keyed by id."""
        return {key: entry.model_dump() for key, entry in self.entries.items()}

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_to_id(name) in self.entries

    @classmethod
    def create_from_entries(
        cls,
        entries: Iterable[EntryLike],
        file: Optional[File] = None,
    ) -> "Glossary":
        """
        Create a glossary from a list of entries.

        Plain mappings are turned into GlossaryEntry values first. When two
        entries share an id the later one wins, at the position of the first.

        Args:
            entries: GlossaryEntry values or mappings with name/description
            file: Optional file the entries were read from

        Returns:
            New Glossary
        """
        result: dict[str, GlossaryEntry] = {}
        for entry in entries:
            if not isinstance(entry, GlossaryEntry):
                entry = GlossaryEntry.model_validate(entry)
            result[entry.id] = entry

        return cls(file=file or File(), entries=result)
