"""
Glossary entries and the identifiers derived from their names.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, computed_field

_PUNCTUATION = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")


def name_to_id(name: str) -> str:
    """
    Convert an entry name to its identifier.

    Lowercases, drops punctuation and joins words with "-", so that
    "API", "api" and " Api. " all map to "api".

    Args:
        name: Display name of the entry

    Returns:
        Normalized identifier ("" for a blank name)
    """
    slug = _PUNCTUATION.sub("", name.strip().lower())
    return _WHITESPACE.sub("-", slug.strip())


class GlossaryEntry(BaseModel):
    """A single glossary term and its description."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Term as displayed")
    description: str = Field(default="", description="Definition text")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return name_to_id(self.name)

    def get_id(self) -> str:
        return self.id

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description
