"""Pydantic v2 models for release metadata consumed by the changelog renderer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Label for entries whose header carries no type.
DEFAULT_TYPE = "Misc"


class Header(BaseModel):
    """Category label and one-line summary of a single change."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    subject: str


class Entry(BaseModel):
    """One recorded change: a header plus an optional multi-line body."""

    model_config = ConfigDict(frozen=True)

    header: Header
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def text_none_is_empty(cls, v: object) -> object:
        """Treat a missing body as an empty one."""
        if v is None:
            return ""
        return v


class Version(BaseModel):
    """A named release holding an ordered sequence of entries."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(
        ...,
        description="Dot-separated release identifier, e.g. 1.2.0.",
    )
    entries: list[Entry] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def version_must_be_orderable(cls, v: str) -> str:
        """Reject identifiers that cannot take part in release ordering."""
        if not v:
            raise ValueError("Version identifier must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Version identifier must not contain whitespace, got {v!r}")
        if any(not part for part in v.split(".")):
            raise ValueError(
                f"Version identifier must not have empty components, got {v!r}"
            )
        return v


class ReleaseSet(BaseModel):
    """Full input to a single render: all versions plus an optional suffix."""

    model_config = ConfigDict(frozen=True)

    versions: list[Version] = Field(default_factory=list)
    suffix: str | None = None


class TypeGroup(BaseModel):
    """Entries of one version sharing a type label, derived during rendering."""

    model_config = ConfigDict(frozen=True)

    label: str
    entries: list[Entry] = Field(default_factory=list)
