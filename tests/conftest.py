"""Shared test fixtures for the relnotes test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from relnotes.models import Entry, Header, ReleaseSet, Version

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_entry(type: str | None = "Fix", subject: str = "fix a bug", text: str = "") -> Entry:
    """Build an Entry with compact arguments."""
    return Entry(header=Header(type=type, subject=subject), text=text)


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def full_scenario() -> ReleaseSet:
    """One version with a typed entry and an untyped entry carrying a body."""
    return ReleaseSet(
        versions=[
            Version(
                version="1.0.0",
                entries=[
                    make_entry(type="Fix", subject="fix A", text=""),
                    make_entry(type="", subject="misc B", text="detail"),
                ],
            )
        ]
    )


@pytest.fixture()
def sample_release_set() -> ReleaseSet:
    """Three unordered versions, mixed types, and a suffix."""
    return ReleaseSet(
        versions=[
            Version(
                version="1.0.0",
                entries=[make_entry(type="Feature", subject="initial release")],
            ),
            Version(
                version="2.1.0",
                entries=[
                    make_entry(type="Feature", subject="add export"),
                    make_entry(type="Fix", subject="fix crash on empty input"),
                    make_entry(type="Feature", subject="add import", text="Reads CSV.\nReads TSV."),
                ],
            ),
            Version(
                version="1.2.0",
                entries=[
                    make_entry(type=None, subject="tidy docs"),
                    make_entry(type="Fix", subject="fix typo"),
                ],
            ),
        ],
        suffix="Thanks for reading\n",
    )


# ---------------------------------------------------------------------------
# File fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def release_file(tmp_path: Path, sample_release_set: ReleaseSet) -> Path:
    """Write *sample_release_set* as JSON and return its path."""
    path = tmp_path / "releases.json"
    path.write_text(
        json.dumps(sample_release_set.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
    return path
