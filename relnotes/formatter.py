"""Changelog rendering for release sets.

Turns a :class:`~relnotes.models.ReleaseSet` into a Markdown document: one
``##`` section per version (newest first), one ``###`` subsection per entry
type in first-seen order, and a bullet per entry with its body indented
beneath it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from relnotes.models import DEFAULT_TYPE, Entry, ReleaseSet, TypeGroup, Version
from relnotes.ordering import sort_versions

logger = logging.getLogger(__name__)

# Width of the body indentation under an entry bullet.
INDENT_WIDTH = 2


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_by_header(
    entries: Sequence[Entry],
    default: str = DEFAULT_TYPE,
) -> list[TypeGroup]:
    """Partition *entries* into type groups.

    Each entry lands in the group named by its ``header.type``, or in
    *default* when the type is empty or missing.  Groups are returned in the
    order their label was first seen, and entries keep their relative order
    inside a group.
    """
    # Ordered labels plus a label -> bucket index; iteration never depends on
    # dict ordering.
    labels: list[str] = []
    buckets: dict[str, list[Entry]] = {}

    for entry in entries:
        label = entry.header.type or default
        bucket = buckets.get(label)
        if bucket is None:
            bucket = []
            buckets[label] = bucket
            labels.append(label)
        bucket.append(entry)

    return [TypeGroup(label=label, entries=buckets[label]) for label in labels]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def indent(text: str, width: int = INDENT_WIDTH) -> str:
    """Shift every line of *text* right by *width* spaces.

    Blank lines become pure whitespace of the indent width so nested blocks
    keep their structure.  Lines break on ``\\n`` (or ``\\r\\n``) only; other
    Unicode separators stay inside their line.  A single trailing newline
    does not produce an extra line.
    """
    body = text.replace("\r\n", "\n").removesuffix("\n")
    if not body:
        return ""
    pad = " " * width
    return "\n".join(f"{pad}{line}" for line in body.split("\n"))


def render_entry(entry: Entry) -> list[str]:
    """Return the bullet line and indented body lines for one entry."""
    lines = [f"- {entry.header.subject}"]
    body = indent(entry.text)
    if body:
        lines.extend(body.split("\n"))
    return lines


def render_version(version: Version) -> str:
    """Render a single version section, ending with a blank line."""
    lines: list[str] = [f"## {version.version}", ""]

    groups = group_by_header(version.entries)
    logger.debug(
        "Version %s: %d entries in %d groups",
        version.version,
        len(version.entries),
        len(groups),
    )

    for group in groups:
        lines.append(f"### {group.label}")
        lines.append("")
        for entry in group.entries:
            lines.extend(render_entry(entry))
        lines.append("")  # blank line after each group

    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render(release_set: ReleaseSet) -> str:
    """Render *release_set* into a changelog document.

    Parameters
    ----------
    release_set:
        Versions and optional suffix to render.  Not modified.

    Returns
    -------
    str
        Version sections newest first, followed by the suffix verbatim when
        it is present and non-empty.  An empty release set without a suffix
        renders to the empty string.
    """
    parts: list[str] = [
        render_version(version) for version in sort_versions(release_set.versions)
    ]

    if release_set.suffix:
        parts.append(release_set.suffix)

    return "".join(parts)
