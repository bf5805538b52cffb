"""Reads release metadata from JSON documents.

The expected layout mirrors :class:`~relnotes.models.ReleaseSet`::

    {
      "versions": [
        {"version": "1.0.0",
         "entries": [{"header": {"type": "Fix", "subject": "..."}, "text": ""}]}
      ],
      "suffix": "optional trailing notes"
    }
"""

from __future__ import annotations

import logging
from pathlib import Path

from relnotes.models import ReleaseSet

logger = logging.getLogger(__name__)


def parse_release_set(raw: str) -> ReleaseSet:
    """Parse JSON text into a ReleaseSet.

    Raises:
        pydantic.ValidationError: If the JSON is malformed or does not match
            the schema, including version identifiers that cannot be ordered.
    """
    return ReleaseSet.model_validate_json(raw)


def load_release_set(path: str | Path) -> ReleaseSet:
    """Read and parse a release metadata file.

    Args:
        path: Location of the JSON document.

    Returns:
        The validated ReleaseSet.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the content does not match the schema.
    """
    source = Path(path)
    logger.debug("Loading release metadata from %s", source)
    raw = source.read_text(encoding="utf-8")
    release_set = parse_release_set(raw)
    logger.debug("Loaded %d version(s)", len(release_set.versions))
    return release_set
