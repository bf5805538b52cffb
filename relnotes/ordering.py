"""Release ordering for version sections.

Identifiers are compared component by component after splitting on ``.``.
Numeric components compare as integers, anything else compares lexically.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from relnotes.models import Version

logger = logging.getLogger(__name__)


def _component_key(part: str) -> tuple[int, int, str]:
    # Numeric components rank above alphanumeric ones in the same position;
    # the raw text breaks ties such as "01" vs "1".
    if part.isdecimal():
        return (1, int(part), part)
    return (0, 0, part)


def version_key(identifier: str) -> tuple[tuple[int, int, str], ...]:
    """Return a sort key giving a total order over version identifiers.

    ``"1.10.0"`` sorts after ``"1.9.0"``, and ``"1.0"`` sorts before
    ``"1.0.0"`` because a prefix compares lower than its extension.
    """
    return tuple(_component_key(part) for part in identifier.split("."))


def sort_versions(versions: Sequence[Version]) -> list[Version]:
    """Return *versions* ordered newest release first.

    The input sequence is left untouched.  Versions with identical
    identifiers may come out in either relative order.
    """
    ascending = sorted(versions, key=lambda v: version_key(v.version))
    ascending.reverse()
    logger.debug("Ordered %d version(s)", len(ascending))
    return ascending
