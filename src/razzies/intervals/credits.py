"""Producer credit string parsing.

A credit string lists one or more producers separated by commas
and/or the word "and", e.g. ``"Allan Carr, Jerry Weintraub and Bo Derek"``.
"""

from __future__ import annotations

import re

# "and" as a standalone word, any case
_AND_SEPARATOR = re.compile(r"\s+and\s+", re.IGNORECASE)


def parse_producers(raw: str | None, dedupe: bool = False) -> list[str]:
    """Split a producer credit string into trimmed producer names.

    Never raises: missing or blank input yields an empty list.

    Args:
        raw: Free-text credit field (may be None).
        dedupe: Drop repeated names within this credit, keeping the
            first occurrence. Off by default, so a name credited twice
            is returned twice.

    Returns:
        Producer names in credit order.

    Example:
        >>> parse_producers("A, B and C")
        ['A', 'B', 'C']
    """
    if raw is None or not raw.strip():
        return []

    normalized = _AND_SEPARATOR.sub(",", raw)
    names = [token.strip() for token in normalized.split(",")]
    names = [name for name in names if name]

    if dedupe:
        names = list(dict.fromkeys(names))

    return names
