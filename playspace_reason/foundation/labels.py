"""Label normalisation helpers shared by every pipeline stage.

Detector labels arrive as comma-separated synonym lists such as
``"studio couch, day bed"``.  Every stage only looks at the first
segment, lower-cased, with whitespace collapsed.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional, TypeVar

_WHITESPACE = re.compile(r"\s+")

T = TypeVar("T")


def normalize_label(label: str) -> str:
    """First comma segment, stripped, lower-cased, whitespace collapsed."""
    first = label.split(",")[0].strip().lower()
    return _WHITESPACE.sub(" ", first)


def compact_key(label: str) -> str:
    """Normalised label with spaces, underscores and hyphens removed."""
    return re.sub(r"[\s_\-]+", "", normalize_label(label))


def contains_any(normalized: str, keywords: Iterable[str]) -> bool:
    """True if any keyword is a substring of *normalized*."""
    return any(kw in normalized for kw in keywords)


def _squash(keyword: str) -> str:
    return re.sub(r"[\s_\-]+", "", keyword.lower())


def overlaps_any(label: str, keywords: Iterable[str]) -> bool:
    """Two-way substring match on compact keys.

    Matches when a keyword appears inside the label, or when the label
    (three characters or longer) appears inside a keyword, which covers
    truncated detector labels.
    """
    key = compact_key(label)
    if not key:
        return False
    squashed = [_squash(kw) for kw in keywords]
    if any(k in key for k in squashed):
        return True
    return len(key) >= 3 and any(key in k for k in squashed)


def first_match(label: str, table: Mapping[str, T]) -> Optional[T]:
    """Value of the first table key matching *label*, or None.

    Keys contained in the label are tried first, in table order; the
    reverse direction is only a fallback, as in ``overlaps_any``.
    """
    key = compact_key(label)
    if not key:
        return None
    for k, value in table.items():
        if _squash(k) in key:
            return value
    if len(key) >= 3:
        for k, value in table.items():
            if key in _squash(k):
                return value
    return None
