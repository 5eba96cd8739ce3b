"""Placeholder Detection — rejects values that are non-empty but meaningless.

Invariants:
    - Comparison is whitespace-, line-break- and case-insensitive
    - Only exact matches count: "n/a harina" is not a placeholder
"""

import re
from collections.abc import Collection

_ANY_WHITESPACE = re.compile(r"\s+")


def placeholder_key(value: str) -> str:
    """Comparison key: whitespace runs to one space, trimmed, lower-cased."""
    return _ANY_WHITESPACE.sub(" ", value).strip().lower()


def is_placeholder(normalized: str, denylist: Collection[str]) -> bool:
    return placeholder_key(normalized) in denylist
