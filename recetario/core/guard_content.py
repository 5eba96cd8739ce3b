"""Content Guard — encoding, markup-injection and control-character checks.

Invariants:
    - All functions are PURE predicates: no IO, no side effects, never raise
    - Markup detection is case-insensitive; one matching pattern is enough to flag
    - Tab (U+0009) and line feed (U+000A) are never control-char violations:
      they carry list structure in multi-line fields
    - "&" alone is not markup

Design Decisions:
    - Pattern table over one giant regex: each injection form is readable and testable on its own
    - Patterns compiled once at import: safe for concurrent read-only use
"""

import re

_MARKUP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<\s*/?\s*[a-z0-9-]+[^>]*>", re.IGNORECASE),  # <b>, </ div>, < img src="">
    re.compile(r"<!--"),                                      # comments
    re.compile(r"<!\[CDATA\[", re.IGNORECASE),                # CDATA sections
    re.compile(r"<!DOCTYPE", re.IGNORECASE),                  # DOCTYPE declarations
    re.compile(r"<\?"),                                       # processing instructions
)

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def is_valid_encoding(value: str | bytes) -> bool:
    """True if value is well-formed UTF-8 text.

    bytes must decode strictly; str must not carry lone surrogates
    (e.g. from a surrogateescape decode upstream).
    """
    try:
        if isinstance(value, bytes):
            value.decode("utf-8")
        else:
            value.encode("utf-8")
    except UnicodeError:
        return False
    return True


def contains_markup(value: str) -> bool:
    """True if value contains a tag, comment, CDATA, DOCTYPE or processing instruction."""
    return any(pattern.search(value) for pattern in _MARKUP_PATTERNS)


def contains_control_chars(value: str) -> bool:
    """True if value contains C0 controls (except TAB, LF and CR) or DEL."""
    return _CONTROL_CHARS.search(value) is not None
