"""Text Normalization — deterministic whitespace and line-break rewriting.

Invariants:
    - Pure and total: never raises for a validly encoded str
    - Line structure survives: LF is the only line separator in the output
    - No blank lines, no leading/trailing whitespace on any line or on the whole value
    - Idempotent: normalize_text(normalize_text(s)) == normalize_text(s)

Design Decisions:
    - Callers MUST check encoding first (guard_content.is_valid_encoding);
      normalizing undecodable input is undefined (ADR: validate-then-transform)
"""

import re

_LINE_BREAKS = re.compile(r"\r\n|\r")
_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_BLANK_LINE_RUN = re.compile(r"\n\s*\n")


def normalize_text(raw: str) -> str:
    """Normalize free text while preserving its line structure.

    Steps, in order:
        1. CRLF and lone CR become LF
        2. whole value is trimmed
        3. runs of non-LF whitespace collapse to one space
        4. runs of blank lines collapse to one LF
        5. every line is trimmed
    """
    text = _LINE_BREAKS.sub("\n", raw)
    text = text.strip()
    text = _INLINE_WHITESPACE.sub(" ", text)
    text = _BLANK_LINE_RUN.sub("\n", text)
    return "\n".join(line.strip() for line in text.split("\n"))
