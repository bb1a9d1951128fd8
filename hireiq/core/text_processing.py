from __future__ import annotations

import re
from typing import Iterable, List

# NOTE: shared line/term helpers for the critique checks.
# Checks should depend on this module rather than re-splitting text themselves.

BULLET_GLYPHS = ("•", "-", "*")

# Bullet at column 0 of a raw line (no leading indentation allowed)
_BULLET_AT_LINE_START_RE = re.compile(r"^[•\-*]", re.MULTILINE)


def split_lines(text: str) -> List[str]:
    """Lines on '\\n' only; '\\r' stays attached and is removed by strip()."""
    if not text:
        return []
    return text.split("\n")


def non_blank_lines(text: str) -> List[str]:
    return [line for line in split_lines(text) if line.strip()]


def has_bullet_at_line_start(text: str) -> bool:
    return bool(_BULLET_AT_LINE_START_RE.search(text or ""))


def bullet_lines(text: str) -> List[str]:
    """Stripped lines that open with a bullet glyph (indented bullets included)."""
    out: List[str] = []
    for line in split_lines(text):
        stripped = line.strip()
        if stripped.startswith(BULLET_GLYPHS):
            out.append(stripped)
    return out


def find_terms(text: str, terms: Iterable[str]) -> List[str]:
    """
    Terms occurring anywhere in text, case-insensitively, in the order given.
    Plain substring search: "used" also fires inside "focused".
    """
    lowered = (text or "").lower()
    return [t for t in terms if t.lower() in lowered]
