# -*- coding: utf-8 -*-
"""Locate the first complete ``Identifier(...)`` record inside loose text.

Used by front ends that hand over "everything from the cursor to the end of
the line" instead of an exact selection.
"""
from __future__ import annotations

import re
from typing import Optional

from .converter import MalformedSpanError
from .scanner import find_balanced_span

_RECORD_OPEN_RE = re.compile(r"[A-Za-z0-9_]+\(")

NO_MATCH_MESSAGE = "selected text does not match the expected record format"


def find_record_span(text: str, match_quotes: bool = False) -> Optional[str]:
    """Return the first balanced record (identifier included) or ``None``."""
    m = _RECORD_OPEN_RE.search(text or "")
    if not m:
        return None
    span = find_balanced_span(text, m.start(), match_quotes)
    if span is None:
        return None
    start, end = span
    return text[start:end]


def require_record_span(text: str, match_quotes: bool = False) -> str:
    span = find_record_span(text, match_quotes)
    if span is None:
        raise MalformedSpanError(NO_MATCH_MESSAGE)
    return span
