# -*- coding: utf-8 -*-
"""Delimiter-aware scanning primitives.

All bracket counting and quote tracking lives here. The splitter, the
key/value separator search and the balanced-span finder walk the text
through the same ``ScanState`` so they never disagree about what is
"top level".
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

OPENERS = "([{"
CLOSERS = ")]}"
QUOTES = "\"'"
ESCAPE_CHAR = "\\"


class ScanEvent(Enum):
    ESCAPE = "escape"  # backslash that arms the escape flag
    QUOTE = "quote"  # opens or closes a quoted run
    OPEN = "open"
    CLOSE = "close"
    QUOTED = "quoted"  # any other character inside quotes
    PLAIN = "plain"  # any other character outside quotes


class ScanState:
    """Depth counter + quote/escape flags, advanced one character at a time.

    By default any unescaped ``"`` or ``'`` toggles the quoted state. With
    ``match_quotes`` a quoted run only ends on the character that opened it,
    so ``"it's"`` stays a single string.
    """

    __slots__ = ("depth", "quote", "escape", "match_quotes")

    def __init__(self, match_quotes: bool = False) -> None:
        self.depth = 0
        self.quote: Optional[str] = None
        self.escape = False
        self.match_quotes = match_quotes

    @property
    def in_quotes(self) -> bool:
        return self.quote is not None

    @property
    def top_level(self) -> bool:
        return self.depth == 0 and self.quote is None

    def feed(self, char: str) -> ScanEvent:
        if self.escape:
            # escaped character never toggles quotes; brackets still count
            self.escape = False
            if self.quote is not None:
                return ScanEvent.QUOTED
            return self._bracket(char)

        if char == ESCAPE_CHAR:
            self.escape = True
            return ScanEvent.ESCAPE

        if char in QUOTES:
            if self.quote is None:
                self.quote = char
                return ScanEvent.QUOTE
            if self.quote == char or not self.match_quotes:
                self.quote = None
                return ScanEvent.QUOTE
            return ScanEvent.QUOTED

        if self.quote is not None:
            return ScanEvent.QUOTED
        return self._bracket(char)

    def _bracket(self, char: str) -> ScanEvent:
        if char in OPENERS:
            self.depth += 1
            return ScanEvent.OPEN
        if char in CLOSERS:
            self.depth -= 1
            return ScanEvent.CLOSE
        return ScanEvent.PLAIN


def iter_scan(
    text: str, start: int = 0, match_quotes: bool = False
) -> Iterator[Tuple[int, str, ScanEvent, ScanState]]:
    """Yield ``(index, char, event, state)`` for ``text[start:]``.

    ``state`` is the live scanner, already advanced past ``char``.
    """
    state = ScanState(match_quotes)
    for i in range(start, len(text)):
        ch = text[i]
        yield i, ch, state.feed(ch), state


def split_top_level(text: str, delimiter: str = ",", match_quotes: bool = False) -> List[str]:
    """Split on depth-zero, unquoted ``delimiter`` characters.

    Every piece is stripped. A trailing whitespace-only piece is dropped
    (``"a, b,"`` -> ``["a", "b"]``) but interior empties are kept
    (``"a,,b"`` -> ``["a", "", "b"]``).
    """
    parts: List[str] = []
    begin = 0
    for i, ch, event, state in iter_scan(text, match_quotes=match_quotes):
        if event is ScanEvent.PLAIN and ch == delimiter and state.depth == 0:
            parts.append(text[begin:i].strip())
            begin = i + 1
    tail = text[begin:].strip()
    if tail:
        parts.append(tail)
    return parts


def find_top_level(text: str, chars: str, match_quotes: bool = False) -> int:
    """Index of the first depth-zero, unquoted character in ``chars`` or -1."""
    for i, ch, event, state in iter_scan(text, match_quotes=match_quotes):
        if event is ScanEvent.PLAIN and ch in chars and state.depth == 0:
            return i
    return -1


def has_top_level(text: str, chars: str, match_quotes: bool = False) -> bool:
    return find_top_level(text, chars, match_quotes) != -1


def split_on_first_separator(
    text: str, separator: str = ":", match_quotes: bool = False
) -> Tuple[str, str]:
    """Split at the first top-level occurrence of any char in ``separator``.

    Returns ``(text, "")`` when no such separator exists.
    """
    idx = find_top_level(text, separator, match_quotes)
    if idx == -1:
        return text, ""
    return text[:idx].strip(), text[idx + 1:].strip()


def find_balanced_span(text: str, start: int = 0, match_quotes: bool = False) -> Optional[Tuple[int, int]]:
    """Find where the first delimiter opened at or after ``start`` closes.

    Returns ``(start, end)`` with ``end`` exclusive, or ``None`` when the
    depth never comes back to zero (truncated or malformed input).
    """
    opened = False
    for i, _ch, event, state in iter_scan(text, start, match_quotes):
        if event is ScanEvent.OPEN:
            opened = True
        elif event is ScanEvent.CLOSE and opened and state.depth == 0:
            return start, i + 1
    return None
