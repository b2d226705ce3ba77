# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

try:
    from pydantic import BaseModel
except Exception as e:  # pragma: no cover
    raise ImportError("pydantic(v2) is required. Install: pip install pydantic>=2") from e

from .scanner import find_balanced_span, find_top_level, split_top_level

logger = logging.getLogger(__name__)

TYPE_FIELD = "_type"


# ============================================================
# Errors
# ============================================================
class ThriftParserError(ValueError):
    pass


class UsageError(ThriftParserError):
    """No input source was named."""


class SourceIOError(ThriftParserError):
    """Input could not be read or output could not be written."""


class MalformedSpanError(ThriftParserError):
    """No complete ``Identifier(...)`` record could be located."""


class TooDeeplyNestedError(ThriftParserError):
    def __init__(self, max_depth: int):
        super().__init__(f"Nesting deeper than {max_depth} levels")
        self.max_depth = max_depth


# ============================================================
# Config
# ============================================================
@dataclass(frozen=True)
class ConverterConfig:
    include_type: bool = True  # records get a leading "_type" field
    max_depth: int = 256  # list/map/record nesting levels before TooDeeplyNestedError
    key_separators: str = ":="  # record fields render as name=value or name: value
    match_quotes: bool = False  # a quoted run ends only on its opening quote char


DEFAULT_CONFIG = ConverterConfig()


# ============================================================
# Output values
# ============================================================
class Record(dict):
    """Field mapping of a named record; ``type_name`` survives include_type=False."""

    __slots__ = ("type_name",)

    def __init__(self, type_name: str, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.type_name = type_name

    def __repr__(self) -> str:
        return f"Record({self.type_name!r}, {dict.__repr__(self)})"

    def __reduce__(self):
        return (self.__class__, (self.type_name, dict(self)))


Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any], Record]


# ============================================================
# Shape classifier
# ============================================================
class Shape(Enum):
    NULL = "null"
    PRIMITIVE = "primitive"
    LIST = "list"
    MAP = "map"
    RECORD = "record"
    STRING = "string"  # nothing matched; text is kept verbatim


_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+\.\d+")
_RECORD_RE = re.compile(r"([A-Za-z0-9_]+)\((.*)\)", re.DOTALL)
_NULL_LITERALS = ("null", "None")


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] in "\"'" and text[0] == text[-1]


def _is_primitive(text: str) -> bool:
    if _INT_RE.fullmatch(text) or _FLOAT_RE.fullmatch(text):
        return True
    if text.lower() in ("true", "false"):
        return True
    return _is_quoted(text)


def _closes_at_end(text: str, match_quotes: bool = False) -> bool:
    span = find_balanced_span(text, 0, match_quotes)
    return span is not None and span[1] == len(text)


def classify(text: str, match_quotes: bool = False) -> Shape:
    """Decide which shape a trimmed span has. Order of checks matters."""
    if text in _NULL_LITERALS:
        return Shape.NULL
    if _is_primitive(text):
        return Shape.PRIMITIVE
    if text.startswith("[") and text.endswith("]") and _closes_at_end(text, match_quotes):
        return Shape.LIST
    if text.startswith("{") and text.endswith("}") and _closes_at_end(text, match_quotes):
        return Shape.MAP
    if _RECORD_RE.fullmatch(text) and _closes_at_end(text, match_quotes):
        return Shape.RECORD
    return Shape.STRING


def parse_primitive(text: str) -> Union[bool, int, float, str]:
    if _INT_RE.fullmatch(text):
        return int(text, 10)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    low = text.lower()
    if low in ("true", "false"):
        return low == "true"
    if _is_quoted(text):
        # interior is kept verbatim, backslashes included
        return text[1:-1]
    return text


# ============================================================
# Converter
# ============================================================
class ThriftStringConverter:
    """Recursive converter from debug-string text to plain Python values."""

    def __init__(self, cfg: ConverterConfig = DEFAULT_CONFIG):
        self.cfg = cfg

    def convert(self, text: str) -> Value:
        return self._convert((text or "").strip(), depth=0)

    # ---------------- Dispatch ----------------
    def _convert(self, text: str, depth: int) -> Value:
        shape = classify(text, self.cfg.match_quotes)
        if shape is Shape.NULL:
            return None
        if shape is Shape.PRIMITIVE:
            return parse_primitive(text)
        if shape is Shape.STRING:
            return text

        if depth >= self.cfg.max_depth:
            logger.debug("Depth guard tripped at %d levels", depth)
            raise TooDeeplyNestedError(self.cfg.max_depth)

        if shape is Shape.LIST:
            return self._convert_list(text, depth + 1)
        if shape is Shape.MAP:
            return self._convert_map(text, depth + 1)
        return self._convert_record(text, depth + 1)

    # ---------------- Composites ----------------
    def _convert_list(self, text: str, depth: int) -> List[Value]:
        if text == "[]":
            return []
        items: List[Value] = []
        for element in split_top_level(text[1:-1], match_quotes=self.cfg.match_quotes):
            items.append(self._convert(element, depth))
        return items

    def _convert_map(self, text: str, depth: int) -> Dict[str, Value]:
        if text == "{}":
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug("JSON fast path missed (%s), parsing map manually", e.msg)
        except RecursionError as e:
            logger.debug("JSON fast path ran out of stack at depth %d", depth)
            raise TooDeeplyNestedError(self.cfg.max_depth) from e

        out: Dict[str, Value] = {}
        for key, raw in self._pairs(text[1:-1]):
            if _is_quoted(key):
                key = key[1:-1]
            out[key] = self._convert(raw, depth)
        return out

    def _convert_record(self, text: str, depth: int) -> Record:
        m = _RECORD_RE.fullmatch(text)
        type_name, body = m.group(1), m.group(2)

        rec = Record(type_name)
        if self.cfg.include_type:
            rec[TYPE_FIELD] = type_name
        for key, raw in self._pairs(body):
            rec[key] = self._convert(raw, depth)
        return rec

    def _pairs(self, body: str):
        """Yield ``(key, raw_value)`` for elements holding a top-level separator."""
        seps = self.cfg.key_separators
        for element in split_top_level(body, match_quotes=self.cfg.match_quotes):
            idx = find_top_level(element, seps, self.cfg.match_quotes)
            if idx == -1:
                # no separator: skipped, not an error
                continue
            yield element[:idx].strip(), element[idx + 1:].strip()


# ============================================================
# Public helpers
# ============================================================
def convert(text: str, include_type: bool = True, *, config: Optional[ConverterConfig] = None) -> Value:
    """Convert a debug-string span to plain Python values.

    Never raises for malformed structure: anything that cannot be classified
    comes back as the original text. Only ``TooDeeplyNestedError`` escapes.
    An explicit ``config`` overrides ``include_type``.
    """
    cfg = config or ConverterConfig(include_type=include_type)
    return ThriftStringConverter(cfg).convert(text)


M = TypeVar("M", bound=BaseModel)


def convert_to_model(text: str, model: Type[M], *, config: Optional[ConverterConfig] = None) -> M:
    """Convert and validate into a pydantic model (``_type`` is left out by default)."""
    cfg = config or ConverterConfig(include_type=False)
    return model.model_validate(ThriftStringConverter(cfg).convert(text))
