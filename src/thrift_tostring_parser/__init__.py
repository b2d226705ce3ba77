from .converter import (
    ConverterConfig,
    MalformedSpanError,
    Record,
    Shape,
    SourceIOError,
    ThriftParserError,
    ThriftStringConverter,
    TooDeeplyNestedError,
    UsageError,
    classify,
    convert,
    convert_to_model,
)
from .document import dump_json, parse_thrift_to_json
from .extractor import find_record_span, require_record_span
from .output_parser import ThriftStringOutputParser
from .scanner import ScanEvent, ScanState, find_balanced_span, split_on_first_separator, split_top_level

__all__ = [
    "ConverterConfig",
    "MalformedSpanError",
    "Record",
    "Shape",
    "SourceIOError",
    "ThriftParserError",
    "ThriftStringConverter",
    "TooDeeplyNestedError",
    "UsageError",
    "classify",
    "convert",
    "convert_to_model",
    "dump_json",
    "parse_thrift_to_json",
    "find_record_span",
    "require_record_span",
    "ThriftStringOutputParser",
    "ScanEvent",
    "ScanState",
    "find_balanced_span",
    "split_on_first_separator",
    "split_top_level",
]
