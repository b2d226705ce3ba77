# -*- coding: utf-8 -*-
"""Text/file entry point around the converter."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .converter import ConverterConfig, SourceIOError, ThriftStringConverter, UsageError, Value
from .security import safe_raw_preview

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dump_json(value: Any) -> str:
    """Pretty JSON, 2-space indent, non-ASCII left as is."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def read_source(input_text: Optional[str] = None, input_file: Optional[PathLike] = None) -> str:
    if input_text:
        return input_text.strip()
    if input_file:
        logger.info("Reading %s", input_file)
        try:
            return Path(input_file).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(f"Cannot read {input_file}: {e}") from e
    raise UsageError("Either input_text or input_file must be provided")


def write_json(value: Any, output_file: PathLike) -> None:
    try:
        Path(output_file).write_text(dump_json(value), encoding="utf-8")
    except OSError as e:
        raise SourceIOError(f"Cannot write {output_file}: {e}") from e
    logger.info("Conversion finished, written to %s", output_file)


def parse_thrift_to_json(
    input_text: Optional[str] = None,
    input_file: Optional[PathLike] = None,
    output_file: Optional[PathLike] = None,
    include_type: bool = True,
) -> Value:
    """Convert literal text or the content of ``input_file``.

    Literal text takes precedence when both are given. When ``output_file``
    is set the result is also written there as pretty-printed JSON.
    """
    content = read_source(input_text, input_file)
    logger.debug("Converting %d chars: %s", len(content), safe_raw_preview(content))

    result = ThriftStringConverter(ConverterConfig(include_type=include_type)).convert(content)

    if output_file:
        write_json(result, output_file)
    return result
