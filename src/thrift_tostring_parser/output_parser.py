# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Optional, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from pydantic import BaseModel, Field

from .converter import ConverterConfig, ThriftParserError, ThriftStringConverter
from .extractor import require_record_span


DEFAULT_CONVERTER_CONFIG = ConverterConfig(include_type=False)


class ThriftStringOutputParser(BaseOutputParser[Any]):
    """LangChain output parser for replies that contain a record toString() dump.

    The first complete ``Identifier(...)`` span in the reply is converted;
    surrounding prose is ignored. With ``model`` set the converted mapping is
    validated into that pydantic model.
    """

    pydantic_model: Optional[Type[BaseModel]] = Field(default=None)
    cfg: ConverterConfig = Field(default_factory=lambda: DEFAULT_CONVERTER_CONFIG)
    _converter: Any = None

    def __init__(
        self,
        model: Optional[Type[BaseModel]] = None,
        cfg: Optional[ConverterConfig] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        object.__setattr__(self, 'pydantic_model', model)
        object.__setattr__(self, 'cfg', cfg or DEFAULT_CONVERTER_CONFIG)
        object.__setattr__(self, '_converter', ThriftStringConverter(self.cfg))

    def get_format_instructions(self) -> str:
        return (
            "Answer with a single record in toString() form, e.g.\n"
            'TypeName(field=123, other="text", items=[1, 2], nested=Child(flag=true))'
        )

    def parse(self, text: str) -> Any:
        obj = self.decode(text)
        if self.pydantic_model is None:
            return obj
        try:
            return self.pydantic_model.model_validate(obj)
        except Exception as e:
            raise OutputParserException(str(e), llm_output=text) from e

    def decode(self, text: str) -> Any:
        """Extract and convert without model validation."""
        try:
            span = require_record_span(text, self.cfg.match_quotes)
            return self._converter.convert(span)
        except ThriftParserError as e:
            raise OutputParserException(str(e), llm_output=text) from e

    @property
    def _type(self) -> str:
        return "thrift_tostring"
