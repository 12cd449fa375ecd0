"""Compile parsed templates into Go render functions."""

from .blocks import Block, BlockKind, GeneratorState, ParsedTemplate, ValueType
from .codegen import generate_source, write_source
from .errors import (
    ConfigError,
    DeclarationSyntaxError,
    GeneratorError,
    InvalidBufferParameterError,
    MissingParametersError,
    NotAFunctionError,
    SignatureError,
    TemplateDocumentError,
    UnsupportedValueTypeError,
)
from .loader import load_document, parse_document
from .signature import RenderFunction, parse_render_function

__all__ = [
    "Block",
    "BlockKind",
    "ConfigError",
    "DeclarationSyntaxError",
    "GeneratorError",
    "GeneratorState",
    "InvalidBufferParameterError",
    "MissingParametersError",
    "NotAFunctionError",
    "ParsedTemplate",
    "RenderFunction",
    "SignatureError",
    "TemplateDocumentError",
    "UnsupportedValueTypeError",
    "ValueType",
    "generate_source",
    "load_document",
    "parse_document",
    "parse_render_function",
    "write_source",
]
