"""Template fragments handed over by the template parser.

The parser splits a template into an ordered list of blocks. Emission
order follows list order; blocks never refer to each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BlockKind(Enum):
    CODE = "code"
    LITERAL = "literal"
    ESCAPED_VALUE = "escape"
    VALUE = "value"
    EXTEND = "extend"


class ValueType(Enum):
    STRING = "string"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    ANY = "any"


@dataclass(frozen=True)
class Block:
    """One template fragment.

    ``value_type`` only matters for value-bearing kinds. It holds the raw
    wire value when the parser reported a type this generator doesn't know.
    """

    kind: BlockKind
    content: str = ""
    value_type: ValueType | Any = ValueType.STRING


@dataclass(frozen=True)
class ParsedTemplate:
    """Everything the parser extracted from one template file."""

    name: str
    blocks: tuple[Block, ...] = ()
    preamble: str = ""
    function: Block | None = None


@dataclass
class GeneratorState:
    """Per-compilation scratch state, never shared between templates."""

    constant_length: int = 0
    statements: list[str] = field(default_factory=list)
    buffer_name: str = ""
