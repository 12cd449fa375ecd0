"""Turn value blocks into Go statements that write to the render buffer.

Two paths share one table keyed by value type:
- plain (``Value`` blocks) writes the expression as-is
- escaped (``EscapedValue`` and ``Literal`` blocks) runs strings through
  the runtime HTML escaper

Only strings and bytes differ between the two. Booleans add their
longest textual form ("false") to the static growth estimate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .blocks import GeneratorState, ValueType
from .errors import UnsupportedValueTypeError

logger = logging.getLogger(__name__)

# Package qualifier of the runtime support library in generated code
RUNTIME_PACKAGE = "Goh"


@dataclass(frozen=True)
class ValueFormat:
    """Statement templates for one value type.

    Templates are filled with ``content``, ``buffer`` and ``rt``.
    """

    plain: str
    escaped: str
    constant_length: int = 0


_FORMAT_INT = ValueFormat(
    plain="{rt}.FormatInt(int64({content}), {buffer})",
    escaped="{rt}.FormatInt(int64({content}), {buffer})",
)
_FORMAT_UINT = ValueFormat(
    plain="{rt}.FormatUint(uint64({content}), {buffer})",
    escaped="{rt}.FormatUint(uint64({content}), {buffer})",
)
_FORMAT_BOOL = ValueFormat(
    plain="{rt}.FormatBool({content}, {buffer})",
    escaped="{rt}.FormatBool({content}, {buffer})",
    constant_length=5,
)
_FORMAT_ANY = ValueFormat(
    plain="{rt}.FormatAny({content}, {buffer})",
    escaped="{rt}.FormatAny({content}, {buffer})",
)

VALUE_FORMATS: Mapping[ValueType, ValueFormat] = MappingProxyType({
    ValueType.STRING: ValueFormat(
        plain="{buffer}.WriteString({content})",
        escaped="{rt}.EscapeHTML({content}, {buffer})",
    ),
    ValueType.BYTES: ValueFormat(
        plain="{buffer}.Write({content})",
        escaped="{rt}.EscapeHTML({rt}.Bytes2String({content}), {buffer})",
    ),
    ValueType.INT: _FORMAT_INT,
    ValueType.UINT: _FORMAT_UINT,
    ValueType.BOOL: _FORMAT_BOOL,
    ValueType.ANY: _FORMAT_ANY,
})


def _emit(state: GeneratorState, template: str, content: str, value_format: ValueFormat) -> str:
    statement = template.format(content=content, buffer=state.buffer_name, rt=RUNTIME_PACKAGE)
    state.constant_length += value_format.constant_length
    state.statements.append(statement)
    return statement


def format_value(state: GeneratorState, content: str, value_type: Any) -> str | None:
    """Emit a plain write for a ``Value`` block.

    Empty content and unknown value types emit nothing.
    """
    content = content.strip()
    if not content:
        return None
    value_format = VALUE_FORMATS.get(value_type)
    if value_format is None:
        logger.debug("skipping value %r with unsupported type %r", content, value_type)
        return None
    return _emit(state, value_format.plain, content, value_format)


def format_escaped(state: GeneratorState, content: str, value_type: Any) -> str | None:
    """Emit an escaped write for an ``EscapedValue`` or ``Literal`` block.

    Unlike format_value, an unknown value type stops generation.
    """
    content = content.strip()
    if not content:
        return None
    value_format = VALUE_FORMATS.get(value_type)
    if value_format is None:
        raise UnsupportedValueTypeError(f"Unsupported value type: {value_type!r}")
    return _emit(state, value_format.escaped, content, value_format)
