"""Load parsed-template documents produced by the template parser.

A document is a JSON object::

    {"template": "views/index.html",
     "preamble": "",
     "function": "func Render(w *bytes.Buffer)",
     "blocks": [{"kind": "code", "content": "x := 1"},
                {"kind": "value", "type": "int", "content": "x"}]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .blocks import Block, BlockKind, ParsedTemplate, ValueType
from .errors import TemplateDocumentError

_KINDS: dict[str, BlockKind] = {kind.value: kind for kind in BlockKind}
_VALUE_TYPES: dict[str, ValueType] = {vt.value: vt for vt in ValueType}


def load_document(path: Path | str) -> ParsedTemplate:
    """Load a parsed-template document from disk."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise TemplateDocumentError(f"invalid JSON: {exc}", source=str(path)) from exc
    except OSError as exc:
        raise TemplateDocumentError(f"cannot read document: {exc.strerror}", source=str(path)) from exc
    return parse_document(data, source=str(path))


def parse_document(data: Any, source: str | None = None) -> ParsedTemplate:
    """Build a ParsedTemplate from a decoded document."""
    if not isinstance(data, dict):
        raise TemplateDocumentError("document must be a JSON object", source)

    name = data.get("template") or source
    if not name:
        raise TemplateDocumentError("document has no template name", source)

    raw_blocks = data.get("blocks", [])
    if not isinstance(raw_blocks, list):
        raise TemplateDocumentError("'blocks' must be a list", source)

    preamble = data.get("preamble") or ""
    if not isinstance(preamble, str):
        raise TemplateDocumentError("'preamble' must be a string", source)

    return ParsedTemplate(
        name=str(name),
        blocks=tuple(_parse_block(raw, i, source) for i, raw in enumerate(raw_blocks)),
        preamble=preamble,
        function=_parse_function(data.get("function"), source),
    )


def _parse_block(raw: Any, index: int, source: str | None) -> Block:
    """Convert one block entry. Unknown value types are kept as-is."""
    if not isinstance(raw, dict):
        raise TemplateDocumentError(f"block {index} must be an object", source)

    raw_kind = raw.get("kind")
    kind = _KINDS.get(raw_kind) if isinstance(raw_kind, str) else None
    if kind is None:
        raise TemplateDocumentError(
            f"block {index} has unknown kind {raw_kind!r}", source,
        )

    content = raw.get("content", "")
    if not isinstance(content, str):
        raise TemplateDocumentError(f"block {index} content must be a string", source)

    raw_type = raw.get("type", ValueType.STRING.value)
    if isinstance(raw_type, str):
        value_type = _VALUE_TYPES.get(raw_type, raw_type)
    elif isinstance(raw_type, int) and not isinstance(raw_type, bool):
        value_type = raw_type
    else:
        raise TemplateDocumentError(f"block {index} type must be a string", source)
    return Block(kind=kind, content=content, value_type=value_type)


def _parse_function(raw: Any, source: str | None) -> Block | None:
    if raw is None:
        return None
    if isinstance(raw, dict):
        raw = raw.get("content")
    if not isinstance(raw, str):
        raise TemplateDocumentError("'function' must be a string or an object with 'content'", source)
    return Block(kind=BlockKind.CODE, content=raw)
