"""Shared fixtures for generator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from gohgen.blocks import Block, BlockKind, ParsedTemplate


@pytest.fixture
def render_function() -> Block:
    """The canonical render function declaration."""
    return Block(BlockKind.CODE, "func Render(w *bytes.Buffer)")


@pytest.fixture
def make_template(render_function) -> Callable[..., ParsedTemplate]:
    """Build a ParsedTemplate around the canonical render function.

    Usage in tests::

        template = make_template(Block(BlockKind.VALUE, "x", ValueType.INT))
    """
    def _make(*blocks: Block, function: Block | None = render_function, preamble: str = "") -> ParsedTemplate:
        return ParsedTemplate(
            name="views/index.html",
            blocks=tuple(blocks),
            preamble=preamble,
            function=function,
        )
    return _make


@pytest.fixture
def write_document(tmp_path) -> Callable[[dict[str, Any]], Path]:
    """Write a parsed-template document to a temp file and return its path."""
    counter = {"n": 0}

    def _write(document: dict[str, Any]) -> Path:
        counter["n"] += 1
        path = tmp_path / f"document{counter['n']}.json"
        path.write_text(json.dumps(document))
        return path
    return _write
