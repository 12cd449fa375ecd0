"""Render parsed templates into Go source.

Takes a ParsedTemplate from the loader, validates its render function,
formats every block into a statement and renders templates/source.go.j2.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from .blocks import BlockKind, GeneratorState, ParsedTemplate
from .formatter import format_escaped, format_value
from .naming import DEFAULT_PACKAGE_NAME, output_filename, resolve_package_name
from .signature import parse_render_function

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
GENERATOR_NAME = "Goh"
RUNTIME_IMPORT = "github.com/OblivionOcean/Goh/utils"

_ESCAPED_KINDS = (BlockKind.LITERAL, BlockKind.ESCAPED_VALUE)

_ENVIRONMENT = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def emit_blocks(state: GeneratorState, template: ParsedTemplate) -> None:
    """Append one statement per block to ``state`` in block order."""
    for block in template.blocks:
        if block.kind is BlockKind.CODE:
            state.statements.append(block.content)
        elif block.kind in _ESCAPED_KINDS:
            format_escaped(state, block.content, block.value_type)
        elif block.kind is BlockKind.VALUE:
            format_value(state, block.content, block.value_type)
        # EXTEND blocks are reserved for template composition


def generate_source(
    template: ParsedTemplate, package_name: str | None = DEFAULT_PACKAGE_NAME,
) -> str:
    """Return the Go source for one parsed template.

    Without a render function the output is just the header. Statements
    are collected before rendering so the Grow() hint is complete.
    """
    context = {
        "generator": GENERATOR_NAME,
        "package_name": resolve_package_name(package_name),
        "runtime_import": RUNTIME_IMPORT,
        "function": None,
    }

    if template.function is not None:
        function = parse_render_function(template.function)
        state = GeneratorState(buffer_name=function.buffer_name)
        emit_blocks(state, template)
        logger.debug(
            "%s: %d statements, grow hint %d",
            template.name, len(state.statements), state.constant_length,
        )
        context.update(
            function=function,
            preamble=template.preamble,
            constant_length=state.constant_length,
            statements=state.statements,
        )

    return _ENVIRONMENT.get_template("source.go.j2").render(**context)


def write_source(
    template: ParsedTemplate,
    destination: Path | str,
    package_name: str | None = DEFAULT_PACKAGE_NAME,
) -> Path:
    """Render a template and write it to ``destination``.

    The file is only created once rendering has succeeded.
    """
    source = generate_source(template, package_name)

    destination = Path(destination)
    destination.mkdir(parents=True, exist_ok=True)
    output_path = destination / output_filename(template.name)
    output_path.write_text(source, encoding="utf-8")
    return output_path
