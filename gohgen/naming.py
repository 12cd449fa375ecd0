"""Names used in generated output.

  views/index.html   -> index.html.go
  package ""         -> package template
"""

from __future__ import annotations

import re
from pathlib import PurePath

from .errors import ConfigError

DEFAULT_PACKAGE_NAME = "template"
SOURCE_SUFFIX = ".go"

_GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})

_IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")


def output_filename(template_name: str) -> str:
    """Return the generated file name for a template path."""
    return PurePath(template_name).name + SOURCE_SUFFIX


def resolve_package_name(name: str | None) -> str:
    """Return the Go package clause name, defaulting to 'template'."""
    if not name:
        return DEFAULT_PACKAGE_NAME
    if not _IDENTIFIER_RE.fullmatch(name) or name in _GO_KEYWORDS or name == "_":
        raise ConfigError(f"{name!r} is not a valid Go package name")
    return name
