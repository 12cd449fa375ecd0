"""Validate the render function declaration.

Generated statements are inserted into a function declared by the
template author. Its last parameter must be a ``bytes.Buffer`` or a
pointer to one; every generated write goes through that parameter.

Only the declaration is inspected:
- ``func Render(w *bytes.Buffer)``          -> buffer ``w``
- ``func (p *Page) Render(a, w *bytes.Buffer) error`` -> buffer ``w``
- ``func Render[T any](v T, w bytes.Buffer)`` -> buffer ``w``
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .blocks import Block
from .errors import (
    DeclarationSyntaxError,
    InvalidBufferParameterError,
    MissingParametersError,
    NotAFunctionError,
)

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<comment>//[^\n]*|/\*.*?\*/)
    | (?P<string>"(?:\\.|[^"\\\n])*"|`[^`]*`|'(?:\\.|[^'\\\n])*')
    | (?P<ident>[^\W\d]\w*)
    | (?P<number>\d[\w.]*)
    | (?P<op>\.\.\.|<-|[()\[\]{},.*;&|^~=<>!+\-/%:])
    """,
    re.VERBOSE | re.DOTALL,
)

_BRACKETS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_BRACKETS.values())

# Keywords that start a type expression rather than a parameter name
_TYPE_KEYWORDS = frozenset({"map", "chan", "func", "struct", "interface"})

_OTHER_DECLARATIONS = frozenset({"var", "const", "type", "import"})

BUFFER_PACKAGE = "bytes"
BUFFER_TYPE = "Buffer"


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str


@dataclass(frozen=True)
class RenderFunction:
    """A validated render function.

    ``declaration`` is the block content verbatim. ``buffer_name`` is empty
    when the buffer parameter is unnamed.
    """

    name: str
    declaration: str
    buffer_name: str


def _tokenize(source: str) -> list[_Token]:
    """Split Go source into tokens, dropping whitespace and comments."""
    tokens: list[_Token] = []
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise DeclarationSyntaxError(
                f"unexpected character {source[pos]!r} at offset {pos}"
            )
        if match.lastgroup not in ("space", "comment"):
            tokens.append(_Token(match.lastgroup, match.group()))
        pos = match.end()
    return tokens


def _skip_group(tokens: list[_Token], start: int) -> int:
    """Return the index just past the bracket group opened at ``start``."""
    expected: list[str] = []
    for i in range(start, len(tokens)):
        token = tokens[i]
        if token.kind != "op":
            continue
        if token.text in _BRACKETS:
            expected.append(_BRACKETS[token.text])
        elif token.text in _CLOSERS:
            if not expected or expected.pop() != token.text:
                raise DeclarationSyntaxError(f"unbalanced {token.text!r}")
            if not expected:
                return i + 1
    raise DeclarationSyntaxError("unclosed bracket in declaration")


def _skip_type(tokens: list[_Token], pos: int) -> int:
    """Return the index just past the type expression starting at ``pos``."""
    if pos >= len(tokens):
        raise DeclarationSyntaxError("expected type, found end of declaration")
    token = tokens[pos]
    if token.text == "*":
        return _skip_type(tokens, pos + 1)
    if token.text == "[":
        return _skip_type(tokens, _skip_group(tokens, pos))
    if token.text == "(":
        return _skip_group(tokens, pos)
    if token.text == "<-":
        if pos + 1 >= len(tokens) or tokens[pos + 1].text != "chan":
            raise DeclarationSyntaxError("expected 'chan' after '<-'")
        return _skip_type(tokens, pos + 2)
    if token.kind != "ident":
        raise DeclarationSyntaxError(f"expected type, found {token.text!r}")

    pos += 1
    if token.text == "map":
        if pos >= len(tokens) or tokens[pos].text != "[":
            raise DeclarationSyntaxError("expected '[' after 'map'")
        return _skip_type(tokens, _skip_group(tokens, pos))
    if token.text == "chan":
        if pos < len(tokens) and tokens[pos].text == "<-":
            pos += 1
        return _skip_type(tokens, pos)
    if token.text in ("struct", "interface"):
        if pos >= len(tokens) or tokens[pos].text != "{":
            raise DeclarationSyntaxError(f"expected '{{' after {token.text!r}")
        return _skip_group(tokens, pos)
    if token.text == "func":
        if pos >= len(tokens) or tokens[pos].text != "(":
            raise DeclarationSyntaxError("expected parameter list in function type")
        pos = _skip_group(tokens, pos)
        if pos < len(tokens) and tokens[pos].text == "(":
            return _skip_group(tokens, pos)
        if pos < len(tokens) and (tokens[pos].kind == "ident" or tokens[pos].text in ("*", "[", "<-")):
            return _skip_type(tokens, pos)
        return pos

    if pos + 1 < len(tokens) and tokens[pos].text == "." and tokens[pos + 1].kind == "ident":
        pos += 2
    if pos < len(tokens) and tokens[pos].text == "[":
        pos = _skip_group(tokens, pos)  # type arguments
    return pos


def _check_results(tokens: list[_Token], pos: int, name: str) -> None:
    """Allow an optional result clause and one ``;`` after the parameters."""
    if pos < len(tokens) and tokens[pos].text != ";":
        if tokens[pos].text == "(":
            pos = _skip_group(tokens, pos)
        else:
            pos = _skip_type(tokens, pos)
    if pos < len(tokens) and tokens[pos].text == ";":
        pos += 1
    if pos < len(tokens):
        raise DeclarationSyntaxError(
            f"unexpected {tokens[pos].text!r} after declaration of {name!r}"
        )


def _split_parameters(tokens: list[_Token]) -> list[list[_Token]]:
    """Split a parameter list body on top-level commas."""
    entries: list[list[_Token]] = []
    current: list[_Token] = []
    depth = 0
    for token in tokens:
        if token.kind == "op":
            if token.text in _BRACKETS:
                depth += 1
            elif token.text in _CLOSERS:
                depth -= 1
            elif token.text == "," and depth == 0:
                entries.append(current)
                current = []
                continue
        current.append(token)
    # A trailing comma leaves ``current`` empty
    if current:
        entries.append(current)
    if any(not entry for entry in entries):
        raise DeclarationSyntaxError("empty entry in parameter list")
    return entries


def _is_named(entry: list[_Token]) -> bool:
    """Whether a parameter entry has the form ``name Type``."""
    if len(entry) < 2:
        return False
    first, second = entry[0], entry[1]
    if first.kind != "ident" or first.text in _TYPE_KEYWORDS:
        return False
    if second.text == ".":
        return False
    if second.text == "[":
        # ``x []int`` names x; ``List[T]`` is a generic type
        return _skip_group(entry, 1) < len(entry)
    return True


def _type_text(tokens: list[_Token]) -> str:
    parts: list[str] = []
    previous: _Token | None = None
    for token in tokens:
        if previous is not None and previous.kind == "ident" and token.kind == "ident":
            parts.append(" ")
        parts.append(token.text)
        previous = token
    return "".join(parts)


def _is_buffer_type(tokens: list[_Token]) -> bool:
    texts = [token.text for token in tokens]
    if texts[:1] == ["*"]:
        texts = texts[1:]
    return texts == [BUFFER_PACKAGE, ".", BUFFER_TYPE]


def parse_render_function(block: Block) -> RenderFunction:
    """Validate a render function declaration block.

    Raises a SignatureError subclass when the declaration is not a
    function, has no parameters, or its last parameter is not a buffer.
    """
    tokens = _tokenize(block.content)
    if not tokens:
        raise DeclarationSyntaxError("render function declaration is empty")

    head = tokens[0]
    if head.kind != "ident" or head.text != "func":
        if head.kind == "ident" and head.text in _OTHER_DECLARATIONS:
            raise NotAFunctionError("definition is not a function type")
        raise DeclarationSyntaxError(f"expected declaration, found {head.text!r}")

    pos = 1
    if pos < len(tokens) and tokens[pos].text == "(":
        pos = _skip_group(tokens, pos)  # method receiver
    if pos >= len(tokens) or tokens[pos].kind != "ident":
        raise DeclarationSyntaxError("expected function name after 'func'")
    name = tokens[pos].text
    pos += 1
    if pos < len(tokens) and tokens[pos].text == "[":
        pos = _skip_group(tokens, pos)  # type parameters
    if pos >= len(tokens) or tokens[pos].text != "(":
        raise DeclarationSyntaxError(f"expected parameter list after {name!r}")

    end = _skip_group(tokens, pos)
    _check_results(tokens, end, name)
    entries = _split_parameters(tokens[pos + 1:end - 1])
    if not entries:
        raise MissingParametersError("function parameters should not be empty")

    last = entries[-1]
    if any(_is_named(entry) for entry in entries):
        if not _is_named(last):
            raise DeclarationSyntaxError(f"mixed named and unnamed parameters in {name!r}")
        buffer_name, buffer_type = last[0].text, last[1:]
    else:
        buffer_name, buffer_type = "", last

    if not _is_buffer_type(buffer_type):
        raise InvalidBufferParameterError(
            f"last parameter of {name!r} must be *{BUFFER_PACKAGE}.{BUFFER_TYPE}"
            f" or {BUFFER_PACKAGE}.{BUFFER_TYPE}, got {_type_text(buffer_type)}"
        )

    logger.debug("render function %s writes to %r", name, buffer_name)
    return RenderFunction(name=name, declaration=block.content, buffer_name=buffer_name)
