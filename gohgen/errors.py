"""Exceptions raised while turning a parsed template into Go source.

Exception Hierarchy:
GeneratorError (base)
├── ConfigError                    # Bad package name or settings
├── TemplateDocumentError          # Parser output could not be loaded
└── SignatureError                 # Render function declaration rejected
    ├── DeclarationSyntaxError
    ├── NotAFunctionError
    ├── MissingParametersError
    └── InvalidBufferParameterError

UnsupportedValueTypeError is deliberately not a GeneratorError. It stops
generation outright and is never handled by the command line.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for recoverable generator failures."""


class ConfigError(GeneratorError):
    """Invalid generator configuration."""


class TemplateDocumentError(GeneratorError):
    """The parsed-template document is malformed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class SignatureError(GeneratorError):
    """The render function declaration cannot host generated code."""


class DeclarationSyntaxError(SignatureError):
    pass


class NotAFunctionError(SignatureError):
    pass


class MissingParametersError(SignatureError):
    pass


class InvalidBufferParameterError(SignatureError):
    pass


class UnsupportedValueTypeError(RuntimeError):
    """Raised by the escaping path for a value type it cannot format."""
