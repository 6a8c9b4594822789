"""dominator-static exception hierarchy.

Every error is scoped to a single input file: the driver records it and moves
on to the next file.
"""


class ConvertError(Exception):
    """Base exception for all conversion errors."""


class ParseError(ConvertError):
    """Raised when the HTML or Markdown parser rejects its input."""


class StructuralError(ConvertError):
    """Raised when a document cannot be expressed as builder calls.

    Prefixed tag or attribute names, a malformed <escape> element, a style
    declaration without ':' and an unbalanced Markdown event stream all end up
    here.
    """


class UnsupportedFileError(ConvertError):
    """Raised when a file extension has no emitter."""


class OutputError(ConvertError):
    """Raised when reading input or writing output fails."""


class ConfigError(ConvertError):
    """Raised for configuration that cannot be resolved."""
