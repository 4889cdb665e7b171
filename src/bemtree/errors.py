"""Exception classes for bemtree.

The pipeline stages are total over string input and never raise. These
exceptions cover the edges around them: reading input, configuration and
deserialization.
"""

from __future__ import annotations


class BemTreeError(Exception):
    """Base exception for all bemtree errors.

    Subclass this for specific error categories.
    """

    pass


class InputError(BemTreeError):
    """No input supplied, or the input source could not be read."""

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize input error with optional source path.

        Args:
            message: Error description
            source_file: Path of the file that failed (optional)
        """
        self.message = message
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class ConfigError(BemTreeError):
    """Invalid configuration value.

    Raised when a GenerateConfig field holds a value the renderer
    cannot use, e.g. an indent unit containing non-whitespace.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Config field '{field}': {message}")


class SerializationError(BemTreeError):
    """Malformed dict or JSON passed to from_dict/from_json."""

    pass
