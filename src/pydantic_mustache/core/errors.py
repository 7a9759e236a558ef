"""Custom exceptions for pydantic-mustache.

Every failure aborts the whole parse: no partially built template is ever
returned to the caller.
"""

from pathlib import Path


class MustacheError(Exception):
    """Base exception for template-related errors."""


class MalformedTemplateError(MustacheError):
    """Raised when template source does not follow the Mustache grammar.

    This occurs when:
    - A section is closed by a tag carrying a different key
    - A closing tag appears with no open section
    - The input ends while a section is still open
    - A tag or triple mustache is never terminated
    - A delimiter directive is malformed
    """


class PartialRecursionError(MalformedTemplateError):
    """Raised when partials include each other deeper than allowed.

    A partial that includes itself, directly or through other partials,
    would otherwise recurse forever.
    """


class TemplateNotFoundError(MustacheError, FileNotFoundError):
    """Raised when a template file cannot be read."""

    def __init__(self, path: Path | str, message: str | None = None) -> None:
        """Initialize with the unreadable path."""
        self.path = Path(path)
        super().__init__(message or f"Template file not found: {self.path}")


class PartialNotFoundError(TemplateNotFoundError):
    """Raised when a partial referenced by ``{{>name}}`` cannot be read."""

    def __init__(self, name: str, path: Path | str) -> None:
        """Initialize with the partial name and the last path tried."""
        self.name = name
        super().__init__(path, f"Partial '{name}' not found: {Path(path)}")


class VariableValidationError(MustacheError, ValueError):
    """Raised when template variable validation fails."""
