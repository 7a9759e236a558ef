"""Classification of tag contents by their leading sigil."""

from dataclasses import dataclass

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.template.enums import Sigil
from pydantic_mustache.template.trim import trim
from pydantic_mustache.template.trim import trim_head
from pydantic_mustache.template.trim import trim_tail


@dataclass(frozen=True)
class TagContent:
    """The variant of a tag and its argument.

    Attributes:
        sigil: Leading sigil, or Sigil.VARIABLE when there is none.
        argument: Trimmed key for keyed tags, the raw body of a delimiter
            directive (between the ``=`` markers), or the comment text.

    """

    sigil: Sigil
    argument: str


def classify(inner: str) -> TagContent:
    """Determine the variant of a tag from the text between its delimiters.

    Args:
        inner: Text between the open and close delimiters

    Returns:
        Sigil and argument of the tag

    Raises:
        MalformedTemplateError: When a delimiter directive lacks its
            closing ``=``

    """
    body = trim_head(inner)
    try:
        sigil = Sigil(body[:1])
    except ValueError:
        sigil = Sigil.VARIABLE

    match sigil:
        case Sigil.VARIABLE:
            # leading spaces are already gone
            return TagContent(sigil, trim_tail(body))
        case Sigil.DELIMITER:
            return TagContent(sigil, _directive_body(body[1:]))
        case Sigil.COMMENT:
            return TagContent(sigil, body[1:])
        case _:
            return TagContent(sigil, trim(body[1:]))


def _directive_body(text: str) -> str:
    """Strip the closing ``=`` of a delimiter directive."""
    text = trim_tail(text)
    if not text.endswith("="):
        msg = f"Delimiter directive must end with '=': {text!r}"
        raise MalformedTemplateError(msg)
    return text[:-1]
