"""Delimiter pairs and the ``{{=open close=}}`` directive."""

from pydantic import BaseModel

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.template.trim import SPACE


class Delimiters(BaseModel):
    """The active pair of tag markers.

    Attributes:
        open: Marker starting a tag.
        close: Marker ending a tag.

    """

    model_config = {"frozen": True}

    open: str = "{{"
    close: str = "}}"


def parse_delimiter_directive(text: str) -> Delimiters:
    """Parse the body of a delimiter directive into a new delimiter pair.

    Args:
        text: Text between the ``=`` markers, e.g. ``<< >>``

    Returns:
        Delimiters taking effect after the directive

    Raises:
        MalformedTemplateError: When the body contains ``=`` or does not hold
            exactly two space-separated tokens

    """
    if "=" in text:
        msg = f"Delimiter directive must not contain '=': {text!r}"
        raise MalformedTemplateError(msg)

    tokens = [token for token in text.split(SPACE) if token]
    if len(tokens) != 2:
        msg = f"Delimiter directive needs exactly two delimiters, got {text!r}"
        raise MalformedTemplateError(msg)

    open_, close = tokens
    return Delimiters(open=open_, close=close)
