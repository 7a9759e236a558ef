"""Tests for tag classification."""

import pytest

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.template.classifier import TagContent
from pydantic_mustache.template.classifier import classify
from pydantic_mustache.template.enums import Sigil


@pytest.mark.parametrize(
    ("inner", "expected"),
    [
        ("name", TagContent(Sigil.VARIABLE, "name")),
        ("  name  ", TagContent(Sigil.VARIABLE, "name")),
        ("", TagContent(Sigil.VARIABLE, "")),
        ("& name ", TagContent(Sigil.UNESCAPED, "name")),
        (" # list ", TagContent(Sigil.SECTION, "list")),
        ("^ empty", TagContent(Sigil.INVERTED, "empty")),
        ("/ list ", TagContent(Sigil.CLOSE, "list")),
        ("> header ", TagContent(Sigil.PARTIAL, "header")),
        ("! note ", TagContent(Sigil.COMMENT, " note ")),
        ("=<< >>=", TagContent(Sigil.DELIMITER, "<< >>")),
        (" = << >> = ", TagContent(Sigil.DELIMITER, " << >> ")),
        ("x#y", TagContent(Sigil.VARIABLE, "x#y")),
    ],
)
def test_classify(inner: str, expected: TagContent) -> None:
    """Test the leading sigil selects the tag variant."""
    assert classify(inner) == expected


@pytest.mark.parametrize("inner", ["=", "=<< >>", " = << >> "])
def test_directive_without_closing_marker(inner: str) -> None:
    """Test error when a delimiter directive does not end with ``=``."""
    with pytest.raises(MalformedTemplateError):
        classify(inner)
