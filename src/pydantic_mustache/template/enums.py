"""Type-safe enumerations for the template parser."""

from enum import StrEnum


class TagKind(StrEnum):
    """Discriminator for parsed tag variants."""

    LITERAL = "literal"
    VARIABLE = "variable"
    SECTION = "section"


class Sigil(StrEnum):
    """Leading character selecting the variant of a tag.

    Attributes:
        VARIABLE: No sigil, an escaped variable.
        UNESCAPED: ``{{&key}}``, a variable rendered without escaping.
        SECTION: ``{{#key}}`` opens a section.
        INVERTED: ``{{^key}}`` opens an inverted section.
        DELIMITER: ``{{=open close=}}`` replaces the delimiter pair.
        COMMENT: ``{{!text}}`` is discarded.
        CLOSE: ``{{/key}}`` closes the innermost open section.
        PARTIAL: ``{{>name}}`` includes another template file.

    """

    VARIABLE = ""
    UNESCAPED = "&"
    SECTION = "#"
    INVERTED = "^"
    DELIMITER = "="
    COMMENT = "!"
    CLOSE = "/"
    PARTIAL = ">"
