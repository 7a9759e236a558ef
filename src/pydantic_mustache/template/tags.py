"""Tag types produced by the parser.

A parsed template is an ordered sequence of tags. Comments, delimiter
directives and partial references never appear here: comments and directives
vanish, and partials are replaced by the tags of the included file.
"""

from collections.abc import Iterable
from collections.abc import Iterator
from typing import Annotated
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from pydantic_mustache.template.enums import TagKind


class LiteralTag(BaseModel):
    """Raw template text passed through unmodified.

    Attributes:
        text: Source text between tags, possibly empty.

    """

    model_config = {"frozen": True}

    kind: Literal[TagKind.LITERAL] = TagKind.LITERAL
    text: str


class VariableTag(BaseModel):
    """A value looked up in the data context.

    Attributes:
        key: Name of the value, trimmed of edge spaces.
        escape: Whether the value is HTML-escaped when rendered. False for
            ``{{{key}}}`` and ``{{&key}}``.

    """

    model_config = {"frozen": True}

    kind: Literal[TagKind.VARIABLE] = TagKind.VARIABLE
    key: str
    escape: bool = True


class SectionTag(BaseModel):
    """A block of tags rendered depending on a context value.

    Attributes:
        key: Name shared by the opening and closing tags.
        negate: True for an inverted section (``{{^key}}``).
        children: Tags between the opening and closing tags, in source order.

    """

    model_config = {"frozen": True}

    kind: Literal[TagKind.SECTION] = TagKind.SECTION
    key: str
    negate: bool = False
    children: tuple["Tag", ...] = ()


Tag = Annotated[LiteralTag | VariableTag | SectionTag, Field(discriminator="kind")]

SectionTag.model_rebuild()


def walk(tags: Iterable[Tag]) -> Iterator[Tag]:
    """Yield every tag depth-first, sections before their children."""
    pending = [iter(tags)]
    while pending:
        for tag in pending[-1]:
            yield tag
            if isinstance(tag, SectionTag):
                pending.append(iter(tag.children))
                break
        else:
            pending.pop()
