"""Mustache template parsing."""

from pydantic_mustache.template.delimiters import Delimiters
from pydantic_mustache.template.delimiters import parse_delimiter_directive
from pydantic_mustache.template.enums import Sigil
from pydantic_mustache.template.enums import TagKind
from pydantic_mustache.template.loaders import FileLoader
from pydantic_mustache.template.loaders import FileSystemLoader
from pydantic_mustache.template.loaders import MappingLoader
from pydantic_mustache.template.parser import TemplateParser
from pydantic_mustache.template.serde import from_dict
from pydantic_mustache.template.serde import to_dict
from pydantic_mustache.template.state import ParseState
from pydantic_mustache.template.tags import LiteralTag
from pydantic_mustache.template.tags import SectionTag
from pydantic_mustache.template.tags import Tag
from pydantic_mustache.template.tags import VariableTag
from pydantic_mustache.template.template import Template
from pydantic_mustache.template.template import from_bytes
from pydantic_mustache.template.template import from_file
from pydantic_mustache.template.validation import collect_variables
from pydantic_mustache.template.validation import validate_missing_or_extra

__all__ = [
    "Delimiters",
    "FileLoader",
    "FileSystemLoader",
    "LiteralTag",
    "MappingLoader",
    "ParseState",
    "SectionTag",
    "Sigil",
    "Tag",
    "TagKind",
    "Template",
    "TemplateParser",
    "VariableTag",
    "collect_variables",
    "from_bytes",
    "from_dict",
    "from_file",
    "parse_delimiter_directive",
    "to_dict",
    "validate_missing_or_extra",
]
