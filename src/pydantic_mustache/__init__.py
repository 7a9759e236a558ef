"""pydantic-mustache - A Mustache template parser built on pydantic.

This package parses Mustache templates into an immutable tree of pydantic
models, ready to be evaluated against a data context.

The parser supports sections and inverted sections, triple-mustache and
``&`` unescaped variables, comments, partial inclusion from files, and
``{{=<< >>=}}`` delimiter redefinition.
"""

from pydantic_mustache.core import MalformedTemplateError
from pydantic_mustache.core import MustacheError
from pydantic_mustache.core import ParseConfig
from pydantic_mustache.core import PartialNotFoundError
from pydantic_mustache.core import PartialRecursionError
from pydantic_mustache.core import TemplateNotFoundError
from pydantic_mustache.core import VariableValidationError
from pydantic_mustache.template import Delimiters
from pydantic_mustache.template import FileLoader
from pydantic_mustache.template import FileSystemLoader
from pydantic_mustache.template import LiteralTag
from pydantic_mustache.template import MappingLoader
from pydantic_mustache.template import ParseState
from pydantic_mustache.template import SectionTag
from pydantic_mustache.template import Tag
from pydantic_mustache.template import TagKind
from pydantic_mustache.template import Template
from pydantic_mustache.template import TemplateParser
from pydantic_mustache.template import VariableTag
from pydantic_mustache.template import collect_variables
from pydantic_mustache.template import from_bytes
from pydantic_mustache.template import from_dict
from pydantic_mustache.template import from_file
from pydantic_mustache.template import to_dict
from pydantic_mustache.template import validate_missing_or_extra

__all__ = [
    "Delimiters",
    "FileLoader",
    "FileSystemLoader",
    "LiteralTag",
    "MalformedTemplateError",
    "MappingLoader",
    "MustacheError",
    "ParseConfig",
    "ParseState",
    "PartialNotFoundError",
    "PartialRecursionError",
    "SectionTag",
    "Tag",
    "TagKind",
    "Template",
    "TemplateNotFoundError",
    "TemplateParser",
    "VariableTag",
    "VariableValidationError",
    "collect_variables",
    "from_bytes",
    "from_dict",
    "from_file",
    "to_dict",
    "validate_missing_or_extra",
]
