"""Core functionality for pydantic-mustache.

This module contains the error hierarchy and parse configuration.
"""

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.core.errors import MustacheError
from pydantic_mustache.core.errors import PartialNotFoundError
from pydantic_mustache.core.errors import PartialRecursionError
from pydantic_mustache.core.errors import TemplateNotFoundError
from pydantic_mustache.core.errors import VariableValidationError
from pydantic_mustache.core.parse_config import ParseConfig

__all__ = [
    "MalformedTemplateError",
    "MustacheError",
    "ParseConfig",
    "PartialNotFoundError",
    "PartialRecursionError",
    "TemplateNotFoundError",
    "VariableValidationError",
]
