"""Template validation utilities."""

from collections.abc import Iterable
from collections.abc import Mapping

from pydantic_mustache.core.errors import VariableValidationError
from pydantic_mustache.template.tags import SectionTag
from pydantic_mustache.template.tags import Tag
from pydantic_mustache.template.tags import VariableTag
from pydantic_mustache.template.template import Template

IMPLICIT_ITERATOR = "."


def collect_variables(template: Template) -> set[str]:
    """Extract the names a template looks up in its data context.

    Args:
        template: Parsed template

    Returns:
        Keys of every variable and section, at any depth, except the
        implicit iterator ``.``

    """
    return _keys(template.walk())


def validate_missing_or_extra(
    template: Template, provided: Mapping[str, object], *, allow_extra: bool = False
) -> None:
    """Validate a data context against the names a template looks up.

    Names used outside any section must be provided. Names used inside a
    section may also resolve against the section's value, so they are never
    required, but they count as known when checking for extras. Dotted names
    are checked by their first segment.

    Args:
        template: Parsed template
        provided: Top-level data context
        allow_extra: Accept names the template never looks up

    Raises:
        VariableValidationError: When names are missing or extra

    """
    required = {_root(key) for key in _keys(template.tags)}
    known = {_root(key) for key in collect_variables(template)}
    names = set(provided)
    missing = required - names
    extra = set() if allow_extra else names - known

    problems = []
    if missing:
        problems.append(f"Missing variables: {', '.join(sorted(missing))}")
    if extra:
        problems.append(f"Extra variables: {', '.join(sorted(extra))}")
    if problems:
        msg = "; ".join(problems)
        raise VariableValidationError(msg)


def _keys(tags: Iterable[Tag]) -> set[str]:
    return {
        tag.key
        for tag in tags
        if isinstance(tag, VariableTag | SectionTag) and tag.key != IMPLICIT_ITERATOR
    }


def _root(key: str) -> str:
    return key.split(".", 1)[0]
