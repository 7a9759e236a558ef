"""Serialization of parsed templates."""

from typing import Any

from pydantic_mustache.template.template import Template


def to_dict(template: Template) -> dict[str, Any]:
    """Serialize a parsed template to a JSON-compatible dictionary.

    Args:
        template: Template to serialize

    Returns:
        Dictionary with a ``tags`` list, each tag carrying its ``kind``

    """
    return template.model_dump(mode="json")


def from_dict(data: dict[str, Any]) -> Template:
    """Deserialize a parsed template from a dictionary.

    Args:
        data: Dictionary produced by to_dict

    Returns:
        Equivalent template

    Raises:
        pydantic.ValidationError: When the dictionary is not a valid template

    """
    return Template.model_validate(data)
