"""Tests for the pydantic_mustache.__init__ module."""

import pydantic_mustache


def test_public_api_exported():
    """Test every name in __all__ is importable from the package."""
    for name in pydantic_mustache.__all__:
        assert hasattr(pydantic_mustache, name), name


def test_top_level_round_trip():
    """Test the top-level entry points work together."""
    template = pydantic_mustache.from_bytes("{{#a}}{{b}}{{/a}}")

    assert pydantic_mustache.collect_variables(template) == {"a", "b"}
    assert pydantic_mustache.from_dict(pydantic_mustache.to_dict(template)) == template
