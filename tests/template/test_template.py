"""Tests for template construction entry points."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError
import pytest

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.core.errors import TemplateNotFoundError
from pydantic_mustache.core.parse_config import ParseConfig
from pydantic_mustache.template.loaders import MappingLoader
from pydantic_mustache.template.tags import LiteralTag
from pydantic_mustache.template.tags import SectionTag
from pydantic_mustache.template.tags import VariableTag
from pydantic_mustache.template.template import Template
from pydantic_mustache.template.template import from_bytes
from pydantic_mustache.template.template import from_file


class TestFromBytes:
    """Test parsing from source text."""

    def test_bytes_source(self) -> None:
        """Test bytes are decoded before parsing."""
        template = from_bytes("café {{x}}".encode())
        assert template.tags == (
            LiteralTag(text="café "),
            VariableTag(key="x"),
            LiteralTag(text=""),
        )

    def test_str_source(self) -> None:
        """Test str sources are parsed as-is."""
        assert from_bytes("plain").tags == (LiteralTag(text="plain"),)

    def test_configured_encoding(self) -> None:
        """Test bytes are decoded with the configured encoding."""
        config = ParseConfig(encoding="latin-1")
        template = from_bytes(b"\xe9", config=config)
        assert template.tags == (LiteralTag(text="é"),)

    def test_lone_surrogate_in_source(self) -> None:
        """Test str sources need not be encodable to parse."""
        template = from_bytes("\ud800{{x}}")
        assert template.tags[0] == LiteralTag(text="\ud800")

    def test_undecodable_source(self) -> None:
        """Test error when bytes are not valid in the encoding."""
        with pytest.raises(MalformedTemplateError):
            from_bytes(b"\xff{{x}}")


class TestFromFile:
    """Test parsing from template files."""

    def test_reads_file(self, tmp_path: Path) -> None:
        """Test a file is read and parsed."""
        path = tmp_path / "t.mustache"
        path.write_text("Hello {{name}}", encoding="utf-8")

        template = from_file(path)

        assert template.tags == (
            LiteralTag(text="Hello "),
            VariableTag(key="name"),
            LiteralTag(text=""),
        )

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        """Test the path may be given as a string."""
        path = tmp_path / "t.mustache"
        path.write_text("x", encoding="utf-8")

        assert from_file(str(path)).tags == (LiteralTag(text="x"),)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test error when the template file does not exist."""
        path = tmp_path / "absent.mustache"

        with pytest.raises(TemplateNotFoundError) as exc_info:
            from_file(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_path_with_null_byte(self) -> None:
        """Test a path the OS rejects is reported as not found."""
        with pytest.raises(TemplateNotFoundError) as exc_info:
            from_file("bad\x00name.mustache")

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_custom_loader(self) -> None:
        """Test files and partials come from the given loader."""
        loader = MappingLoader(
            {"tpl/page": "{{>head}}", "tpl/head.mustache": "{{title}}"}
        )

        template = from_file("tpl/page", loader=loader)

        assert VariableTag(key="title") in template.tags


class TestTemplate:
    """Test the parsed template value."""

    def test_immutable(self) -> None:
        """Test templates cannot be modified."""
        template = from_bytes("{{a}}")

        with pytest.raises(ValidationError):
            template.tags = ()  # type: ignore[misc]

    def test_tags_are_immutable(self) -> None:
        """Test tags cannot be modified."""
        tag = from_bytes("{{#a}}{{/a}}").tags[1]

        with pytest.raises(ValidationError):
            tag.key = "b"  # type: ignore[misc]

    def test_walk(self) -> None:
        """Test walk visits sections before their children."""
        template = from_bytes("{{#a}}{{b}}{{/a}}")

        keys = [
            tag.key
            for tag in template.walk()
            if isinstance(tag, VariableTag | SectionTag)
        ]
        assert keys == ["a", "b"]

    def test_walk_deep_nesting(self) -> None:
        """Test walk visits every tag of a deeply nested template."""
        depth = 3000
        source = "".join(f"{{{{#s{i}}}}}" for i in range(depth)) + "x"
        source += "".join(f"{{{{/s{i}}}}}" for i in reversed(range(depth)))

        template = from_bytes(source)

        assert sum(1 for _ in template.walk()) == 3 * depth + 1

    def test_equality(self) -> None:
        """Test templates parsed from the same source are equal."""
        source = "a{{#b}}{{{c}}}{{/b}}"
        assert from_bytes(source) == from_bytes(source)
        assert from_bytes(source) == Template(tags=from_bytes(source).tags)

    def test_concurrent_parses(self) -> None:
        """Test independent parses do not affect each other."""
        sources = ["{{=<< >>=}}<<a>>{{b}}", "{{a}}<<b>>"] * 20

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(from_bytes, sources))

        first, second = results[0], results[1]
        assert all(r == first for r in results[::2])
        assert all(r == second for r in results[1::2])
        assert VariableTag(key="a") in second.tags
        assert LiteralTag(text="<<b>>") in second.tags
