"""Parsed templates and their construction entry points."""

from collections.abc import Iterator
import hashlib
from pathlib import Path
import time

from opentelemetry import trace
from pydantic import BaseModel

from pydantic_mustache.core.errors import TemplateNotFoundError
from pydantic_mustache.core.parse_config import ParseConfig
from pydantic_mustache.template.loaders import FileLoader
from pydantic_mustache.template.loaders import FileSystemLoader
from pydantic_mustache.template.parser import TemplateParser
from pydantic_mustache.template.partials import decode_source
from pydantic_mustache.template.state import ParseState
from pydantic_mustache.template.tags import Tag
from pydantic_mustache.template.tags import walk

tracer = trace.get_tracer(__name__)


class Template(BaseModel):
    """An immutable parsed template.

    Attributes:
        tags: Top-level tags in source order.

    """

    model_config = {"frozen": True}

    tags: tuple[Tag, ...] = ()

    def walk(self) -> Iterator[Tag]:
        """Yield every tag depth-first, sections before their children."""
        return walk(self.tags)


def from_bytes(
    source: bytes | str,
    *,
    config: ParseConfig | None = None,
    loader: FileLoader | None = None,
) -> Template:
    """Parse a template from source text.

    Partials are resolved relative to the working directory.

    Args:
        source: Template source, bytes are decoded with the configured encoding
        config: Parse configuration (defaults to ParseConfig())
        loader: Loader used to read partials (defaults to the file system)

    Returns:
        Parsed template

    Raises:
        MalformedTemplateError: When the source is not well formed
        PartialNotFoundError: When an included partial cannot be read

    """
    config = config or ParseConfig()
    text = decode_source(source, config.encoding)
    return _parse(text, None, config, loader or FileSystemLoader())


def from_file(
    path: Path | str,
    *,
    config: ParseConfig | None = None,
    loader: FileLoader | None = None,
) -> Template:
    """Parse a template file.

    Partials are resolved relative to the directory containing ``path``.

    Args:
        path: Template file to read
        config: Parse configuration (defaults to ParseConfig())
        loader: Loader used to read the file and its partials

    Returns:
        Parsed template

    Raises:
        TemplateNotFoundError: When the file cannot be read
        MalformedTemplateError: When the source is not well formed
        PartialNotFoundError: When an included partial cannot be read

    """
    config = config or ParseConfig()
    loader = loader or FileSystemLoader()
    path = Path(path)
    try:
        data = loader.load(path)
    except (OSError, ValueError) as e:
        raise TemplateNotFoundError(path) from e

    text = decode_source(data, config.encoding, path)
    return _parse(text, path.parent, config, loader)


def _parse(
    source: str,
    base_directory: Path | None,
    config: ParseConfig,
    loader: FileLoader,
) -> Template:
    """Run a top-level parse inside a tracing span."""
    with tracer.start_as_current_span("mustache.parse") as span:
        start_time = time.perf_counter()

        span.set_attribute("mustache.source_hash", _hash_source(source))
        span.set_attribute("mustache.source_length", len(source))
        span.set_attribute("mustache.base_directory", str(base_directory or ""))

        parser = TemplateParser(config=config, loader=loader)
        state = ParseState.initial(config, base_directory)
        template = Template(tags=parser.parse(source, state))

        span.set_attribute("mustache.tag_count", sum(1 for _ in template.walk()))
        parse_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("mustache.parse_ms", parse_ms)

        return template


def _hash_source(source: str) -> str:
    """Generate hash of template source for telemetry."""
    data = source[:500].encode(errors="surrogatepass")
    return hashlib.sha256(data).hexdigest()[:16]
