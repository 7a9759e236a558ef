"""Recursive-descent parser for Mustache templates.

The parser scans forward for the active open delimiter, classifies each tag
by its sigil, and recurses only for partials. Open sections are kept on an
explicit stack, so nesting depth is not bounded by the interpreter. The
delimiter pair is part of the parse state, so a ``{{=<< >>=}}`` directive
changes how the rest of the buffer is split.
"""

from dataclasses import dataclass

from opentelemetry import trace

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.core.errors import PartialRecursionError
from pydantic_mustache.core.parse_config import ParseConfig
from pydantic_mustache.template.classifier import classify
from pydantic_mustache.template.delimiters import parse_delimiter_directive
from pydantic_mustache.template.enums import Sigil
from pydantic_mustache.template.loaders import FileLoader
from pydantic_mustache.template.loaders import FileSystemLoader
from pydantic_mustache.template.partials import load_partial
from pydantic_mustache.template.state import ParseState
from pydantic_mustache.template.state import ScanDone
from pydantic_mustache.template.state import ScanResult
from pydantic_mustache.template.state import SectionClosed
from pydantic_mustache.template.tags import LiteralTag
from pydantic_mustache.template.tags import SectionTag
from pydantic_mustache.template.tags import Tag
from pydantic_mustache.template.tags import VariableTag
from pydantic_mustache.template.trim import trim

tracer = trace.get_tracer(__name__)

TRIPLE_OPEN = "{"
TRIPLE_CLOSE = "}"


class TemplateParser:
    """Parse template source into a sequence of tags.

    The parser itself holds only its configuration and file loader. All
    mutable parse state is passed into and returned from each call, so one
    parser can serve any number of independent parses.
    """

    def __init__(
        self,
        *,
        config: ParseConfig | None = None,
        loader: FileLoader | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            config: Parse configuration (defaults to ParseConfig())
            loader: Loader used to read partials (defaults to the file system)

        """
        self.config = config or ParseConfig()
        self.loader: FileLoader = loader or FileSystemLoader()

    def parse(self, source: str, state: ParseState | None = None) -> tuple[Tag, ...]:
        """Parse a complete template.

        Args:
            source: Template source text
            state: Starting state (defaults to the configured delimiters and
                no base directory)

        Returns:
            Tags in source order

        Raises:
            MalformedTemplateError: When the source is not well formed
            PartialNotFoundError: When an included partial cannot be read

        """
        state = state or ParseState.initial(self.config)
        match self._scan(state, source, [], depth=0):
            case SectionClosed(key=key):
                msg = f"Closing tag '{key}' has no open section"
                raise MalformedTemplateError(msg)
            case ScanDone(tags=tags):
                return tuple(tags)

    def _scan(
        self, state: ParseState, text: str, tags: list[Tag], depth: int
    ) -> ScanResult:
        """Scan ``text`` until it is exhausted or an unmatched closing tag is met.

        Tags are appended to ``tags``. Every split of the buffer emits a
        literal, empty or not. Sections opened in ``text`` are tracked on an
        explicit stack and must be closed within ``text``.
        """
        open_sections: list[_OpenSection] = []
        current = tags
        pos = 0
        while True:
            start = text.find(state.delimiters.open, pos)
            if start < 0:
                current.append(LiteralTag(text=text[pos:]))
                if open_sections:
                    msg = f"Section '{open_sections[-1].key}' is never closed"
                    raise MalformedTemplateError(msg)
                return ScanDone(state=state, tags=tags)

            current.append(LiteralTag(text=text[pos:start]))
            pos = start + len(state.delimiters.open)

            if text.startswith(TRIPLE_OPEN, pos):
                key, pos = self._split_triple(state, text, pos + len(TRIPLE_OPEN))
                current.append(VariableTag(key=trim(key), escape=False))
                continue

            end = text.find(state.delimiters.close, pos)
            if end < 0:
                msg = (
                    f"Unterminated tag: '{state.delimiters.open}"
                    f"{text[pos : pos + 40]}' has no closing "
                    f"'{state.delimiters.close}'"
                )
                raise MalformedTemplateError(msg)
            content = classify(text[pos:end])
            pos = end + len(state.delimiters.close)

            match content.sigil:
                case Sigil.VARIABLE:
                    current.append(VariableTag(key=content.argument))
                case Sigil.UNESCAPED:
                    current.append(VariableTag(key=content.argument, escape=False))
                case Sigil.SECTION | Sigil.INVERTED:
                    open_sections.append(
                        _OpenSection(
                            key=content.argument,
                            negate=content.sigil is Sigil.INVERTED,
                            parent=current,
                        )
                    )
                    current = []
                case Sigil.DELIMITER:
                    state = state.with_delimiters(
                        parse_delimiter_directive(content.argument)
                    )
                case Sigil.COMMENT:
                    pass
                case Sigil.CLOSE:
                    if not open_sections:
                        return SectionClosed(
                            state=state,
                            key=content.argument,
                            rest=text[pos:],
                            tags=tags,
                        )
                    section = open_sections.pop()
                    if content.argument != section.key:
                        msg = (
                            f"Section '{section.key}' closed by mismatched tag "
                            f"'{content.argument}'"
                        )
                        raise MalformedTemplateError(msg)
                    section.parent.append(
                        SectionTag(
                            key=section.key,
                            negate=section.negate,
                            children=tuple(current),
                        )
                    )
                    current = section.parent
                case Sigil.PARTIAL:
                    state = self._include_partial(
                        state, content.argument, current, depth
                    )

    def _split_triple(self, state: ParseState, text: str, pos: int) -> tuple[str, int]:
        """Return the key of a triple mustache and the position after it."""
        terminator = TRIPLE_CLOSE + state.delimiters.close
        end = text.find(terminator, pos)
        if end < 0:
            msg = (
                f"Unterminated triple mustache: '{state.delimiters.open}"
                f"{TRIPLE_OPEN}{text[pos : pos + 40]}' has no closing '{terminator}'"
            )
            raise MalformedTemplateError(msg)
        return text[pos:end], end + len(terminator)

    def _include_partial(
        self, state: ParseState, name: str, tags: list[Tag], depth: int
    ) -> ParseState:
        """Splice the tags of partial ``name`` into ``tags``.

        The partial is parsed with the current state, and the state it ends
        with carries over into the including template.
        """
        if depth >= self.config.max_partial_depth:
            msg = (
                f"Partial '{name}' exceeds the maximum inclusion depth of "
                f"{self.config.max_partial_depth}"
            )
            raise PartialRecursionError(msg)

        with tracer.start_as_current_span("mustache.partial") as span:
            span.set_attribute("mustache.partial.name", name)
            path, source = load_partial(name, state, self.loader, self.config)
            span.set_attribute("mustache.partial.path", str(path))

            match self._scan(state, source, tags, depth + 1):
                case SectionClosed(key=key):
                    msg = (
                        f"Closing tag '{key}' in partial '{name}' "
                        "has no open section"
                    )
                    raise MalformedTemplateError(msg)
                case ScanDone(state=state):
                    return state


@dataclass(frozen=True)
class _OpenSection:
    """A section whose closing tag has not been reached yet."""

    key: str
    negate: bool
    parent: list[Tag]
