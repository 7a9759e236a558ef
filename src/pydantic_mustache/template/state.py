"""Parse state threaded through every scanning call.

State is never shared between parse invocations: each call receives a state
value and hands back the state its caller continues with.
"""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel

from pydantic_mustache.core.parse_config import ParseConfig
from pydantic_mustache.template.delimiters import Delimiters
from pydantic_mustache.template.tags import Tag


class ParseState(BaseModel):
    """Delimiters in effect and the directory partials are resolved against.

    Attributes:
        delimiters: Active open/close marker pair.
        base_directory: Directory joined with partial names. None resolves
            partials against the working directory.

    """

    model_config = {"frozen": True}

    delimiters: Delimiters = Delimiters()
    base_directory: Path | None = None

    @classmethod
    def initial(
        cls, config: ParseConfig, base_directory: Path | None = None
    ) -> "ParseState":
        """Build the starting state for a top-level parse."""
        return cls(
            delimiters=Delimiters(
                open=config.open_delimiter, close=config.close_delimiter
            ),
            base_directory=base_directory,
        )

    def with_delimiters(self, delimiters: Delimiters) -> "ParseState":
        """Return a copy using a new delimiter pair."""
        return self.model_copy(update={"delimiters": delimiters})


@dataclass(frozen=True)
class ScanDone:
    """Scanning reached the end of the buffer."""

    state: ParseState
    tags: list[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class SectionClosed:
    """Scanning stopped at a closing tag.

    Attributes:
        state: State to resume with after the closing tag.
        key: Trimmed key of the closing tag.
        rest: Buffer following the closing tag.
        tags: Tags collected since scanning started.

    """

    state: ParseState
    key: str
    rest: str
    tags: list[Tag] = field(default_factory=list)


ScanResult: TypeAlias = ScanDone | SectionClosed
