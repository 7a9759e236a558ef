"""File loaders used to read templates and partials."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class FileLoader(Protocol):
    """Protocol for reading template files."""

    def load(self, path: Path) -> bytes:
        """Return the full content of ``path``.

        Raises:
            OSError: When the path cannot be read

        """
        ...


class FileSystemLoader:
    """Read templates from the local file system."""

    def load(self, path: Path) -> bytes:
        """Read the file at ``path``."""
        return Path(path).read_bytes()


class MappingLoader:
    """Serve templates from an in-memory mapping of path to content."""

    def __init__(
        self, files: Mapping[str | Path, str | bytes], *, encoding: str = "utf-8"
    ) -> None:
        """Initialize the mapping loader.

        Args:
            files: Template content keyed by path
            encoding: Encoding applied to str content

        """
        self._files = {Path(path): content for path, content in files.items()}
        self.encoding = encoding

    def load(self, path: Path) -> bytes:
        """Return the content registered for ``path``.

        Raises:
            FileNotFoundError: When no content is registered for the path

        """
        try:
            content = self._files[Path(path)]
        except KeyError as e:
            raise FileNotFoundError(str(path)) from e
        if isinstance(content, str):
            return content.encode(self.encoding)
        return content
