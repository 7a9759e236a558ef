"""Resolution of partial template names to file contents."""

from pathlib import Path

from pydantic_mustache.core.errors import MalformedTemplateError
from pydantic_mustache.core.errors import PartialNotFoundError
from pydantic_mustache.core.parse_config import ParseConfig
from pydantic_mustache.template.loaders import FileLoader
from pydantic_mustache.template.state import ParseState


def partial_paths(
    name: str, base_directory: Path | None, extension: str = ""
) -> list[Path]:
    """List the paths tried for a partial, in order.

    Args:
        name: Trimmed partial name from ``{{>name}}``
        base_directory: Directory of the including file, if any
        extension: Suffix retried when the bare name cannot be read

    Returns:
        Candidate paths, the bare name first

    """
    path = base_directory / name if base_directory is not None else Path(name)
    paths = [path]
    if extension and name and path.name and not name.endswith(extension):
        paths.append(path.with_name(path.name + extension))
    return paths


def load_partial(
    name: str, state: ParseState, loader: FileLoader, config: ParseConfig
) -> tuple[Path, str]:
    """Read and decode the source of a partial.

    Args:
        name: Trimmed partial name
        state: Current parse state supplying the base directory
        loader: File loader used for reading
        config: Parse configuration

    Returns:
        Path that was read and its decoded content

    Raises:
        PartialNotFoundError: When no candidate path can be read
        MalformedTemplateError: When the content cannot be decoded

    """
    paths = partial_paths(name, state.base_directory, config.partial_extension)
    error: OSError | ValueError | None = None
    for path in paths:
        try:
            data = loader.load(path)
        except (OSError, ValueError) as e:
            # ValueError covers names the OS rejects, e.g. embedded null bytes
            error = e
            continue
        return path, decode_source(data, config.encoding, path)

    raise PartialNotFoundError(name, paths[-1]) from error


def decode_source(data: bytes | str, encoding: str, origin: object = None) -> str:
    """Decode template source, passing str through unchanged."""
    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        where = f" in {origin}" if origin is not None else ""
        msg = f"Cannot decode template source{where} as {encoding}: {e}"
        raise MalformedTemplateError(msg) from e
