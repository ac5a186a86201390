"""Reading and validating the manifest of source file paths."""

import logging
from collections.abc import Sequence
from pathlib import Path, PurePath

from yaml2env.errors import ConfigReadError, PathValidationError
from yaml2env.utils import split_lines

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_EXTENSION = ".yaml"


def read_manifest(path: Path | str) -> list[str]:
    """Read the manifest and return one path string per line, verbatim.

    Lines are neither trimmed nor filtered, so blank lines are kept and will
    fail validation later.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path) from e
    paths = split_lines(text)
    logger.info("Read %d source paths from manifest %s", len(paths), path)
    return paths


def has_extension(path: str, extension: str) -> bool:
    """Whether the path's final suffix is exactly the given extension."""
    return PurePath(path).suffix == extension


def validate_source_paths(
    paths: Sequence[str], extension: str = DEFAULT_SOURCE_EXTENSION
) -> list[str]:
    """Check that every manifest entry carries the source extension.

    Every offending entry is reported before failing. On success the paths are
    returned unchanged.
    """
    if not extension.startswith("."):
        extension = f".{extension}"

    invalid = [p for p in paths if not has_extension(p, extension)]
    if invalid:
        for p in invalid:
            logger.error("Manifest entry %r does not have a %s extension", p, extension)
        raise PathValidationError(extension, invalid)
    return list(paths)
