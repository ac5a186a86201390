"""Extract key-value entries from line-oriented yaml source files."""

import logging
from pathlib import Path

from yaml2env.errors import ContentValidationError, SourceReadError
from yaml2env.utils import split_lines

logger = logging.getLogger(__name__)

KEY_VALUE_SEPARATOR = ":"


def parse_entries(text: str, path: Path | str) -> list[tuple[str, str]]:
    """Split every line of a source file at its first colon.

    Keys and values are returned untrimmed. A single line without a colon,
    blank lines included, rejects the whole file.
    """
    entries: list[tuple[str, str]] = []
    for line_number, line in enumerate(split_lines(text), start=1):
        key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            logger.error(
                "Line %d of %s has no %r separator",
                line_number,
                path,
                KEY_VALUE_SEPARATOR,
            )
            raise ContentValidationError(path, line_number)
        entries.append((key, value))
    return entries


def extract_entries(path: Path | str) -> list[tuple[str, str]]:
    """Read a source file and return its key-value entries in line order."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path) from e
    entries = parse_entries(text, path)
    logger.debug("Extracted %d entries from %s", len(entries), path)
    return entries
