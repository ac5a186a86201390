"""Merge extracted entries and render them as an env file."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from yaml2env.errors import OutputWriteError

logger = logging.getLogger(__name__)


def merge_entries(
    per_file_entries: Iterable[Iterable[tuple[str, str]]],
) -> dict[str, str]:
    """Merge entries from every source file into one mapping.

    Files are merged in manifest order and entries in line order, so the last
    value seen for a key wins. Keys and values are kept untrimmed.
    """
    merged: dict[str, str] = {}
    for entries in per_file_entries:
        for key, value in entries:
            merged[key] = value
    return merged


def serialize_env(env: Mapping[str, str], sort_keys: bool = False) -> str:
    """Render the mapping as `key=value` lines with surrounding whitespace trimmed.

    Lines follow the mapping's iteration order unless `sort_keys` is set, in
    which case they are ordered by trimmed key.
    """
    items = list(env.items())
    if sort_keys:
        items.sort(key=lambda kv: (kv[0].strip(), kv[0]))
    return "".join(f"{k.strip()}={v.strip()}\n" for k, v in items)


def write_env_file(path: Path | str, content: str) -> None:
    """Create or truncate the env file and write the rendered content."""
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
