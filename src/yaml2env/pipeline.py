"""Pipeline that turns a manifest of yaml sources into a single env file."""

import logging
from dataclasses import dataclass
from pathlib import Path

from yaml2env.envfile import merge_entries, serialize_env, write_env_file
from yaml2env.manifest import read_manifest, validate_source_paths
from yaml2env.models.configs import ConversionConfig
from yaml2env.sources import extract_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Summary of a successful conversion."""

    output_path: Path
    source_count: int
    entry_count: int


def run_pipeline(config: ConversionConfig) -> ConversionResult:
    """Convert the sources listed in the manifest into the configured env file.

    Every source file is read and parsed before the output is touched, so a
    failure at any step leaves the output path as it was.
    """
    paths = read_manifest(config.manifest_path)
    source_paths = validate_source_paths(paths, config.source_extension)

    per_file_entries = []
    for source_path in source_paths:
        logger.info("Reading source file %s", source_path)
        per_file_entries.append(extract_entries(source_path))

    env = merge_entries(per_file_entries)
    content = serialize_env(env, sort_keys=config.sort_keys)
    write_env_file(config.output_path, content)
    logger.info("Wrote %d vars to %s", len(env), config.output_path)

    return ConversionResult(
        output_path=config.output_path,
        source_count=len(source_paths),
        entry_count=len(env),
    )
