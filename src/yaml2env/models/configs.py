"""Configuration models for the yaml2env project."""

from pathlib import Path

from pydantic import Field, field_validator

from yaml2env.manifest import DEFAULT_SOURCE_EXTENSION
from yaml2env.models.base import BaseConfig


class ConversionConfig(BaseConfig):
    """Configuration for a single manifest to env file conversion."""

    manifest_path: Path = Field(
        ..., description="The path to the manifest listing the yaml source files."
    )
    output_path: Path = Field(..., description="The path of the env file to write.")
    source_extension: str = Field(
        default=DEFAULT_SOURCE_EXTENSION,
        description="The extension every source file listed in the manifest must have.",
    )
    sort_keys: bool = Field(
        default=False,
        description="Write env entries sorted by key instead of in merge order.",
    )

    @field_validator("source_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Ensure the extension is non-empty, dotted and free of path separators."""
        v = v.strip()
        if not v or v == ".":
            msg = "The source extension must not be empty."
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = f"The source extension {v!r} must not contain a path separator."
            raise ValueError(msg)
        return v if v.startswith(".") else f".{v}"
