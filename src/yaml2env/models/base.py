"""Base models for the yaml2env project."""

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel


class BaseConfig(BaseModel):
    """A base configuration for a yaml2env run."""

    @classmethod
    def from_manifest(cls, manifest_path: Path | str) -> Self:
        """Load the configuration from a yaml settings file."""
        with open(manifest_path) as f:
            manifest = yaml.safe_load(f)
        if not isinstance(manifest, dict):
            msg = f"Settings file {manifest_path} must contain a mapping at the top level."
            raise ValueError(msg)
        return cls.model_validate(manifest)

    @classmethod
    def from_(cls, v: Self | dict | Path | str) -> Self:
        """Load the configuration from an instance, a dict, or a settings file path."""
        if isinstance(v, cls):
            return v
        if isinstance(v, dict):
            return cls.model_validate(v)
        return cls.from_manifest(v)
