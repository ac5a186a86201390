"""Errors raised while converting yaml source files into an env file."""

from collections.abc import Sequence
from pathlib import Path


class Yaml2EnvError(Exception):
    """Base class for every fatal conversion error."""

    def __init__(self, message: str):
        """Store the user-facing message."""
        super().__init__(message)
        self.message = message


class ConfigReadError(Yaml2EnvError):
    """The manifest file could not be opened or read."""

    def __init__(self, path: Path | str):
        """Build the error for the unreadable manifest path."""
        self.path = Path(path)
        super().__init__(f"Could not read config file: {path}")


class PathValidationError(Yaml2EnvError):
    """One or more manifest entries lack the required source extension."""

    def __init__(self, extension: str, invalid_paths: Sequence[str]):
        """Build the error for the required extension and the offending entries."""
        self.extension = extension
        self.invalid_paths = list(invalid_paths)
        super().__init__(f"All paths in config file must have {extension} extension")


class SourceReadError(Yaml2EnvError):
    """A validated source file could not be opened or read."""

    def __init__(self, path: Path | str):
        """Build the error for the unreadable source path."""
        self.path = Path(path)
        super().__init__(f"Could not read yaml file with path: {path}")


class ContentValidationError(Yaml2EnvError):
    """A source file contains a line without a key-value separator."""

    def __init__(self, path: Path | str, line_number: int):
        """Build the error for the rejected file.

        `line_number` is the 1-based index of the first malformed line.
        """
        self.path = Path(path)
        self.line_number = line_number
        super().__init__(f"Unsupported yaml structure in file with path: {path}")


class OutputWriteError(Yaml2EnvError):
    """The env file could not be created or written."""

    def __init__(self, path: Path | str, reason: str):
        """Build the error for the output path and the underlying reason."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error when trying to write env file {path}: {reason}")
