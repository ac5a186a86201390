"""yaml2env: merge line-oriented yaml key-value files into a single env file."""

__version__ = "0.1.0"
