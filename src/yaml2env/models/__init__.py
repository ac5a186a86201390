"""Configuration models for yaml2env."""
