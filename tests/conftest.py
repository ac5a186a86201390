from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write source files and a manifest listing them, in the given order."""

    def _write(sources: dict[str, str], extra_lines: list[str] | None = None) -> Path:
        lines = []
        for name, content in sources.items():
            path = tmp_path / name
            path.write_text(content, encoding="utf-8")
            lines.append(str(path))
        lines.extend(extra_lines or [])
        manifest = tmp_path / "manifest.txt"
        manifest.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return manifest

    return _write
