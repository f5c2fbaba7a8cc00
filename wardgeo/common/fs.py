"""Filesystem helpers."""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def replace_file_bytes(path: Path, data: bytes) -> None:
    """Remove any existing file at ``path`` and write ``data`` in one call."""
    ensure_dir(path.parent)
    if path.exists():
        path.unlink()
    with path.open("wb") as f:
        f.write(data)
