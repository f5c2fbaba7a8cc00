"""Configuration loading and validation."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from wardgeo.common.constants import (
    CONFIG_FILENAME,
    FD_ZONE_FILENAME,
    NON_FD_ZONE_FILENAME,
    STATUS_OK,
)
from wardgeo.common.errors import ConfigError
from wardgeo.common.fs import read_yaml
from wardgeo.common.models import CollectionMetadata
from wardgeo.common.schema import validate_converter_config

DEFAULT_CONFIG: dict[str, Any] = {
    "collection": {
        "name": "VietNam",
        "localized_names": {
            "en": "VietNam",
            "ko": "",
            "zh_hans": "",
            "zh_hant": "",
            "ja": "",
            "id": "",
            "vi": "Việt Nam",
            "km": "",
        },
    },
    "input": {
        "columns": {"district": 0, "ward": 1, "geometry": 2, "status": 4},
        "ok_value": STATUS_OK,
        "row_error_policy": "abort",
    },
    "coordinates": {"policy": "fail"},
    "output": {
        "directory": ".",
        "fd_zone_filename": FD_ZONE_FILENAME,
        "non_fd_zone_filename": NON_FD_ZONE_FILENAME,
        "indent": None,
    },
}


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_mapping(path: Path) -> dict:
    payload = read_yaml(path)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return payload


def load_converter_config(
    config_dir: Path | None,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> dict:
    """Build the effective config: defaults, then ``converter.yml``, then the overlay.

    Missing files are skipped so the converter runs with built-in defaults.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    for directory in (config_dir, overlay_config_dir):
        if directory is None:
            continue
        path = directory / CONFIG_FILENAME
        if not path.exists():
            continue
        cfg = _deep_merge(cfg, _read_mapping(path))
    return validate_converter_config(cfg, allow_unknown=allow_unknown)


def collection_metadata(cfg: dict) -> CollectionMetadata:
    section = cfg["collection"]
    names = {code: value or "" for code, value in section["localized_names"].items()}
    return CollectionMetadata(name=section["name"], localized_names=names)
