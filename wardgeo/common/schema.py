"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from wardgeo.common.constants import COORDINATE_POLICIES, LANGUAGE_CODES, ROW_ERROR_POLICIES
from wardgeo.common.errors import ConfigError

COLUMN_KEYS = {"district", "ward", "geometry", "status"}


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _validate_collection(section: dict, allow_unknown: bool) -> None:
    _assert_mapping(section, "collection")
    _assert_required_keys(section, {"name", "localized_names"}, "collection")
    _assert_no_unknown_keys(section, {"name", "localized_names"}, "collection", allow_unknown)
    names = section["localized_names"]
    _assert_mapping(names, "collection.localized_names")
    unknown = set(names) - set(LANGUAGE_CODES)
    if unknown:
        raise ConfigError(f"Unsupported language codes: {', '.join(sorted(unknown))}")
    for code, value in names.items():
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"collection.localized_names.{code} must be a string")


def _validate_input(section: dict, allow_unknown: bool) -> None:
    known = {"columns", "ok_value", "row_error_policy"}
    _assert_mapping(section, "input")
    _assert_required_keys(section, known, "input")
    _assert_no_unknown_keys(section, known, "input", allow_unknown)

    columns = section["columns"]
    _assert_mapping(columns, "input.columns")
    _assert_required_keys(columns, COLUMN_KEYS, "input.columns")
    _assert_no_unknown_keys(columns, COLUMN_KEYS, "input.columns", allow_unknown=False)
    offsets = []
    for key in sorted(COLUMN_KEYS):
        value = columns[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"input.columns.{key} must be a non-negative integer")
        offsets.append(value)
    if len(set(offsets)) != len(offsets):
        raise ConfigError("input.columns offsets must be distinct")

    if section["row_error_policy"] not in ROW_ERROR_POLICIES:
        raise ConfigError(f"input.row_error_policy must be one of {', '.join(ROW_ERROR_POLICIES)}")
    if not isinstance(section["ok_value"], str) or not section["ok_value"]:
        raise ConfigError("input.ok_value must be a non-empty string")


def _validate_output(section: dict, allow_unknown: bool) -> None:
    known = {"directory", "fd_zone_filename", "non_fd_zone_filename", "indent"}
    _assert_mapping(section, "output")
    _assert_required_keys(section, known, "output")
    _assert_no_unknown_keys(section, known, "output", allow_unknown)
    if section["fd_zone_filename"] == section["non_fd_zone_filename"]:
        raise ConfigError("output filenames for the two modes must differ")
    indent = section["indent"]
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
        raise ConfigError("output.indent must be null or a non-negative integer")


def validate_converter_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"collection", "input", "coordinates", "output"}
    _assert_mapping(cfg, "converter config")
    _assert_required_keys(cfg, top_required, "converter config")
    _assert_no_unknown_keys(cfg, top_required, "converter config", allow_unknown)

    _validate_collection(cfg["collection"], allow_unknown)
    _validate_input(cfg["input"], allow_unknown)

    _assert_mapping(cfg["coordinates"], "coordinates")
    _assert_required_keys(cfg["coordinates"], {"policy"}, "coordinates")
    if cfg["coordinates"]["policy"] not in COORDINATE_POLICIES:
        raise ConfigError(f"coordinates.policy must be one of {', '.join(COORDINATE_POLICIES)}")

    _validate_output(cfg["output"], allow_unknown)
    return cfg
