import copy

import pytest

from wardgeo.common.config_loader import DEFAULT_CONFIG
from wardgeo.common.errors import ConfigError
from wardgeo.common.schema import validate_converter_config


def _cfg() -> dict:
    return copy.deepcopy(DEFAULT_CONFIG)


def test_validate_converter_config_accepts_defaults():
    validated = validate_converter_config(_cfg())
    assert validated["collection"]["name"] == "VietNam"


def test_validate_converter_config_rejects_unknown_key_by_default():
    bad = _cfg()
    bad["unexpected"] = True
    with pytest.raises(ConfigError):
        validate_converter_config(bad)


def test_validate_converter_config_allows_unknown_when_enabled():
    okay = _cfg()
    okay["extra"] = 1
    validate_converter_config(okay, allow_unknown=True)


def test_validate_converter_config_rejects_missing_section():
    bad = _cfg()
    del bad["output"]
    with pytest.raises(ConfigError):
        validate_converter_config(bad)


def test_validate_converter_config_rejects_unsupported_language():
    bad = _cfg()
    bad["collection"]["localized_names"]["fr"] = "Viêt Nam"
    with pytest.raises(ConfigError):
        validate_converter_config(bad)


@pytest.mark.parametrize(
    "columns",
    [
        {"district": 0, "ward": 0, "geometry": 2, "status": 4},
        {"district": -1, "ward": 1, "geometry": 2, "status": 4},
        {"district": "0", "ward": 1, "geometry": 2, "status": 4},
        {"district": 0, "ward": 1, "geometry": 2},
    ],
)
def test_validate_converter_config_rejects_bad_columns(columns):
    bad = _cfg()
    bad["input"]["columns"] = columns
    with pytest.raises(ConfigError):
        validate_converter_config(bad)


def test_validate_converter_config_rejects_identical_output_names():
    bad = _cfg()
    bad["output"]["fd_zone_filename"] = bad["output"]["non_fd_zone_filename"]
    with pytest.raises(ConfigError):
        validate_converter_config(bad)


def test_validate_converter_config_rejects_unknown_row_error_policy():
    bad = _cfg()
    bad["input"]["row_error_policy"] = "ignore"
    with pytest.raises(ConfigError):
        validate_converter_config(bad)
