"""Application constants."""

EXIT_SUCCESS = 0
EXIT_USAGE = 2
EXIT_HARD_FAIL = 20

CONFIG_FILENAME = "converter.yml"
FD_ZONE_FILENAME = "FD_zone.geojson"
NON_FD_ZONE_FILENAME = "non_FD_zone.geojson"
STATUS_OK = "Ok"

# Order matters: this is the key order of the rendered FeatureCollection.
LANGUAGE_CODES = ("en", "ko", "zh_hans", "zh_hant", "ja", "id", "vi", "km")

COORDINATE_POLICIES = ("fail", "zero")
ROW_ERROR_POLICIES = ("abort", "skip")

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "row_index",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
