"""Domain errors and failure typing."""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for conversion failures."""

    error_code = "CONVERTER_ERROR"


class ConfigError(ConverterError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputError(ConverterError):
    """Raised when the input CSV cannot be opened or read."""

    error_code = "INPUT_ERROR"


class RowParseError(ConverterError):
    """Raised when a data row is structurally unusable."""

    error_code = "ROW_PARSE_ERROR"

    def __init__(self, row_index: int, cause: str) -> None:
        super().__init__(f"row {row_index}: {cause}")
        self.row_index = row_index
        self.cause = cause


class CoordinateParseError(ConverterError):
    """Raised when a coordinate string or one of its tokens cannot be parsed."""

    error_code = "COORDINATE_PARSE_ERROR"

    def __init__(self, message: str, *, token: str | None = None, row_index: int | None = None) -> None:
        super().__init__(message if row_index is None else f"row {row_index}: {message}")
        self.reason = message
        self.token = token
        self.row_index = row_index

    def with_row(self, row_index: int) -> "CoordinateParseError":
        return CoordinateParseError(self.reason, token=self.token, row_index=row_index)


class OutputWriteError(ConverterError):
    """Raised when the output collection cannot be written."""

    error_code = "OUTPUT_WRITE_ERROR"

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"cannot write {path}: {cause}")
        self.path = path
        self.cause = cause
