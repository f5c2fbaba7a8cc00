"""CSV row parsing and status filtering."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable

from wardgeo.common.constants import STATUS_OK
from wardgeo.common.errors import InputError, RowParseError
from wardgeo.common.logging import log_warning
from wardgeo.common.models import Record

DEFAULT_COLUMNS = {"district": 0, "ward": 1, "geometry": 2, "status": 4}


def _record_from_line(line: list[str], row_index: int, columns: dict[str, int], expected_fields: int) -> Record:
    if len(line) != expected_fields:
        raise RowParseError(row_index, f"expected {expected_fields} fields, got {len(line)}")
    required = max(columns.values()) + 1
    if len(line) < required:
        raise RowParseError(row_index, f"expected at least {required} fields, got {len(line)}")
    return Record(
        district=line[columns["district"]],
        ward=line[columns["ward"]],
        raw_geometry=line[columns["geometry"]],
        status_flag=line[columns["status"]],
        row_index=row_index,
    )


def _find_bare_quote(raw: str) -> int | None:
    """Return the offset of a ``"`` that appears inside an unquoted field."""
    quoted = False
    field_start = True
    i = 0
    while i < len(raw):
        c = raw[i]
        if quoted:
            if c == '"':
                if raw[i + 1 : i + 2] == '"':
                    i += 1
                else:
                    quoted = False
        elif c == '"':
            if not field_start:
                return i
            quoted = True
        field_start = c == "," and not quoted
        i += 1
    return None


def read_records(
    path: Path,
    *,
    columns: dict[str, int] | None = None,
    row_error_policy: str = "abort",
    logger: logging.Logger | None = None,
) -> list[Record]:
    """Read data rows from ``path``; the first non-empty row is discarded as a header.

    Every data row must have as many fields as the header. ``row_error_policy``
    is ``"abort"`` (raise on the first bad row) or ``"skip"`` (log and drop it).
    """
    columns = columns or DEFAULT_COLUMNS
    records: list[Record] = []
    try:
        f = path.open("r", encoding="utf-8-sig", newline="")
    except OSError as exc:
        raise InputError(f"Cannot open CSV input {path}: {exc.strerror or exc}") from exc

    with f:
        consumed: list[str] = []

        def _lines():
            for physical_line in f:
                consumed.append(physical_line)
                yield physical_line

        reader = csv.reader(_lines(), strict=True)
        header_fields: int | None = None
        while True:
            consumed.clear()
            try:
                line = next(reader)
                bare_quote = _find_bare_quote("".join(consumed))
                if bare_quote is not None:
                    raise RowParseError(reader.line_num, f'bare " in non-quoted field at offset {bare_quote}')
            except StopIteration:
                break
            except UnicodeDecodeError as exc:
                raise InputError(f"CSV input {path} is not valid UTF-8 near line {reader.line_num + 1}") from exc
            except csv.Error as exc:
                error = RowParseError(reader.line_num, str(exc))
                if row_error_policy != "skip":
                    raise error from exc
                _warn_skipped(logger, error, path)
                continue
            except RowParseError as error:
                if row_error_policy != "skip":
                    raise
                _warn_skipped(logger, error, path)
                continue

            if not line:
                continue
            if header_fields is None:
                header_fields = len(line)
                continue

            try:
                records.append(_record_from_line(line, reader.line_num, columns, header_fields))
            except RowParseError as error:
                if row_error_policy != "skip":
                    raise
                _warn_skipped(logger, error, path)

    return records


def _warn_skipped(logger: logging.Logger | None, error: RowParseError, path: Path) -> None:
    if logger is None:
        return
    log_warning(
        logger,
        f"skipping row: {error.cause}",
        stage="parse",
        source=str(path),
        event="ROW_SKIPPED",
        status="warning",
        row_index=error.row_index,
        error_code=error.error_code,
    )


def is_fd_zone(record: Record, ok_value: str = STATUS_OK) -> bool:
    return record.status_flag.casefold() == ok_value.casefold()


def filter_records(records: Iterable[Record], fd_zone: bool, *, ok_value: str = STATUS_OK) -> list[Record]:
    """Keep FD zone rows when ``fd_zone`` is true, every other row otherwise."""
    return [record for record in records if is_fd_zone(record, ok_value) == fd_zone]
