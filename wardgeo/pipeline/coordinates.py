"""Parsing of ``(lon,lat lon,lat ...)`` ring strings into coordinate rings."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from wardgeo.common.errors import CoordinateParseError
from wardgeo.common.logging import log_warning
from wardgeo.common.models import Point, Ring, RingSet

DELIMITER_PAIRS = {"(": ")", "[": "]", "{": "}"}


class CoordinatePolicy(str, Enum):
    FAIL = "fail"
    ZERO = "zero"


@dataclass(frozen=True)
class ParsedPoint:
    token: str
    longitude: float | None
    latitude: float | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_point(self) -> Point:
        return (
            self.longitude if self.longitude is not None else 0.0,
            self.latitude if self.latitude is not None else 0.0,
        )


def _safe_float(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    # NaN and infinities cannot be serialised as JSON numbers.
    if not math.isfinite(number):
        return None
    return number


def _strip_delimiters(raw: str) -> str:
    text = raw.strip()
    if len(text) < 2:
        raise CoordinateParseError(f"coordinate string too short: {raw!r}")
    opening, closing = text[0], text[-1]
    if DELIMITER_PAIRS.get(opening) != closing:
        raise CoordinateParseError(f"unbalanced delimiters {opening!r}...{closing!r}")
    return text[1:-1]


def _parse_token(token: str) -> ParsedPoint:
    parts = token.split(",")
    if len(parts) != 2:
        lon = _safe_float(parts[0]) if parts else None
        return ParsedPoint(token, lon, None, f"expected 'lon,lat', got {token!r}")
    lon = _safe_float(parts[0])
    lat = _safe_float(parts[1])
    if lon is None or lat is None:
        return ParsedPoint(token, lon, lat, f"invalid number in {token!r}")
    return ParsedPoint(token, lon, lat)


def parse_points(raw: str) -> list[ParsedPoint]:
    """Split a wrapped coordinate string into per-point parse results.

    Delimiter problems raise ``CoordinateParseError``; numeric problems are
    reported on the returned points and left to the caller.
    """
    tokens = _strip_delimiters(raw).split()
    if not tokens:
        raise CoordinateParseError(f"no coordinate pairs in {raw!r}")
    return [_parse_token(token) for token in tokens]


def points_to_ring(
    points: list[ParsedPoint],
    policy: CoordinatePolicy = CoordinatePolicy.FAIL,
    *,
    logger: logging.Logger | None = None,
    row_index: int | None = None,
) -> Ring:
    policy = CoordinatePolicy(policy)
    ring: list[Point] = []
    for point in points:
        if not point.ok:
            if policy is CoordinatePolicy.FAIL:
                raise CoordinateParseError(point.error, token=point.token, row_index=row_index)
            if logger is not None:
                log_warning(
                    logger,
                    f"zero-filled coordinate token: {point.error}",
                    stage="build",
                    event="COORDINATE_ZERO_FILLED",
                    status="warning",
                    row_index=row_index,
                    error_code=CoordinateParseError.error_code,
                )
        ring.append(point.as_point())
    return tuple(ring)


def parse_coordinates(
    raw: str,
    policy: CoordinatePolicy = CoordinatePolicy.FAIL,
    *,
    logger: logging.Logger | None = None,
    row_index: int | None = None,
) -> RingSet:
    """Return a ring-set holding the single ring described by ``raw``."""
    try:
        points = parse_points(raw)
    except CoordinateParseError as exc:
        if row_index is None:
            raise
        raise exc.with_row(row_index) from exc
    return (points_to_ring(points, policy, logger=logger, row_index=row_index),)
