"""Feature construction from filtered records."""

from __future__ import annotations

import logging
from typing import Iterable

from wardgeo.common.models import POLYGON, Feature, Geometry, Record
from wardgeo.pipeline.coordinates import CoordinatePolicy, parse_coordinates


def feature_name(record: Record) -> str:
    return f"District {record.district} - Ward {record.ward}"


def build_feature(
    record: Record,
    *,
    policy: CoordinatePolicy = CoordinatePolicy.FAIL,
    logger: logging.Logger | None = None,
) -> Feature:
    ring_set = parse_coordinates(record.raw_geometry, policy, logger=logger, row_index=record.row_index)
    return Feature(geometry=Geometry(kind=POLYGON, polygons=(ring_set,)), name=feature_name(record))


def build_features(
    records: Iterable[Record],
    *,
    policy: CoordinatePolicy = CoordinatePolicy.FAIL,
    logger: logging.Logger | None = None,
) -> list[Feature]:
    return [build_feature(record, policy=policy, logger=logger) for record in records]
