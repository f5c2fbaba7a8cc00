"""Conversion orchestration: parse, filter, build, group, assemble, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from wardgeo.common.config_loader import collection_metadata
from wardgeo.common.logging import log_event
from wardgeo.pipeline.collection import assemble_collection
from wardgeo.pipeline.coordinates import CoordinatePolicy
from wardgeo.pipeline.features import build_features
from wardgeo.pipeline.grouping import group_features, sort_by_district
from wardgeo.pipeline.rows import filter_records, read_records
from wardgeo.pipeline.writer import Sink, write_collection


@dataclass(frozen=True)
class ConversionResult:
    output: str
    rows_read: int
    rows_kept: int
    features_written: int


def run_conversion(
    input_path: Path,
    *,
    fd_zone: bool,
    cfg: dict,
    sink: Sink,
    logger: logging.Logger,
    run_id: str,
    group_districts: bool = False,
    sort_districts: bool = False,
) -> ConversionResult:
    source = str(input_path)

    def _start(stage: str) -> None:
        log_event(logger, f"{stage} start", run_id=run_id, stage=stage, source=source, event="STAGE_START", status="ok")

    def _end(stage: str, rows_in: int, rows_out: int) -> None:
        log_event(
            logger,
            f"{stage} complete",
            run_id=run_id,
            stage=stage,
            source=source,
            event="STAGE_END",
            status="ok",
            rows_in=rows_in,
            rows_out=rows_out,
        )

    input_cfg = cfg["input"]
    _start("parse")
    records = read_records(
        input_path,
        columns=input_cfg["columns"],
        row_error_policy=input_cfg["row_error_policy"],
        logger=logger,
    )
    _end("parse", len(records), len(records))

    _start("filter")
    kept = filter_records(records, fd_zone, ok_value=input_cfg["ok_value"])
    _end("filter", len(records), len(kept))

    _start("build")
    policy = CoordinatePolicy(cfg["coordinates"]["policy"])
    features = build_features(kept, policy=policy, logger=logger)
    _end("build", len(kept), len(features))

    if group_districts:
        _start("group")
        ordered = sort_by_district(features) if sort_districts else features
        grouped = group_features(ordered)
        _end("group", len(features), len(grouped))
        features = grouped

    _start("assemble")
    collection = assemble_collection(features, collection_metadata(cfg))
    _end("assemble", len(features), len(collection.features))

    _start("write")
    output = write_collection(collection, fd_zone, sink, cfg["output"])
    _end("write", len(collection.features), len(collection.features))

    return ConversionResult(
        output=output,
        rows_read=len(records),
        rows_kept=len(kept),
        features_written=len(collection.features),
    )
