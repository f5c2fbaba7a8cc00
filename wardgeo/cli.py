"""Convert a ward boundary CSV into an FD zone or non-FD zone GeoJSON collection."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wardgeo.common.config_loader import load_converter_config
from wardgeo.common.constants import COORDINATE_POLICIES, EXIT_HARD_FAIL, EXIT_SUCCESS, EXIT_USAGE, ROW_ERROR_POLICIES
from wardgeo.common.errors import ConverterError, InputError
from wardgeo.common.ids import generate_run_id
from wardgeo.common.logging import build_logger, log_event
from wardgeo.pipeline.runner import run_conversion
from wardgeo.pipeline.writer import FileSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wardgeo", description=__doc__)
    parser.add_argument("-f", "--file", dest="file", default=None, help="input CSV path")
    parser.add_argument(
        "-d",
        "--fd-mode",
        dest="fd_mode",
        type=int,
        default=0,
        choices=[0, 1],
        help="0: normal / 1: FD zone mode",
    )
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--output-dir", default=None)
    parser.add_argument("--coordinate-policy", default=None, choices=list(COORDINATE_POLICIES))
    parser.add_argument("--on-row-error", default=None, choices=list(ROW_ERROR_POLICIES))
    parser.add_argument("--group-districts", action="store_true")
    parser.add_argument("--sort-districts", action="store_true")
    parser.add_argument("--pretty", action="store_true")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--run-id", default=None)
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _apply_overrides(cfg: dict, args: argparse.Namespace) -> dict:
    if args.output_dir is not None:
        cfg["output"]["directory"] = args.output_dir
    if args.coordinate_policy is not None:
        cfg["coordinates"]["policy"] = args.coordinate_policy
    if args.on_row_error is not None:
        cfg["input"]["row_error_policy"] = args.on_row_error
    if args.pretty and cfg["output"]["indent"] is None:
        cfg["output"]["indent"] = 2
    return cfg


def run_command(args: argparse.Namespace) -> int:
    fd_zone = args.fd_mode == 1
    run_id = args.run_id or generate_run_id(fd_zone)
    logger = build_logger(
        run_id,
        level=args.log_level,
        log_path=Path(args.log_file) if args.log_file else None,
    )
    log_event(
        logger,
        f"run start (fd_zone={fd_zone})",
        run_id=run_id,
        source=args.file,
        event="RUN_START",
        status="ok",
    )

    try:
        if not args.file:
            raise InputError("no input file given (-f)")
        overlay = Path(args.overlay_config_dir) if args.overlay_config_dir else None
        cfg = _apply_overrides(load_converter_config(Path(args.config_dir), overlay_config_dir=overlay), args)
        result = run_conversion(
            Path(args.file),
            fd_zone=fd_zone,
            cfg=cfg,
            sink=FileSink(Path(cfg["output"]["directory"])),
            logger=logger,
            run_id=run_id,
            group_districts=args.group_districts,
            sort_districts=args.sort_districts,
        )
    except ConverterError as exc:
        logger.error(
            str(exc),
            extra={
                "run_id": run_id,
                "source": args.file,
                "event": "STAGE_FAIL",
                "status": "error",
                "row_index": getattr(exc, "row_index", None),
                "error_code": exc.error_code,
            },
        )
        return EXIT_HARD_FAIL
    except Exception as exc:
        logger.error(
            f"unexpected failure: {exc}",
            extra={
                "run_id": run_id,
                "source": args.file,
                "event": "STAGE_FAIL",
                "status": "error",
                "error_code": "UNEXPECTED_ERROR",
            },
        )
        return EXIT_HARD_FAIL

    log_event(
        logger,
        f"wrote {result.features_written} features to {result.output}",
        run_id=run_id,
        source=args.file,
        event="RUN_END",
        status="ok",
        rows_in=result.rows_read,
        rows_out=result.features_written,
    )
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        build_parser().print_usage(sys.stderr)
        return EXIT_USAGE
    return run_command(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
