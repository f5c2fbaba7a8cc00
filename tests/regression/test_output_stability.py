from pathlib import Path

import pytest

from wardgeo.cli import parse_args, run_command

CSV_BODY = (
    "district,ward,geometry,area,status\n"
    '1,Ben Nghe,"(106.70,10.77 106.71,10.78 106.70,10.77)",1.2,Ok\n'
    '3,Vo Thi Sau,"(106.68,10.78 106.69,10.78 106.68,10.78)",0.8,no\n'
)


def _run_once(input_path: Path, out_dir: Path, run_id: str) -> None:
    args = parse_args(
        [
            "-f",
            str(input_path),
            "-d",
            "1",
            "--config-dir",
            "config",
            "--output-dir",
            str(out_dir),
            "--run-id",
            run_id,
        ]
    )
    assert run_command(args) == 0


@pytest.mark.regression
def test_outputs_are_byte_stable_for_same_inputs(tmp_path: Path):
    input_path = tmp_path / "wards.csv"
    input_path.write_text(CSV_BODY, encoding="utf-8")

    _run_once(input_path, tmp_path / "first", "run-a")
    _run_once(input_path, tmp_path / "second", "run-b")

    first_bytes = (tmp_path / "first" / "FD_zone.geojson").read_bytes()
    second_bytes = (tmp_path / "second" / "FD_zone.geojson").read_bytes()
    assert first_bytes == second_bytes


@pytest.mark.regression
def test_fd_zone_output_snapshot(tmp_path: Path):
    input_path = tmp_path / "wards.csv"
    input_path.write_text(CSV_BODY, encoding="utf-8")

    _run_once(input_path, tmp_path, "run-snapshot")

    expected = (
        '{"name":"VietNam","name_en":"VietNam","name_ko":"","name_zh_hans":"","name_zh_hant":"",'
        '"name_ja":"","name_id":"","name_vi":"Việt Nam","name_km":"","type":"FeatureCollection",'
        '"features":[{"type":"Feature","geometry":{"type":"Polygon","coordinates":'
        "[[[106.7,10.77],[106.71,10.78],[106.7,10.77]]]},"
        '"properties":{"name":"District 1 - Ward Ben Nghe"}}]}'
    )
    assert (tmp_path / "FD_zone.geojson").read_text(encoding="utf-8") == expected
