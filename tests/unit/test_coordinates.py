import logging

import pytest

from wardgeo.common.errors import CoordinateParseError
from wardgeo.pipeline.coordinates import CoordinatePolicy, parse_coordinates, parse_points, points_to_ring


def test_parse_coordinates_single_ring_in_token_order():
    assert parse_coordinates("(1.0,2.0 3.0,4.0)") == (((1.0, 2.0), (3.0, 4.0)),)


def test_parse_coordinates_keeps_duplicates_and_does_not_close_ring():
    ring_set = parse_coordinates("(1,1 2,2 1,1 3,3)")

    assert ring_set == (((1.0, 1.0), (2.0, 2.0), (1.0, 1.0), (3.0, 3.0)),)


def test_parse_coordinates_accepts_other_bracket_pairs_and_extra_spaces():
    assert parse_coordinates(" [106.7,10.7  106.8,10.8] ") == (((106.7, 10.7), (106.8, 10.8)),)


def test_parse_coordinates_zero_policy_fills_bad_numbers():
    ring_set = parse_coordinates("(x,2.0 3.0,4.0)", CoordinatePolicy.ZERO)

    assert ring_set == (((0.0, 2.0), (3.0, 4.0)),)


def test_parse_coordinates_zero_policy_logs_each_filled_token(caplog):
    logger = logging.getLogger("wardgeo.test-coordinates")

    with caplog.at_level(logging.WARNING, logger="wardgeo.test-coordinates"):
        parse_coordinates("(x,2.0 3.0,y)", "zero", logger=logger, row_index=9)

    events = [rec for rec in caplog.records if getattr(rec, "event", None) == "COORDINATE_ZERO_FILLED"]
    assert len(events) == 2
    assert {rec.row_index for rec in events} == {9}


def test_parse_coordinates_fail_policy_names_offending_token():
    with pytest.raises(CoordinateParseError) as excinfo:
        parse_coordinates("(1.0,2.0 3.0,abc)", row_index=4)

    assert excinfo.value.token == "3.0,abc"
    assert excinfo.value.row_index == 4
    assert str(excinfo.value).startswith("row 4:")


def test_parse_coordinates_rejects_token_without_comma():
    with pytest.raises(CoordinateParseError):
        parse_coordinates("(1.0 2.0)")


def test_parse_coordinates_rejects_non_finite_numbers():
    with pytest.raises(CoordinateParseError):
        parse_coordinates("(nan,1 2,3)")


@pytest.mark.parametrize("raw", ["1.0,2.0 3.0,4.0", "(1.0,2.0 3.0,4.0]", "(", "", "()", "(   )"])
def test_parse_coordinates_structural_errors_raise_under_any_policy(raw):
    for policy in CoordinatePolicy:
        with pytest.raises(CoordinateParseError):
            parse_coordinates(raw, policy)


def test_parse_coordinates_structural_error_carries_row_index():
    with pytest.raises(CoordinateParseError) as excinfo:
        parse_coordinates("1,2 3,4", row_index=12)

    assert excinfo.value.row_index == 12


def test_parse_points_reports_per_point_results():
    points = parse_points("(1,2 x,3 4,5)")

    assert [p.ok for p in points] == [True, False, True]
    assert points[1].token == "x,3"
    assert points[1].latitude == 3.0
    assert points[1].longitude is None


def test_points_to_ring_is_caller_policy_driven():
    points = parse_points("(1,2 x,3)")

    assert points_to_ring(points, CoordinatePolicy.ZERO) == ((1.0, 2.0), (0.0, 3.0))
    with pytest.raises(CoordinateParseError):
        points_to_ring(points, CoordinatePolicy.FAIL)
