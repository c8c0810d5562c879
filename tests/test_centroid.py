"""
Tests for objdist.engines.centroid
==================================

Validates the centroid engine:
    - mean of parsed points at the configured offset
    - parse failures are logged and skipped, never fatal
    - blank lines count toward the denominator
    - empty / degenerate files
"""

import logging

import numpy as np
import pytest

from objdist.engines.centroid import (
    compute_centroid,
    parse_coordinate,
    parse_point,
    split_lines,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def two_points():
    """Points (1,2,3) and (3,4,5) behind two metadata fields."""
    return "0 7 1 2 3\n1 7 3 4 5\n"


# =============================================================================
# parse_coordinate
# =============================================================================

class TestParseCoordinate:
    """Strict float parsing of a single field."""

    @pytest.mark.parametrize("text,expected", [
        ("1", 1.0),
        ("-2.5", -2.5),
        ("+.5", 0.5),
        ("3.", 3.0),
        ("1e3", 1000.0),
        ("1.5E-2", 0.015),
    ])
    def test_accepts_plain_literals(self, text, expected):
        assert parse_coordinate(text) == expected

    def test_accepts_inf_and_nan(self):
        assert np.isinf(parse_coordinate("inf"))
        assert np.isinf(parse_coordinate("-Infinity"))
        assert np.isnan(parse_coordinate("NaN"))

    @pytest.mark.parametrize("text", ["", "abc", "1,5", " 1", "2\r", "1_000", "0x10", "1e", "+nan", "-NaN"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            parse_coordinate(text)

    def test_out_of_range_is_inf_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            assert parse_coordinate("1e400") == np.inf
            assert parse_coordinate("-1e400") == -np.inf
        assert caplog.text.count("value out of range") == 2

    def test_inf_literal_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            parse_coordinate("-Inf")
        assert "out of range" not in caplog.text


# =============================================================================
# parse_point
# =============================================================================

class TestParsePoint:

    def test_offset_fields(self):
        p = parse_point("a b 1 2 3 9 9")
        assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)

    def test_custom_offset(self):
        p = parse_point("1 2 3", offset=0)
        assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)

    def test_bad_field_is_zero_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            p = parse_point("a b 1 oops 3")
        assert (p.x, p.y, p.z) == (1.0, 0.0, 3.0)
        assert "Unable to parse oops" in caplog.text

    def test_missing_fields_are_zero_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            p = parse_point("a b 4")
        assert (p.x, p.y, p.z) == (4.0, 0.0, 0.0)
        assert caplog.text.count("Unable to parse") == 2

    def test_double_space_shifts_fields(self):
        """Fields are split on single spaces; an empty field does not parse."""
        p = parse_point("a b  1 2 3")
        assert (p.x, p.y, p.z) == (0.0, 1.0, 2.0)


# =============================================================================
# compute_centroid
# =============================================================================

class TestComputeCentroid:

    def test_mean_of_two_points(self, two_points):
        assert compute_centroid(two_points) == (2.0, 3.0, 4.0)

    def test_returns_float32(self, two_points):
        centroid = compute_centroid(two_points)
        assert all(isinstance(v, np.float32) for v in centroid)

    def test_parse_failure_is_isolated(self, caplog):
        content = "0 0 1 bad 3\n0 0 3 4 5"
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            centroid = compute_centroid(content)
        # y only gets 4 from the second line, still divided by 2 lines
        assert centroid == (2.0, 2.0, 4.0)
        assert "Unable to parse bad" in caplog.text

    def test_trailing_newlines_are_trimmed(self):
        assert compute_centroid("0 0 2 2 2\n\n\n\r\n") == (2.0, 2.0, 2.0)

    def test_interior_blank_line_counts_in_denominator(self):
        # 3 split lines, 2 contributing
        centroid = compute_centroid("0 0 3 3 3\n\n0 0 3 3 3")
        np.testing.assert_allclose(centroid, (2.0, 2.0, 2.0))

    def test_empty_file_is_origin(self):
        assert split_lines("") == [""]
        assert compute_centroid("") == (0.0, 0.0, 0.0)

    def test_crlf_last_field_does_not_parse(self, caplog):
        with caplog.at_level(logging.WARNING, logger="objdist.engines.centroid"):
            centroid = compute_centroid("0 0 1 2 3\r\n0 0 1 2 3")
        assert centroid == (1.0, 2.0, 1.5)

    def test_non_finite_values_propagate(self):
        x, y, z = compute_centroid("0 0 inf 1 1\n0 0 -inf 1 1")
        assert np.isnan(x)
        assert (y, z) == (1.0, 1.0)

    def test_logs_summary(self, two_points, caplog):
        with caplog.at_level(logging.INFO, logger="objdist.engines.centroid"):
            compute_centroid(two_points)
        assert "avg : 2 3 4" in caplog.text
