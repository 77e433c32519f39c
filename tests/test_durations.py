"""Tests for duration parsing and clock-style formatting."""

import pytest

from app.services.durations import format_duration, parse_iso8601_duration


class TestParseDuration:

    @pytest.mark.parametrize("text,expected", [
        ("PT15S", 15),
        ("PT1M2S", 62),
        ("PT1H3M", 3780),
        ("PT2H", 7200),
        ("PT1H1M1S", 3661),
        ("PT10M", 600),
        ("PT0S", 0),
    ])
    def test_components(self, text, expected):
        assert parse_iso8601_duration(text) == expected

    def test_hours_minutes_seconds_formula(self):
        for h in (0, 1, 12):
            for m in (0, 7, 59):
                for s in (0, 5, 59):
                    text = f"PT{h}H{m}M{s}S"
                    assert parse_iso8601_duration(text) == h * 3600 + m * 60 + s

    @pytest.mark.parametrize("text", ["", "garbage", "1:02:03", "P1D"])
    def test_unparseable_is_zero(self, text):
        assert parse_iso8601_duration(text) == 0

    def test_none_is_zero(self):
        assert parse_iso8601_duration(None) == 0


class TestFormatDuration:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (59, "0:59"),
        (60, "1:00"),
        (303, "5:03"),
        (1240, "20:40"),
        (3600, "1:00:00"),
        (3661, "1:01:01"),
        (3720, "1:02:00"),
        (36000 + 59, "10:00:59"),
    ])
    def test_clock_format(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_minutes_unpadded_without_hours(self):
        assert format_duration(5 * 60 + 3) == "5:03"

    def test_fraction_is_floored(self):
        assert format_duration(59.99) == "0:59"
        assert format_duration(3661.5) == "1:01:01"
