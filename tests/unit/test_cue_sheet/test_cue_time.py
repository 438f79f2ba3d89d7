"""Unit tests for CUE time representations."""

import pytest

from cue_sheet.cue_time import (
    CueTime,
    HMSTime,
    add_hms_time,
    add_msf_time,
    compare_hms_time,
    compare_msf_time,
    format_hms_time,
    format_msf_time,
    frames_to_msf,
    hms_to_seconds,
    msf_to_frames,
    msf_to_seconds,
    parse_hms_time,
    parse_msf_time,
    seconds_to_hms,
    seconds_to_msf,
    subtract_hms_time,
    subtract_msf_time,
)
from cue_sheet.exceptions import InvalidTimeFormatError, TimeArithmeticError


class TestCueTime:
    """Test CueTime class."""

    def test_init_valid(self):
        """Test creating valid CueTime."""
        time = CueTime(5, 30, 45)
        assert time.minutes == 5
        assert time.seconds == 30
        assert time.frames == 45

    def test_init_invalid_seconds(self):
        """Test invalid seconds raises error."""
        with pytest.raises(InvalidTimeFormatError):
            CueTime(5, 60, 45)

    def test_init_invalid_frames(self):
        """Test invalid frames raises error."""
        with pytest.raises(InvalidTimeFormatError):
            CueTime(5, 30, 75)

    def test_init_negative_minutes(self):
        with pytest.raises(InvalidTimeFormatError):
            CueTime(-1, 0, 0)

    def test_from_string_valid(self):
        """Test parsing valid time strings, padded or not."""
        assert CueTime.from_string("05:30:45") == CueTime(5, 30, 45)
        assert CueTime.from_string("0:00:00") == CueTime(0, 0, 0)
        assert CueTime.from_string("1:2:3") == CueTime(1, 2, 3)
        assert CueTime.from_string(" 120:00:74 ") == CueTime(120, 0, 74)

    @pytest.mark.parametrize("value", ["05:30", "1:2:3:4", "aa:bb:cc", "", "1::2", "1.5:00:00"])
    def test_from_string_invalid_format(self, value):
        """Test strings that are not three integer fields."""
        with pytest.raises(InvalidTimeFormatError, match="Invalid MSF time format"):
            CueTime.from_string(value)

    def test_from_string_out_of_range(self):
        """Test seconds and frames bounds."""
        with pytest.raises(InvalidTimeFormatError, match="Seconds must be less than 60"):
            CueTime.from_string("05:60:00")
        with pytest.raises(InvalidTimeFormatError, match="Frames must be less than 75"):
            CueTime.from_string("05:30:75")

    def test_from_string_negative(self):
        with pytest.raises(InvalidTimeFormatError, match="non-negative"):
            CueTime.from_string("-1:00:00")

    def test_error_carries_offending_string(self):
        with pytest.raises(InvalidTimeFormatError, match="invalid:time:format"):
            CueTime.from_string("invalid:time:format")

    def test_to_frames(self):
        """Test frame count conversion."""
        assert CueTime(0, 0, 0).to_frames() == 0
        assert CueTime(0, 1, 0).to_frames() == 75
        assert CueTime(1, 0, 0).to_frames() == 4500
        assert CueTime(1, 30, 45).to_frames() == 6795

    def test_from_frames(self):
        assert CueTime.from_frames(6795) == CueTime(1, 30, 45)
        assert CueTime.from_frames(74) == CueTime(0, 0, 74)

    def test_from_frames_negative(self):
        with pytest.raises(InvalidTimeFormatError):
            CueTime.from_frames(-1)

    def test_to_seconds(self):
        """Test conversion to fractional seconds."""
        assert CueTime(1, 30, 45).to_seconds() == pytest.approx(90.6)
        assert CueTime(0, 2, 33).to_seconds() == pytest.approx(2.44)
        assert CueTime(0, 0, 0).to_seconds() == 0

    def test_from_seconds_rounds_to_nearest_frame(self):
        assert CueTime.from_seconds(90.6) == CueTime(1, 30, 45)
        assert CueTime.from_seconds(2.44) == CueTime(0, 2, 33)

    def test_from_seconds_negative(self):
        with pytest.raises(InvalidTimeFormatError):
            CueTime.from_seconds(-0.5)

    def test_milliseconds(self):
        """Test millisecond conversions."""
        assert CueTime.from_milliseconds(1000) == CueTime(0, 1, 0)
        # 1 frame = 13.333ms, partial frames are dropped
        assert CueTime.from_milliseconds(13).frames == 0
        assert CueTime.from_milliseconds(14).frames == 1
        assert CueTime(0, 1, 0).to_milliseconds() == 1000

    def test_str_and_format(self):
        """Test zero-padded and plain renderings."""
        assert str(CueTime(1, 30, 45)) == "01:30:45"
        assert str(CueTime(0, 2, 33)) == "00:02:33"
        assert CueTime(1, 2, 3).format(zero_pad=False) == "1:2:3"

    def test_comparison(self):
        """Test ordering by frame count."""
        assert CueTime(0, 0, 74) < CueTime(0, 1, 0)
        assert CueTime(1, 0, 0) > CueTime(0, 59, 74)
        assert CueTime(2, 0, 0) <= CueTime(2, 0, 0)
        assert sorted([CueTime(3, 0, 0), CueTime(1, 0, 0)]) == [CueTime(1, 0, 0), CueTime(3, 0, 0)]

    def test_hashable(self):
        assert len({CueTime(1, 0, 0), CueTime(1, 0, 0), CueTime(0, 0, 1)}) == 2

    def test_add_carries(self):
        assert CueTime(0, 59, 74) + CueTime(0, 0, 1) == CueTime(1, 0, 0)

    def test_subtract(self):
        assert CueTime(1, 0, 0) - CueTime(0, 0, 1) == CueTime(0, 59, 74)

    def test_subtract_negative_raises(self):
        with pytest.raises(TimeArithmeticError):
            CueTime(0, 0, 1) - CueTime(0, 0, 2)


class TestMSFFunctions:
    """Test module-level MSF helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("0:00:00", "00:00:00"), ("1:30:45", "01:30:45"), ("12:34:56", "12:34:56"), ("3:4:5", "03:04:05")],
    )
    def test_format_normalizes_parsed_strings(self, value, expected):
        assert format_msf_time(parse_msf_time(value)) == expected

    def test_format_without_padding(self):
        assert format_msf_time(CueTime(1, 5, 9), zero_pad=False) == "1:5:9"

    def test_seconds_round_trip(self):
        for time in (CueTime(0, 0, 0), CueTime(0, 2, 33), CueTime(74, 59, 74), CueTime(10, 0, 1)):
            assert seconds_to_msf(msf_to_seconds(time)) == time

    def test_frames_round_trip(self):
        for frames in (0, 1, 74, 75, 4499, 4500, 333333):
            assert msf_to_frames(frames_to_msf(frames)) == frames

    def test_add_and_subtract(self):
        start = CueTime(1, 30, 45)
        gap = CueTime(0, 0, 30)
        assert add_msf_time(start, gap) == CueTime(1, 31, 0)
        assert subtract_msf_time(CueTime(1, 31, 0), gap) == start

    def test_subtract_negative(self):
        with pytest.raises(TimeArithmeticError):
            subtract_msf_time(CueTime(0, 0, 0), CueTime(0, 0, 1))

    def test_compare(self):
        assert compare_msf_time(CueTime(0, 0, 1), CueTime(0, 0, 2)) == -1
        assert compare_msf_time(CueTime(0, 1, 0), CueTime(0, 0, 75 - 1)) == 1
        assert compare_msf_time(CueTime(2, 2, 2), CueTime(2, 2, 2)) == 0


class TestHMSTime:
    """Test HMSTime and its helpers."""

    def test_from_string(self):
        assert HMSTime.from_string("01:30:45") == HMSTime(1, 30, 45)
        assert parse_hms_time("100:00:00").hours == 100

    def test_from_string_out_of_range(self):
        with pytest.raises(InvalidTimeFormatError, match="Minutes must be less than 60"):
            parse_hms_time("00:60:00")
        with pytest.raises(InvalidTimeFormatError, match="Seconds must be less than 60"):
            parse_hms_time("00:00:60")

    def test_from_string_invalid(self):
        with pytest.raises(InvalidTimeFormatError, match="Invalid HMS time format"):
            parse_hms_time("1:30")

    def test_seconds_conversions(self):
        assert hms_to_seconds(HMSTime(1, 30, 45)) == 5445
        assert seconds_to_hms(5445) == HMSTime(1, 30, 45)
        assert seconds_to_hms(59.9) == HMSTime(0, 0, 59)

    def test_format(self):
        assert format_hms_time(HMSTime(1, 2, 3)) == "01:02:03"
        assert format_hms_time(HMSTime(1, 2, 3), zero_pad=False) == "1:2:3"

    def test_arithmetic(self):
        assert add_hms_time(HMSTime(0, 59, 59), HMSTime(0, 0, 1)) == HMSTime(1, 0, 0)
        assert subtract_hms_time(HMSTime(1, 0, 0), HMSTime(0, 0, 1)) == HMSTime(0, 59, 59)
        with pytest.raises(TimeArithmeticError):
            subtract_hms_time(HMSTime(0, 0, 0), HMSTime(0, 0, 1))

    def test_compare(self):
        assert compare_hms_time(HMSTime(0, 0, 1), HMSTime(1, 0, 0)) == -1
        assert compare_hms_time(HMSTime(1, 0, 0), HMSTime(0, 59, 59)) == 1
        assert compare_hms_time(HMSTime(1, 0, 0), HMSTime(1, 0, 0)) == 0

    def test_not_equal_to_cue_time(self):
        """The two encodings never compare equal even with the same fields."""
        assert HMSTime(1, 2, 3) != CueTime(1, 2, 3)
