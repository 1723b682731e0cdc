import unittest

from ltcmarkers.timing.converter import (
    frames_to_timecode,
    is_timecode,
    nominal_fps,
    parse_duration,
    tc_to_frames,
)
from ltcmarkers.utils.exceptions import TimecodeFormatError


class TestNominalFps(unittest.TestCase):
    def test_fractional_rates_round_to_cadence(self):
        self.assertEqual(nominal_fps(23.976), 24)
        self.assertEqual(nominal_fps(29.97), 30)
        self.assertEqual(nominal_fps(59.94), 60)
        self.assertEqual(nominal_fps(25), 25)

    def test_string_rate_from_host(self):
        self.assertEqual(nominal_fps("23.976"), 24)


class TestTcToFrames(unittest.TestCase):
    def test_zero_is_zero_for_any_rate(self):
        for fps in (23.976, 24, 25, 29.97, 30, 50, 59.94, 60):
            self.assertEqual(tc_to_frames("00:00:00:00", fps), 0)

    def test_known_values_at_24(self):
        self.assertEqual(tc_to_frames("01:00:00:00", 24), 86400)
        self.assertEqual(tc_to_frames("01:00:05:00", 24), 86520)
        self.assertEqual(tc_to_frames("14:30:00:00", 24), 1252800)
        self.assertEqual(tc_to_frames("14:30:15:12", 24), 1253172)

    def test_semicolon_separator_is_accepted(self):
        self.assertEqual(tc_to_frames("01:00:00;00", 29.97), 108000)
        self.assertEqual(tc_to_frames("00:00:01;15", 29.97), 45)

    def test_drop_frame_rates_use_nominal_cadence_without_compensation(self):
        # 10 minutes at 29.97 DF would be 17982 frames; nominal arithmetic gives 18000
        self.assertEqual(tc_to_frames("00:10:00;00", 29.97), 18000)
        self.assertEqual(tc_to_frames("00:00:01:00", 23.976), 24)

    def test_whitespace_is_tolerated(self):
        self.assertEqual(tc_to_frames("  00:00:01:00 ", 25), 25)

    def test_monotonic_in_timecode_order(self):
        timecodes = [
            "00:00:00:00",
            "00:00:00:01",
            "00:00:00:23",
            "00:00:01:00",
            "00:01:00:00",
            "01:00:00:00",
            "14:30:00:00",
            "23:59:59:23",
        ]
        frames = [tc_to_frames(tc, 24) for tc in timecodes]
        self.assertEqual(frames, sorted(frames))

    def test_malformed_timecodes_raise(self):
        bad = [
            "",
            "   ",
            "01:00:00",
            "01:00:00:00:00",
            "aa:bb:cc:dd",
            "01-00-00-00",
            "01:00:00:",
            ":00:00:00",
            "01:00:0x:00",
            "010000 00",
            "-1:00:00:00",
        ]
        for text in bad:
            with self.subTest(text=text):
                with self.assertRaises(TimecodeFormatError):
                    tc_to_frames(text, 24)

    def test_error_carries_timecode(self):
        with self.assertRaises(TimecodeFormatError) as ctx:
            tc_to_frames("nope", 24)
        self.assertEqual(ctx.exception.timecode, "nope")
        self.assertIn("nope", str(ctx.exception))

    def test_is_timecode(self):
        self.assertTrue(is_timecode("01:00:00:00"))
        self.assertTrue(is_timecode("01:00:00;00"))
        self.assertFalse(is_timecode("01:00:00"))
        self.assertFalse(is_timecode(None))


class TestFramesToTimecode(unittest.TestCase):
    def test_round_trip_at_integer_rates(self):
        for fps in (24, 25, 30):
            for tc in ("00:00:00:00", "01:00:00:00", "10:20:30:12"):
                with self.subTest(fps=fps, tc=tc):
                    self.assertEqual(frames_to_timecode(tc_to_frames(tc, fps), fps), tc)

    def test_fractional_rate_formats_as_non_drop(self):
        self.assertEqual(frames_to_timecode(108000, 29.97), "01:00:00:00")

    def test_negative_frames_rejected(self):
        with self.assertRaises(ValueError):
            frames_to_timecode(-1, 24)


class TestParseDuration(unittest.TestCase):
    def test_blank_defaults_to_one(self):
        self.assertEqual(parse_duration("", 24), 1)
        self.assertEqual(parse_duration("   ", 24), 1)
        self.assertEqual(parse_duration(None, 24), 1)

    def test_plain_numbers_are_floored_and_clamped(self):
        self.assertEqual(parse_duration("48", 24), 48)
        self.assertEqual(parse_duration("12.9", 24), 12)
        self.assertEqual(parse_duration("0", 24), 1)
        self.assertEqual(parse_duration("-5", 24), 1)

    def test_timecode_spans(self):
        self.assertEqual(parse_duration("00:00:02:00", 24), 48)
        self.assertEqual(parse_duration("00:00:00;10", 29.97), 10)
        self.assertEqual(parse_duration("00:00:00:00", 24), 1)

    def test_invalid_values_default_to_one(self):
        self.assertEqual(parse_duration("garbage", 24), 1)
        self.assertEqual(parse_duration("00:02", 24), 1)
        self.assertEqual(parse_duration("nan", 24), 1)
