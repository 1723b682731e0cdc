import dataclasses
import unittest

from ltcmarkers.data.csv_reader import MarkerCsvReader
from ltcmarkers.data.models import CsvTable, MarkerRow
from ltcmarkers.sync.resolver import (
    SyncResolver,
    find_session_start,
    is_session_start,
    normalize_marker_text,
)
from ltcmarkers.timing.converter import tc_to_frames
from ltcmarkers.utils.exceptions import SyncError, TimecodeFormatError


def make_table(rows):
    return CsvTable(header_index={"timecode": 0, "label": 1, "color": 2, "note": 3}, rows=rows)


class TestSessionStartDetection(unittest.TestCase):
    def test_normalize_strips_case_and_non_letters(self):
        self.assertEqual(normalize_marker_text("Session Start"), "sessionstart")
        self.assertEqual(normalize_marker_text("  SESSION_START!! "), "sessionstart")
        self.assertEqual(normalize_marker_text("session-start 2"), "sessionstart")
        self.assertEqual(normalize_marker_text(None), "")

    def test_note_or_label_match(self):
        self.assertTrue(is_session_start(MarkerRow("01:00:00:00", note="Session Start")))
        self.assertTrue(is_session_start(MarkerRow("01:00:00:00", label="session_start")))
        self.assertFalse(is_session_start(MarkerRow("01:00:00:00", note="Session Started")))

    def test_note_match_found_ahead_of_later_label_match(self):
        rows = [
            MarkerRow("14:00:00:00", note="Slate", row_number=2),
            MarkerRow("14:30:00:00", label="", note=" session   START ", row_number=3),
            MarkerRow("15:00:00:00", label="Session Start", note="", row_number=4),
        ]
        self.assertIs(find_session_start(rows), rows[1])

    def test_first_match_in_file_order_wins(self):
        rows = [
            MarkerRow("14:00:00:00", label="SessionStart", row_number=2),
            MarkerRow("14:30:00:00", note="Session Start", row_number=3),
        ]
        self.assertIs(find_session_start(rows), rows[0])

    def test_no_match(self):
        self.assertIsNone(find_session_start([MarkerRow("14:00:00:00", note="Take 1")]))


class TestSyncResolver(unittest.TestCase):
    def setUp(self):
        self.resolver = SyncResolver(fps=24, timeline_start="01:00:00:00")
        self.table = make_table([
            MarkerRow("14:30:00:00", note="Session Start", row_number=2),
            MarkerRow("14:30:00:12", note="Take 1", row_number=3),
            MarkerRow("14:30:15:12", note="Take 2", row_number=4),
        ])

    def test_manual_timeline_sync_offset(self):
        result = self.resolver.resolve(self.table, sync_ltc="14:30:00:00", sync_timeline="01:00:05:00")

        # 86520 - 1252800 - 86400
        self.assertEqual(result.offset, -1252680)
        self.assertFalse(result.start_timecode_changed)
        self.assertEqual(result.sync_source, "manual")
        self.assertEqual(tc_to_frames("14:30:00:12", 24) + result.offset, 132)
        self.assertEqual(tc_to_frames("14:30:15:12", 24) + result.offset, 492)

    def test_auto_detected_sync_maps_to_timeline_start(self):
        result = self.resolver.resolve(self.table)

        self.assertEqual(result.offset, -1252800)
        self.assertTrue(result.start_timecode_changed)
        self.assertEqual(result.sync_ltc, "14:30:00:00")
        self.assertEqual(result.detected_row, 2)
        self.assertEqual(result.effective_start, "14:30:00:00")
        self.assertEqual(tc_to_frames("14:30:00:12", 24) + result.offset, 12)
        self.assertEqual(tc_to_frames("14:30:15:12", 24) + result.offset, 372)

    def test_auto_detected_ltc_with_manual_timeline_sync(self):
        result = self.resolver.resolve(self.table, sync_timeline="01:00:05:00")
        self.assertEqual(result.offset, -1252680)
        self.assertEqual(result.detected_row, 2)

    def test_manual_ltc_overrides_detection(self):
        result = self.resolver.resolve(self.table, sync_ltc="14:00:00:00")
        self.assertEqual(result.offset, -tc_to_frames("14:00:00:00", 24))
        self.assertIsNone(result.detected_row)

    def test_blank_overrides_count_as_missing(self):
        result = self.resolver.resolve(self.table, sync_ltc="  ", sync_timeline="")
        self.assertEqual(result.sync_ltc, "14:30:00:00")
        self.assertTrue(result.start_timecode_changed)

    def test_describe_start_reset(self):
        result = self.resolver.resolve(self.table)
        self.assertEqual(
            result.describe(),
            "Sync: LTC 14:30:00:00 → timeline start  (timeline TC set to 14:30:00:00)",
        )

    def test_describe_manual_timeline(self):
        result = self.resolver.resolve(self.table, sync_timeline="01:00:05:00")
        self.assertEqual(
            result.describe(),
            "Sync: LTC 14:30:00:00 → timeline 01:00:05:00  (timeline starts at 01:00:00:00)",
        )

    def test_malformed_manual_sync_raises(self):
        with self.assertRaises(TimecodeFormatError):
            self.resolver.resolve(self.table, sync_ltc="14:30")

    def test_no_anchor_raises_with_diagnostics(self):
        text = 'timecode,label,color,note\r\n14:30:00:12,"Take, 1",red,Slate\r\n'
        table = MarkerCsvReader(24).parse_text(text)

        with self.assertRaises(SyncError) as ctx:
            self.resolver.resolve(table)

        diagnostics = ctx.exception.diagnostics
        self.assertEqual(diagnostics[0], "Header: timecode,label,color,note")
        self.assertEqual(diagnostics[1], 'Row 2:  14:30:00:12,"Take, 1",red,Slate')
        self.assertEqual(diagnostics[2], "  [1] = '14:30:00:12'")
        self.assertEqual(diagnostics[3], "  [2] = 'Take, 1'")
        self.assertIn("No 'Session Start' marker detected.", str(ctx.exception))
        self.assertIn("Enter the LTC sync TC manually.", str(ctx.exception))

    def test_fractional_rate_uses_nominal_frames(self):
        # 29.97 is treated as 30 frames per second, without drop-frame compensation
        resolver = SyncResolver(fps=29.97, timeline_start="00:00:00;00")
        result = resolver.resolve(make_table([]), sync_ltc="00:10:00;00", sync_timeline="00:00:00;00")
        self.assertEqual(result.offset, -18000)

    def test_describe_refused_start_reset(self):
        result = dataclasses.replace(self.resolver.resolve(self.table), start_timecode_refused=True)
        self.assertEqual(result.effective_start, "01:00:00:00")
        self.assertEqual(
            result.describe(),
            "Sync: LTC 14:30:00:00 → timeline start  (could not set timeline TC, still 01:00:00:00)",
        )
