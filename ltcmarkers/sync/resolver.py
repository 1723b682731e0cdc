"""LTC to timeline synchronization.

The device log records time-of-day LTC; the timeline counts frames from
its own start timecode. One sync point known in both clocks fixes the
frame offset between them for the whole import:

    timeline_frame = tc_to_frames(device_tc) + offset

The device sync timecode comes from the caller or from the first row
whose note (or label) reads "Session Start". The timeline side either
comes from the caller or defaults to the timeline start, in which case
the timeline's start timecode is moved to the device sync timecode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ltcmarkers.data.models import CsvTable, MarkerRow
from ltcmarkers.data.csv_reader import parse_line
from ltcmarkers.timing.converter import tc_to_frames
from ltcmarkers.utils.constants import SESSION_START_KEY
from ltcmarkers.utils.exceptions import SyncError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_marker_text(text: str | None) -> str:
    """
    Lower-case text and drop everything that is not a letter a-z.

    Examples:
        "Session Start" -> "sessionstart"
        "SESSION_START!" -> "sessionstart"
        "session-start 2" -> "sessionstart"
    """
    return _NON_LETTERS.sub("", (text or "").lower())


def is_session_start(row: MarkerRow) -> bool:
    """Check whether a row marks the start of the recording session.

    The device writes its marker text into the note column and leaves
    label empty, so note is checked first, then label.
    """
    return (
        normalize_marker_text(row.note) == SESSION_START_KEY
        or normalize_marker_text(row.label) == SESSION_START_KEY
    )


def find_session_start(rows: list[MarkerRow]) -> MarkerRow | None:
    """Return the first Session Start row in file order, or None."""
    for row in rows:
        if is_session_start(row):
            return row
    return None


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SyncResult:
    """Outcome of sync resolution.

    Attributes:
        offset: Frames added to every device frame count
        sync_ltc: Device timecode at the sync point
        sync_timeline: Timeline timecode at the sync point (None if the
            sync point was mapped to the timeline start)
        timeline_start: Timeline start timecode read before the import
        start_timecode_changed: True if the timeline start must be set to sync_ltc
        detected_row: CSV line of the Session Start row, None for manual sync
        start_timecode_refused: True if the host would not change its start
            timecode, which then stays at timeline_start
    """

    offset: int
    sync_ltc: str
    sync_timeline: str | None
    timeline_start: str
    start_timecode_changed: bool
    detected_row: int | None = None
    start_timecode_refused: bool = False

    @property
    def effective_start(self) -> str:
        """Timeline start timecode once the import has been applied."""
        if self.start_timecode_changed and not self.start_timecode_refused:
            return self.sync_ltc
        return self.timeline_start

    @property
    def sync_source(self) -> str:
        if self.detected_row is None:
            return "manual"
        return f"Session Start (row {self.detected_row})"

    def describe(self) -> str:
        """One-line description of the sync used, for the import summary."""
        if self.start_timecode_refused:
            return (
                f"Sync: LTC {self.sync_ltc} → timeline start  "
                f"(could not set timeline TC, still {self.timeline_start})"
            )
        if self.start_timecode_changed:
            return (
                f"Sync: LTC {self.sync_ltc} → timeline start  "
                f"(timeline TC set to {self.sync_ltc})"
            )
        return (
            f"Sync: LTC {self.sync_ltc} → timeline {self.sync_timeline}  "
            f"(timeline starts at {self.timeline_start})"
        )


class SyncResolver:
    """Computes the device-to-timeline frame offset for one import.

    Example:
        >>> resolver = SyncResolver(fps=24, timeline_start="01:00:00:00")
        >>> result = resolver.resolve(table, sync_ltc="14:30:00:00",
        ...                           sync_timeline="01:00:05:00")
        >>> result.offset
        -1252680
    """

    def __init__(self, fps: float, timeline_start: str) -> None:
        """Initialize with the timeline state read at the start of the import.

        Args:
            fps: Timeline frame rate
            timeline_start: Timeline start timecode
        """
        self.fps = fps
        self.timeline_start = timeline_start

    def resolve(
        self,
        table: CsvTable,
        sync_ltc: str | None = None,
        sync_timeline: str | None = None,
    ) -> SyncResult:
        """Determine the frame offset.

        Args:
            table: Parsed CSV (rows are scanned when sync_ltc is not given)
            sync_ltc: Device timecode at the sync point, overrides auto-detection
            sync_timeline: Timeline timecode at the same instant

        Returns:
            SyncResult with the offset and the sync description

        Raises:
            SyncError: If no device sync timecode was given or detected
            TimecodeFormatError: If a sync or start timecode is malformed
        """
        sync_ltc = _blank_to_none(sync_ltc)
        sync_timeline = _blank_to_none(sync_timeline)
        detected_row = None

        if sync_ltc is None:
            anchor = find_session_start(table.rows)
            if anchor is not None:
                sync_ltc = anchor.timecode
                detected_row = anchor.row_number
                logger.info(f"Detected Session Start at row {anchor.row_number}: LTC {sync_ltc}")

        if not sync_ltc:
            raise SyncError(
                "No 'Session Start' marker detected.",
                diagnostics=self.diagnostics(table),
            )

        if sync_timeline is not None:
            offset = (
                tc_to_frames(sync_timeline, self.fps)
                - tc_to_frames(sync_ltc, self.fps)
                - tc_to_frames(self.timeline_start, self.fps)
            )
            start_changed = False
            logger.info(f"Sync: LTC {sync_ltc} -> timeline {sync_timeline}, offset {offset}")
        else:
            offset = -tc_to_frames(sync_ltc, self.fps)
            start_changed = True
            logger.info(f"Sync: LTC {sync_ltc} -> timeline start, offset {offset}")

        return SyncResult(
            offset=offset,
            sync_ltc=sync_ltc,
            sync_timeline=sync_timeline,
            timeline_start=self.timeline_start,
            start_timecode_changed=start_changed,
            detected_row=detected_row,
        )

    @staticmethod
    def diagnostics(table: CsvTable) -> list[str]:
        """Describe the start of the CSV so a failed detection can be debugged."""
        lines = [
            f"Header: {table.header_line}",
            f"Row 2:  {table.first_data_line}",
        ]
        for index, value in enumerate(parse_line(table.first_data_line), start=1):
            lines.append(f"  [{index}] = {value!r}")
        return lines
