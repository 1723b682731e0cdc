"""
Marker writing - places CSV rows on the timeline as markers.

Every row is handled on its own: a bad timecode, a row that lands before
the timeline start or a marker the editor refuses is recorded as a
RowOutcome and the remaining rows are still written. Existing markers on
the target frame are deleted first, so importing the same CSV twice
leaves one marker per row.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum

from ltcmarkers.data.models import MarkerRow
from ltcmarkers.host.base import TimelineHost
from ltcmarkers.sync.resolver import SyncResult
from ltcmarkers.timing.converter import frames_to_timecode, tc_to_frames
from ltcmarkers.utils.constants import (
    DEFAULT_MARKER_COLOR,
    EMPTY_NAME_PLACEHOLDER,
    MARKER_COLORS,
    MAX_REPORTED_ISSUES,
)
from ltcmarkers.utils.exceptions import LtcMarkersException
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Marker attributes
# ============================================================================

def resolve_color(color: str | None) -> str:
    """
    Map a CSV color name to a Resolve marker color.

    Args:
        color: Color text from the CSV (any case)

    Returns:
        Resolve color name; DEFAULT_MARKER_COLOR when unknown or empty

    Examples:
        "red" -> "Red"
        "MAGENTA" -> "Fuchsia"
        "teal" -> "Blue"
    """
    return MARKER_COLORS.get((color or "").strip().lower(), DEFAULT_MARKER_COLOR)


def resolve_marker_name(row: MarkerRow) -> str:
    """Pick the marker name: label, else note, else a single space."""
    return row.label or row.note or EMPTY_NAME_PLACEHOLDER


def build_custom_data(row: MarkerRow) -> str:
    """
    Build the marker's customData blob.

    Keeps the original LTC timecode and the TC IN/TC Out references,
    which are not shown in the marker note.

    Example:
        '{"ltc":"14:30:15:12","tc_in":"","tc_out":""}'
    """
    payload = {"ltc": row.timecode, "tc_in": row.tc_in, "tc_out": row.tc_out}
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def parse_custom_data(custom_data: str) -> dict[str, str]:
    """Read back a blob written by build_custom_data()."""
    payload = json.loads(custom_data)
    return {key: str(payload.get(key, "")) for key in ("ltc", "tc_in", "tc_out")}


# ============================================================================
# Results
# ============================================================================

class RowStatus(Enum):
    ADDED = "added"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RowOutcome:
    """What happened to one CSV row.

    Attributes:
        row: The source row
        status: added, skipped (before timeline start) or failed
        frame: Target timeline frame (None if the timecode did not parse)
        message: Issue line for the summary (empty when added)
        color: Marker color used
        name: Marker name used
    """

    row: MarkerRow
    status: RowStatus
    frame: int | None = None
    message: str = ""
    color: str = ""
    name: str = ""

    @property
    def is_issue(self) -> bool:
        return self.status is not RowStatus.ADDED


@dataclass
class ImportReport:
    """Result of one import run.

    Attributes:
        timeline_name: Display name of the target timeline
        sync: Sync point and offset used
        outcomes: One entry per CSV row, in file order
        fps: Timeline frame rate used for all conversions
    """

    timeline_name: str
    sync: SyncResult
    outcomes: list[RowOutcome] = field(default_factory=list)
    fps: float = 24.0

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def added(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is RowStatus.ADDED)

    @property
    def skipped(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is RowStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is RowStatus.FAILED)

    @property
    def issues(self) -> list[str]:
        return [outcome.message for outcome in self.outcomes if outcome.is_issue]

    def timeline_timecode(self, frame: int | None) -> str:
        """Timeline timecode of a marker frame, or "" if unknown."""
        if frame is None or frame < 0:
            return ""
        start = tc_to_frames(self.sync.effective_start, self.fps)
        return frames_to_timecode(start + frame, self.fps)

    def summary(self, max_issues: int = MAX_REPORTED_ISSUES) -> str:
        """
        Human-readable result of the import.

        Lists at most max_issues issue lines followed by an
        "...and N more." line when there are more.
        """
        text = (
            f"Added {self.added} of {self.total} marker(s) to '{self.timeline_name}'.\n"
            f"{self.sync.describe()}"
        )

        issues = self.issues
        if issues:
            text += f"\n\n{len(issues)} issue(s):\n" + "\n".join(issues[:max_issues])
            if len(issues) > max_issues:
                text += f"\n…and {len(issues) - max_issues} more."

        return text


# ============================================================================
# Writer
# ============================================================================

class MarkerWriter:
    """Writes marker rows to a timeline at a fixed frame offset.

    Example:
        >>> writer = MarkerWriter(host, fps=24, offset=-1252800)
        >>> outcomes = writer.write_all(table.rows)
    """

    def __init__(self, host: TimelineHost, fps: float, offset: int) -> None:
        """
        Args:
            host: Timeline to write to
            fps: Timeline frame rate
            offset: Frames added to each row's LTC frame count
        """
        self.host = host
        self.fps = fps
        self.offset = offset

    def target_frame(self, row: MarkerRow) -> int:
        """Timeline frame for a row (may be negative)."""
        return tc_to_frames(row.timecode, self.fps) + self.offset

    def write_all(self, rows: list[MarkerRow]) -> list[RowOutcome]:
        """Write every row, never stopping on a per-row problem."""
        outcomes = []
        for i, row in enumerate(rows, 1):
            outcome = self.write_row(row)
            outcomes.append(outcome)
            if i % 50 == 0:
                logger.debug(f"Processed {i}/{len(rows)} rows...")
        return outcomes

    def write_row(self, row: MarkerRow) -> RowOutcome:
        """Write one row as a marker.

        Returns:
            RowOutcome describing whether the marker was added, skipped or failed
        """
        color = resolve_color(row.color)
        name = resolve_marker_name(row)

        try:
            frame = self.target_frame(row)
        except LtcMarkersException as e:
            logger.warning(f"Row {row.row_number}: {e}")
            return RowOutcome(
                row, RowStatus.FAILED, message=f"Row {row.row_number}: {e}", color=color, name=name
            )

        if frame < 0:
            message = f"Row {row.row_number}: {row.timecode} is before timeline start — skipped"
            logger.warning(message)
            return RowOutcome(row, RowStatus.SKIPPED, frame, message, color, name)

        try:
            self.host.delete_marker_at_frame(frame)
            added = self.host.add_marker(
                frame, color, name, row.note, row.duration, build_custom_data(row)
            )
        except Exception as e:
            logger.warning(f"Row {row.row_number}: {e}", exc_info=True)
            return RowOutcome(
                row, RowStatus.FAILED, frame, f"Row {row.row_number}: {e}", color, name
            )

        if not added:
            message = (
                f"Row {row.row_number}: AddMarker failed at {row.timecode} (frame {frame})."
            )
            logger.warning(message)
            return RowOutcome(row, RowStatus.FAILED, frame, message, color, name)

        logger.debug(f"Row {row.row_number}: {color} marker '{name}' at frame {frame}")
        return RowOutcome(row, RowStatus.ADDED, frame, color=color, name=name)
