"""In-memory timeline used for dry runs and tests."""

from dataclasses import dataclass

from ltcmarkers.host.base import TimelineHost
from ltcmarkers.utils.constants import (
    DEFAULT_DRY_RUN_FPS,
    DEFAULT_DRY_RUN_START_TC,
    DEFAULT_DRY_RUN_TIMELINE_NAME,
)
from ltcmarkers.utils.exceptions import HostUnavailableError


@dataclass
class StoredMarker:
    """A marker held by MemoryTimelineHost."""

    color: str
    name: str
    note: str
    duration: int
    custom_data: str


class MemoryTimelineHost(TimelineHost):
    """Timeline that keeps markers in a dict keyed by frame.

    Behaves like Resolve where it matters for the import: a marker
    cannot be added on a frame that already holds one, and an empty
    marker name is rejected.

    Example:
        >>> host = MemoryTimelineHost(fps=25, start_timecode="10:00:00:00")
        >>> host.add_marker(0, "Red", "Slate", "", 1, "{}")
        True
    """

    def __init__(
        self,
        fps: float = DEFAULT_DRY_RUN_FPS,
        start_timecode: str = DEFAULT_DRY_RUN_START_TC,
        name: str = DEFAULT_DRY_RUN_TIMELINE_NAME,
        available: bool = True,
    ) -> None:
        """Initialize the timeline.

        Args:
            fps: Timeline frame rate
            start_timecode: Timeline start timecode
            name: Timeline display name
            available: If False, connect() fails as if no editor were running
        """
        self.fps = fps
        self.start_timecode = start_timecode
        self.name = name
        self.available = available
        self.markers: dict[int, StoredMarker] = {}
        self.connected = False

    def connect(self) -> None:
        if not self.available:
            raise HostUnavailableError("No timeline is available.", stage="timeline")
        self.connected = True

    def get_frame_rate(self) -> float:
        return float(self.fps)

    def get_start_timecode(self) -> str:
        return self.start_timecode

    def set_start_timecode(self, timecode: str) -> bool:
        self.start_timecode = timecode
        return True

    def delete_marker_at_frame(self, frame: int) -> bool:
        return self.markers.pop(frame, None) is not None

    def add_marker(
        self,
        frame: int,
        color: str,
        name: str,
        note: str,
        duration: int,
        custom_data: str,
    ) -> bool:
        if frame < 0 or frame in self.markers or not name:
            return False
        self.markers[frame] = StoredMarker(color, name, note, int(duration), custom_data)
        return True

    def get_timeline_name(self) -> str:
        return self.name
