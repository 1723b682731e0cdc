"""Interface to the editing application that owns the timeline.

The importer only needs a narrow slice of an editor's scripting API:
read the timeline frame rate and start timecode, move the start
timecode, and delete/add markers by frame. Any editor exposing those
calls can be adapted behind TimelineHost.
"""

from abc import ABC, abstractmethod


class TimelineHost(ABC):
    """Abstract access to the active timeline of an editing application."""

    @abstractmethod
    def connect(self) -> None:
        """Attach to the running application, its open project and active timeline.

        Raises:
            HostUnavailableError: If any of the three is missing
        """

    @abstractmethod
    def get_frame_rate(self) -> float:
        """Return the timeline frame rate (e.g. 23.976, 25.0)."""

    @abstractmethod
    def get_start_timecode(self) -> str:
        """Return the timeline start timecode as HH:MM:SS:FF."""

    @abstractmethod
    def set_start_timecode(self, timecode: str) -> bool:
        """Set the timeline start timecode. Returns True on success."""

    @abstractmethod
    def delete_marker_at_frame(self, frame: int) -> bool:
        """Delete the marker at frame, if any. Returns True if one was removed."""

    @abstractmethod
    def add_marker(
        self,
        frame: int,
        color: str,
        name: str,
        note: str,
        duration: int,
        custom_data: str,
    ) -> bool:
        """Add a marker at a frame relative to the timeline start.

        Returns:
            True if the application accepted the marker
        """

    @abstractmethod
    def get_timeline_name(self) -> str:
        """Return the display name of the active timeline."""
