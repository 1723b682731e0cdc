"""DaVinci Resolve timeline access through the Resolve scripting API.

DaVinciResolveScript ships with Resolve (it is not installed from PyPI).
Run from Resolve's own Python console, pass the ``resolve`` object that
Resolve provides; run externally, the module is imported on connect().
"""

from ltcmarkers.host.base import TimelineHost
from ltcmarkers.utils.exceptions import HostUnavailableError, MarkerWriteError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ResolveHost(TimelineHost):
    """Active timeline of the running DaVinci Resolve instance."""

    def __init__(self, resolve=None) -> None:
        """Initialize the adapter.

        Args:
            resolve: Resolve scripting object, if already available
        """
        self.resolve = resolve
        self.project = None
        self.timeline = None

    def connect(self) -> None:
        """Attach to Resolve, the current project and the current timeline.

        Raises:
            HostUnavailableError: If Resolve, a project or a timeline is missing
        """
        if self.resolve is None:
            self.resolve = self._load_resolve()

        project = self.resolve.GetProjectManager().GetCurrentProject()
        if not project:
            raise HostUnavailableError("No project is currently open.", stage="project")

        timeline = project.GetCurrentTimeline()
        if not timeline:
            raise HostUnavailableError(
                "No timeline is active. Open one in the Edit page first.", stage="timeline"
            )

        self.project = project
        self.timeline = timeline
        self.resolve.OpenPage("edit")
        logger.info(f"Connected to Resolve timeline '{timeline.GetName()}'")

    @staticmethod
    def _load_resolve():
        try:
            import DaVinciResolveScript as dvr_script
        except ImportError as e:
            raise HostUnavailableError(
                "Could not import DaVinciResolveScript. Check RESOLVE_SCRIPT_API "
                "and PYTHONPATH point at Resolve's scripting modules.",
                stage="connect",
            ) from e

        resolve = dvr_script.scriptapp("Resolve")
        if not resolve:
            raise HostUnavailableError(
                "Could not connect to DaVinci Resolve. Is it running?", stage="connect"
            )
        return resolve

    def _require_timeline(self):
        if self.timeline is None:
            raise HostUnavailableError("Not connected to a Resolve timeline.", stage="timeline")
        return self.timeline

    def get_frame_rate(self) -> float:
        self._require_timeline()
        return float(self.project.GetSetting("timelineFrameRate"))

    def get_start_timecode(self) -> str:
        return self._require_timeline().GetStartTimecode()

    def set_start_timecode(self, timecode: str) -> bool:
        return bool(self._require_timeline().SetStartTimecode(timecode))

    def delete_marker_at_frame(self, frame: int) -> bool:
        return bool(self._require_timeline().DeleteMarkerAtFrame(int(frame)))

    def add_marker(
        self,
        frame: int,
        color: str,
        name: str,
        note: str,
        duration: int,
        custom_data: str,
    ) -> bool:
        timeline = self._require_timeline()
        # Resolve only accepts positional arguments with int frame/duration
        try:
            return bool(
                timeline.AddMarker(int(frame), color, name, note, int(duration), custom_data)
            )
        except (TypeError, AttributeError) as e:
            raise MarkerWriteError(f"Resolve rejected AddMarker ({e})", frame=frame) from e

    def get_timeline_name(self) -> str:
        return self._require_timeline().GetName()
