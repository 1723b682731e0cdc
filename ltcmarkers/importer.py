"""
CSV marker import - ties reader, sync resolver and writer together.

One call imports one CSV into the active timeline:

    host -> frame rate + start TC -> CSV rows -> sync offset -> markers

The host is checked before the CSV is touched, the timeline state is read
once, and nothing is written until the sync offset is known.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

from ltcmarkers.data.csv_reader import MarkerCsvReader
from ltcmarkers.host.base import TimelineHost
from ltcmarkers.host.resolve_host import ResolveHost
from ltcmarkers.markers.writer import ImportReport, MarkerWriter
from ltcmarkers.sync.resolver import SyncResolver
from ltcmarkers.utils.logger import get_logger, log_banner

logger = get_logger(__name__)


class MarkerImporter:
    """Imports marker CSV files into a timeline.

    Example:
        >>> importer = MarkerImporter(ResolveHost())
        >>> report = importer.run("markers.csv")
        >>> print(report.summary())
    """

    def __init__(self, host: TimelineHost) -> None:
        self.host = host

    def run(
        self,
        csv_path: str | Path,
        sync_ltc: str | None = None,
        sync_timeline: str | None = None,
    ) -> ImportReport:
        """
        Import one CSV file.

        Args:
            csv_path: Marker CSV exported by the recording device
            sync_ltc: LTC timecode at the sync point; detected from a
                "Session Start" row when omitted
            sync_timeline: Timeline timecode at the same instant; when
                omitted the sync point becomes the timeline start and the
                timeline start timecode is set to sync_ltc

        Returns:
            ImportReport with one outcome per CSV row

        Raises:
            HostUnavailableError: No editor, project or timeline
            CsvSchemaError: CSV unreadable or missing a required column
            SyncError: No sync point given or detected
            TimecodeFormatError: A sync or start timecode is malformed
        """
        log_banner(logger, "Starting marker import", f"CSV file: {csv_path}")

        self.host.connect()

        fps = self.host.get_frame_rate()
        timeline_start = self.host.get_start_timecode()
        timeline_name = self.host.get_timeline_name()
        logger.info(f"Timeline '{timeline_name}': {fps} fps, starts at {timeline_start}")

        table = MarkerCsvReader(fps).load(csv_path)

        sync = SyncResolver(fps, timeline_start).resolve(table, sync_ltc, sync_timeline)

        if sync.start_timecode_changed:
            if self.host.set_start_timecode(sync.sync_ltc):
                logger.info(f"Timeline start timecode set to {sync.sync_ltc}")
            else:
                logger.warning(
                    f"Could not set timeline start timecode to {sync.sync_ltc}, "
                    f"it stays at {timeline_start}"
                )
                sync = dataclasses.replace(sync, start_timecode_refused=True)

        writer = MarkerWriter(self.host, fps, sync.offset)
        report = ImportReport(
            timeline_name=timeline_name,
            sync=sync,
            outcomes=writer.write_all(table.rows),
            fps=fps,
        )

        log_banner(
            logger, f"Added: {report.added}  Skipped: {report.skipped}  Failed: {report.failed}"
        )

        return report


def run_import(
    csv_path: str | Path,
    sync_ltc: str | None = None,
    sync_timeline: str | None = None,
    host: TimelineHost | None = None,
) -> str:
    """Import a CSV into the active Resolve timeline and return the summary text."""
    importer = MarkerImporter(host if host is not None else ResolveHost())
    return importer.run(csv_path, sync_ltc, sync_timeline).summary()
