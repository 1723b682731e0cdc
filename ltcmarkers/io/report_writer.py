"""
Per-row import report export (CSV or Excel).

The import summary lists at most a handful of issues; this report has one
line per CSV row so long logs can be checked in a spreadsheet.
"""

from pathlib import Path

import pandas as pd

from ltcmarkers.markers.writer import ImportReport
from ltcmarkers.utils.constants import REPORT_SUFFIXES
from ltcmarkers.utils.exceptions import ConfigurationError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)

REPORT_COLUMNS = [
    "Row",
    "LTC",
    "Timeline Frame",
    "Timeline TC",
    "Status",
    "Message",
    "Color",
    "Name",
    "Note",
    "Duration",
]


class ReportWriter:
    """Writes an ImportReport to .csv or .xlsx."""

    @staticmethod
    def to_dataframe(report: ImportReport) -> pd.DataFrame:
        """One row per CSV line, in file order."""
        records = []
        for outcome in report.outcomes:
            records.append({
                "Row": outcome.row.row_number,
                "LTC": outcome.row.timecode,
                "Timeline Frame": outcome.frame if outcome.frame is not None else "",
                "Timeline TC": report.timeline_timecode(outcome.frame),
                "Status": outcome.status.value,
                "Message": outcome.message,
                "Color": outcome.color,
                "Name": outcome.name,
                "Note": outcome.row.note,
                "Duration": outcome.row.duration,
            })
        return pd.DataFrame(records, columns=REPORT_COLUMNS)

    @staticmethod
    def summary_dataframe(report: ImportReport) -> pd.DataFrame:
        """Key/value table describing the run."""
        return pd.DataFrame([
            {"Key": "Timeline", "Value": report.timeline_name},
            {"Key": "Frame Rate", "Value": str(report.fps)},
            {"Key": "Sync Source", "Value": report.sync.sync_source},
            {"Key": "Sync LTC", "Value": report.sync.sync_ltc},
            {"Key": "Sync Timeline", "Value": report.sync.sync_timeline or "timeline start"},
            {"Key": "Frame Offset", "Value": str(report.sync.offset)},
            {"Key": "Timeline Start", "Value": report.sync.effective_start},
            {"Key": "Total Rows", "Value": str(report.total)},
            {"Key": "Added", "Value": str(report.added)},
            {"Key": "Skipped", "Value": str(report.skipped)},
            {"Key": "Failed", "Value": str(report.failed)},
        ])

    @classmethod
    def write(cls, report: ImportReport, output_path: str | Path) -> Path:
        """
        Export the report.

        Args:
            report: Result of an import
            output_path: Destination file; the suffix selects the format

        Returns:
            Path of the written file

        Raises:
            ConfigurationError: If the suffix is not .csv or .xlsx
        """
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix not in REPORT_SUFFIXES:
            raise ConfigurationError(
                "Unsupported report format", config_key="report_path", invalid_value=str(path)
            )

        path.parent.mkdir(parents=True, exist_ok=True)
        df_rows = cls.to_dataframe(report)

        if suffix == ".csv":
            df_rows.to_csv(path, index=False)
        else:
            with pd.ExcelWriter(path, engine="openpyxl") as writer:
                df_rows.to_excel(writer, sheet_name="Markers", index=False)
                cls.summary_dataframe(report).to_excel(writer, sheet_name="Summary", index=False)

        logger.info(f"Wrote import report ({len(df_rows)} rows) to {path}")
        return path
