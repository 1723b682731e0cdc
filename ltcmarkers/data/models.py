"""Data models for rows read from a marker CSV.

This module defines the dataclasses that carry CSV content from the
reader to the sync resolver and the marker writer.
"""

from dataclasses import dataclass, field

from ltcmarkers.utils.constants import DEFAULT_DURATION


@dataclass
class MarkerRow:
    """One non-blank data line of a marker CSV.

    Attributes:
        timecode: Device (LTC) timecode of the event, as written in the CSV
        label: Marker name text (may be empty)
        color: Color name, lower-cased
        note: Free-text note
        tc_in: Optional reference timecode, stored in marker metadata only
        tc_out: Optional reference timecode, stored in marker metadata only
        duration: Marker duration in frames (>= 1)
        row_number: 1-based physical line number in the CSV (header is line 1)

    Example:
        >>> row = MarkerRow(timecode="14:30:15:12", label="", color="red",
        ...                 note="Take 3", row_number=4)
    """

    timecode: str
    label: str = ""
    color: str = ""
    note: str = ""
    tc_in: str = ""
    tc_out: str = ""
    duration: int = DEFAULT_DURATION
    row_number: int = 0

    def __post_init__(self) -> None:
        """Normalize text fields."""
        self.timecode = self.timecode.strip()
        self.label = self.label.strip()
        self.color = self.color.strip().lower()
        self.note = self.note.strip()
        self.tc_in = self.tc_in.strip()
        self.tc_out = self.tc_out.strip()
        if self.duration < DEFAULT_DURATION:
            self.duration = DEFAULT_DURATION


@dataclass
class CsvTable:
    """Everything the reader extracted from one CSV file.

    Attributes:
        header_index: Normalized column name -> 0-based field index
        rows: Parsed data rows in file order
        header_line: Raw header line (BOM and trailing CR removed)
        first_data_line: Raw second physical line of the file, kept for
            sync diagnostics (empty if the file has only a header)
        source: Where the data came from (file path or "<memory>")
    """

    header_index: dict[str, int]
    rows: list[MarkerRow] = field(default_factory=list)
    header_line: str = ""
    first_data_line: str = ""
    source: str = "<memory>"

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def columns(self) -> list[str]:
        """Normalized column names in file order."""
        return [name for name, _ in sorted(self.header_index.items(), key=lambda item: item[1])]
