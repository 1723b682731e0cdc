"""Marker CSV reading.

This module parses the CSV exported by the on-set recording device.
Only the quoting the device produces is supported: double-quoted fields
with embedded commas and doubled quotes. Both LF and CRLF line endings
are accepted and a UTF-8 byte-order-mark on the first line is ignored.
"""

from pathlib import Path

from ltcmarkers.data.models import CsvTable, MarkerRow
from ltcmarkers.timing.converter import parse_duration
from ltcmarkers.utils.constants import (
    COLUMN_DURATION,
    COLUMN_TC_IN,
    COLUMN_TC_OUT,
    REQUIRED_COLUMNS,
    UTF8_BOM,
)
from ltcmarkers.utils.exceptions import CsvSchemaError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


def parse_line(line: str) -> list[str]:
    """Split one CSV line into fields.

    A field starting with a double quote runs to the next unescaped quote,
    and ``""`` inside it stands for one literal quote. Any other field runs
    to the next comma. A line ending in a comma gets a trailing empty field.

    Args:
        line: A single line without its line terminator

    Returns:
        List of field values (untrimmed)

    Example:
        >>> parse_line('01:00:00:00,"Hello, world",red,')
        ['01:00:00:00', 'Hello, world', 'red', '']
    """
    fields: list[str] = []
    length = len(line)
    i = 0

    while i < length:
        if line[i] == '"':
            i += 1
            buf = []
            while i < length:
                char = line[i]
                if char == '"':
                    if i + 1 < length and line[i + 1] == '"':
                        buf.append('"')
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    buf.append(char)
                    i += 1
            fields.append("".join(buf))
            if i < length and line[i] == ",":
                i += 1
        else:
            comma = line.find(",", i)
            if comma == -1:
                fields.append(line[i:])
                break
            fields.append(line[i:comma])
            i = comma + 1

    if line.endswith(","):
        fields.append("")

    return fields


def build_header_index(fields: list[str]) -> dict[str, int]:
    """Map lower-cased, trimmed column names to their field index.

    When a name appears twice the later column wins.
    """
    return {name.strip().lower(): index for index, name in enumerate(fields)}


class MarkerCsvReader:
    """Reads marker CSV files into a CsvTable.

    Required columns are timecode, label, color and note (any case, any
    order). TC IN, TC Out and Duration are optional.

    Example:
        >>> reader = MarkerCsvReader(fps=24)
        >>> table = reader.load("markers.csv")
        >>> table.rows[0].timecode
        '14:30:00:00'
    """

    def __init__(self, fps: float) -> None:
        """Initialize the reader.

        Args:
            fps: Timeline frame rate, used to parse timecode-style durations
        """
        self.fps = fps

    def load(self, file_path: str | Path) -> CsvTable:
        """Read and parse a CSV file.

        The file is read in binary mode and closed before parsing starts.

        Raises:
            CsvSchemaError: If the file cannot be read or a required column is missing
        """
        path = Path(file_path)
        logger.info(f"Loading marker CSV: {path}")

        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except FileNotFoundError:
            raise CsvSchemaError("File not found", file_path=str(path))
        except PermissionError:
            raise CsvSchemaError("Permission denied reading file", file_path=str(path))
        except OSError as e:
            raise CsvSchemaError(f"Cannot open file ({e})", file_path=str(path)) from e

        return self.parse_bytes(data, source=str(path))

    def parse_bytes(self, data: bytes, source: str = "<memory>") -> CsvTable:
        """Parse raw CSV bytes (UTF-8, optional BOM)."""
        # Undecodable bytes become U+FFFD rather than failing the whole file
        text = data.decode("utf-8", errors="replace")
        return self.parse_text(text, source=source)

    def parse_text(self, text: str, source: str = "<memory>") -> CsvTable:
        """Parse decoded CSV text.

        Args:
            text: Whole file contents
            source: Label used in log and error messages

        Returns:
            CsvTable with header index and rows

        Raises:
            CsvSchemaError: If a required column is missing
        """
        lines = text.split("\n")

        header_line = lines[0].removeprefix(UTF8_BOM).removesuffix("\r")
        header_index = build_header_index(parse_line(header_line))

        for column in REQUIRED_COLUMNS:
            if column not in header_index:
                raise CsvSchemaError(
                    "CSV is missing required column:", column_name=column, file_path=source
                )

        logger.debug(f"Columns: {list(header_index)}")

        first_data_line = lines[1].removesuffix("\r") if len(lines) > 1 else ""

        rows = []
        # Header is line 1; numbering counts blank lines too
        for row_number, raw_line in enumerate(lines[1:], start=2):
            line = raw_line.removesuffix("\r")
            if not line.strip():
                continue
            rows.append(self._build_row(parse_line(line), header_index, row_number))

        logger.info(f"Read {len(rows)} marker row(s) from {source}")

        return CsvTable(
            header_index=header_index,
            rows=rows,
            header_line=header_line,
            first_data_line=first_data_line,
            source=source,
        )

    def _build_row(
        self, fields: list[str], header_index: dict[str, int], row_number: int
    ) -> MarkerRow:
        """Create a MarkerRow from split fields."""

        def get(name: str) -> str:
            index = header_index.get(name)
            if index is None or index >= len(fields):
                return ""
            return fields[index].strip()

        return MarkerRow(
            timecode=get("timecode"),
            label=get("label"),
            color=get("color"),
            note=get("note"),
            tc_in=get(COLUMN_TC_IN),
            tc_out=get(COLUMN_TC_OUT),
            duration=parse_duration(get(COLUMN_DURATION), self.fps),
            row_number=row_number,
        )
