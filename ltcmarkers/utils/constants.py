"""Constants for CSV marker import.

Column names, the marker color table and the reporting limits used by
the reader, resolver and writer live here so every module agrees on them.
"""

from typing import Final

# Required CSV columns (matched case-insensitively, whitespace-trimmed)
REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("timecode", "label", "color", "note")

# Optional CSV columns
COLUMN_TC_IN: Final[str] = "tc in"
COLUMN_TC_OUT: Final[str] = "tc out"
COLUMN_DURATION: Final[str] = "duration"

# UTF-8 byte-order-mark as decoded text
UTF8_BOM: Final[str] = "\ufeff"

# Normalized text that marks the LTC sync row
SESSION_START_KEY: Final[str] = "sessionstart"

# Lower-case CSV color -> Resolve marker color.
# magenta and fuchsia intentionally resolve to the same marker color.
MARKER_COLORS: Final[dict[str, str]] = {
    "blue": "Blue",
    "cyan": "Cyan",
    "green": "Green",
    "yellow": "Yellow",
    "red": "Red",
    "pink": "Pink",
    "purple": "Purple",
    "fuchsia": "Fuchsia",
    "magenta": "Fuchsia",
    "rose": "Rose",
    "lavender": "Lavender",
    "sky": "Sky",
    "mint": "Mint",
    "lemon": "Lemon",
    "sand": "Sand",
    "cocoa": "Cocoa",
    "cream": "Cream",
}
DEFAULT_MARKER_COLOR: Final[str] = "Blue"

# Resolve rejects AddMarker with an empty name
EMPTY_NAME_PLACEHOLDER: Final[str] = " "

DEFAULT_DURATION: Final[int] = 1

# Issues listed in the summary before the "...and N more" tail
MAX_REPORTED_ISSUES: Final[int] = 15

# Dry-run timeline defaults
DEFAULT_DRY_RUN_FPS: Final[float] = 24.0
DEFAULT_DRY_RUN_START_TC: Final[str] = "01:00:00:00"
DEFAULT_DRY_RUN_TIMELINE_NAME: Final[str] = "Dry Run"

# Report export formats
REPORT_SUFFIXES: Final[tuple[str, ...]] = (".csv", ".xlsx")
