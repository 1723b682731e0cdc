"""Custom exception classes for the ltcmarkers package.

Fatal problems (bad timecodes, a CSV missing columns, no sync point, no
editor to talk to) are raised as subclasses of LtcMarkersException so the
CLI can report them with one handler. Problems with a single CSV row are
not raised; the marker writer records them and carries on.
"""


class LtcMarkersException(Exception):
    """Base exception for all ltcmarkers-related errors."""

    pass


class TimecodeFormatError(LtcMarkersException):
    """Raised when a timecode string is not HH:MM:SS:FF.

    Attributes:
        timecode: The text that failed to parse
    """

    def __init__(self, message: str, timecode: str | None = None) -> None:
        """Initialize with the offending timecode.

        Args:
            message: Description of the error
            timecode: Timecode text that was provided
        """
        self.timecode = timecode

        error_parts = [message]
        if timecode is not None:
            error_parts.append(f"'{timecode}'")

        super().__init__(": ".join(error_parts))


class CsvSchemaError(LtcMarkersException):
    """Raised when the marker CSV cannot be used at all.

    This exception is raised when:
    - A required column is missing from the header
    - The file cannot be opened or decoded
    - The file has no header line

    Attributes:
        column_name: Missing column (if that was the problem)
        file_path: Path of the CSV file (if known)
    """

    def __init__(
        self,
        message: str,
        column_name: str | None = None,
        file_path: str | None = None,
    ) -> None:
        """Initialize with schema error details.

        Args:
            message: Description of the error
            column_name: Column name that is missing
            file_path: CSV file being read
        """
        self.column_name = column_name
        self.file_path = file_path

        error_parts = [message]
        if column_name:
            error_parts.append(f"'{column_name}'")
        if file_path:
            error_parts.append(f"(file: {file_path})")

        super().__init__(" ".join(error_parts))


class SyncError(LtcMarkersException):
    """Raised when no LTC sync point can be determined.

    The diagnostics hold the raw header line, the raw first data line and
    that line's parsed fields, so the user can see why auto-detection
    found nothing.

    Attributes:
        diagnostics: Lines describing the start of the CSV file
    """

    def __init__(self, message: str, diagnostics: list[str] | None = None) -> None:
        """Initialize with diagnostic context.

        Args:
            message: Description of the error
            diagnostics: Lines dumped from the CSV file
        """
        self.diagnostics = diagnostics or []

        text = message
        if self.diagnostics:
            text += "\n\n" + "\n".join(self.diagnostics)
        text += "\n\nEnter the LTC sync TC manually."

        super().__init__(text)


class HostUnavailableError(LtcMarkersException):
    """Raised when the editing application cannot be reached.

    Attributes:
        stage: Where the connection failed ("connect", "project", "timeline")
    """

    def __init__(self, message: str, stage: str | None = None) -> None:
        self.stage = stage
        super().__init__(message)


class MarkerWriteError(LtcMarkersException):
    """Raised by a host when a single marker cannot be written.

    Attributes:
        row_number: 1-based CSV line of the marker (if known)
        frame: Timeline frame of the marker (if known)
    """

    def __init__(
        self,
        message: str,
        row_number: int | None = None,
        frame: int | None = None,
    ) -> None:
        """Initialize with marker write details.

        Args:
            message: Description of the error
            row_number: CSV line the marker came from
            frame: Timeline frame that was targeted
        """
        self.row_number = row_number
        self.frame = frame

        error_parts = [message]
        if frame is not None:
            error_parts.append(f"at frame {frame}")
        if row_number is not None:
            error_parts.append(f"(row {row_number})")

        super().__init__(" ".join(error_parts))


class ConfigurationError(LtcMarkersException):
    """Raised when import settings are invalid.

    Attributes:
        config_key: Configuration key that has an issue
        invalid_value: The invalid value (if applicable)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        invalid_value: object = None,
    ) -> None:
        """Initialize with configuration error details.

        Args:
            message: Description of the error
            config_key: Configuration key with issue
            invalid_value: The value that was invalid
        """
        self.config_key = config_key
        self.invalid_value = invalid_value

        error_parts = [message]
        if config_key:
            error_parts.append(f"for setting '{config_key}'")
        if invalid_value is not None:
            error_parts.append(f"(value: {invalid_value!r})")

        super().__init__(" ".join(error_parts))
