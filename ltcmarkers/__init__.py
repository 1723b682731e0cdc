"""
LTC CSV to timeline markers.

Reads the event log written by an on-set recording device (LTC
timecodes in a CSV), aligns it with the active timeline and writes one
marker per row.
"""

from .importer import MarkerImporter, run_import
from .markers.writer import ImportReport, RowOutcome, RowStatus
from .utils.exceptions import (
    LtcMarkersException,
    TimecodeFormatError,
    CsvSchemaError,
    SyncError,
    HostUnavailableError,
    MarkerWriteError,
    ConfigurationError,
)

__all__ = [
    'MarkerImporter',
    'run_import',
    'ImportReport',
    'RowOutcome',
    'RowStatus',
    'LtcMarkersException',
    'TimecodeFormatError',
    'CsvSchemaError',
    'SyncError',
    'HostUnavailableError',
    'MarkerWriteError',
    'ConfigurationError',
]

__version__ = '1.0.0'
