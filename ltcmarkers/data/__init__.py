"""CSV reading and row models."""

from .models import MarkerRow, CsvTable
from .csv_reader import MarkerCsvReader, parse_line, build_header_index

__all__ = ['MarkerRow', 'CsvTable', 'MarkerCsvReader', 'parse_line', 'build_header_index']
