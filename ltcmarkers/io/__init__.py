"""File output for import reports."""

from .report_writer import ReportWriter, REPORT_COLUMNS

__all__ = ['ReportWriter', 'REPORT_COLUMNS']
