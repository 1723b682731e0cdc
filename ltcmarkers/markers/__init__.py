"""Marker writing and import reporting."""

from .writer import (
    MarkerWriter,
    ImportReport,
    RowOutcome,
    RowStatus,
    resolve_color,
    resolve_marker_name,
    build_custom_data,
    parse_custom_data,
)

__all__ = [
    'MarkerWriter',
    'ImportReport',
    'RowOutcome',
    'RowStatus',
    'resolve_color',
    'resolve_marker_name',
    'build_custom_data',
    'parse_custom_data',
]
